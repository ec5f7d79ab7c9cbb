"""Sui JSON-RPC adapter implementing ChainClient protocol."""

from typing import Dict, List, Optional
import logging

from typegate.blockchain import SuiClient, SuiObjectNotFound

logger = logging.getLogger(__name__)


class SuiChainClient:
    """Wraps SuiClient to provide ChainClient interface."""
    
    def __init__(self, sui: SuiClient):
        self.sui = sui
    
    async def get_object_type(self, object_id: str) -> Optional[str]:
        """Object type, None for missing objects. Other RPC errors propagate."""
        try:
            data = await self.sui.get_object(object_id)
        except SuiObjectNotFound as e:
            logger.debug(f"Treating as missing: {e}")
            return None
        return data.get("type")
    
    async def get_object_types(self, object_ids: List[str]) -> Dict[str, str]:
        if not object_ids:
            return {}
        objects = await self.sui.get_objects(object_ids)
        types = {o["objectId"]: o["type"] for o in objects if o.get("objectId") and o.get("type")}
        if len(types) < len(object_ids):
            logger.debug(f"{len(object_ids) - len(types)} of {len(object_ids)} objects have no type")
        return types
