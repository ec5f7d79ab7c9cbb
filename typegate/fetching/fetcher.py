"""Object type fetching and checking against required types."""

from typing import Dict, List, Optional
import logging

from typegate.gate import TypeGate
from typegate.parsing import TypeNameError
from typegate.types import TypeSignature
from .client import ChainClient

logger = logging.getLogger(__name__)


class Fetcher:
    """Fetches object types using any ChainClient implementation and decomposes them."""
    
    def __init__(self, client: ChainClient, address_length: int):
        self.client = client
        self.gate = TypeGate(address_length)
    
    @property
    def address_length(self) -> int:
        return self.gate.address_length
    
    async def fetch_signature(self, object_id: str) -> Optional[TypeSignature]:
        """Decomposed type of one object, None if it has no type. Parse errors propagate."""
        type_name = await self.client.get_object_type(object_id)
        if not type_name:
            return None
        return self.gate.signature(type_name)
    
    async def fetch_signatures(self, object_ids: List[str]) -> Dict[str, TypeSignature]:
        """Decomposed types for several objects; objects that fail to parse are skipped."""
        signatures = {}
        for object_id, type_name in (await self.client.get_object_types(object_ids)).items():
            try:
                signatures[object_id] = self.gate.signature(type_name)
            except TypeNameError as e:
                logger.debug(f"Failed to parse type of {object_id[:16]}..: {e}")
        return signatures
    
    async def object_matches(self, object_id: str, required_type: str) -> bool:
        """Check that an object's type is exactly `required_type`. Missing objects never match."""
        type_name = await self.client.get_object_type(object_id)
        if not type_name:
            logger.info(f"Object {object_id[:16]}.. has no type, denying")
            return False
        return self.gate.matches(type_name, required_type)
