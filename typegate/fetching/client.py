"""Chain client protocol for fetching object types."""

from typing import Dict, List, Optional, Protocol


class ChainClient(Protocol):
    """
    Interface for object type providers (JSON-RPC, indexers, fixtures).
    
    Types are returned as the node prints them, e.g. "0x2::coin::Coin<0x2::sui::SUI>".
    """
    
    async def get_object_type(self, object_id: str) -> Optional[str]:
        """Type of one object, None if it has none (packages) or is missing."""
        ...
    
    async def get_object_types(self, object_ids: List[str]) -> Dict[str, str]:
        """object_id → type for every object that was found."""
        ...
