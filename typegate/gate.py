"""Type checks used to gate actions on a presented asset."""

import logging

from typegate.parsing import TypeNameError, canonical_type_name, decompose, is_same_module, is_same_type
from typegate.types import TypeSignature

logger = logging.getLogger(__name__)


class TypeGate:
    """
    Answers "does the presented type match the required type?".
    
    Address literals are canonicalised first, so "0x2::sui::SUI" and the
    padded on-chain form compare equal, generic arguments included.
    Any parse error on either side denies the check.
    """
    
    def __init__(self, address_length: int):
        self.address_length = address_length
    
    def signature(self, type_name: str) -> TypeSignature:
        return decompose(canonical_type_name(type_name, self.address_length), self.address_length)
    
    def matches(self, presented: str, required: str) -> bool:
        """Exact type match, generics included and in order."""
        try:
            return is_same_type(self.signature(presented), self.signature(required))
        except TypeNameError as e:
            logger.warning(f"Type check denied ({presented!r} vs {required!r}): {e}")
            return False
    
    def matches_module(self, presented: str, required: str) -> bool:
        """Both types come from the same address and module."""
        try:
            return is_same_module(self.signature(presented), self.signature(required))
        except TypeNameError as e:
            logger.warning(f"Module check denied ({presented!r} vs {required!r}): {e}")
            return False
