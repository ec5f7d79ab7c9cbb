"""
Core types for the type gate.

A single immutable record describing a decomposed Move type name.
"""

from dataclasses import dataclass
from typing import Tuple

# Origin address of primitive types (u64, vector<u8>, ...)
NO_ADDRESS = b""


@dataclass(frozen=True)
class TypeSignature:
    """
    Decomposed `<address>::<module>::<Struct><generics>` type name.
    
    Primitive types carry NO_ADDRESS and an empty module name.
    Generic arguments are raw type names, in source order.
    """
    origin_address: bytes
    module_name: str
    struct_name: str
    generic_arguments: Tuple[str, ...] = ()
    
    @property
    def is_primitive(self) -> bool:
        return self.origin_address == NO_ADDRESS
    
    @property
    def address_hex(self) -> str:
        return self.origin_address.hex()
    
    @classmethod
    def primitive(cls, struct_name: str, generic_arguments: Tuple[str, ...] = ()) -> "TypeSignature":
        return cls(origin_address=NO_ADDRESS, module_name="", struct_name=struct_name,
                   generic_arguments=tuple(generic_arguments))
    
    def __str__(self) -> str:
        name = self.struct_name
        if not self.is_primitive:
            name = f"{self.address_hex}::{self.module_name}::{name}"
        if self.generic_arguments:
            name += f"<{', '.join(self.generic_arguments)}>"
        return name
    
    def __repr__(self) -> str:
        if self.is_primitive:
            return f"TypeSignature({self})"
        return f"TypeSignature({self.address_hex[:8]}..::{self.module_name}::{self.struct_name}, {len(self.generic_arguments)} generics)"
