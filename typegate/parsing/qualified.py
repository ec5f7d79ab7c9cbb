"""Fully-qualified type name decomposition (`<address>::<module>::<Struct><...>`)."""

import logging
import re
import string

from typegate.types import TypeSignature
from .errors import InvalidTypeName, MalformedAddress
from .generics import decompose_struct
from .scanner import DELIMITER, index_of, slice_text

logger = logging.getLogger(__name__)

HEX_PREFIX = "0x"
_HEX_DIGITS = frozenset(string.hexdigits)
# Address literals only, not `0x` inside identifiers such as `a0x1`
_ADDRESS_RE = re.compile(r"(?<![0-9A-Za-z_])0x([0-9a-fA-F]+)(?![0-9A-Za-z_])")


def decode_address(address_hex: str, address_length: int) -> bytes:
    """Decode exactly `address_length` bytes of hex, else MalformedAddress."""
    if len(address_hex) != address_length * 2:
        raise MalformedAddress(
            f"Address {address_hex!r} is {len(address_hex)} hex chars, expected {address_length * 2}"
        )
    # bytes.fromhex() skips whitespace, so check the digits first
    if not all(c in _HEX_DIGITS for c in address_hex):
        raise MalformedAddress(f"Address {address_hex!r} is not valid hex")
    return bytes.fromhex(address_hex)


def is_fully_qualified(type_name: str, address_length: int) -> bool:
    """True if `::` sits right after an `address_length`-byte hex prefix."""
    if type_name.startswith(HEX_PREFIX):
        type_name = type_name[len(HEX_PREFIX):]
    width = address_length * 2
    return len(type_name) > width + len(DELIMITER) and type_name[width:width + len(DELIMITER)] == DELIMITER


def decompose(type_name: str, address_length: int, track_depth: bool = True) -> TypeSignature:
    """
    Decompose a type name into a TypeSignature.
    
    The branch is chosen by the fixed-offset delimiter check only: names whose
    `::` does not sit at the address width are treated as primitive types.
    
    Examples (address_length=1):
        "01::coin::Coin<02::sui::SUI>" -> (b"\\x01", "coin", "Coin", ["02::sui::SUI"])
        "vector<u8>"                   -> (NO_ADDRESS, "", "vector", ["u8"])
    """
    if not is_fully_qualified(type_name, address_length):
        struct_name, generics = decompose_struct(type_name, track_depth=track_depth)
        return TypeSignature.primitive(struct_name, tuple(generics))
    
    body = type_name[len(HEX_PREFIX):] if type_name.startswith(HEX_PREFIX) else type_name
    width = address_length * 2
    address = decode_address(slice_text(body, 0, width), address_length)
    
    remainder = slice_text(body, width + len(DELIMITER), len(body))
    j = index_of(remainder, DELIMITER)
    if j == -1:
        raise InvalidTypeName(f"No module/struct separator in {type_name!r}")
    
    module_name = slice_text(remainder, 0, j)
    struct_name, generics = decompose_struct(
        slice_text(remainder, j + len(DELIMITER), len(remainder)), track_depth=track_depth
    )
    logger.debug(f"Decomposed {type_name[:24]}.. -> {module_name}::{struct_name} ({len(generics)} generics)")
    return TypeSignature(
        origin_address=address,
        module_name=module_name,
        struct_name=struct_name,
        generic_arguments=tuple(generics),
    )


def canonical_type_name(type_name: str, address_length: int) -> str:
    """
    Rewrite every `0x...` address literal as full-width hex without prefix.
    
    Full nodes print short addresses ("0x2::coin::Coin<0x2::sui::SUI>");
    on-chain type names use the padded form decompose() expects.
    Literals longer than the address width are left as they are.
    """
    width = address_length * 2
    
    def _pad(m: re.Match) -> str:
        digits = m.group(1).lower()
        if len(digits) > width:
            return m.group(0)
        return digits.rjust(width, "0")
    
    return _ADDRESS_RE.sub(_pad, type_name.strip())
