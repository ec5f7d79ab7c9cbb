"""Type name parsing: scanner, generics, fully-qualified names and queries."""

from .errors import TypeNameError, InvalidTypeName, MalformedAddress, InvalidSlice
from .scanner import DELIMITER, slice_text, slice_bytes, index_of
from .generics import (
    find_outer_angle_brackets, split_at_outer_angle_brackets, split_top_level, decompose_struct,
)
from .qualified import decode_address, is_fully_qualified, decompose, canonical_type_name
from .queries import (
    module_path, qualified_struct_path, append_member,
    is_same_module, is_same_type, has_generics, is_vector_name, extract_option_argument,
)

__all__ = [
    "TypeNameError", "InvalidTypeName", "MalformedAddress", "InvalidSlice",
    "DELIMITER", "slice_text", "slice_bytes", "index_of",
    "find_outer_angle_brackets", "split_at_outer_angle_brackets", "split_top_level", "decompose_struct",
    "decode_address", "is_fully_qualified", "decompose", "canonical_type_name",
    "module_path", "qualified_struct_path", "append_member",
    "is_same_module", "is_same_type", "has_generics", "is_vector_name", "extract_option_argument",
]
