"""Comparisons and path helpers over decomposed type names."""

from typegate.types import TypeSignature
from .errors import InvalidTypeName
from .generics import find_outer_angle_brackets, split_at_outer_angle_brackets
from .scanner import DELIMITER, index_of, slice_text

VECTOR = "vector"
OPTION = "Option"


def module_path(sig: TypeSignature) -> str:
    """`<address_hex>::<module>`. Primitive types have none."""
    if sig.is_primitive:
        raise InvalidTypeName(f"Primitive type {sig.struct_name!r} has no module path")
    return f"{sig.address_hex}{DELIMITER}{sig.module_name}"


def qualified_struct_path(sig: TypeSignature) -> str:
    """`<address_hex>::<module>::<Struct>`, generics not included."""
    return append_member(module_path(sig), sig.struct_name)


def append_member(path: str, name: str) -> str:
    """Join with `::`. Does not check that the member exists."""
    return f"{path}{DELIMITER}{name}"


def is_same_module(a: TypeSignature, b: TypeSignature) -> bool:
    return a.origin_address == b.origin_address and a.module_name == b.module_name


def is_same_type(a: TypeSignature, b: TypeSignature) -> bool:
    """All four fields equal; generics compared in order (Pair<A, B> != Pair<B, A>)."""
    return (
        is_same_module(a, b)
        and a.struct_name == b.struct_name
        and tuple(a.generic_arguments) == tuple(b.generic_arguments)
    )


def has_generics(type_name: str) -> bool:
    return find_outer_angle_brackets(type_name) is not None


def is_vector_name(type_name: str) -> bool:
    return type_name[:len(VECTOR)] == VECTOR


def extract_option_argument(type_name: str) -> str:
    """
    Inner type of the first `Option<...>` in a type name, "" if there is none.
    
    Examples:
        "0000..01::option::Option<u64>" -> "u64"
        "u64"                           -> ""
    """
    i = index_of(type_name, OPTION)
    if i == -1:
        return ""
    _, inner = split_at_outer_angle_brackets(slice_text(type_name, i + len(OPTION), len(type_name)))
    return inner
