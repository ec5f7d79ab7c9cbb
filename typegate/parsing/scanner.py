"""
Slicing and search primitives used by the type name parsers.

Structural delimiters (`<`, `>`, `,`, `:`) are ASCII, so string offsets
line up with byte offsets of the encoded type name.
"""

from typing import Union

from .errors import InvalidSlice

DELIMITER = "::"


def _check_range(length: int, start: int, end: int):
    if end < start:
        raise InvalidSlice(f"End index {end} is before start index {start}")
    if start < 0 or end > length:
        raise InvalidSlice(f"Range [{start}, {end}) outside input of length {length}")


def slice_text(text: str, start: int, end: int) -> str:
    """Return text[start:end], raising InvalidSlice instead of clamping."""
    _check_range(len(text), start, end)
    return text[start:end]


def slice_bytes(data: Union[bytes, bytearray], start: int, end: int) -> bytes:
    """Return data[start:end] as bytes, raising InvalidSlice instead of clamping."""
    _check_range(len(data), start, end)
    return bytes(data[start:end])


def index_of(text: str, needle: str, start: int = 0) -> int:
    """Index of the first `needle` at or after `start`, -1 if absent."""
    return text.find(needle, start)
