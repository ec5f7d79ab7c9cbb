"""Generic argument extraction: `Name<A, B<C, D>>` -> ("Name", ["A", "B<C, D>"])."""

from typing import List, Optional, Tuple

from .scanner import slice_text

OPEN = "<"
CLOSE = ">"
SEPARATOR = ","


def find_outer_angle_brackets(text: str) -> Optional[Tuple[int, int]]:
    """
    Locate the outermost `<...>` pair.
    
    Returns (open_index, close_index) or None when there is no `<` or the
    brackets never balance. A `>` seen before the first `<` is ignored.
    """
    depth = 0
    start = -1
    for i, char in enumerate(text):
        if char == OPEN:
            if depth == 0 and start == -1:
                start = i
            depth += 1
        elif char == CLOSE and start != -1:
            depth -= 1
            if depth == 0:
                return start, i
    return None


def split_at_outer_angle_brackets(text: str) -> Tuple[str, str]:
    """
    Split a type name into (prefix, inner generics region).
    
    Examples:
        "Coin<Wrapper<u64, Bar>>" -> ("Coin", "Wrapper<u64, Bar>")
        "u64"                     -> ("u64", "")
        "Foo<>"                   -> ("Foo", "")
        "Foo<u8"                  -> ("Foo<u8", "")
    """
    found = find_outer_angle_brackets(text)
    if found is None:
        return text, ""
    start, end = found
    return slice_text(text, 0, start), slice_text(text, start + 1, end)


def split_top_level(text: str, track_depth: bool = True) -> List[str]:
    """
    Split a generics region on its top-level commas.
    
    One space right after a comma is formatting and is dropped; any further
    spaces stay with the segment. Input without a comma (including "")
    comes back as a single segment.
    
    With track_depth=False every comma splits, regardless of nesting.
    """
    segments = []
    depth = 0
    start = 0
    i = 0
    while i < len(text):
        char = text[i]
        if char == OPEN:
            depth += 1
        elif char == CLOSE:
            depth -= 1
        elif char == SEPARATOR and (depth == 0 or not track_depth):
            segments.append(slice_text(text, start, i))
            start = i + 1
            if text.startswith(" ", start):
                start += 1
            i = start
            continue
        i += 1
    segments.append(slice_text(text, start, len(text)))
    return segments


def decompose_struct(text: str, track_depth: bool = True) -> Tuple[str, List[str]]:
    """Split `Name<A, B>` into ("Name", ["A", "B"]); no generics gives []."""
    name, inner = split_at_outer_angle_brackets(text)
    if not inner:
        return name, []
    return name, split_top_level(inner, track_depth=track_depth)
