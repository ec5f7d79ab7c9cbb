"""Errors raised while decomposing type names."""


class TypeNameError(ValueError):
    """Base exception for type name parsing errors."""

class InvalidTypeName(TypeNameError):
    """Fully-qualified name is missing its module/struct separator."""

class MalformedAddress(TypeNameError):
    """Address prefix is not hex or has the wrong width."""

class InvalidSlice(TypeNameError):
    """Requested range does not fit the input."""
