"""Net-JSON Exceptions.

This module defines the errors raised while decoding netlist documents.
Every error records the path of the offending field inside the document
and the value that was observed there.
"""

from typing import Any, Optional, Sequence, Union

PathElement = Union[str, int]


def format_path(path: Sequence[PathElement]) -> str:
    """Renders a field path as ``modules.top.ports.a.bits[2]``."""
    out = ""
    for element in path:
        if isinstance(element, int):
            out += f"[{element}]"
        elif out:
            out += f".{element}"
        else:
            out = str(element)
    return out or "<document>"


class NetlistFormatError(ValueError):
    """Base class for documents that are not valid netlists of this format.

    Attributes:
        path: Keys and array indices leading to the offending field.
        value: The value observed at that field, if any.
    """

    def __init__(self, message: str, path: Sequence[PathElement] = (), value: Any = None):
        self.path = tuple(path)
        self.value = value
        self.reason = message
        super().__init__(f"{format_path(self.path)}: {message}")


class InvalidBitValue(NetlistFormatError):
    """Raised when a bit is neither a signal id nor one of "0", "1", "z", "x"."""

    def __init__(self, value: Any, path: Sequence[PathElement] = ()):
        super().__init__(
            f"invalid bit value {value!r}, "
            'expected a non-negative integer, "0", "1", "z" or "x"',
            path,
            value,
        )


class InvalidFlagValue(NetlistFormatError):
    """Raised when an integer-encoded flag is not an integer."""

    def __init__(self, value: Any, path: Sequence[PathElement] = ()):
        super().__init__(
            f"invalid flag value {value!r}, expected an integer (1 for true)",
            path,
            value,
        )


class MissingRequiredField(NetlistFormatError):
    """Raised when a field required by the schema is absent."""

    def __init__(self, field: str, path: Sequence[PathElement] = ()):
        self.field = field
        super().__init__(f"missing required field {field!r}", tuple(path) + (field,))


class TypeMismatch(NetlistFormatError):
    """Raised when a field's JSON shape does not match the schema."""

    def __init__(self, expected: str, value: Any, path: Sequence[PathElement] = ()):
        self.expected = expected
        super().__init__(
            f"expected {expected}, got {type(value).__name__} {value!r}", path, value
        )


class MalformedDocument(NetlistFormatError):
    """Raised when the input is not well-formed JSON, nests too deeply to
    decode, or is not UTF-8.

    The underlying parser error is kept unmodified on ``cause`` and chained
    as ``__cause__``.
    """

    def __init__(self, cause: Exception):
        self.cause = cause
        self.lineno: Optional[int] = getattr(cause, "lineno", None)
        self.colno: Optional[int] = getattr(cause, "colno", None)
        super().__init__(f"malformed document: {cause}")
