"""Scalar types and codecs shared across the netlist models.

This module defines the port direction enumeration, the ``Bit`` value type
used by ports, nets and cell connections, and the two scalar codecs of the
format:

- the bit codec, which maps a JSON integer (signal id) or one of the strings
  ``"0"``, ``"1"``, ``"z"``, ``"x"`` to a ``Bit`` and back;
- the boolean-flag codec, which reads integer-encoded booleans such as
  ``hide_name`` and ``signed``.
"""

import functools
from enum import Enum
from typing import Any, Optional, Sequence, Union

from pydantic_core import core_schema

from ..exceptions import InvalidBitValue, InvalidFlagValue, PathElement


class Direction(str, Enum):
    """Enumeration of port directions.

    Directions order by declaration (input < output < inout), not by the
    alphabetical order of their values.
    """

    INPUT = "input"
    OUTPUT = "output"
    INOUT = "inout"

    @property
    def _rank(self) -> int:
        return list(Direction).index(self)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Direction):
            return NotImplemented
        return self._rank < other._rank

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Direction):
            return NotImplemented
        return self._rank <= other._rank

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Direction):
            return NotImplemented
        return self._rank > other._rank

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Direction):
            return NotImplemented
        return self._rank >= other._rank


class BitConstant(str, Enum):
    """The four reserved constant bit values, by wire spelling."""

    ZERO = "0"
    ONE = "1"
    Z = "z"  # High impedance
    X = "x"  # Undefined


# Constants sort after every signal id, in declaration order.
_CONSTANT_RANK = {constant: rank for rank, constant in enumerate(BitConstant, start=1)}


@functools.total_ordering
class Bit:
    """A single-wire reference: a numbered signal or a constant.

    Bits are immutable, hashable and totally ordered. Signal ids order
    numerically and come before the constants, which order ``0 < 1 < z < x``.

    Use ``Bit.from_signal(n)`` for signals and ``Bit.ZERO``, ``Bit.ONE``,
    ``Bit.Z``, ``Bit.X`` for constants.
    """

    __slots__ = ("_signal", "_constant")

    ZERO: "Bit"
    ONE: "Bit"
    Z: "Bit"
    X: "Bit"

    def __init__(self, signal: Optional[int] = None, constant: Optional[BitConstant] = None):
        if (signal is None) == (constant is None):
            raise ValueError("Bit needs exactly one of signal or constant")
        if signal is not None and (isinstance(signal, bool) or not isinstance(signal, int) or signal < 0):
            raise ValueError(f"signal id must be a non-negative integer, got {signal!r}")
        object.__setattr__(self, "_signal", signal)
        object.__setattr__(self, "_constant", BitConstant(constant) if constant is not None else None)

    @classmethod
    def from_signal(cls, signal: int) -> "Bit":
        return cls(signal=signal)

    @property
    def signal(self) -> Optional[int]:
        """The signal id, or None for constants."""
        return self._signal

    @property
    def constant(self) -> Optional[BitConstant]:
        """The constant, or None for signals."""
        return self._constant

    @property
    def is_signal(self) -> bool:
        return self._signal is not None

    @property
    def is_constant(self) -> bool:
        return self._constant is not None

    def _sort_key(self) -> tuple[int, int]:
        if self._constant is not None:
            return (_CONSTANT_RANK[self._constant], 0)
        return (0, self._signal)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Bit is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bit):
            return NotImplemented
        return self._sort_key() == other._sort_key()

    def __lt__(self, other: "Bit") -> bool:
        if not isinstance(other, Bit):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __hash__(self) -> int:
        return hash(self._sort_key())

    def __repr__(self) -> str:
        if self._constant is not None:
            return f"Bit.{self._constant.name}"
        return f"Bit({self._signal})"

    def __copy__(self) -> "Bit":
        return self

    def __deepcopy__(self, memo: dict) -> "Bit":
        return self

    def __reduce__(self):
        return (Bit, (self._signal, self._constant))

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        """Lets models accept Bit instances or wire values, and dump wire values to JSON."""
        return core_schema.no_info_plain_validator_function(
            _coerce_bit,
            serialization=core_schema.plain_serializer_function_ser_schema(
                encode_bit, when_used="json"
            ),
        )


Bit.ZERO = Bit(constant=BitConstant.ZERO)
Bit.ONE = Bit(constant=BitConstant.ONE)
Bit.Z = Bit(constant=BitConstant.Z)
Bit.X = Bit(constant=BitConstant.X)

_CONSTANT_BITS = {
    BitConstant.ZERO.value: Bit.ZERO,
    BitConstant.ONE.value: Bit.ONE,
    BitConstant.Z.value: Bit.Z,
    BitConstant.X.value: Bit.X,
}


def _is_json_int(value: Any) -> bool:
    # json maps true/false to bool, which is an int subclass
    return isinstance(value, int) and not isinstance(value, bool)


def decode_bit(value: Any, path: Sequence[PathElement] = ()) -> Bit:
    """Decodes a wire bit value.

    Args:
        value: A JSON scalar: a non-negative integer signal id, or one of the
            strings "0", "1", "z", "x" (lowercase only).
        path: Location of the value, used in error messages.

    Returns:
        The decoded Bit.

    Raises:
        InvalidBitValue: For any other value.
    """
    if _is_json_int(value):
        if value >= 0:
            return Bit(signal=value)
    elif isinstance(value, str):
        bit = _CONSTANT_BITS.get(value)
        if bit is not None:
            return bit
    raise InvalidBitValue(value, path)


def encode_bit(bit: Bit) -> Union[int, str]:
    """Encodes a Bit as its wire value (int for signals, string for constants)."""
    if bit.constant is not None:
        return bit.constant.value
    return bit.signal


def _coerce_bit(value: Any) -> Bit:
    if isinstance(value, Bit):
        return value
    return decode_bit(value)


def decode_flag(value: Any, path: Sequence[PathElement] = ()) -> bool:
    """Decodes an integer-encoded boolean.

    Only the integer 1 is true; every other integer, including negative
    and large values, is false.

    Raises:
        InvalidFlagValue: If the value is not an integer.
    """
    if not _is_json_int(value):
        raise InvalidFlagValue(value, path)
    return value == 1


def encode_flag(flag: bool) -> int:
    """Encodes an integer-encoded boolean.

    Always 0, whatever the flag: the producing tool writes 0 for these
    fields and consumers expect exactly that output. True values therefore
    do not survive a decode/encode round trip.
    """
    return 0
