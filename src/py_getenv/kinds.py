"""Primitive kinds and the typed storage cells bound to them.

Python has no pointers to primitives, so a binding cannot write into a
caller's ``int`` directly.  Instead the caller owns a ``Var``, a small
mutable cell, and the registry holds a reference to it.  Parsing
assigns ``var.value`` in place, so the caller sees the new value through
the same object it registered.

Every ``Var`` is tagged with a ``Kind``.  The set of kinds is closed:

- **STRING** — assigned verbatim.
- **BOOL** — the standard boolean literals (``1``, ``t``, ``TRUE`` ...).
- **INT, INT8 … INT64** — signed, base 10, range-checked.
- **UINT, UINT8 … UINT64, UINTPTR** — unsigned, base 10, range-checked.
- **FLOAT32, FLOAT64** — decimal or scientific notation.

Each kind carries its own zero value, its own legality test for values,
and its own default converter, so nothing downstream has to inspect
Python types to decide how to parse.
"""

import contextlib
import math
import re
import struct
from enum import StrEnum

_SIGNED_PATTERN = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_PATTERN = re.compile(r"[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_FLOAT_SPECIAL_PATTERN = re.compile(r"[+-]?(?:inf|infinity|nan)", re.IGNORECASE)

_TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


class ConversionError(ValueError):
    """Raise when text cannot be converted to a kind's value."""


def _syntax_error(text: str) -> ConversionError:
    return ConversionError(f"parsing {text!r}: invalid syntax")


def _range_error(text: str) -> ConversionError:
    return ConversionError(f"parsing {text!r}: value out of range")


class Kind(StrEnum):
    """The closed set of primitive types a variable can be bound to."""

    STRING = "string"
    BOOL = "bool"
    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT = "uint"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    UINTPTR = "uintptr"
    FLOAT32 = "float32"
    FLOAT64 = "float64"

    @property
    def is_signed(self) -> bool:
        """Return True for the signed integer kinds."""
        return self in _SIGNED_BITS

    @property
    def is_unsigned(self) -> bool:
        """Return True for the unsigned integer kinds (including UINTPTR)."""
        return self in _UNSIGNED_BITS

    @property
    def is_float(self) -> bool:
        """Return True for FLOAT32 and FLOAT64."""
        return self in {Kind.FLOAT32, Kind.FLOAT64}

    @property
    def bounds(self) -> tuple[int, int]:
        """Return the inclusive (min, max) range of an integer kind.

        Raises:
            TypeError: If the kind is not an integer kind.

        """
        if self in _SIGNED_BITS:
            bits = _SIGNED_BITS[self]
            return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
        if self in _UNSIGNED_BITS:
            return 0, (1 << _UNSIGNED_BITS[self]) - 1
        msg = f"{self} is not an integer kind"
        raise TypeError(msg)

    def zero(self) -> str | bool | int | float:
        """Return the zero value for this kind."""
        if self is Kind.STRING:
            return ""
        if self is Kind.BOOL:
            return False
        if self.is_float:
            return 0.0
        return 0

    def accepts(self, value: object) -> bool:
        """Return True if *value* is a legal value for this kind.

        A finite FLOAT32 value must be exactly representable in single
        precision; ``0.1`` is rejected, its float32 rounding is accepted.
        """
        if self is Kind.STRING:
            return isinstance(value, str)
        if self is Kind.BOOL:
            return isinstance(value, bool)
        if self.is_float:
            if not isinstance(value, float):
                return False
            if self is Kind.FLOAT32 and math.isfinite(value):
                try:
                    return _round_float32(value) == value
                except OverflowError:
                    return False
            return True
        # bool is an int subclass, but never a legal integer value here.
        if not isinstance(value, int) or isinstance(value, bool):
            return False
        low, high = self.bounds
        return low <= value <= high

    def convert(self, text: str) -> str | bool | int | float:
        """Convert *text* to a value of this kind.

        Raises:
            ConversionError: If *text* is not valid syntax for the kind,
                or is outside the kind's range.

        """
        if self is Kind.STRING:
            return text
        if self is Kind.BOOL:
            return _convert_bool(text)
        if self.is_float:
            return _convert_float(text, single=self is Kind.FLOAT32)
        pattern = _SIGNED_PATTERN if self.is_signed else _UNSIGNED_PATTERN
        if pattern.fullmatch(text) is None:
            raise _syntax_error(text)
        number = int(text)
        low, high = self.bounds
        if not low <= number <= high:
            raise _range_error(text)
        return number


_SIGNED_BITS: dict[Kind, int] = {
    Kind.INT: 64,
    Kind.INT8: 8,
    Kind.INT16: 16,
    Kind.INT32: 32,
    Kind.INT64: 64,
}

_UNSIGNED_BITS: dict[Kind, int] = {
    Kind.UINT: 64,
    Kind.UINT8: 8,
    Kind.UINT16: 16,
    Kind.UINT32: 32,
    Kind.UINT64: 64,
    Kind.UINTPTR: 64,
}


def _convert_bool(text: str) -> bool:
    if text in _TRUE_LITERALS:
        return True
    if text in _FALSE_LITERALS:
        return False
    raise _syntax_error(text)


def _round_float32(number: float) -> float:
    """Round *number* to single precision, raising OverflowError past float32 range."""
    return struct.unpack("<f", struct.pack("<f", number))[0]


def _convert_float(text: str, *, single: bool) -> float:
    if _FLOAT_SPECIAL_PATTERN.fullmatch(text) is not None:
        return float(text)
    if _FLOAT_PATTERN.fullmatch(text) is None:
        raise _syntax_error(text)
    number = float(text)
    if math.isinf(number):
        raise _range_error(text)
    if not single:
        return number
    try:
        return _round_float32(number)
    except OverflowError as e:
        raise _range_error(text) from e


class Var:
    """A caller-owned, mutable storage cell of a fixed kind.

    The registry never copies a ``Var``; it holds a reference and writes
    ``value`` in place during parsing.  Two ``Var`` objects are distinct
    targets even when they hold equal values.
    """

    def __init__(self, kind: Kind, value: str | bool | int | float | None = None) -> None:
        """Create a cell of *kind*, holding *value* or the kind's zero value.

        A FLOAT32 value is rounded to single precision here, so the
        registered default matches what parsing the same text would store.
        Nothing else is validated; registration rejects cells whose value
        is not legal for their kind.
        """
        self._kind = kind
        if value is None:
            value = kind.zero()
        elif kind is Kind.FLOAT32 and isinstance(value, float):
            with contextlib.suppress(OverflowError):
                value = _round_float32(value)
        self.value = value

    @property
    def kind(self) -> Kind:
        """Return the kind this cell was created with."""
        return self._kind

    def set_from(self, text: str) -> None:
        """Convert *text* with the kind's default converter and store it.

        Raises:
            ConversionError: If *text* cannot be converted.

        """
        self.value = self._kind.convert(text)

    def __repr__(self) -> str:
        """Return a readable representation."""
        return f"Var({self._kind.name}, {self.value!r})"
