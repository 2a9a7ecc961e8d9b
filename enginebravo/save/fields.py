"""Named save-game values and checks for numeric text."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_FLT_MAX = 3.4028234663852886e38

_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+")
_FLOAT_TEXT = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass
class IntSaveField:
    """An integer value stored under a name."""

    name: str
    value: int


@dataclass
class FloatSaveField:
    """A floating-point value stored under a name."""

    name: str
    value: float


@dataclass
class StringSaveField:
    """A text value stored under a name."""

    name: str
    value: str


def is_integer(value: str) -> bool:
    """Return whether the whole of ``value`` is a decimal 32-bit integer.

    Leading or trailing whitespace makes the text invalid.
    """
    if not _INTEGER_TEXT.fullmatch(value):
        return False
    return _INT32_MIN <= int(value) <= _INT32_MAX


def is_float(value: str) -> bool:
    """Return whether the whole of ``value`` is a decimal single-precision number.

    Leading or trailing whitespace makes the text invalid, as does a value
    too large for single precision.
    """
    if not _FLOAT_TEXT.fullmatch(value):
        return False
    return abs(float(value)) <= _FLT_MAX