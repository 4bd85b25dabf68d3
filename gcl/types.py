"""Integer semantics for the language.

All program values are 64-bit signed integers. Python integers are
unbounded, so arithmetic results are wrapped to two's complement the same
way a native 64-bit integer overflows. Division truncates toward zero.
"""

from __future__ import annotations

import re
from typing import Optional

from .errors import GclArithmeticError

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

_INTEGER_TEXT = re.compile(r'[+-]?[0-9]+')


def wrap_int64(value: int) -> int:
    """Wrap an arbitrary integer into the signed 64-bit range."""
    value &= (1 << 64) - 1
    if value > INT64_MAX:
        value -= 1 << 64
    return value


def in_int64_range(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


def parse_int64(text: str) -> Optional[int]:
    """Parse a decimal signed integer, returning None when it is not one.

    Only an optional sign followed by ASCII digits is accepted; values
    outside the 64-bit range are rejected rather than wrapped.
    """
    if not _INTEGER_TEXT.fullmatch(text):
        return None
    value = int(text)
    if not in_int64_range(value):
        return None
    return value


def truncating_divide(a: int, b: int) -> int:
    """Integer division rounding toward zero (not toward negative infinity)."""
    if b == 0:
        raise GclArithmeticError('division by zero')
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return wrap_int64(quotient)
