"""Overflow detection for 64-bit signed integer arithmetic.

Python integers never wrap, so both checks widen the operation to an exact
result and compare it against the int64 bounds.
"""

from __future__ import annotations

__all__ = ["INT64_MIN", "INT64_MAX", "is_int64", "is_overflow", "is_underflow"]

INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1


def is_int64(value: object) -> bool:
    """Return ``True`` if ``value`` is an ``int`` within the int64 range."""

    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return INT64_MIN <= value <= INT64_MAX


def is_overflow(a: int, b: int) -> bool:
    """Return ``True`` if ``a + b`` is not representable as an int64."""

    return not INT64_MIN <= a + b <= INT64_MAX


def is_underflow(end: int, start: int) -> bool:
    """Return ``True`` if ``end - start`` is not representable as an int64."""

    return not INT64_MIN <= end - start <= INT64_MAX
