"""Arithmetic for deriving span coordinates and validating them.

``calc_end`` and ``calc_length`` are plain projections and never check their
inputs.  The ``check_*`` gates raise before a span could be built from values
that break ordering or leave the int64 domain.
"""

from __future__ import annotations

from longspan.utils.errors import InvalidSpanArgumentError, SpanOutOfRangeError
from longspan.utils.overflow import INT64_MAX, is_int64, is_overflow, is_underflow

__all__ = [
    "calc_end",
    "calc_length",
    "require_int64",
    "check_start_and_length",
    "check_start_and_end",
]


def calc_end(start: int, length: int) -> int:
    """Return the last position of a span of ``length`` beginning at ``start``."""

    return start + length - 1


def calc_length(start: int, end: int) -> int:
    """Return the number of positions in ``[start, end]``."""

    return end - start + 1


def require_int64(name: str, value: object) -> int:
    """Return ``value`` if it is an int64, raising otherwise.

    ``TypeError`` is raised for anything that is not an ``int`` (``bool``
    included); :class:`InvalidSpanArgumentError` for integers outside the
    int64 range.
    """

    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    if not is_int64(value):
        raise InvalidSpanArgumentError(f"{name} ({value}) is outside the int64 range")
    return value


def check_start_and_length(start: int, length: int) -> None:
    """Ensure ``start + length`` stays within the int64 range.

    Raises :class:`SpanOutOfRangeError` if ``length`` is negative and
    :class:`InvalidSpanArgumentError` if the sum overflows.
    """

    if length < 0:
        raise SpanOutOfRangeError(f"Length may not be less than zero: {length}")
    if is_overflow(start, length):
        raise InvalidSpanArgumentError(
            f"length ({length}) + start ({start}) > INT64_MAX ({INT64_MAX})"
        )


def check_start_and_end(start: int, end: int) -> None:
    """Ensure ``(start, end)`` describes a span, possibly empty.

    ``end == start - 1`` is the only accepted value below ``start``.  The
    distance ``end - start`` and the derived length must both be int64 values.
    """

    require_int64("start", start)
    require_int64("end", end)
    if end < start and end + 1 != start:
        raise InvalidSpanArgumentError(
            f"The end position is too small ({end}): end + 1 must be >= start ({start})"
        )
    if is_underflow(end, start) or calc_length(start, end) > INT64_MAX:
        raise InvalidSpanArgumentError(
            f"The distance between start ({start}) and end ({end}) is too large: "
            f"length > INT64_MAX ({INT64_MAX})"
        )
