"""Sanctioned constructors for :class:`~longspan.core.base.LongSpan`.

Both functions validate eagerly; a span is either fully valid or not created.
Rejections are logged at ``DEBUG`` before the error propagates to the caller.
"""

from __future__ import annotations

from longspan.utils.errors import InvalidSpanArgumentError, SpanOutOfRangeError
from longspan.utils.logging import get_logger
from longspan.utils.overflow import INT64_MAX, is_overflow

from .base import LongSpan
from .span_math import require_int64

__all__ = ["from_end", "from_length"]

logger = get_logger(__name__)


def from_end(start: int, end: int) -> LongSpan:
    """Create a span from its first and last position.

    ``from_end(5, 4)`` is the empty span anchored at ``5``; anything further
    below ``start`` raises :class:`InvalidSpanArgumentError`.
    """

    try:
        return LongSpan(start, end)
    except InvalidSpanArgumentError as exc:
        logger.debug("rejected from_end(%r, %r): %s", start, end, exc)
        raise


def from_length(start: int, length: int) -> LongSpan:
    """Create a span from its first position and number of positions.

    Raises :class:`SpanOutOfRangeError` for a negative ``length`` and
    :class:`InvalidSpanArgumentError` when the last position would leave the
    int64 range.
    """

    try:
        require_int64("start", start)
        require_int64("length", length)
        if length < 0:
            raise SpanOutOfRangeError(f"Length may not be less than 0: {length}")
        # length - 1 is computed before the sum so INT64_MIN with length 0 is caught
        last_offset = length - 1
        if is_overflow(start, last_offset):
            raise InvalidSpanArgumentError(
                f"The end position is too large: start ({start}) + length ({length}) - 1 "
                f"is outside [INT64_MIN, {INT64_MAX}]"
            )
    except InvalidSpanArgumentError as exc:
        logger.debug("rejected from_length(%r, %r): %s", start, length, exc)
        raise
    return from_end(start, start + last_offset)
