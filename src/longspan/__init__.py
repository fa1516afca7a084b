"""Immutable int64 spans with overflow-safe construction.

A span is the closed interval ``[start, end]``; the empty span anchored at
``start`` has ``end == start - 1``.  Build spans with :func:`from_end` or
:func:`from_length`.  The command line interface lives in :mod:`longspan.cli`.
"""

from .core.base import LongSpan, SpanLike
from .core.factory import from_end, from_length
from .utils.errors import InvalidSpanArgumentError, SpanError, SpanOutOfRangeError
from .utils.overflow import INT64_MAX, INT64_MIN, is_overflow, is_underflow

__version__ = "0.1.0"

__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "InvalidSpanArgumentError",
    "LongSpan",
    "SpanError",
    "SpanLike",
    "SpanOutOfRangeError",
    "__version__",
    "from_end",
    "from_length",
    "is_overflow",
    "is_underflow",
]
