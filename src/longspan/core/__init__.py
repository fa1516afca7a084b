"""Span value type, arithmetic, predicates and factory."""

from .base import LongSpan, SpanLike
from .factory import from_end, from_length

__all__ = ["LongSpan", "SpanLike", "from_end", "from_length"]
