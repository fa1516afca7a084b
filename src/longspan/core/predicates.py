"""Overlap and containment predicates.

The functions only read ``start`` and ``end`` so they work for any object
satisfying :class:`~longspan.core.base.SpanLike`.  Both ends are inclusive:
spans touching at a single position overlap.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .base import SpanLike

__all__ = ["overlaps", "contains_position", "contains_span", "contains"]


def overlaps(one: SpanLike, other: SpanLike) -> bool:
    """Return ``True`` if ``one`` and ``other`` share any position."""

    return not (one.end < other.start or one.start > other.end)


def contains_position(one: SpanLike, pos: int) -> bool:
    """Return ``True`` if ``one.start <= pos <= one.end``."""

    return one.start <= pos <= one.end


def contains_span(one: SpanLike, other: SpanLike) -> bool:
    """Return ``True`` if ``other`` lies entirely within ``one``."""

    return one.start <= other.start and other.end <= one.end


def contains(one: SpanLike, item: int | SpanLike) -> bool:
    """Dispatch to :func:`contains_position` or :func:`contains_span`."""

    from .base import SpanLike

    if isinstance(item, int) and not isinstance(item, bool):
        return contains_position(one, item)
    if isinstance(item, SpanLike):
        return contains_span(one, item)
    raise TypeError(f"expected an int position or a span, not {type(item).__name__}")
