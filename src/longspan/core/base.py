"""Core span model and protocol definitions.

Spans are closed intervals ``[start, end]`` over 64-bit signed integers.  A
zero-length span keeps its anchor in ``start`` and stores ``end`` as
``start - 1``.  ``length`` is derived on every read and never stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from longspan.utils.spanfmt import span_to_string

from . import predicates
from .span_math import calc_length, check_start_and_end


@runtime_checkable
class SpanLike(Protocol):
    """Anything exposing the first position, last position and length."""

    @property
    def start(self) -> int: ...

    @property
    def end(self) -> int: ...

    @property
    def length(self) -> int: ...


@dataclass(slots=True, frozen=True)
class LongSpan:
    """Immutable span storing its first and last position.

    Instances are validated on construction whatever the route, so every
    ``LongSpan`` satisfies ``end >= start - 1`` and stays inside the int64
    domain.  Prefer :func:`~longspan.core.factory.from_end` and
    :func:`~longspan.core.factory.from_length` to build one.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        check_start_and_end(self.start, self.end)

    @property
    def length(self) -> int:
        """Return the number of positions in the span."""

        return calc_length(self.start, self.end)

    def overlaps(self, other: SpanLike) -> bool:
        return predicates.overlaps(self, other)

    def contains(self, item: int | SpanLike) -> bool:
        """Return ``True`` if the position or span ``item`` lies in this span."""

        return predicates.contains(self, item)

    def contains_position(self, pos: int) -> bool:
        return predicates.contains_position(self, pos)

    def contains_span(self, other: SpanLike) -> bool:
        return predicates.contains_span(self, other)

    def __contains__(self, item: object) -> bool:
        return predicates.contains(self, item)  # type: ignore[arg-type]

    def __str__(self) -> str:
        return span_to_string(self)
