"""Debug formatting for spans.

The rendered form is ``<implementation-name>[<start>,<end>]`` where ``end`` is
replaced by a marker for empty spans.  It is meant for diagnostics only and
is not parsed anywhere.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from longspan.core.base import SpanLike

__all__ = ["EMPTY_MARKER", "type_name", "span_to_string"]

EMPTY_MARKER: str = "-empty-"


def type_name(obj: object, *, qualified: bool = True) -> str:
    """Return the class name of ``obj``, prefixed by its module if ``qualified``."""

    cls = type(obj)
    if qualified:
        return f"{cls.__module__}.{cls.__qualname__}"
    return cls.__qualname__


def span_to_string(
    span: SpanLike, *, empty_marker: str = EMPTY_MARKER, qualified: bool = True
) -> str:
    """Return the debug representation of ``span``."""

    end: object = span.end if span.length > 0 else empty_marker
    return f"{type_name(span, qualified=qualified)}[{span.start},{end}]"
