from dataclasses import FrozenInstanceError

import pytest

from longspan.core.base import LongSpan, SpanLike
from longspan.core.factory import from_end, from_length
from longspan.utils.errors import InvalidSpanArgumentError
from longspan.utils.overflow import INT64_MAX, INT64_MIN


def test_long_span_fields_and_length() -> None:
    span = from_end(3, 7)
    assert span.start == 3
    assert span.end == 7
    assert span.length == 5
    assert isinstance(span, SpanLike)


def test_single_position_span() -> None:
    span = from_end(3, 3)
    assert span.length == 1
    assert str(span) == "longspan.core.base.LongSpan[3,3]"


def test_long_span_immutable() -> None:
    span = from_end(0, 1)
    with pytest.raises(FrozenInstanceError):
        span.start = 1  # type: ignore[misc]
    with pytest.raises(FrozenInstanceError):
        span.end = 5  # type: ignore[misc]
    assert not hasattr(span, "__dict__")


@pytest.mark.parametrize("start,end", [(5, 3), (0, -5), (INT64_MIN, INT64_MAX), (0, INT64_MAX + 1)])
def test_direct_construction_is_validated(start: int, end: int) -> None:
    with pytest.raises(InvalidSpanArgumentError):
        LongSpan(start, end)


def test_value_semantics() -> None:
    assert from_end(2, 5) == LongSpan(2, 5)
    assert from_end(2, 5) == from_length(2, 4)
    assert from_end(2, 5) != from_end(2, 6)
    assert hash(from_end(5, 4)) == hash(from_length(5, 0))
    assert len({from_end(0, 1), from_length(0, 2), from_end(0, 2)}) == 2


def test_string_forms() -> None:
    assert str(from_end(3, 7)) == "longspan.core.base.LongSpan[3,7]"
    assert str(from_length(5, 0)) == "longspan.core.base.LongSpan[5,-empty-]"
    assert str(from_end(-3, -1)) == "longspan.core.base.LongSpan[-3,-1]"
    assert repr(from_end(3, 7)) == "LongSpan(start=3, end=7)"


def test_methods_delegate_to_predicates() -> None:
    a = from_end(0, 10)
    b = from_end(2, 5)
    assert a.contains(b) is True
    assert b.contains(a) is False
    assert a.contains(10) is True
    assert a.contains(11) is False
    assert a.contains_span(b) is True
    assert a.contains_position(0) is True
    assert a.overlaps(from_end(10, 12)) is True
    assert a.overlaps(from_end(11, 12)) is False


def test_in_operator() -> None:
    span = from_end(3, 7)
    assert 3 in span
    assert 8 not in span
    assert from_end(4, 5) in span
    assert from_end(4, 8) not in span


def test_extreme_spans() -> None:
    top = from_end(INT64_MAX, INT64_MAX)
    assert top.length == 1
    widest = from_end(INT64_MIN, -2)
    assert widest.length == INT64_MAX
    assert widest.contains(INT64_MIN)
    assert not widest.contains(-1)
