import pytest

from longspan.utils.overflow import INT64_MAX, INT64_MIN, is_int64, is_overflow, is_underflow


def test_bounds() -> None:
    assert INT64_MAX == 9223372036854775807
    assert INT64_MIN == -9223372036854775808


@pytest.mark.parametrize(
    "a,b,expected",
    [
        (0, 0, False),
        (INT64_MAX, 0, False),
        (INT64_MAX, 1, True),
        (INT64_MAX - 2, 10, True),
        (INT64_MAX - 10, 10, False),
        (INT64_MIN, 0, False),
        (INT64_MIN, -1, True),
        (-1, INT64_MIN, True),
        (INT64_MIN, INT64_MAX, False),
    ],
)
def test_is_overflow(a: int, b: int, expected: bool) -> None:
    assert is_overflow(a, b) is expected


@pytest.mark.parametrize(
    "end,start,expected",
    [
        (0, 0, False),
        (INT64_MAX, 0, False),
        (INT64_MAX, -1, True),
        (INT64_MAX, INT64_MIN, True),
        (-1, INT64_MIN, False),
        (INT64_MIN, 1, True),
        (INT64_MIN, 0, False),
    ],
)
def test_is_underflow(end: int, start: int, expected: bool) -> None:
    assert is_underflow(end, start) is expected


@pytest.mark.parametrize(
    "value,expected",
    [
        (0, True),
        (INT64_MAX, True),
        (INT64_MIN, True),
        (INT64_MAX + 1, False),
        (INT64_MIN - 1, False),
        (True, False),
        (1.0, False),
        ("1", False),
    ],
)
def test_is_int64(value: object, expected: bool) -> None:
    assert is_int64(value) is expected
