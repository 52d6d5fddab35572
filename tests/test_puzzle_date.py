import pytest

from core.domain.puzzle_date import is_valid_puzzle_date


@pytest.mark.parametrize(
    "value",
    [
        "2024-01-01",
        "1994-11-21",
        "0000-00-00",   # only the shape is checked, not the calendar
        "2024-13-45",
    ],
)
def test_accepts_yyyy_mm_dd(value):
    assert is_valid_puzzle_date(value)


@pytest.mark.parametrize(
    "value",
    [
        "",
        "2024-1-01",
        "24-01-01",
        "2024/01/01",
        "20240101",
        "2024-01-01 ",
        " 2024-01-01",
        "2024-01-01\n",
        "2024-01-011",
        "abcd-ef-gh",
        "2024-01-01T00:00",
    ],
)
def test_rejects_everything_else(value):
    assert not is_valid_puzzle_date(value)
