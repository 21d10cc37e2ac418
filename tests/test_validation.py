"""Тесты приведения года и проверки календаря."""
from datebot.models import CalendarDate, DateCandidate
from datebot.validation import build_date, coerce_year, is_valid_date


# --- coerce_year ---

def test_two_digit_pivot():
    assert coerce_year("26") == 2026
    assert coerce_year("99") == 1999
    assert coerce_year("50") == 2050
    assert coerce_year("51") == 1951
    assert coerce_year("00") == 2000


def test_three_and_four_digits():
    assert coerce_year("026") == 2026
    assert coerce_year("2026") == 2026
    assert coerce_year("1987") == 1987


def test_other_length_as_is():
    assert coerce_year("7") == 7


# --- is_valid_date ---

def test_leap_years():
    assert is_valid_date(29, 2, 2024) is True
    assert is_valid_date(29, 2, 2023) is False
    assert is_valid_date(29, 2, 2000) is True
    assert is_valid_date(29, 2, 1900) is False


def test_month_lengths():
    assert is_valid_date(31, 4, 2024) is False
    assert is_valid_date(30, 4, 2024) is True
    assert is_valid_date(31, 12, 2024) is True


def test_ranges():
    assert is_valid_date(1, 1, 1899) is False
    assert is_valid_date(1, 1, 1900) is True
    assert is_valid_date(31, 12, 2100) is True
    assert is_valid_date(1, 1, 2101) is False
    assert is_valid_date(1, 13, 2024) is False
    assert is_valid_date(1, 0, 2024) is False
    assert is_valid_date(0, 1, 2024) is False
    assert is_valid_date(32, 1, 2024) is False


# --- build_date ---

def test_build_date_coerces_year():
    assert build_date(DateCandidate(day=27, month=1, year_raw="26")) == CalendarDate(27, 1, 2026)


def test_build_date_rejects_invalid():
    assert build_date(DateCandidate(day=30, month=2, year_raw="2024")) is None
    assert build_date(DateCandidate(day=1, month=1, year_raw="7")) is None
