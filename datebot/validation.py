"""Приведение года и проверка существования даты."""
from __future__ import annotations

from datetime import date
from typing import Optional

from .config import YEAR_MAX, YEAR_MIN, YEAR_PIVOT
from .models import CalendarDate, DateCandidate


def coerce_year(raw: str) -> int:
    value = int(raw)
    if len(raw) == 4:
        return value
    if len(raw) == 3:
        return 2000 + value
    if len(raw) == 2:
        return 2000 + value if value <= YEAR_PIVOT else 1900 + value
    return value


def is_valid_date(day: int, month: int, year: int) -> bool:
    """Единственная проверка легальности даты: диапазоны + григорианский календарь."""
    if not YEAR_MIN <= year <= YEAR_MAX:
        return False
    if not 1 <= month <= 12:
        return False
    if not 1 <= day <= 31:
        return False
    try:
        date(year, month, day)
    except ValueError:
        return False
    return True


def build_date(candidate: DateCandidate) -> Optional[CalendarDate]:
    year = coerce_year(candidate.year_raw)
    if not is_valid_date(candidate.day, candidate.month, year):
        return None
    return CalendarDate(day=candidate.day, month=candidate.month, year=year)
