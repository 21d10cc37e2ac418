"""Разбор даты с названием месяца: «27 января 2026», «Jan 27, 26», «января 27»."""
from __future__ import annotations

import logging
import re
from typing import Optional

from .models import CalendarDate, DateCandidate
from .months import MONTH_TOKENS
from .validation import build_date

logger = logging.getLogger(__name__)

_SPLIT_RE = re.compile(r"[\s/.\-:]+")
_DAY_RE = re.compile(r"^[0-9]{1,2}$")
_YEAR_RE = re.compile(r"^[0-9]{2,4}$")


def tokenize(normalized: str) -> list[str]:
    tokens = (t.replace(".", "") for t in _SPLIT_RE.split(normalized))
    return [t for t in tokens if t]


def _find_month(tokens: list[str]) -> Optional[int]:
    for i, token in enumerate(tokens):
        if token in MONTH_TOKENS:
            return i
    return None


def has_month_name(normalized: str) -> bool:
    return _find_month(tokenize(normalized)) is not None


def _find_day(tokens: list[str], m: int) -> Optional[int]:
    # сначала ближайшие слева («27 января»), затем справа («января 27»)
    order = list(range(m - 1, -1, -1)) + list(range(m + 1, len(tokens)))
    for i in order:
        if _DAY_RE.match(tokens[i]) and 1 <= int(tokens[i]) <= 31:
            return i
    return None


def _find_year(tokens: list[str], m: int, day_idx: int) -> Optional[str]:
    order = list(range(m + 1, len(tokens))) + list(range(m - 1, -1, -1))
    for i in order:
        if i != day_idx and _YEAR_RE.match(tokens[i]):
            return tokens[i]
    return None


def match_by_month_name(normalized: str, reference_year: int) -> Optional[CalendarDate]:
    """
    Ищет первое название месяца и подбирает к нему день и год из соседей.
    Без дня — None. Без года — берётся reference_year.
    Разбор однократный: если тройка не проходит календарь, других вариантов не ищем.
    """
    tokens = tokenize(normalized)
    m = _find_month(tokens)
    if m is None:
        return None

    day_idx = _find_day(tokens, m)
    if day_idx is None:
        logger.debug("month name without day: %r", normalized)
        return None

    year_raw = _find_year(tokens, m, day_idx)
    if year_raw is None:
        year_raw = str(reference_year)

    candidate = DateCandidate(
        day=int(tokens[day_idx]),
        month=MONTH_TOKENS[tokens[m]],
        year_raw=year_raw,
    )
    return build_date(candidate)
