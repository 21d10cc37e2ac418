"""Разбор чисто цифровых дат: 20260127, 270126, 27.01.2026, 1/27/26, 5/9."""
from __future__ import annotations

import logging
import re
from typing import Iterator, Optional

from .models import CalendarDate, DateCandidate, NumToken
from .validation import build_date

logger = logging.getLogger(__name__)

_NON_DIGIT_RE = re.compile(r"[^0-9]")
_NUMERAL_RE = re.compile(r"[0-9]{1,4}")


def numeral_tokens(normalized: str) -> list[NumToken]:
    return [NumToken(raw) for raw in _NUMERAL_RE.findall(normalized)]


def compact_candidates(digits: str) -> Iterator[DateCandidate]:
    """Сплошная запись: 8 цифр — сначала ГГГГММДД, 6 цифр — сначала ДДММГГ."""
    if len(digits) == 8:
        yield DateCandidate(day=int(digits[6:8]), month=int(digits[4:6]), year_raw=digits[0:4])
        yield DateCandidate(day=int(digits[0:2]), month=int(digits[2:4]), year_raw=digits[4:8])
    elif len(digits) == 6:
        yield DateCandidate(day=int(digits[0:2]), month=int(digits[2:4]), year_raw=digits[4:6])
        yield DateCandidate(day=int(digits[4:6]), month=int(digits[2:4]), year_raw=digits[0:2])


def window_candidates(a: NumToken, b: NumToken, c: NumToken) -> Iterator[DateCandidate]:
    """
    Варианты для трёх соседних чисел в порядке приоритета.
    Каждое правило: (применимо?, порядки (день, месяц, год)).
    """
    rules = (
        # четырёхзначный год: в начале, в конце, в середине
        (a.length == 4, (c, b, a), (b, c, a)),
        (c.length == 4, (a, b, c), (b, a, c)),
        (b.length == 4, (a, c, b), (c, a, b)),
        # короткий год в конце или в начале
        (c.length <= 2, (a, b, c), (b, a, c)),
        (a.length <= 2, (c, b, a), (b, c, a)),
    )
    for applies, *orders in rules:
        if not applies:
            continue
        for day, month, year in orders:
            yield DateCandidate(day=day.value, month=month.value, year_raw=year.raw)


def sliding_candidates(tokens: list[NumToken]) -> Iterator[DateCandidate]:
    # более ранние позиции в тексте важнее
    for i in range(len(tokens) - 2):
        yield from window_candidates(*tokens[i:i + 3])


def pair_candidates(tokens: list[NumToken], reference_year: int) -> Iterator[DateCandidate]:
    """Последний шанс: два коротких числа без года («27 1», «5/9»)."""
    short = [t for t in tokens if t.length <= 2]
    if len(short) < 2:
        return
    first, second = short[0], short[1]
    year_raw = f"{reference_year:04d}"
    yield DateCandidate(day=first.value, month=second.value, year_raw=year_raw)
    yield DateCandidate(day=second.value, month=first.value, year_raw=year_raw)


def match_numeric(normalized: str, reference_year: int) -> Optional[CalendarDate]:
    digits = _NON_DIGIT_RE.sub("", normalized)
    tokens = numeral_tokens(normalized)

    # генераторы ленивые: следующий уровень строится, только если предыдущий ничего не дал
    tiers = (
        ("compact", compact_candidates(digits)),
        ("window", sliding_candidates(tokens)),
        ("pair", pair_candidates(tokens, reference_year)),
    )
    for tier, candidates in tiers:
        for candidate in candidates:
            result = build_date(candidate)
            if result is not None:
                logger.debug("numeric date accepted tier=%s candidate=%s", tier, candidate)
                return result
    return None
