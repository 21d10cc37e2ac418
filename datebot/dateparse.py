"""Распознавание даты из свободного ввода (RU/EN)."""
from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from .models import CalendarDate
from .monthname import has_month_name, match_by_month_name
from .normalize import normalize
from .numeric import match_numeric

logger = logging.getLogger(__name__)


def parse_date(text: str, reference: date) -> Optional[CalendarDate]:
    """
    Возвращает CalendarDate или None, если безопасного прочтения нет.

    reference — «сегодня» вызывающей стороны; из него берётся только год,
    когда во вводе года нет. Текущее время здесь не читается.

    Примеры:
      "27.01.2026"      → 27.01.2026
      "27 января 2026"  → 27.01.2026
      "20260127"        → 27.01.2026
      "января 27"       → 27.01.<год reference>
      "январь"          → None
    """
    cleaned = normalize(text)
    if not cleaned:
        return None

    if has_month_name(cleaned):
        result = match_by_month_name(cleaned, reference.year)
    else:
        result = match_numeric(cleaned, reference.year)

    if result is None:
        logger.debug("date not recognized: %r", cleaned)
    return result
