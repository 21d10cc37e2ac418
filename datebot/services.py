# datebot/services.py
from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional
from zoneinfo import ZoneInfo

from .config import TZ
from .dateparse import parse_date
from .models import CalendarDate
from .normalize import normalize_spaces

# Относительные слова разбираются здесь, до вызова parse_date
RELATIVE_DAYS: dict[str, int] = {
    "сегодня": 0,
    "today": 0,
    "вчера": -1,
    "yesterday": -1,
    "завтра": 1,
    "tomorrow": 1,
}


def today_local(tz: Optional[ZoneInfo] = None) -> date:
    """Гражданская дата «сегодня» в заданном поясе (по умолчанию TZ)."""
    return datetime.now(tz or TZ).date()


def resolve_date_input(text: str, today: date) -> Optional[CalendarDate]:
    s = normalize_spaces(text).lower()
    if not s:
        return None

    shift = RELATIVE_DAYS.get(s)
    if shift is not None:
        return CalendarDate.from_date(today + timedelta(days=shift))

    return parse_date(s, today)
