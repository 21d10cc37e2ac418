from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
import os
from typing import Optional


# Часовой пояс «сегодня» можно задать через переменную окружения TZ_NAME, по умолчанию Москва
DEFAULT_TZ_NAME = "Europe/Moscow"
TZ_NAME = os.getenv("TZ_NAME", DEFAULT_TZ_NAME)


def resolve_tz(tz_name: Optional[str]) -> ZoneInfo:
    """Возвращает ZoneInfo по названию, при ошибке — московский пояс."""
    if tz_name:
        try:
            return ZoneInfo(tz_name)
        except (ZoneInfoNotFoundError, Exception):
            pass
    return ZoneInfo(DEFAULT_TZ_NAME)


TZ = resolve_tz(TZ_NAME)

# Допустимый диапазон лет для распознанной даты
YEAR_MIN = 1900
YEAR_MAX = 2100

# Двузначный год: <= 50 → 20xx, иначе 19xx
YEAR_PIVOT = 50
