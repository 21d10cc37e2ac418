"""Тесты доменных типов и настроек."""
import dataclasses
import pytest
from datetime import date
from zoneinfo import ZoneInfo

from datebot.config import resolve_tz
from datebot.models import CalendarDate, NumToken


def test_calendar_date_round_trip():
    d = CalendarDate.from_date(date(2024, 2, 29))
    assert d == CalendarDate(day=29, month=2, year=2024)
    assert d.to_date() == date(2024, 2, 29)


def test_calendar_date_isoformat():
    assert CalendarDate(5, 3, 1999).isoformat() == "1999-03-05"


def test_calendar_date_immutable():
    d = CalendarDate(1, 1, 2026)
    with pytest.raises(dataclasses.FrozenInstanceError):
        d.day = 2


def test_num_token_preserves_length():
    assert NumToken("07").length == 2
    assert NumToken("7").length == 1
    assert NumToken("07").value == NumToken("7").value == 7


def test_resolve_tz():
    assert resolve_tz("Asia/Bangkok") == ZoneInfo("Asia/Bangkok")
    assert resolve_tz("Not/AZone") == ZoneInfo("Europe/Moscow")
    assert resolve_tz(None) == ZoneInfo("Europe/Moscow")
    # имя каталога tzdata, а не зоны
    assert resolve_tz("Europe") == ZoneInfo("Europe/Moscow")
