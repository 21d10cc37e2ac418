"""Тесты вызывающей стороны: «сегодня» в поясе и относительные слова."""
import pytest
from datetime import date, datetime
from zoneinfo import ZoneInfo

import datebot.services as services
from datebot.models import CalendarDate
from datebot.services import resolve_date_input, today_local

MSK = ZoneInfo("Europe/Moscow")


@pytest.fixture
def today():
    return date(2026, 1, 27)


# --- resolve_date_input ---

def test_relative_keywords(today):
    assert resolve_date_input("сегодня", today) == CalendarDate(27, 1, 2026)
    assert resolve_date_input("Вчера", today) == CalendarDate(26, 1, 2026)
    assert resolve_date_input("  ЗАВТРА ", today) == CalendarDate(28, 1, 2026)


def test_english_keywords(today):
    assert resolve_date_input("today", today) == CalendarDate(27, 1, 2026)
    assert resolve_date_input("Yesterday", today) == CalendarDate(26, 1, 2026)
    assert resolve_date_input("tomorrow", today) == CalendarDate(28, 1, 2026)


def test_keyword_crosses_year():
    assert resolve_date_input("завтра", date(2025, 12, 31)) == CalendarDate(1, 1, 2026)
    assert resolve_date_input("вчера", date(2024, 3, 1)) == CalendarDate(29, 2, 2024)


def test_keyword_must_be_exact(today):
    assert resolve_date_input("сегодня 5", today) is None


def test_delegates_to_parser(today):
    assert resolve_date_input("27 января", today) == CalendarDate(27, 1, 2026)
    assert resolve_date_input("01.03.2024", today) == CalendarDate(1, 3, 2024)


def test_empty(today):
    assert resolve_date_input("", today) is None
    assert resolve_date_input("   ", today) is None


# --- today_local ---

class _FixedDatetime:
    calls = []

    @classmethod
    def now(cls, tz=None):
        cls.calls.append(tz)
        return datetime(2026, 1, 27, 23, 30, tzinfo=tz)


def test_today_local_uses_zone(monkeypatch):
    _FixedDatetime.calls = []
    monkeypatch.setattr(services, "datetime", _FixedDatetime)

    assert today_local(MSK) == date(2026, 1, 27)
    assert _FixedDatetime.calls == [MSK]


def test_today_local_default_zone(monkeypatch):
    _FixedDatetime.calls = []
    monkeypatch.setattr(services, "datetime", _FixedDatetime)

    today_local()
    assert _FixedDatetime.calls == [services.TZ]
