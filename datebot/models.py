from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class CalendarDate:
    """Распознанная дата. Создаётся только после проверки календарём."""

    day: int
    month: int
    year: int

    @classmethod
    def from_date(cls, d: date) -> "CalendarDate":
        return cls(day=d.day, month=d.month, year=d.year)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True)
class DateCandidate:
    # год ещё не приведён: "26", "026", "2026"
    day: int
    month: int
    year_raw: str


@dataclass(frozen=True)
class NumToken:
    raw: str

    @property
    def value(self) -> int:
        return int(self.raw)

    @property
    def length(self) -> int:
        return len(self.raw)
