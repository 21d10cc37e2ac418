"""Нормализация свободного ввода даты перед разбором."""
from __future__ import annotations

import re

_QUOTES_RE = re.compile(r"[«»\"„“”'‘’]")
_DASHES_RE = re.compile(r"[‐‑–—]")
# 14:30, 9:05:17, 7:30 pm, хвост ISO "…27t14:30"
_CLOCK_RE = re.compile(r"(?:(?<=[0-9])t|(?<![0-9+\-]))[0-9]{1,2}:[0-9]{2}(?::[0-9]{2})?(?:\s*(?:am|pm)\b)?(?![0-9])")
# +03:00, -0500; не трогаем "-2026" в "27-01-2026"
_OFFSET_RE = re.compile(r"(?<![0-9./\-])[+-](?:0[0-9]|1[0-4]):?[0-5][0-9](?![0-9])")
_ISO_T_RE = re.compile(r"t(?=[0-9]{1,2}:[0-9]{2})")
_YEAR_WORD_RE = re.compile(r"(?<![a-zа-я])(?:года|год|г\.?)(?![a-zа-я])")
_BRACKETS_RE = re.compile(r"[(),]")
_LETTER_DIGIT_RE = re.compile(r"(?<=[a-zа-я])(?=[0-9])|(?<=[0-9])(?=[a-zа-я])")
_SPACES_RE = re.compile(r"\s+")


def normalize_spaces(value: str) -> str:
    return _SPACES_RE.sub(" ", value).strip()


def normalize(raw: str) -> str:
    """
    Приводит ввод к каноническому виду:
      "27 Января 2026г., 14:30"  → "27 января 2026"
      "2026-01-27T14:30:00+03:00" → "2026-01-27"
      "27января2026"             → "27 января 2026"
    Порядок шагов важен: каждый работает по результату предыдущего.
    """
    s = raw.lower().replace("ё", "е")
    s = _QUOTES_RE.sub(" ", s)
    s = _DASHES_RE.sub("-", s)
    s = _CLOCK_RE.sub(" ", s)
    s = _OFFSET_RE.sub(" ", s)
    s = _ISO_T_RE.sub(" ", s)
    s = _YEAR_WORD_RE.sub(" ", s)
    s = _BRACKETS_RE.sub(" ", s)
    s = _LETTER_DIGIT_RE.sub(" ", s)
    return normalize_spaces(s)
