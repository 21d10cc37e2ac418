"""Словарь названий месяцев: русские и английские формы, сокращения."""
from __future__ import annotations

# Родительный падеж для форматирования (индекс 1-12, индекс 0 не используется)
MONTHS_GENITIVE = (
    "",
    "января", "февраля", "марта", "апреля", "мая", "июня",
    "июля", "августа", "сентября", "октября", "ноября", "декабря",
)

MONTH_TOKENS: dict[str, int] = {
    # русские: именительный, родительный, сокращения (с точкой и без)
    "январь": 1, "января": 1, "янв": 1, "янв.": 1,
    "февраль": 2, "февраля": 2, "фев": 2, "фев.": 2,
    "март": 3, "марта": 3, "мар": 3, "мар.": 3,
    "апрель": 4, "апреля": 4, "апр": 4, "апр.": 4,
    "май": 5, "мая": 5,
    "июнь": 6, "июня": 6, "июн": 6, "июн.": 6,
    "июль": 7, "июля": 7, "июл": 7, "июл.": 7,
    "август": 8, "августа": 8, "авг": 8, "авг.": 8,
    "сентябрь": 9, "сентября": 9, "сент": 9, "сен": 9, "сен.": 9, "сент.": 9,
    "октябрь": 10, "октября": 10, "окт": 10, "окт.": 10,
    "ноябрь": 11, "ноября": 11, "ноя": 11, "ноя.": 11,
    "декабрь": 12, "декабря": 12, "дек": 12, "дек.": 12,
    # английские
    "january": 1, "jan": 1, "jan.": 1,
    "february": 2, "feb": 2, "feb.": 2,
    "march": 3, "mar": 3, "mar.": 3,
    "april": 4, "apr": 4, "apr.": 4,
    "may": 5,
    "june": 6, "jun": 6, "jun.": 6,
    "july": 7, "jul": 7, "jul.": 7,
    "august": 8, "aug": 8, "aug.": 8,
    "september": 9, "sept": 9, "sep": 9, "sep.": 9,
    "october": 10, "oct": 10, "oct.": 10,
    "november": 11, "nov": 11, "nov.": 11,
    "december": 12, "dec": 12, "dec.": 12,
}


def month_genitive(month: int) -> str:
    """Название месяца в родительном падеже; номер зажимается в 1..12."""
    return MONTHS_GENITIVE[min(max(month, 1), 12)]
