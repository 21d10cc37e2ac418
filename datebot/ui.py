from __future__ import annotations

from telegram import KeyboardButton, ReplyKeyboardMarkup, ReplyKeyboardRemove

from .models import CalendarDate
from .months import month_genitive


BTN_TODAY = "Сегодня"
BTN_YESTERDAY = "Вчера"
BTN_TOMORROW = "Завтра"

PROMPT_TEXT = "Введите дату (в свободной форме):"
EMPTY_TEXT = "Дата не может быть пустой. Введите дату:"
UNRECOGNIZED_TEXT = "Не удалось распознать дату. Примеры: 27.01.2026, 27 янв 2026, 27 января 2026."

HELP_TEXT = (
    "<b>📅 Распознавание дат — справка</b>\n\n"
    "<b>Команды:</b>\n"
    "/start — начать\n"
    "/help — эта справка\n\n"
    "<b>Примеры ввода:</b>\n"
    "• <code>27.01.2026</code>, <code>27/1/26</code>, <code>2026-01-27</code>\n"
    "• <code>27 января 2026</code>, <code>27 янв. 2026 г.</code>, <code>Jan 27, 2026</code>\n"
    "• <code>20260127</code>, <code>270126</code>\n"
    "• <code>27 января</code> — текущий год\n"
    "• <code>сегодня</code>, <code>вчера</code>, <code>завтра</code>"
)


def format_russian_date(d: CalendarDate) -> str:
    """«27» января 2026 г."""
    return f"«{d.day:02d}» {month_genitive(d.month)} {d.year} г."


def date_keyboard() -> ReplyKeyboardMarkup:
    buttons = [
        [
            KeyboardButton(BTN_TODAY),
            KeyboardButton(BTN_YESTERDAY),
            KeyboardButton(BTN_TOMORROW),
        ],
    ]
    return ReplyKeyboardMarkup(buttons, resize_keyboard=True, one_time_keyboard=True)


def remove_keyboard() -> ReplyKeyboardRemove:
    return ReplyKeyboardRemove()
