import logging

from telegram import Update
from telegram.ext import ContextTypes

from .config import TZ
from .services import resolve_date_input, today_local
from .ui import (
    EMPTY_TEXT,
    HELP_TEXT,
    PROMPT_TEXT,
    UNRECOGNIZED_TEXT,
    date_keyboard,
    format_russian_date,
    remove_keyboard,
)

logger = logging.getLogger(__name__)


async def start(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.effective_chat.send_message(
        "👋 Привет! Пришли дату в любом виде — верну её в формате «ДД» месяца ГГГГ г.\n\n"
        "Справка: /help"
    )
    await update.effective_chat.send_message(PROMPT_TEXT, reply_markup=date_keyboard())


async def cmd_help(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text(HELP_TEXT, parse_mode="HTML", disable_web_page_preview=True)


async def on_text(update: Update, context: ContextTypes.DEFAULT_TYPE):
    if not update.message or update.message.text is None:
        return

    text = update.message.text
    if text.startswith("/"):
        return

    if not text.strip():
        await update.message.reply_text(EMPTY_TEXT, reply_markup=date_keyboard())
        return

    ymd = resolve_date_input(text, today_local(TZ))
    if ymd is None:
        await update.message.reply_text(UNRECOGNIZED_TEXT, reply_markup=date_keyboard())
        return

    logger.info("date resolved chat_id=%s date=%s", update.effective_chat.id, ymd.isoformat())
    await update.message.reply_text(format_russian_date(ymd), reply_markup=remove_keyboard())
