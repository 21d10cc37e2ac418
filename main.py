import os
import logging

from dotenv import load_dotenv
load_dotenv()

from telegram import Update
from telegram.ext import Application, CommandHandler, MessageHandler, filters

# после load_dotenv: datebot.config читает TZ_NAME при импорте
from datebot.handlers import start, on_text, cmd_help

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("datebot.main")


async def _error_handler(update: object, context) -> None:
    logger.error("Unhandled exception in handler", exc_info=context.error)


def main():
    token = os.getenv("BOT_TOKEN")
    if not token:
        raise SystemExit("ERROR: set BOT_TOKEN env var BOT_TOKEN")

    app = Application.builder().token(token).build()

    app.add_handler(CommandHandler("start", start))
    app.add_handler(CommandHandler("help", cmd_help))
    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, on_text))
    app.add_error_handler(_error_handler)

    app.run_polling(allowed_updates=Update.ALL_TYPES)


if __name__ == "__main__":
    main()
