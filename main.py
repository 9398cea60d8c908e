"""
Telegram relay bot - forwards chat messages to a language model and relays the replies.
Main entry point for the application.
"""

from bot.telegram_handler import TelegramBot
from config.settings import get_settings
from core import configure_logging, get_logger

logger = get_logger(__name__)


def main():
    """Load settings and run the bot until interrupted."""
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL, json_logs=settings.is_production)

    try:
        logger.info("Relay bot starting", environment=settings.ENVIRONMENT)
        TelegramBot(settings).run()
    except KeyboardInterrupt:
        logger.info("Shutting down gracefully...")
    except Exception as e:
        logger.error("Error starting bot", error=str(e), exc_info=True)
        raise


if __name__ == "__main__":
    main()
