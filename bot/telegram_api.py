"""
Thin Telegram Bot API client: bot identity, file lookups and webhook registration.
"""

from typing import Optional

from telegram import Bot, User
from telegram.error import TelegramError

from core import get_logger, TelegramAPIError
from utils.token_mask import mask

logger = get_logger(__name__)


class TelegramApiClient:
    """Telegram primitives the pipeline and deploy scripts need."""

    base_url = "https://api.telegram.org"

    def __init__(self, bot_token: str, bot: Optional[Bot] = None):
        self.bot_token = bot_token
        self.bot = bot or Bot(bot_token)

    def get_file_url(self, file_path: str) -> str:
        """
        Download URL for a file_path returned by getFile.

        python-telegram-bot already expands file_path to a full URL; bare
        paths from the raw API are expanded here.

        https://core.telegram.org/bots/api#getfile
        """
        if file_path.startswith(("http://", "https://")):
            return file_path
        return f"{self.base_url}/file/bot{self.bot_token}/{file_path.lstrip('/')}"

    async def get_file_path(self, file_id: str) -> str:
        """file_path for a file_id, from getFile."""
        try:
            async with self.bot:
                telegram_file = await self.bot.get_file(file_id)
        except TelegramError as e:
            raise TelegramAPIError(details=str(e)) from e
        return telegram_file.file_path

    async def get_me(self) -> User:
        """Bot identity from getMe."""
        try:
            async with self.bot:
                return await self.bot.get_me()
        except TelegramError as e:
            raise TelegramAPIError(details=str(e)) from e

    async def set_webhook(self, url: str, secret_token: Optional[str] = None) -> bool:
        """Point Telegram at the webhook URL."""
        logger.info("Setting webhook", url=mask(url, self.bot_token))
        try:
            async with self.bot:
                return await self.bot.set_webhook(url=url, secret_token=secret_token or None)
        except TelegramError as e:
            raise TelegramAPIError(details=str(e)) from e

