"""
Access gate - only allow-listed Telegram users reach the pipeline.
"""

from typing import Optional

from telegram import Update
from telegram.ext import ApplicationHandlerStop, ContextTypes

from bot.languages import Notices, DEFAULT_NOTICES
from config.settings import BotConfig
from core import get_logger

logger = get_logger(__name__)


class AccessGate:
    """Allow/deny by sender id, installed in handler group -1 ahead of everything else."""

    def __init__(self, config: BotConfig, notices: Notices = DEFAULT_NOTICES):
        self.allowed_user_ids = frozenset(config.allowed_user_ids)
        self.notices = notices
        logger.info("Access gate initialized", allowed_users=len(self.allowed_user_ids))

    def is_allowed(self, user_id: Optional[int]) -> bool:
        return user_id is not None and user_id in self.allowed_user_ids

    async def check(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """
        Stop handling of updates from senders outside the allow-list.

        Raises:
            ApplicationHandlerStop: For denied senders, so no later handler runs
        """
        user = update.effective_user
        user_id = user.id if user else None
        if self.is_allowed(user_id):
            return

        logger.warning("Access denied", user_id=user_id)
        if update.effective_message is not None:
            await update.effective_message.reply_text(self.notices.not_allowed)
        raise ApplicationHandlerStop
