"""
Telegram bot handler for receiving and sending messages.
Wires the access gate, commands and the conversation pipeline into a
python-telegram-bot Application and runs it in polling or webhook mode.
"""

import hashlib
from typing import Optional

from telegram import BotCommand, Update
from telegram.ext import (
    Application,
    CommandHandler,
    ContextTypes,
    MessageHandler,
    TypeHandler,
    filters,
)

from agents.completion_agent import CompletionAgent
from bot.access import AccessGate
from bot.pipeline import ConversationPipeline
from bot.telegram_api import TelegramApiClient
from config.settings import Settings
from core import get_logger
from memory.transcript_store import AsyncTranscriptStore
from utils.llm_client import LLMClient

logger = get_logger(__name__)


def webhook_secret_for(settings: Settings) -> str:
    """Configured secret, or one derived from the bot token."""
    # Telegram secret_token only allows A-Za-z0-9_- characters
    return settings.WEBHOOK_SECRET or hashlib.sha256(settings.TELEGRAM_BOT_TOKEN.encode()).hexdigest()[:32]


class TelegramBot:
    """Telegram bot handler for the relay bot."""

    def __init__(
        self,
        settings: Settings,
        pipeline: Optional[ConversationPipeline] = None,
        store: Optional[AsyncTranscriptStore] = None,
    ):
        """Initialize the Telegram bot and its collaborators."""
        self.settings = settings
        self.config = settings.to_bot_config()
        self.notices = settings.to_notices()
        self.application: Optional[Application] = None

        self.store = store
        if pipeline is None:
            if self.store is None:
                self.store = AsyncTranscriptStore(
                    settings.DATABASE_URL, echo=settings.LOG_LEVEL == "DEBUG"
                )
            completion = CompletionAgent(
                llm=LLMClient(api_key=settings.OPENAI_API_KEY),
                model=settings.MODEL_CONVERSATION,
                vision_model=settings.MODEL_VISION,
            )
            pipeline = ConversationPipeline(
                config=self.config,
                platform=TelegramApiClient(settings.TELEGRAM_BOT_TOKEN),
                completion=completion,
                store=self.store,
                notices=self.notices,
            )
        self.pipeline = pipeline
        self.access_gate = AccessGate(self.config, self.notices) if self.config.protected_bot else None

    async def whoiam_command(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Handle the /whoiam command: tell users their Telegram id."""
        user = update.effective_user
        if user is None or update.message is None:
            return
        await update.message.reply_text(f"{self.notices.you_are} {user.first_name} (id: {user.id})")

    async def handle_message(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Hand every non-command message to the conversation pipeline."""
        if update.message is None:
            return
        await self.pipeline.handle_message(update.message)

    async def error_handler(self, update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
        """
        Handle errors caused by updates.
        Logs errors gracefully instead of crashing the application.
        """
        logger.error(
            "Exception while handling an update",
            exc_info=context.error,
            update_id=getattr(update, "update_id", None),
            error_type=type(context.error).__name__,
        )

    def setup_handlers(self) -> None:
        """Set up the access gate, command and message handlers."""
        assert self.application is not None, "Application not initialized"
        # Error handler - must be added first to catch all errors
        self.application.add_error_handler(self.error_handler)

        if self.access_gate is not None:
            # Group -1 runs before the default group and can stop propagation
            self.application.add_handler(TypeHandler(Update, self.access_gate.check), group=-1)

        self.application.add_handler(
            CommandHandler("whoiam", self.whoiam_command)
        )
        self.application.add_handler(
            MessageHandler(filters.UpdateType.MESSAGE, self.handle_message)
        )

        logger.info("Telegram bot handlers configured", protected=self.access_gate is not None)

    async def _post_init(self, application: Application) -> None:
        await application.bot.set_my_commands([BotCommand("whoiam", "Who am I")])
        if self.store is not None:
            await self.store.create_tables()
        logger.info("Bot starts", username=application.bot.username)

    async def _post_shutdown(self, application: Application) -> None:
        if self.store is not None:
            await self.store.close()

    def _build_application(self) -> Application:
        """Build and configure the application."""
        if self.application:
            return self.application

        self.application = (
            Application.builder()
            .token(self.settings.TELEGRAM_BOT_TOKEN)
            .post_init(self._post_init)
            .post_shutdown(self._post_shutdown)
            .build()
        )
        self.setup_handlers()
        return self.application

    def run(self) -> None:
        """
        Start the Telegram bot.
        This is a blocking call that runs the bot until interrupted.
        """
        application = self._build_application()

        if self.settings.TELEGRAM_WEBHOOK_URL:
            webhook_secret = webhook_secret_for(self.settings)
            webhook_path = f"/webhook/{webhook_secret}"
            webhook_url = f"{self.settings.TELEGRAM_WEBHOOK_URL.rstrip('/')}{webhook_path}"

            logger.info("Starting Telegram bot in WEBHOOK mode", port=self.settings.PORT)
            application.run_webhook(
                listen="0.0.0.0",
                port=self.settings.PORT,
                url_path=webhook_path,
                webhook_url=webhook_url,
                secret_token=webhook_secret,
                allowed_updates=Update.ALL_TYPES,
            )
        else:
            logger.info("Starting Telegram bot in POLLING mode (no TELEGRAM_WEBHOOK_URL set)")
            application.run_polling(allowed_updates=Update.ALL_TYPES)
