"""
Conversation pipeline - one incoming Telegram message in, paced replies out.

Flow per message:
1. Classify the message (text, captioned photo, or nothing usable)
2. Record the user's side in the transcript
3. Ask the completion service, with the replied-to message as context
4. Record the bot's side in the transcript
5. Deliver the replies one at a time
"""

import asyncio
from typing import Awaitable, Callable, List, Optional

from telegram import Message
from telegram.error import TelegramError

from bot.classifier import classify_message
from bot.languages import Notices, DEFAULT_NOTICES
from config.settings import BotConfig
from core import (
    get_logger,
    MissingSenderIdentityError,
    NoUsableCompletionError,
    UnclassifiableUpdateError,
)
from core.interfaces import CompletionClient, PlatformClient, TranscriptStore
from schemas import BOT_SENDER_ID, TranscriptEntryCreateSchema
from utils.token_mask import mask

logger = get_logger(__name__)


class ConversationPipeline:
    """
    Handles a single update start to finish.

    Every collaborator call is awaited in sequence. Expected dead ends
    (nothing to classify, no sender, nothing generated) end with a fixed
    notice; collaborator failures propagate to the application error handler.
    """

    def __init__(
        self,
        config: BotConfig,
        platform: PlatformClient,
        completion: CompletionClient,
        store: TranscriptStore,
        notices: Notices = DEFAULT_NOTICES,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.config = config
        self.platform = platform
        self.completion = completion
        self.store = store
        self.notices = notices
        self._sleep = sleep

    async def handle_message(self, message: Message) -> None:
        """Entry point for every incoming message."""
        try:
            normalized = await classify_message(message, self.platform)
        except UnclassifiableUpdateError:
            await message.reply_text(self.notices.cannot_understand_message_type)
            return

        user_id = message.from_user.id if message.from_user else None
        incoming = normalized.incoming_text

        try:
            if normalized.photo:
                photo_url = self.platform.get_file_url(normalized.photo)
                await self.handle_photo(message, user_id, photo_url, caption=incoming)
            else:
                await self.handle_text(
                    message, user_id, incoming, reply_to_message=normalized.reply_to_message
                )
        except (MissingSenderIdentityError, NoUsableCompletionError) as e:
            logger.info("No reply generated", reason=e.error_code, **e.context)
            await message.reply_text(self.notices.cannot_understand)

    async def handle_photo(
        self,
        message: Message,
        user_id: Optional[int],
        photo_url: str,
        caption: Optional[str] = None,
    ) -> None:
        """
        Answer a photo, with its caption when there is one.

        Transcript order: caption, photo (masked URL), bot reply.

        Raises:
            MissingSenderIdentityError: If the sender is unknown
            NoUsableCompletionError: If nothing was generated for the photo
        """
        if user_id is None:
            raise MissingSenderIdentityError(message_id=message.message_id)
        owner = str(user_id)
        masked_url = mask(photo_url, self.config.bot_token)

        logger.info("Photo received", user_id=owner, has_caption=bool(caption), url=masked_url)

        try:
            await message.reply_text(f"{self.notices.reading_image}...")
        except TelegramError as e:
            logger.warning("Failed to send reading-image notice", user_id=owner, error=str(e))

        if caption:
            await self.store.append(self._entry(caption, owner, sender_id=owner))
        await self.store.append(self._entry(masked_url, owner, sender_id=owner, type="photo"))

        inputs = [caption] if caption else []
        reply = await self.completion.complete_with_image(self.config.persona, inputs, photo_url)
        if not reply:
            raise NoUsableCompletionError(user_id=owner)

        await message.reply_text(reply)
        await self.store.append(self._entry(reply, owner, sender_id=BOT_SENDER_ID))

    async def handle_text(
        self,
        message: Message,
        user_id: Optional[int],
        incoming: Optional[str],
        reply_to_message: Optional[str] = None,
    ) -> None:
        """
        Answer a text message (or a caption without a photo).

        The user's message is stored before generation, so it stays in the
        transcript even when generation fails.

        Raises:
            MissingSenderIdentityError: If the sender is unknown
            NoUsableCompletionError: If the text is empty or every generated
                output is empty
        """
        if user_id is None:
            raise MissingSenderIdentityError(message_id=message.message_id)
        owner = str(user_id)
        if not incoming:
            raise NoUsableCompletionError(user_id=owner)

        logger.info(
            "Text received",
            user_id=owner,
            is_reply=reply_to_message is not None,
            message_preview=incoming[:50],
        )

        await self.store.append(self._entry(incoming, owner, sender_id=owner))

        # One reply hop is all the memory there is
        context = [reply_to_message] if reply_to_message else []
        outputs = [
            "" if output is None else str(output)
            for output in await self.completion.complete(self.config.persona, [incoming], context)
        ]

        await self.store.append(self._entry("\n".join(outputs), owner, sender_id=BOT_SENDER_ID))

        sent = await self.deliver(message, outputs)
        if sent == 0:
            raise NoUsableCompletionError(user_id=owner, outputs=len(outputs))

    async def deliver(self, message: Message, outputs: List[str]) -> int:
        """
        Send non-empty outputs in order, pausing before each one.

        Returns:
            Number of messages sent
        """
        sent = 0
        for output in outputs:
            if output == "":
                continue
            await self._sleep(self.config.reply_delay_seconds)
            await message.reply_text(output)
            sent += 1
        return sent

    async def save_text_messages(
        self, user_id: int, messages: List[str], sender_id: int
    ) -> None:
        """
        Store several text messages as one batch.

        Each entry gets an explicit order (0, 1, ...) so the batch keeps its
        sequence whatever order the store returns rows in.
        """
        owner = str(user_id)
        entries = [
            self._entry(payload, owner, sender_id=str(sender_id), order=order)
            for order, payload in enumerate(messages)
        ]
        await self.store.append_batch(entries)
        logger.debug("Saved text messages", user_id=owner, count=len(entries))

    @staticmethod
    def _entry(
        payload: str,
        user_id: str,
        sender_id: str,
        type: str = "text",
        order: Optional[int] = None,
    ) -> TranscriptEntryCreateSchema:
        return TranscriptEntryCreateSchema(
            payload=payload,
            user_id=user_id,
            sender_id=sender_id,
            type=type,
            order=order,
        )
