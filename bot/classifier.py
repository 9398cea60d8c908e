"""
Message classifier - reduces a Telegram message to a NormalizedMessageSchema.
"""

from telegram import Message

from core import get_logger, UnclassifiableUpdateError
from core.interfaces import PlatformClient
from schemas import NormalizedMessageSchema

logger = get_logger(__name__)


async def classify_message(message: Message, platform: PlatformClient) -> NormalizedMessageSchema:
    """
    Extract reply context, text, caption and photo from an incoming message.

    For photos the largest size is resolved through the platform's getFile,
    which is a Telegram API call and may fail.

    Raises:
        UnclassifiableUpdateError: If the message has no text, caption or photo
    """
    reply_to = message.reply_to_message
    photo = None
    if message.photo:
        photo = await platform.get_file_path(message.photo[-1].file_id)

    normalized = NormalizedMessageSchema(
        reply_to_message=reply_to.text if reply_to is not None else None,
        text=message.text,
        caption=message.caption,
        photo=photo,
    )

    if normalized.is_empty:
        logger.info("Unclassifiable message", message_id=message.message_id)
        raise UnclassifiableUpdateError(message_id=message.message_id)

    return normalized
