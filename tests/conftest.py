"""
Shared pytest fixtures for relay bot tests.
"""

from types import SimpleNamespace
from typing import Any, Dict, List, Optional, Tuple
from unittest.mock import AsyncMock, MagicMock

import pytest

from bot.languages import Notices
from bot.pipeline import ConversationPipeline
from config.settings import BotConfig

BOT_TOKEN = "123456:ABC-secret_TOKEN"


# --- Config ---

@pytest.fixture
def bot_token():
    return BOT_TOKEN


@pytest.fixture
def bot_config():
    """Bot config with a recognisable token and a pacing delay to assert on."""
    return BotConfig(
        bot_token=BOT_TOKEN,
        allowed_user_ids=(42, 7),
        protected_bot=True,
        reply_delay_seconds=0.1,
    )


@pytest.fixture
def notices():
    return Notices()


# --- Call log shared by all doubles, to assert on ordering ---

@pytest.fixture
def events() -> List[Tuple[str, Any]]:
    return []


# --- Mock collaborators ---

@pytest.fixture
def mock_store(events):
    """Transcript store double that records every append."""
    store = AsyncMock()

    async def append(entry):
        events.append(("append", entry))
        return entry

    async def append_batch(entries):
        events.append(("append_batch", entries))
        return entries

    store.append = AsyncMock(side_effect=append)
    store.append_batch = AsyncMock(side_effect=append_batch)
    return store


@pytest.fixture
def mock_completion(events):
    """Completion client double; tests set return values."""
    completion = AsyncMock()

    async def complete(persona, inputs, context):
        events.append(("complete", (persona, inputs, context)))
        return completion.outputs

    async def complete_with_image(persona, inputs, image_url):
        events.append(("complete_with_image", (persona, inputs, image_url)))
        return completion.image_reply

    completion.outputs = ["hello"]
    completion.image_reply = "nice photo"
    completion.complete = AsyncMock(side_effect=complete)
    completion.complete_with_image = AsyncMock(side_effect=complete_with_image)
    return completion


@pytest.fixture
def telegram_files() -> Dict[str, str]:
    """file_id -> file_path, filled in by the message builder."""
    return {}


@pytest.fixture
def mock_platform(telegram_files):
    """Platform client double resolving files and building URLs the way Telegram does."""
    platform = MagicMock()
    platform.get_file_path = AsyncMock(side_effect=lambda file_id: telegram_files[file_id])
    platform.get_file_url = MagicMock(
        side_effect=lambda path: f"https://api.telegram.org/file/bot{BOT_TOKEN}/{path}"
    )
    platform.get_me = AsyncMock(return_value=SimpleNamespace(id=1, username="relay_bot"))
    return platform


@pytest.fixture
def mock_sleep(events):
    async def sleep(seconds):
        events.append(("sleep", seconds))

    return AsyncMock(side_effect=sleep)


@pytest.fixture
def pipeline(bot_config, mock_platform, mock_completion, mock_store, notices, mock_sleep):
    """Pipeline wired to mock collaborators and a recording sleep."""
    return ConversationPipeline(
        config=bot_config,
        platform=mock_platform,
        completion=mock_completion,
        store=mock_store,
        notices=notices,
        sleep=mock_sleep,
    )


# --- Telegram message builder ---

class MessageBuilder:
    """Helper to build telegram.Message stand-ins."""

    def __init__(self, events: List[Tuple[str, Any]], files: Dict[str, str]):
        self.events = events
        self.files = files

    def build(
        self,
        text: Optional[str] = None,
        caption: Optional[str] = None,
        photo_path: Optional[str] = None,
        reply_to_text: Optional[str] = None,
        user_id: Optional[int] = 42,
        message_id: int = 100,
    ) -> MagicMock:
        message = MagicMock()
        message.message_id = message_id
        message.text = text
        message.caption = caption
        message.from_user = SimpleNamespace(id=user_id, first_name="Ada") if user_id is not None else None
        message.reply_to_message = (
            SimpleNamespace(text=reply_to_text) if reply_to_text is not None else None
        )

        if photo_path is not None:
            small = SimpleNamespace(file_id=f"small-{message_id}")
            large = SimpleNamespace(file_id=f"large-{message_id}")
            self.files[small.file_id] = "photos/small.jpg"
            self.files[large.file_id] = photo_path
            message.photo = (small, large)
        else:
            message.photo = ()

        async def reply_text(text, *args, **kwargs):
            self.events.append(("reply", text))

        message.reply_text = AsyncMock(side_effect=reply_text)
        return message


@pytest.fixture
def make_message(events, telegram_files):
    """Factory fixture for Telegram messages that log replies to `events`."""
    return MessageBuilder(events, telegram_files).build

