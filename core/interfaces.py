"""
Collaborator interfaces the conversation pipeline depends on.

Concrete implementations live in bot.telegram_api, agents.completion_agent
and memory.transcript_store; tests substitute AsyncMock doubles.
"""

from typing import Any, List, Optional, Protocol

from schemas import TranscriptEntryCreateSchema, TranscriptEntrySchema


class PlatformClient(Protocol):
    """Messaging platform primitives."""

    async def get_file_path(self, file_id: str) -> str:
        """Resolve a file_id with getFile."""
        ...

    def get_file_url(self, file_path: str) -> str:
        """Turn a file_path from getFile into a downloadable URL."""
        ...

    async def get_me(self) -> Any:
        """Identity of the bot itself."""
        ...


class CompletionClient(Protocol):
    """Language-model completion service."""

    async def complete(
        self, persona: str, inputs: List[str], context: List[str]
    ) -> List[str]:
        """Ordered outputs; an empty string means no response for that sub-turn."""
        ...

    async def complete_with_image(
        self, persona: str, inputs: List[str], image_url: str
    ) -> Optional[str]:
        ...


class TranscriptStore(Protocol):
    """Append-only conversation transcript."""

    async def append(self, entry: TranscriptEntryCreateSchema) -> TranscriptEntrySchema:
        ...

    async def append_batch(
        self, entries: List[TranscriptEntryCreateSchema]
    ) -> List[TranscriptEntrySchema]:
        ...
