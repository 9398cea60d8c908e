"""Transcript schemas."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, ConfigDict

# sender_id of every unit the bot produces
BOT_SENDER_ID = "0"


class TranscriptEntryCreateSchema(BaseModel):
    """One unit of conversation, built right before it is appended."""

    payload: str = Field(..., description="Text content, or a masked URL for photos")
    user_id: str = Field(..., min_length=1, description="Conversation owner (the human)")
    sender_id: str = Field(..., min_length=1, description="Who produced the unit; '0' for the bot")
    type: Literal["text", "photo"] = Field(..., description="Unit type")
    order: Optional[int] = Field(
        default=None,
        ge=0,
        description="Position inside a batch write; None means insertion order",
    )

    model_config = ConfigDict(frozen=True)

    @property
    def from_bot(self) -> bool:
        return self.sender_id == BOT_SENDER_ID


class TranscriptEntrySchema(TranscriptEntryCreateSchema):
    """Stored transcript entry."""

    id: int = Field(..., description="Transcript entry ID")
    created_at: datetime = Field(..., description="When the entry was stored")

    model_config = ConfigDict(from_attributes=True, frozen=True)
