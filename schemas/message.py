"""Inbound message schema."""

from typing import Optional

from pydantic import BaseModel, Field, ConfigDict


class NormalizedMessageSchema(BaseModel):
    """
    What an incoming Telegram update carries, reduced to the parts the
    pipeline cares about. Never persisted.
    """

    reply_to_message: Optional[str] = Field(
        default=None, description="Text of the message being replied to, used as context"
    )
    text: Optional[str] = Field(default=None, description="Plain text body")
    caption: Optional[str] = Field(default=None, description="Caption sent with a photo")
    photo: Optional[str] = Field(default=None, description="file_path of the largest photo size")

    model_config = ConfigDict(frozen=True)

    @property
    def is_empty(self) -> bool:
        return self.text is None and self.caption is None and self.photo is None

    @property
    def incoming_text(self) -> Optional[str]:
        """Text to answer: the message body, falling back to the caption."""
        return self.text or self.caption
