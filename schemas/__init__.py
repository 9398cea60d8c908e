"""
Pydantic schemas for type-safe data transfer.
"""

from schemas.transcript import (
    BOT_SENDER_ID,
    TranscriptEntryCreateSchema,
    TranscriptEntrySchema,
)
from schemas.message import NormalizedMessageSchema

__all__ = [
    "BOT_SENDER_ID",
    "TranscriptEntryCreateSchema",
    "TranscriptEntrySchema",
    "NormalizedMessageSchema",
]
