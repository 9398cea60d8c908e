"""
Prompts module - LLM prompts for the relay bot.

    from prompts import SYSTEM_FRAME, get_persona
"""

from prompts.system_frame import (
    SYSTEM_FRAME,
    MESSAGE_BREAK,
    NO_RESPONSE,
    PREVIOUS_MESSAGE_PREFIX,
    PHOTO_WITHOUT_CAPTION,
)
from prompts.personas import get_persona

__all__ = [
    "SYSTEM_FRAME",
    "MESSAGE_BREAK",
    "NO_RESPONSE",
    "PREVIOUS_MESSAGE_PREFIX",
    "PHOTO_WITHOUT_CAPTION",
    "get_persona",
]
