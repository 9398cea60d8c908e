"""
User-visible notice strings.

Other components and tests depend on these exact strings, so override them
through settings (NOTICE_* env vars) rather than editing call sites.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Notices:
    """Fixed replies the bot sends instead of a generated response."""

    you_are: str = "You are"
    reading_image: str = "Reading image"
    cannot_understand: str = "Sorry, I cannot understand"
    cannot_understand_message_type: str = "Sorry, I cannot understand this message type"
    not_allowed: str = "Sorry, you are not allowed to use this bot"


DEFAULT_NOTICES = Notices()
