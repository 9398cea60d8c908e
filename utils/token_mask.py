"""
Bot token masking.

Telegram file URLs embed the bot token (https://api.telegram.org/file/bot<token>/...).
Anything that leaves the process, the transcript and the logs, gets the masked form.
"""

BOT_TOKEN_PLACEHOLDER = "${{BOT_TOKEN}}"


def mask(text: str, token: str) -> str:
    """Replace every literal occurrence of the token with the placeholder."""
    if not token:
        return text
    return text.replace(token, BOT_TOKEN_PLACEHOLDER)


def unmask(text: str, token: str) -> str:
    """Inverse of mask()."""
    if not token:
        return text
    return text.replace(BOT_TOKEN_PLACEHOLDER, token)
