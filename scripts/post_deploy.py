#!/usr/bin/env python3
"""
Re-register the Telegram webhook after a deploy.

Starting the bot in polling mode removes the webhook, so run this after
deploying a webhook build.

Usage:
    uv run python scripts/post_deploy.py
"""

import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from bot.telegram_api import TelegramApiClient
from bot.telegram_handler import webhook_secret_for
from config.settings import get_settings
from core import configure_logging, get_logger

logger = get_logger(__name__)


async def post_deploy() -> None:
    settings = get_settings()
    if not settings.TELEGRAM_WEBHOOK_URL:
        print("❌ TELEGRAM_WEBHOOK_URL is not set, nothing to do")
        sys.exit(1)

    secret = webhook_secret_for(settings)
    webhook_url = f"{settings.TELEGRAM_WEBHOOK_URL.rstrip('/')}/webhook/{secret}"

    telegram = TelegramApiClient(settings.TELEGRAM_BOT_TOKEN)
    me = await telegram.get_me()
    await telegram.set_webhook(webhook_url, secret_token=secret)
    print(f"✅ Webhook set for @{me.username}")


if __name__ == "__main__":
    configure_logging(get_settings().LOG_LEVEL)
    asyncio.run(post_deploy())
