#!/usr/bin/env python
"""Register or remove the Telegram webhook for the voice relay bot."""

import argparse
import asyncio
import sys

from telegram import Bot
from telegram.error import TelegramError

from voice_relay_bot import LOGGER
from voice_relay_bot.settings import load_settings
from voice_relay_bot.utils.exceptions import ConfigurationError

ALLOWED_UPDATES = ["message", "edited_message", "channel_post", "callback_query"]


def build_webhook_url(base_url: str, webhook_path: str) -> str:
    return f"{base_url.rstrip('/')}/webhook/{webhook_path}"


async def setup_telegram_webhook(
    base_url: str,
    token: str,
    webhook_path: str,
    secret_token: str,
    remove: bool = False,
) -> bool:
    """Set up or remove the Telegram webhook.
    
    Args:
        base_url: Public base URL of the service (e.g., https://example.com)
        token: Telegram bot token
        webhook_path: Secret path segment the webhook is served under
        secret_token: Value Telegram will send in X-Telegram-Bot-Api-Secret-Token
        remove: Whether to remove the webhook instead of setting it
        
    Returns:
        True if successful, False otherwise
    """
    async with Bot(token=token) as bot:
        try:
            if remove:
                LOGGER.info("Removing Telegram webhook...")
                result = await bot.delete_webhook()
                LOGGER.info(f"Webhook removed: {result}")
                return result

            LOGGER.info(f"Setting Telegram webhook under {base_url}")
            result = await bot.set_webhook(
                url=build_webhook_url(base_url, webhook_path),
                secret_token=secret_token,
                allowed_updates=ALLOWED_UPDATES,
            )
            if result:
                webhook_info = await bot.get_webhook_info()
                LOGGER.info(f"Telegram webhook set, pending updates: {webhook_info.pending_update_count}")
            else:
                LOGGER.error("Failed to set Telegram webhook")
            return result
        except TelegramError as e:
            LOGGER.error(f"Error configuring Telegram webhook: {e.message}", exc_info=True)
            return False


def parse_arguments():
    parser = argparse.ArgumentParser(description="Configure the Telegram webhook")
    parser.add_argument("--base-url", help="Public base URL, e.g. https://bot.example.com")
    parser.add_argument("--remove", action="store_true", help="Remove the webhook")
    args = parser.parse_args()
    if not args.remove and not args.base_url:
        parser.error("--base-url is required unless --remove is given")
    return args


def main():
    args = parse_arguments()
    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(e.render(), file=sys.stderr)
        sys.exit(1)

    success = asyncio.run(
        setup_telegram_webhook(
            base_url=args.base_url or "",
            token=settings.telegram.BOT_TOKEN.get_secret_value(),
            webhook_path=settings.webhook.PATH.get_secret_value(),
            secret_token=settings.webhook.SECRET.get_secret_value(),
            remove=args.remove,
        )
    )
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
