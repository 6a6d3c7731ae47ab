__all__ = ["UpdateParser"]

from voice_relay_bot.adapters.telegram.update_parser import UpdateParser
