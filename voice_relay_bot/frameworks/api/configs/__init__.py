__all__ = ["fastapi_information", "fastapi_tags_metadata"]

from voice_relay_bot.frameworks.api.configs.fastapi_doc import (
    fastapi_information,
    fastapi_tags_metadata,
)
