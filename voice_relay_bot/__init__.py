from __future__ import annotations

__version__ = "0.1.0"
__name__ = "voice_relay_bot"

import os
from pathlib import Path

from chromatrace import LoggingConfig, LoggingSettings


DEFAULT_PATH = Path(os.path.realpath(__file__)).parents[1]
LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG").upper()
LOG_FILE = os.environ.get("LOG_FILE", str(DEFAULT_PATH / "logs.log"))


logging_config = LoggingConfig(
    settings=LoggingSettings(
        application_level=LOG_LEVEL,
        enable_tracing=True,
        ignore_nan_trace=True,
        log_level=LOG_LEVEL,
        file_path=LOG_FILE,
        enable_file_logging=True,
        max_bytes=10 * 1024 * 1024,
        backup_count=50,
    )
)
LOGGER = logging_config.get_logger(__name__)


__all__ = ["__version__", "__name__", "LOGGER", "DEFAULT_PATH"]
