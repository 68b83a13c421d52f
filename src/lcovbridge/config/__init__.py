"""Config module exports."""

from lcovbridge.config.loader import load_config
from lcovbridge.config.models import (
    DEFAULT_PATH_DELIMITER,
    FormatterConfig,
    LcovBridgeConfig,
    LoggingConfig,
    LogOutputConfig,
)

__all__ = [
    "load_config",
    "DEFAULT_PATH_DELIMITER",
    "FormatterConfig",
    "LcovBridgeConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
