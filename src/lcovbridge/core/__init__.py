"""Core module exports."""

from lcovbridge.core.errors import (
    BundleError,
    ConfigError,
    EmitError,
    ErrorCode,
    LcovBridgeError,
)
from lcovbridge.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)

__all__ = [
    # Errors
    "BundleError",
    "ConfigError",
    "EmitError",
    "ErrorCode",
    "LcovBridgeError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
]
