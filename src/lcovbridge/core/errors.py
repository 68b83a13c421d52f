"""lcovbridge error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Bundle input
- 4xxx: Emission
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2004

    # Bundle input (3xxx)
    BUNDLE_NOT_FOUND = 3001
    BUNDLE_INVALID = 3002

    # Emission (4xxx)
    EMIT_WRITE_FAILED = 4001


@dataclass(frozen=True, slots=True)
class LcovBridgeError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'EMIT_WRITE_FAILED')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(LcovBridgeError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class BundleError(LcovBridgeError):
    """Coverage input could not be read."""

    @classmethod
    def not_found(cls, path: str) -> "BundleError":
        return cls(
            code=ErrorCode.BUNDLE_NOT_FOUND,
            message=f"Coverage report not found: {path}",
            details={"path": path},
        )

    @classmethod
    def invalid(cls, path: str, reason: str) -> "BundleError":
        return cls(
            code=ErrorCode.BUNDLE_INVALID,
            message=f"Invalid coverage report {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class EmitError(LcovBridgeError):
    """Writing LCOV output failed. Aborts the current pass."""

    @classmethod
    def write_failed(cls, path: str, reason: str) -> "EmitError":
        return cls(
            code=ErrorCode.EMIT_WRITE_FAILED,
            message=f"Failed to write LCOV record for {path}: {reason}",
            retryable=True,
            details={"path": path, "reason": reason},
        )
