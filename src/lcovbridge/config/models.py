"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (LCOVBRIDGE__SECTION__KEY)
3. YAML file (--config, or ./.lcovbridge.yaml)
4. Built-in defaults (this file)

Examples:
    LCOVBRIDGE__LOGGING__LEVEL=DEBUG
    LCOVBRIDGE__FORMATTER__PATH_DELIMITER=::
    LCOVBRIDGE__FORMATTER__EMIT_BRANCHES=false
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_PATH_DELIMITER = "///"


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        LCOVBRIDGE__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. DEBUG logs every unresolved class.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class FormatterConfig(BaseModel):
    """LCOV formatter configuration.

    Env vars:
        LCOVBRIDGE__FORMATTER__PATH_DELIMITER: Separator for original/execution path pairs
        LCOVBRIDGE__FORMATTER__EMIT_FUNCTIONS: Write FN/FNDA/FNF/FNH records
        LCOVBRIDGE__FORMATTER__EMIT_BRANCHES: Write BRDA/BRF/BRH records
    """

    path_delimiter: str = Field(
        default=DEFAULT_PATH_DELIMITER,
        description="Separates '<original><delimiter><execution>' in path entries. "
        "Must never occur inside a real path.",
    )
    emit_functions: bool = Field(
        default=True,
        description="Write per-method function records.",
    )
    emit_branches: bool = Field(
        default=True,
        description="Write per-branch records.",
    )

    @field_validator("path_delimiter")
    @classmethod
    def validate_path_delimiter(cls, v: str) -> str:
        if not v:
            raise ValueError("Path delimiter must not be empty")
        if v in ("/", "\\"):
            raise ValueError(f"Path delimiter cannot be a path separator: {v!r}")
        return v


class LcovBridgeConfig(BaseModel):
    """Root configuration model."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    formatter: FormatterConfig = Field(default_factory=FormatterConfig)
