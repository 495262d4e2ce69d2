"""Formatting configuration with validation."""

from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError, ValidationInfo, field_validator
from pydantic_settings import BaseSettings

from .exceptions import ConfigurationError

DEFAULT_PREFIX = "> "
"""Markdown blockquote marker followed by the space most renderers expect."""


class BlockquoteConfig(BaseModel):
    """
    Immutable formatting options, validated once at construction.

    Use build_config() to get ConfigurationError instead of pydantic's
    ValidationError on bad input.
    """

    # prefix is declared first so the limit validators can see it
    prefix: str = Field(
        default=DEFAULT_PREFIX,
        description="Marker prepended to every line, separators included"
    )
    soft_limit: Optional[int] = Field(
        default=None,
        description="Target maximum rendered length (None = unbounded)"
    )
    hard_limit: int = Field(
        default=0,
        ge=0,
        description="Characters past soft_limit allowed to finish a word"
    )
    line_width: Optional[int] = Field(
        default=None,
        description="Rendered width for greedy line wrapping (None = one line per paragraph)"
    )
    with_ellipsis: bool = Field(
        default=True,
        description="End truncated output with an ellipsis"
    )
    strip_existing_prefix: bool = Field(
        default=True,
        description="Remove one level of quoting from input that is already quoted"
    )

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator('prefix')
    @classmethod
    def validate_prefix(cls, v: str) -> str:
        if "\n" in v or "\r" in v:
            raise ValueError("Prefix cannot contain a line break")
        return v

    @field_validator('soft_limit', 'line_width')
    @classmethod
    def validate_fits_prefix(cls, v: Optional[int], info: ValidationInfo) -> Optional[int]:
        """A limit must leave room for at least one character after the prefix."""
        if v is None:
            return v
        prefix = info.data.get("prefix")
        if prefix is None:
            # prefix failed its own validation; that error is reported instead
            return v
        if v <= len(prefix):
            raise ValueError(
                f"{info.field_name} ({v}) must be greater than the prefix length ({len(prefix)})"
            )
        return v

    @property
    def hard_cap(self) -> Optional[int]:
        """Absolute rendered length no word may run past, or None when unbounded."""
        if self.soft_limit is None:
            return None
        return self.soft_limit + self.hard_limit


def build_config(**options: Any) -> BlockquoteConfig:
    """
    Build a validated configuration from keyword options.

    Raises:
        ConfigurationError: If an option is unknown or out of range.
    """
    try:
        return BlockquoteConfig(**options)
    except ValidationError as e:
        raise ConfigurationError.from_validation_error(e) from e


class FormatterSettings(BaseSettings):
    """
    Environment-driven defaults for the command line.

    Every field maps to a BLOCKQUOTE_* variable, optionally read from a
    .env file in the working directory.
    """

    soft_limit: Optional[int] = Field(
        default=None,
        description="Default soft limit (BLOCKQUOTE_SOFT_LIMIT)"
    )
    hard_limit: int = Field(
        default=0,
        description="Default hard limit (BLOCKQUOTE_HARD_LIMIT)"
    )
    prefix: str = Field(
        default=DEFAULT_PREFIX,
        description="Default prefix (BLOCKQUOTE_PREFIX)"
    )
    line_width: Optional[int] = Field(
        default=None,
        description="Default line width (BLOCKQUOTE_LINE_WIDTH)"
    )
    with_ellipsis: bool = Field(
        default=True,
        description="Append an ellipsis on truncation (BLOCKQUOTE_WITH_ELLIPSIS)"
    )

    # Logging Configuration
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_format: str = Field(
        default="text",
        description="Log output format: 'json' for structured, 'text' for human-readable"
    )

    model_config = {
        "env_prefix": "BLOCKQUOTE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard Python logging levels."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level. Must be one of: {valid_levels}")
        return v_upper

    @field_validator('log_format')
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v_lower = v.lower()
        if v_lower not in ("json", "text"):
            raise ValueError("Invalid log format. Must be 'json' or 'text'")
        return v_lower

    def to_config(self, **overrides: Any) -> BlockquoteConfig:
        """
        Build a BlockquoteConfig from these settings.

        Overrides whose value is None are ignored, so unset command line
        flags fall back to the environment.

        Raises:
            ConfigurationError: If the combined options are invalid.
        """
        options = {
            "soft_limit": self.soft_limit,
            "hard_limit": self.hard_limit,
            "prefix": self.prefix,
            "line_width": self.line_width,
            "with_ellipsis": self.with_ellipsis,
        }
        options.update({k: v for k, v in overrides.items() if v is not None})
        return build_config(**options)


def load_settings() -> FormatterSettings:
    """
    Read settings from the environment.

    Raises:
        ConfigurationError: If a BLOCKQUOTE_* variable holds an invalid value.
    """
    try:
        return FormatterSettings()
    except ValidationError as e:
        raise ConfigurationError.from_validation_error(e) from e
