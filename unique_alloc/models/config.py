"""Configuration models for the allocators."""

from typing import Literal

from pydantic import BaseModel, Field

from unique_alloc.constants import (
    DEFAULT_ID_ALPHABET,
    DEFAULT_ID_LENGTH,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_SLUG_MAX_ATTEMPTS,
    DEFAULT_SLUG_MAX_LENGTH,
)


class RetryConfig(BaseModel):
    """Budget for random-candidate strategies (insert-and-retry, exists check)."""

    max_attempts: int = Field(
        default=DEFAULT_MAX_ATTEMPTS, ge=1, description="Attempts before giving up"
    )


class SlugConfig(BaseModel):
    """Deterministic slug allocation configuration."""

    max_length: int = Field(
        default=DEFAULT_SLUG_MAX_LENGTH, ge=1, description="Maximum slug length, suffix included"
    )
    max_attempts: int = Field(
        default=DEFAULT_SLUG_MAX_ATTEMPTS,
        ge=1,
        description="Candidates tried, counting the unsuffixed base as attempt 1",
    )


class IdConfig(BaseModel):
    """Random id generator configuration."""

    alphabet: str = Field(default=DEFAULT_ID_ALPHABET, min_length=1)
    length: int = Field(default=DEFAULT_ID_LENGTH, ge=1, description="Random part length")
    prefix: str = Field(default="", description="Prepended verbatim to every id")


class LoggingConfig(BaseModel):
    """Logging configuration for loguru."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    serialize: bool = Field(default=False, description="Serialize file logs to JSON")
    colorize: bool = Field(default=True, description="Colorize console output")
    file_path: str | None = Field(default=None, description="Optional log file")
    rotation: str = Field(default="50 MB", description="Log rotation size/time")
    retention: str = Field(default="14 days", description="Log retention period")


class AllocatorConfig(BaseModel):
    """Complete allocator configuration."""

    retry: RetryConfig = Field(default_factory=RetryConfig)
    slug: SlugConfig = Field(default_factory=SlugConfig)
    ids: IdConfig = Field(default_factory=IdConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
