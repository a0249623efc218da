"""Pydantic configuration models."""

from unique_alloc.models.config import (
    AllocatorConfig,
    IdConfig,
    LoggingConfig,
    RetryConfig,
    SlugConfig,
)

__all__ = [
    "AllocatorConfig",
    "RetryConfig",
    "SlugConfig",
    "IdConfig",
    "LoggingConfig",
]
