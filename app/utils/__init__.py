"""DesiFit API - Utilities Package."""

from app.utils.errors import (
    DesiFitException,
    ConfigurationError,
    ProviderError,
    ValidationRejection,
)

__all__ = [
    "DesiFitException",
    "ConfigurationError",
    "ProviderError",
    "ValidationRejection",
]
