"""Cache exceptions."""

from apps.connectivity.application.cache.exceptions.cache import (
    KeyNotFoundError,
    MissingFieldError,
)

__all__ = ["KeyNotFoundError", "MissingFieldError"]
