"""Cache DTOs."""

from apps.connectivity.application.cache.dto.key_value import KeyValuePair

__all__ = ["KeyValuePair"]
