"""HTTP Schemas."""

from apps.connectivity.presentation.http.schemas.cache import WriteKeyRequest

__all__ = ["WriteKeyRequest"]
