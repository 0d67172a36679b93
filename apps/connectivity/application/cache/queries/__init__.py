"""Cache Queries."""

from apps.connectivity.application.cache.queries.read_key import ReadKeyQuery

__all__ = ["ReadKeyQuery"]
