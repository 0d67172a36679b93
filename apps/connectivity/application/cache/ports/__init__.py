"""Ports (Interfaces)."""

from apps.connectivity.application.cache.ports.key_value_store import KeyValueStore

__all__ = ["KeyValueStore"]
