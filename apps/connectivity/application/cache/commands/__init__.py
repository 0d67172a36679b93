"""Cache Commands."""

from apps.connectivity.application.cache.commands.write_key import WriteKeyCommand

__all__ = ["WriteKeyCommand"]
