"""Queue Commands."""

from apps.connectivity.application.queue.commands.publish_message import (
    PublishMessageCommand,
)

__all__ = ["PublishMessageCommand"]
