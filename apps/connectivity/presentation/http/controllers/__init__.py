"""HTTP Controllers."""

from apps.connectivity.presentation.http.controllers.cache import router as cache_router
from apps.connectivity.presentation.http.controllers.health import (
    router as health_router,
)
from apps.connectivity.presentation.http.controllers.queue import router as queue_router

__all__ = ["cache_router", "health_router", "queue_router"]
