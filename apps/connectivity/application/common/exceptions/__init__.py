"""Application Exceptions.

공통 예외만 포함합니다. 기능별 예외는 각 패키지에서 직접 import하세요:
  - apps.connectivity.application.cache.exceptions.*
  - apps.connectivity.application.queue.exceptions.*
"""

from apps.connectivity.application.common.exceptions.base import ApplicationError
from apps.connectivity.application.common.exceptions.gateway import (
    UpstreamUnavailableError,
)

__all__ = [
    "ApplicationError",
    "UpstreamUnavailableError",
]
