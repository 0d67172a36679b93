"""connectivity 테스트 공통 Fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent.parent.parent
sys.path.insert(0, str(project_root))

from unittest.mock import AsyncMock, MagicMock

import pytest


class InMemoryKeyValueStore:
    """KeyValueStore 테스트 더블 (dict 기반)."""

    def __init__(self) -> None:
        self.data: dict[str, str] = {}

    async def set(self, key: str, value: str) -> None:
        self.data[key] = value

    async def get(self, key: str) -> str | None:
        return self.data.get(key)


class InMemoryMessageQueue:
    """MessageQueue 테스트 더블 (FIFO list 기반)."""

    def __init__(self, queue_name: str = "filaTeste") -> None:
        self._queue_name = queue_name
        self.messages: list[str] = []

    @property
    def queue_name(self) -> str:
        return self._queue_name

    async def publish(self, message: str) -> None:
        self.messages.append(message)

    async def receive_one(self) -> str | None:
        if not self.messages:
            return None
        return self.messages.pop(0)


@pytest.fixture
def in_memory_store() -> InMemoryKeyValueStore:
    """dict 기반 KeyValueStore."""
    return InMemoryKeyValueStore()


@pytest.fixture
def in_memory_queue() -> InMemoryMessageQueue:
    """list 기반 MessageQueue."""
    return InMemoryMessageQueue()


@pytest.fixture
def mock_redis() -> AsyncMock:
    """Mock Redis 클라이언트."""
    redis = AsyncMock()
    redis.set = AsyncMock(return_value=True)
    redis.get = AsyncMock(return_value=None)
    return redis


@pytest.fixture
def mock_store() -> AsyncMock:
    """Mock KeyValueStore."""
    store = AsyncMock()
    store.set = AsyncMock()
    store.get = AsyncMock(return_value=None)
    return store


@pytest.fixture
def mock_queue() -> MagicMock:
    """Mock MessageQueue."""
    queue = MagicMock()
    queue.queue_name = "filaTeste"
    queue.publish = AsyncMock()
    queue.receive_one = AsyncMock(return_value=None)
    return queue
