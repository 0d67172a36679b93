"""Key-Value DTO."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class KeyValuePair:
    """요청 단위로 생성되는 키-값 쌍.

    Redis 호출 이후 폐기됩니다.
    """

    key: str
    value: str
