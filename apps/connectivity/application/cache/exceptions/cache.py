"""Cache exceptions."""

from __future__ import annotations

from apps.connectivity.application.common.exceptions.base import ApplicationError


class MissingFieldError(ApplicationError):
    """'chave' 또는 'valor'가 누락된 요청."""

    def __init__(self) -> None:
        super().__init__("A 'chave' e o 'valor' não podem ser nulos.")


class KeyNotFoundError(ApplicationError):
    """키가 존재하지 않음 (미기록/만료 구분 없음)."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Key '{key}' not found")
