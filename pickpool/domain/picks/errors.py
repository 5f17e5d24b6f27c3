"""
Picks 도메인 오류 — 순수 파이썬

모든 오류는 요청 단위로 끝난다 (재시도 없음). message는 그대로 사용자에게 노출된다.
"""
from __future__ import annotations

from typing import Optional


class PicksDomainError(Exception):
    """Picks 도메인 규칙 위반 등."""

    default_message = "Request failed."

    def __init__(self, message: Optional[str] = None, *, field: Optional[str] = None) -> None:
        self.message = message or self.default_message
        self.field = field
        super().__init__(self.message)


class ValidationFailed(PicksDomainError):
    """저장 전에 걸러지는 입력 오류의 공통 부모."""
    pass


class MissingField(ValidationFailed):
    """필수 값 누락 (문항 키, name, tiebreaker)."""

    def __init__(self, field: str, message: Optional[str] = None) -> None:
        super().__init__(message or _missing_message(field), field=field)


class InvalidValue(ValidationFailed):
    """타입이 다르거나 0/1 범위를 벗어난 값."""

    def __init__(self, field: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"Invalid answer for {field}.", field=field)


class UnknownQuestionKey(ValidationFailed):
    """카탈로그에 없는 문항 키 (마스터 부분 저장에서만 발생)."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Unknown question {key}.", field=key)


class NoUpdatesProvided(ValidationFailed):
    default_message = "No updates provided."


class NotFound(PicksDomainError):
    default_message = "Entry not found."

    def __init__(self, entry_id: str) -> None:
        self.entry_id = entry_id
        super().__init__()


class PersistenceFailure(PicksDomainError):
    """저장소 쓰기 실패. 행은 완전히 저장되었거나 전혀 저장되지 않았다."""

    default_message = "Failed to save entry."


def _missing_message(field: str) -> str:
    if field == "name":
        return "Name is required."
    if field == "tiebreaker":
        return "Tiebreaker is required."
    if field == "answers":
        return "Answers are required."
    return f"Missing answer for {field}."
