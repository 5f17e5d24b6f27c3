"""
답안 검증 — 제출(전체) / 마스터(부분) / tiebreaker / 이름

저장 전에 모두 끝난다. 하나라도 실패하면 예외, 부분 결과는 반환하지 않는다.
"""
from __future__ import annotations

import math
from typing import Any, Mapping, Optional

from pickpool.domain.picks.catalog import QUESTION_KEYS, is_question_key
from pickpool.domain.picks.entities import AnswerSet
from pickpool.domain.picks.errors import (
    InvalidValue,
    MissingField,
    UnknownQuestionKey,
)

NAME_MAX_LENGTH = 100


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _as_float(value: Any) -> float:
    """
    int / float / 숫자 문자열 → float.
    bool, 그 외 타입, float 범위를 넘는 정수(JSON 10**400 등)는 ValueError.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError(value)
    try:
        return float(value.strip() if isinstance(value, str) else value)
    except OverflowError as e:
        raise ValueError(value) from e


def coerce_choice(key: str, value: Any) -> int:
    """
    0/1 강제 변환.
    - int / float: 0 또는 1과 같아야 함
    - str: 공백 제거 후 숫자로 읽혀서 0 또는 1
    - bool 및 그 외 타입은 거부 (True == 1 이지만 의도된 입력이 아님)
    """
    try:
        numeric = _as_float(value)
    except ValueError:
        raise InvalidValue(key) from None

    if numeric == 0.0:
        return 0
    if numeric == 1.0:
        return 1
    raise InvalidValue(key)


def validate_complete(raw: Any) -> AnswerSet:
    """
    제출용 전체 답안.
    카탈로그 순서대로 검사하고 첫 번째 실패 키를 예외에 담는다.
    카탈로그 밖의 키는 무시.
    """
    if not isinstance(raw, Mapping):
        raise MissingField("answers")

    normalized: AnswerSet = {}
    for key in QUESTION_KEYS:
        value = raw.get(key)
        if _is_blank(value):
            raise MissingField(key)
        normalized[key] = coerce_choice(key, value)
    return normalized


def validate_partial(raw: Any) -> AnswerSet:
    """
    마스터 시트 부분 갱신용.
    None → {} (아무 것도 안 보냄). 빈 결과를 오류로 볼지는 호출자가 결정.
    """
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise InvalidValue("answers", "Answers must be an object.")

    normalized: AnswerSet = {}
    for key, value in raw.items():
        if not is_question_key(key):
            raise UnknownQuestionKey(str(key))
        if _is_blank(value):
            raise InvalidValue(key)
        normalized[key] = coerce_choice(key, value)
    return normalized


def parse_tiebreaker(raw: Any, *, required: bool = True) -> Optional[float]:
    """유한 실수만 허용. 비어 있으면 required에 따라 오류 또는 None."""
    if _is_blank(raw):
        if required:
            raise MissingField("tiebreaker")
        return None

    message = "Tiebreaker must be a number."
    try:
        numeric = _as_float(raw)
    except ValueError:
        raise InvalidValue("tiebreaker", message) from None

    if not math.isfinite(numeric):
        raise InvalidValue("tiebreaker", message)
    return numeric


def validate_name(raw: Any) -> str:
    if raw is not None and not isinstance(raw, str):
        raise InvalidValue("name", "Name must be a string.")
    if raw is None or not raw.strip():
        raise MissingField("name")
    name = raw.strip()
    if len(name) > NAME_MAX_LENGTH:
        raise InvalidValue("name", f"Name must be at most {NAME_MAX_LENGTH} characters.")
    return name
