"""
마스터 시트 병합 — 필드 단위 last-write-wins

결과[key] = update[key] (있으면) → 기존 값 (있으면) → None
tiebreaker도 같은 규칙. 같은 update를 두 번 적용해도 결과는 같다 (멱등).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from pickpool.domain.picks.catalog import QUESTION_KEYS
from pickpool.domain.picks.entities import AnswerSet


@dataclass(frozen=True)
class MergedMaster:
    answers: AnswerSet
    tiebreaker: Optional[float]
    changed_keys: tuple[str, ...] = ()


def merge_master(
    existing: Optional[Mapping[str, Optional[int]]],
    update: Mapping[str, int],
    update_tiebreaker: Optional[float] = None,
    existing_tiebreaker: Optional[float] = None,
) -> MergedMaster:
    """
    existing=None 이면 마스터가 아직 없는 상태.
    update는 validate_partial()을 통과한 값이어야 한다.
    """
    base = existing or {}
    merged: AnswerSet = {}
    changed: list[str] = []

    for key in QUESTION_KEYS:
        previous = base.get(key)
        value = update[key] if key in update else previous
        merged[key] = value
        if value != previous:
            changed.append(key)

    tiebreaker = update_tiebreaker if update_tiebreaker is not None else existing_tiebreaker
    if tiebreaker != existing_tiebreaker:
        changed.append("tiebreaker")

    return MergedMaster(answers=merged, tiebreaker=tiebreaker, changed_keys=tuple(changed))
