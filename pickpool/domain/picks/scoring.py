"""
채점 / 리더보드 — 순수 파이썬

- 점수 = 마스터가 정한 문항 중 일치 개수 (미정 문항은 가점/감점 없음)
- tiebreaker는 점수와 분리된 표시용 상태 (순위 계산에 쓰지 않음)
- 순위: 점수 내림차순 → 이름 오름차순(프로세스 LC_COLLATE 기준) → entry_id
  LC_COLLATE는 PicksConfig.ready()가 PICKS_COLLATION_LOCALE로 설정. 미설정(C)이면 코드포인트 순.
"""
from __future__ import annotations

import locale
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional

from pickpool.domain.picks.catalog import QUESTIONS, QUESTIONS_COUNT
from pickpool.domain.picks.entities import Entry


class AnswerStatus(str, Enum):
    CORRECT = "correct"
    WRONG = "wrong"
    PENDING = "pending"


def _compare(entry_value: Any, master_value: Any) -> AnswerStatus:
    if master_value is None:
        return AnswerStatus.PENDING
    if entry_value is not None and float(entry_value) == float(master_value):
        return AnswerStatus.CORRECT
    return AnswerStatus.WRONG


def score(entry: Entry, master: Optional[Entry]) -> Optional[int]:
    if master is None:
        return None
    total = 0
    for question in QUESTIONS:
        if _compare(entry.answer(question.key), master.answer(question.key)) is AnswerStatus.CORRECT:
            total += 1
    return total


def question_statuses(entry: Entry, master: Optional[Entry]) -> list[dict[str, Any]]:
    """문항별 표시용 상태 (응답 페이지)."""
    rows = []
    for question in QUESTIONS:
        entry_value = entry.answer(question.key)
        master_value = master.answer(question.key) if master else None
        rows.append({
            "key": question.key,
            "text": question.text,
            "answer": entry_value,
            "answer_label": question.label_for(entry_value),
            "master_answer": master_value,
            "master_label": question.label_for(master_value),
            "status": _compare(entry_value, master_value).value,
        })
    return rows


def tiebreaker_status(entry: Entry, master: Optional[Entry]) -> dict[str, Any]:
    master_value = master.tiebreaker if master else None
    difference = None
    if master_value is not None and entry.tiebreaker is not None:
        difference = abs(float(entry.tiebreaker) - float(master_value))
    return {
        "status": _compare(entry.tiebreaker, master_value).value,
        "entry": entry.tiebreaker,
        "master": master_value,
        "difference": difference,
    }


def score_breakdown(entry: Entry, master: Optional[Entry]) -> dict[str, Any]:
    return {
        "score": score(entry, master),
        "total": QUESTIONS_COUNT,
        "questions": question_statuses(entry, master),
        "tiebreaker": tiebreaker_status(entry, master),
    }


@dataclass(frozen=True)
class LeaderboardRow:
    entry: Entry
    score: Optional[int]
    rank: Optional[int]

    def to_dict(self) -> dict[str, Any]:
        return {
            "rank": self.rank,
            "entry_id": self.entry.entry_id,
            "name": self.entry.name,
            "score": self.score,
            "total": QUESTIONS_COUNT,
        }


def _name_key(name: str) -> str:
    """현재 LC_COLLATE 기준 정렬 키 (C 로케일이면 name 그대로와 같은 순서)."""
    try:
        return locale.strxfrm(name)
    except (ValueError, OSError):
        return name


def build_leaderboard(entries: Iterable[Entry], master: Optional[Entry]) -> list[LeaderboardRow]:
    """
    master 없음: 입력 순서(제출 시간순) 유지, score/rank 모두 None.
    master 있음: 점수 desc → 이름 asc → entry_id asc (전순서).
    마스터 행 자체는 리더보드에서 제외.
    """
    regular = [e for e in entries if not e.is_master]

    if master is None:
        return [LeaderboardRow(entry=e, score=None, rank=None) for e in regular]

    scored = [(e, score(e, master) or 0) for e in regular]
    scored.sort(key=lambda pair: (-pair[1], _name_key(pair[0].name), pair[0].entry_id))

    rows: list[LeaderboardRow] = []
    rank = 0
    previous: Optional[int] = None
    for position, (entry, value) in enumerate(scored, start=1):
        # 동점은 같은 순위, 다음 순위는 건너뜀 (1, 2, 2, 4)
        if value != previous:
            rank = position
            previous = value
        rows.append(LeaderboardRow(entry=entry, score=value, rank=rank))
    return rows
