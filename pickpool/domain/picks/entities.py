"""
Picks 도메인 엔티티 — 순수 파이썬 (Django/ORM 미사용)
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from pickpool.domain.picks.catalog import QUESTION_KEYS

# 문항 키 → 0/1. 마스터 시트에서는 None = 아직 미정.
AnswerSet = dict[str, Optional[int]]


@dataclass(frozen=True)
class Entry:
    """
    제출 1건 또는 마스터 시트 1건.

    - 일반 엔트리: 제출 시 1회 생성, 이후 변경 없음
    - 마스터: entry_id == MASTER_ENTRY_ID, 관리자 저장 때마다 병합 갱신
    """
    entry_id: str
    name: str
    answers: AnswerSet = field(default_factory=dict)
    tiebreaker: Optional[float] = None
    is_master: bool = False
    created_at: Optional[datetime] = None

    def answer(self, key: str) -> Optional[int]:
        return self.answers.get(key)

    def to_dict(self) -> dict[str, Any]:
        """API 응답 계약: answers는 항상 카탈로그 키 전체를 포함 (미정은 None)."""
        return {
            "entry_id": self.entry_id,
            "name": self.name,
            "is_master": self.is_master,
            "answers": {key: self.answers.get(key) for key in QUESTION_KEYS},
            "tiebreaker": self.tiebreaker,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
