"""
조회 Use Case — 엔트리 / 점수 / 스코어보드 / 마스터

읽기는 트랜잭션 없이 수행 (폴링 간 마스터/엔트리 변경 허용).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from pickpool.application.ports.unit_of_work import UnitOfWork
from pickpool.domain.picks.entities import Entry
from pickpool.domain.picks.errors import NotFound
from pickpool.domain.picks.scoring import LeaderboardRow, build_leaderboard, score_breakdown


@dataclass(frozen=True)
class ScoreView:
    entry: Entry
    master: Optional[Entry]

    @property
    def result(self) -> dict[str, Any]:
        return score_breakdown(self.entry, self.master)


@dataclass(frozen=True)
class ScoreboardView:
    entries: list[Entry]
    master: Optional[Entry]
    leaderboard: list[LeaderboardRow]


def get_entry(uow: UnitOfWork, entry_id: str) -> Entry:
    entry = uow.entries.get(entry_id)
    if entry is None:
        raise NotFound(entry_id)
    return entry


def get_score(uow: UnitOfWork, entry_id: str) -> ScoreView:
    entry = get_entry(uow, entry_id)
    return ScoreView(entry=entry, master=uow.entries.get_master())


def get_scoreboard(uow: UnitOfWork, limit: Optional[int] = None) -> ScoreboardView:
    """
    limit은 leaderboard 행 수만 자른다 (entries는 전체).
    None 또는 0 이하 = 제한 없음.
    """
    repo = uow.entries
    master = repo.get_master()
    entries = repo.list_regular()
    rows = build_leaderboard(entries, master)
    if limit is not None and int(limit) > 0:
        rows = rows[: int(limit)]
    return ScoreboardView(entries=entries, master=master, leaderboard=rows)


def get_master(uow: UnitOfWork) -> Optional[Entry]:
    return uow.entries.get_master()
