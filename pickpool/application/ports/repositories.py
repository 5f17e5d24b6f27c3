"""
Repository 포트 — 영속화 추상화 (Django/ORM 미사용)
"""
from __future__ import annotations

from abc import abstractmethod
from typing import Optional, Protocol

from pickpool.domain.picks.entities import Entry


class EntryRepository(Protocol):
    """entries 컬렉션. entry_id 유니크, is_master=True 행은 최대 1개."""

    @abstractmethod
    def get(self, entry_id: str) -> Optional[Entry]:
        """entry_id로 조회. 없으면 None."""
        ...

    @abstractmethod
    def get_master(self) -> Optional[Entry]:
        """마스터 시트 조회 (락 없음). 없으면 None."""
        ...

    @abstractmethod
    def lock_master(self) -> tuple[Entry, bool]:
        """
        마스터 행 row lock 조회. 없으면 빈 sentinel 행을 먼저 만든다.
        UoW 트랜잭션 안에서만 호출.
        Returns: (마스터, 이번 호출에서 생성됐는지)
        """
        ...

    @abstractmethod
    def list_regular(self) -> list[Entry]:
        """마스터 제외 전체, 제출 시간순."""
        ...

    @abstractmethod
    def add(self, entry: Entry) -> Entry:
        """
        신규 insert. entry_id 충돌 시 덮어쓰지 않고 PersistenceFailure.
        Returns: created_at이 채워진 엔티티.
        """
        ...

    @abstractmethod
    def save_master(self, entry: Entry) -> Entry:
        """마스터 행 생성 또는 갱신 (sentinel entry_id 기준)."""
        ...
