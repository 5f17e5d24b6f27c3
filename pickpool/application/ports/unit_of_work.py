"""
Unit of Work 포트 — 트랜잭션 경계 (Django 미사용)
"""
from __future__ import annotations

from typing import Protocol

from pickpool.application.ports.repositories import EntryRepository


class UnitOfWork(Protocol):
    """트랜잭션 단위. __enter__에서 시작, __exit__에서 commit/rollback."""

    @property
    def entries(self) -> EntryRepository:
        ...

    def __enter__(self) -> "UnitOfWork":
        ...

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        ...

    def commit(self) -> None:
        ...

    def rollback(self) -> None:
        ...
