"""
마스터 시트 저장 Use Case — 부분 갱신 병합

한 트랜잭션 안에서: 마스터 행 확보(없으면 빈 sentinel 생성) + row lock → merge → 갱신.
첫 저장이 동시에 들어와도 두 번째 요청은 첫 요청의 커밋 결과 위에서 병합한다.
저장소 고유 upsert 문법에 의존하지 않는다.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from pickpool.application.ports.unit_of_work import UnitOfWork
from pickpool.domain.picks.entities import Entry
from pickpool.domain.picks.errors import (
    NoUpdatesProvided,
    PersistenceFailure,
    ValidationFailed,
)
from pickpool.domain.picks.merge import merge_master
from pickpool.domain.picks.validation import parse_tiebreaker, validate_partial
from pickpool.domain.shared.ids import MASTER_ENTRY_ID, MASTER_ENTRY_NAME

logger = logging.getLogger(__name__)


def save_master(
    uow: UnitOfWork,
    answers: Any = None,
    tiebreaker: Any = None,
) -> Entry:
    """
    answers / tiebreaker 둘 다 비어 있으면 NoUpdatesProvided.
    Returns: 병합 후 마스터 엔트리.
    """
    try:
        update = validate_partial(answers)
        update_tiebreaker: Optional[float] = parse_tiebreaker(tiebreaker, required=False)
        if not update and update_tiebreaker is None:
            raise NoUpdatesProvided()
    except ValidationFailed as e:
        logger.warning("master save rejected | field=%s reason=%s", e.field, e.message)
        raise

    try:
        with uow:
            repo = uow.entries
            existing, created = repo.lock_master()
            merged = merge_master(
                existing.answers,
                update,
                update_tiebreaker,
                existing.tiebreaker,
            )
            saved = repo.save_master(
                Entry(
                    entry_id=MASTER_ENTRY_ID,
                    name=MASTER_ENTRY_NAME,
                    answers=merged.answers,
                    tiebreaker=merged.tiebreaker,
                    is_master=True,
                    created_at=existing.created_at,
                )
            )
    except PersistenceFailure:
        logger.exception("master save persist failed")
        raise

    logger.info(
        "master saved | created=%s changed=%s",
        created,
        ",".join(merged.changed_keys) or "-",
    )
    return saved
