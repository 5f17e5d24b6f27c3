"""
엔트리 제출 Use Case — 도메인/포트만 사용 (Django 미사용)

검증 → ID 발급 → insert 1회. 검증 실패 시 저장소에 접근하지 않는다.
"""
from __future__ import annotations

import logging
from typing import Any, Callable

from pickpool.application.ports.unit_of_work import UnitOfWork
from pickpool.domain.picks.entities import Entry
from pickpool.domain.picks.errors import PersistenceFailure, ValidationFailed
from pickpool.domain.picks.validation import (
    parse_tiebreaker,
    validate_complete,
    validate_name,
)
from pickpool.domain.shared.ids import generate_entry_id

logger = logging.getLogger(__name__)


def submit_entry(
    uow: UnitOfWork,
    name: Any,
    answers: Any,
    tiebreaker: Any,
    id_factory: Callable[[], str] = generate_entry_id,
) -> Entry:
    """
    Returns: 저장된 엔트리 (entry_id 포함).
    Raises: ValidationFailed 계열, PersistenceFailure.
    """
    try:
        clean_name = validate_name(name)
        clean_answers = validate_complete(answers)
        clean_tiebreaker = parse_tiebreaker(tiebreaker, required=True)
    except ValidationFailed as e:
        logger.warning("submission rejected | field=%s reason=%s", e.field, e.message)
        raise

    entry = Entry(
        entry_id=id_factory(),
        name=clean_name,
        answers=clean_answers,
        tiebreaker=clean_tiebreaker,
        is_master=False,
    )

    try:
        with uow:
            saved = uow.entries.add(entry)
    except PersistenceFailure:
        logger.exception("submission persist failed | entry_id=%s", entry.entry_id)
        raise

    logger.info("entry submitted | entry_id=%s name=%s", saved.entry_id, saved.name)
    return saved
