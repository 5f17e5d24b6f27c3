"""
Entry Repository — Django ORM 구현 (메서드 내부에서만 apps.domains.picks import)

DatabaseError는 전부 PersistenceFailure로 변환한다.
"""
from __future__ import annotations

from typing import Optional

from pickpool.domain.picks.catalog import QUESTION_KEYS
from pickpool.domain.picks.entities import Entry
from pickpool.domain.picks.errors import PersistenceFailure
from pickpool.domain.shared.ids import MASTER_ENTRY_ID, MASTER_ENTRY_NAME


def _model_to_entity(m) -> Optional[Entry]:
    if m is None:
        return None
    raw = m.answers if isinstance(m.answers, dict) else {}
    answers = {}
    for key in QUESTION_KEYS:
        value = raw.get(key)
        answers[key] = int(value) if value is not None else None
    return Entry(
        entry_id=m.entry_id,
        name=m.name,
        answers=answers,
        tiebreaker=float(m.tiebreaker) if m.tiebreaker is not None else None,
        is_master=bool(m.is_master),
        created_at=m.created_at,
    )


def _answers_payload(entry: Entry) -> dict:
    return {key: entry.answers.get(key) for key in QUESTION_KEYS}


class DjangoEntryRepository:
    """EntryRepository 구현. ORM 접근은 모두 메서드 내부에서 lazy import."""

    def get(self, entry_id: str) -> Optional[Entry]:
        from apps.domains.picks.models import PickEntry
        m = PickEntry.objects.filter(entry_id=entry_id).first()
        return _model_to_entity(m)

    def get_master(self) -> Optional[Entry]:
        from apps.domains.picks.models import PickEntry
        m = PickEntry.objects.filter(is_master=True).first()
        return _model_to_entity(m)

    def lock_master(self) -> tuple[Entry, bool]:
        """
        호출자가 이미 UoW 트랜잭션 내에 있어야 함 (select_for_update 락 유지).

        첫 저장에서도 잠글 행이 있도록 sentinel 행을 먼저 get_or_create.
        동시 생성 충돌은 get_or_create가 IntegrityError 후 재조회로 처리.
        """
        from django.db import DatabaseError
        from apps.domains.picks.models import PickEntry
        try:
            _, created = PickEntry.objects.get_or_create(
                entry_id=MASTER_ENTRY_ID,
                defaults={
                    "name": MASTER_ENTRY_NAME,
                    "is_master": True,
                    "answers": {},
                    "tiebreaker": None,
                },
            )
            m = PickEntry.objects.select_for_update().get(entry_id=MASTER_ENTRY_ID)
        except DatabaseError as e:
            raise PersistenceFailure("Failed to save master sheet.") from e
        return _model_to_entity(m), created

    def list_regular(self) -> list[Entry]:
        from apps.domains.picks.models import PickEntry
        qs = PickEntry.objects.filter(is_master=False).order_by("created_at", "id")
        return [_model_to_entity(m) for m in qs]

    def add(self, entry: Entry) -> Entry:
        from django.db import DatabaseError, transaction
        from apps.domains.picks.models import PickEntry
        try:
            # savepoint: 충돌 시 바깥 트랜잭션은 살아 있어야 함
            with transaction.atomic():
                m = PickEntry.objects.create(
                    entry_id=entry.entry_id,
                    name=entry.name,
                    is_master=entry.is_master,
                    answers=_answers_payload(entry),
                    tiebreaker=entry.tiebreaker,
                )
        except DatabaseError as e:
            raise PersistenceFailure() from e
        return _model_to_entity(m)

    def save_master(self, entry: Entry) -> Entry:
        from django.db import DatabaseError, transaction
        from apps.domains.picks.models import PickEntry
        try:
            with transaction.atomic():
                m, _ = PickEntry.objects.update_or_create(
                    entry_id=MASTER_ENTRY_ID,
                    defaults={
                        "name": entry.name,
                        "is_master": True,
                        "answers": _answers_payload(entry),
                        "tiebreaker": entry.tiebreaker,
                    },
                )
        except DatabaseError as e:
            raise PersistenceFailure("Failed to save master sheet.") from e
        return _model_to_entity(m)
