from __future__ import annotations

import pytest

from apps.domains.picks.models import PickEntry
from pickpool.adapters.db.django.repositories_picks import DjangoEntryRepository
from pickpool.domain.picks.catalog import QUESTION_KEYS
from pickpool.domain.picks.errors import PersistenceFailure
from pickpool.domain.shared.ids import MASTER_ENTRY_ID

from picks_factories import make_answers, make_entry, make_master

pytestmark = pytest.mark.django_db


@pytest.fixture
def repo():
    return DjangoEntryRepository()


def test_add_and_get_roundtrip(repo):
    saved = repo.add(make_entry("abc-123", "Amy", make_answers(1, question_2=0), tiebreaker=101.5))

    loaded = repo.get("abc-123")

    assert loaded == saved
    assert loaded.name == "Amy"
    assert loaded.answers["question_2"] == 0
    assert loaded.answers["question_1"] == 1
    assert loaded.tiebreaker == 101.5
    assert loaded.is_master is False
    assert loaded.created_at is not None


def test_get_missing_returns_none(repo):
    assert repo.get("nope") is None
    assert repo.get_master() is None


def test_duplicate_entry_id_is_persistence_failure_not_overwrite(repo):
    repo.add(make_entry("same-id", "First", make_answers(0), tiebreaker=1))

    with pytest.raises(PersistenceFailure):
        repo.add(make_entry("same-id", "Second", make_answers(1), tiebreaker=2))

    assert PickEntry.objects.filter(entry_id="same-id").count() == 1
    assert repo.get("same-id").name == "First"


def test_save_master_creates_then_updates_single_row(repo):
    repo.save_master(make_master({"question_1": 0}, tiebreaker=None))
    repo.save_master(make_master({"question_1": 1, "question_2": 0}, tiebreaker=77))

    assert PickEntry.objects.filter(is_master=True).count() == 1
    master = repo.get_master()
    assert master.entry_id == MASTER_ENTRY_ID
    assert master.is_master is True
    assert master.answers["question_1"] == 1
    assert master.answers["question_2"] == 0
    assert master.answers["question_3"] is None
    assert master.tiebreaker == 77.0
    assert set(master.answers) == set(QUESTION_KEYS)


def test_list_regular_excludes_master_in_submission_order(repo):
    repo.add(make_entry("e1", "Cid", make_answers(0), tiebreaker=1))
    repo.save_master(make_master(make_answers(1)))
    repo.add(make_entry("e2", "Amy", make_answers(1), tiebreaker=2))

    entries = repo.list_regular()

    assert [e.entry_id for e in entries] == ["e1", "e2"]


def test_lock_master_creates_empty_sentinel_once(repo):
    first, created = repo.lock_master()

    assert created is True
    assert first.entry_id == MASTER_ENTRY_ID
    assert first.is_master is True
    assert first.tiebreaker is None
    assert all(v is None for v in first.answers.values())

    again, created_again = repo.lock_master()

    assert created_again is False
    assert again.created_at == first.created_at
    assert PickEntry.objects.filter(is_master=True).count() == 1


def test_lock_master_returns_saved_values(repo):
    repo.save_master(make_master({"question_2": 1}, tiebreaker=12))

    master, created = repo.lock_master()

    assert created is False
    assert master.answers["question_2"] == 1
    assert master.tiebreaker == 12.0
