from __future__ import annotations

from pickpool.domain.picks.catalog import QUESTION_KEYS
from pickpool.domain.picks.merge import merge_master

from picks_factories import make_answers


def _partial_master(**values):
    answers = {key: None for key in QUESTION_KEYS}
    answers.update(values)
    return answers


def test_empty_update_is_noop():
    existing = make_answers(1, question_3=0)
    merged = merge_master(existing, {}, None, 100.0)

    assert merged.answers == existing
    assert merged.tiebreaker == 100.0
    assert merged.changed_keys == ()


def test_update_overrides_and_preserves_other_fields():
    existing = _partial_master(question_1=0, question_2=1)
    merged = merge_master(existing, {"question_1": 1}, None, 100.0)

    assert merged.answers["question_1"] == 1
    assert merged.answers["question_2"] == 1
    assert merged.tiebreaker == 100.0
    assert merged.changed_keys == ("question_1",)


def test_same_update_twice_is_idempotent():
    existing = _partial_master(question_4=0)
    update = {"question_4": 1, "question_5": 0}

    once = merge_master(existing, update, 55.5, None)
    twice = merge_master(once.answers, update, 55.5, once.tiebreaker)

    assert twice.answers == once.answers
    assert twice.tiebreaker == once.tiebreaker == 55.5
    assert twice.changed_keys == ()


def test_without_existing_master_undecided_fields_are_none():
    merged = merge_master(None, {"question_1": 1})

    assert merged.answers["question_1"] == 1
    assert all(merged.answers[key] is None for key in QUESTION_KEYS if key != "question_1")
    assert merged.tiebreaker is None
    assert set(merged.answers) == set(QUESTION_KEYS)


def test_tiebreaker_only_update_keeps_answers():
    existing = make_answers(0)
    merged = merge_master(existing, {}, 88.0, 12.0)

    assert merged.answers == existing
    assert merged.tiebreaker == 88.0
    assert merged.changed_keys == ("tiebreaker",)


def test_result_does_not_alias_existing_mapping():
    existing = _partial_master(question_1=0)
    merged = merge_master(existing, {"question_1": 1})

    assert existing["question_1"] == 0
    assert merged.answers is not existing
