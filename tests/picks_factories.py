from __future__ import annotations

from pickpool.domain.picks.catalog import QUESTION_KEYS
from pickpool.domain.picks.entities import Entry
from pickpool.domain.shared.ids import MASTER_ENTRY_ID, MASTER_ENTRY_NAME


def make_answers(value: int = 0, **overrides) -> dict:
    """카탈로그 전체 키를 value로 채우고 overrides만 바꾼 답안."""
    answers = {key: value for key in QUESTION_KEYS}
    answers.update(overrides)
    return answers


def answers_with_correct(count: int) -> dict:
    """마스터가 전부 1일 때 정답 개수가 count가 되는 답안."""
    return {key: (1 if i < count else 0) for i, key in enumerate(QUESTION_KEYS)}


def make_entry(entry_id: str, name: str, answers: dict, tiebreaker=None) -> Entry:
    return Entry(entry_id=entry_id, name=name, answers=answers, tiebreaker=tiebreaker)


def make_master(answers: dict, tiebreaker=None) -> Entry:
    return Entry(
        entry_id=MASTER_ENTRY_ID,
        name=MASTER_ENTRY_NAME,
        answers=answers,
        tiebreaker=tiebreaker,
        is_master=True,
    )


