"""
문항 카탈로그 — 배포 단위 고정 설정 (읽기 전용)

모든 문항은 선택지 2개, 값은 0(첫 번째) / 1(두 번째).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Question:
    key: str
    text: str
    options: tuple[str, str]

    def label_for(self, value: Optional[int]) -> Optional[str]:
        """0/1 → 선택지 라벨. 값이 없으면 None."""
        if value is None:
            return None
        try:
            return self.options[int(value)]
        except (IndexError, TypeError, ValueError):
            return None


def _q(number: int, text: str, first: str, second: str) -> Question:
    return Question(key=f"question_{number}", text=text, options=(first, second))


QUESTIONS: tuple[Question, ...] = (
    _q(1, "Time for National Anthem: 119.5 seconds", "Over", "Under"),
    _q(2, "Outcome of the coin toss", "Heads", "Tails"),
    _q(3, "Team to score 1st", "Seahawks", "Patriots"),
    _q(4, "1st scoring play", "Touchdown", "FG / Safety"),
    _q(5, "Either QB throws 300+ yards?", "Yes", "No"),
    _q(6, "Touchdown of 1 or fewer yards?", "Yes", "No"),
    _q(7, "Team to score last", "Seahawks", "Patriots"),
    _q(8, "Either team scores 28 or more points?", "Yes", "No"),
    _q(9, "# of times broadcast shows Cardi B: 3.5 times", "Over", "Under"),
    _q(10, "Total number of AI Lab advertisements for an AI product: 4.5", "Over", "Under"),
    _q(11, "First TV advertisement (after kickoff)?", "Food / drink", "Not food / drink"),
    _q(12, "Kenneth Walker III rushing yards: 80.5", "Over", "Under"),
    _q(13, "First letter of first bad Bunny song name?", "a-m", "n-z"),
    _q(14, "Total half time show songs: 11.5", "Over", "Under"),
    _q(15, "More total points in the first half or second half?", "First", "Second"),
    _q(16, "Cardi B joins the half time show?", "Yes", "No"),
    _q(17, "Gatorade shower color?", "Orange / Lime", "Other"),
    _q(18, "Super Bowl winner?", "Seahawks", "Patriots"),
    _q(19, "Super Bowl MVP", "Quarterback", "Non-QB"),
)

QUESTION_KEYS: tuple[str, ...] = tuple(q.key for q in QUESTIONS)
QUESTIONS_BY_KEY: dict[str, Question] = {q.key: q for q in QUESTIONS}
QUESTIONS_COUNT = len(QUESTIONS)

TIEBREAKER_LABEL = "Tiebreaker (enter a number) - total rushing yards:"


def is_question_key(key: object) -> bool:
    return isinstance(key, str) and key in QUESTIONS_BY_KEY
