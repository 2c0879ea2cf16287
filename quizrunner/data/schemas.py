from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


def option_letter(index: int) -> str:
    """Letter shown next to the option at ``index`` ('a' for 0)."""
    return chr(ord("a") + index)


@dataclass(frozen=True)
class Question:
    id: str
    section: str
    prompt: str
    options: Tuple[str, ...]
    correct_answer: int  # 0-based index
    explanation: str

    @property
    def correct_option(self) -> str:
        return self.options[self.correct_answer]

    def is_correct(self, index: int) -> bool:
        return index == self.correct_answer


@dataclass(frozen=True)
class GradingTier:
    name: str
    minimum: int
    message: str


@dataclass(frozen=True)
class GradingTable:
    """Grading tiers ordered from highest to lowest threshold.

    The last tier is the catch-all and is awarded without checking its
    minimum.
    """
    tiers: Tuple[GradingTier, ...]

    def tier(self, name: str) -> GradingTier:
        for t in self.tiers:
            if t.name == name:
                return t
        raise KeyError(name)


@dataclass(frozen=True)
class QuizDefinition:
    title: str
    description: str
    passing_score: int
    grading: GradingTable
    questions: Tuple[Question, ...]

    @property
    def total_questions(self) -> int:
        return len(self.questions)


@dataclass(frozen=True)
class UserAnswer:
    question_id: str
    chosen_index: int
    is_correct: bool


@dataclass(frozen=True)
class SessionConfig:
    show_explanations: bool = False
    shuffle_questions: bool = False
