"""Scoring, grading and per-section aggregation of a finished quiz."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from ..data.schemas import GradingTable, GradingTier, Question, QuizDefinition, UserAnswer


@dataclass(frozen=True)
class SectionStats:
    section: str
    correct: int
    total: int

    @property
    def percentage(self) -> float:
        return self.correct / self.total * 100 if self.total else 0.0


@dataclass(frozen=True)
class QuizResult:
    correct_count: int
    total_count: int
    percentage: float
    grade: GradingTier
    passed: bool
    sections: Tuple[SectionStats, ...]
    missed: Tuple[Tuple[int, Question], ...]  # (presentation number, question)


def grade_for(correct_count: int, grading: GradingTable) -> GradingTier:
    """Return the highest tier whose minimum ``correct_count`` reaches.

    Tiers are checked top-down; the final tier is returned unconditionally.
    """
    *ranked, fallback = grading.tiers
    for tier in ranked:
        if correct_count >= tier.minimum:
            return tier
    return fallback


def section_breakdown(questions: Sequence[Question], answers: Sequence[UserAnswer]) -> List[SectionStats]:
    """Correct/total counts per section, in first-encountered order."""
    counts: Dict[str, List[int]] = {}
    for question, answer in zip(questions, answers):
        correct_total = counts.setdefault(question.section, [0, 0])
        correct_total[0] += int(answer.is_correct)
        correct_total[1] += 1
    return [SectionStats(section, correct, total) for section, (correct, total) in counts.items()]


def compute_results(
    quiz: QuizDefinition,
    questions: Sequence[Question],
    answers: Sequence[UserAnswer],
) -> QuizResult:
    """Aggregate recorded answers into the final result.

    Args:
        quiz: Loaded quiz, for the passing score and grading table
        questions: Questions in presentation order
        answers: One answer per presented question, same order

    Raises:
        ValueError: If answers and questions do not pair up one-to-one
    """
    if len(questions) != len(answers):
        raise ValueError(
            f"Expected one answer per question: {len(questions)} questions, {len(answers)} answers"
        )
    for question, answer in zip(questions, answers):
        if question.id != answer.question_id:
            raise ValueError(f"Answer for {answer.question_id} recorded against question {question.id}")

    total_count = len(questions)
    correct_count = sum(1 for a in answers if a.is_correct)
    percentage = correct_count / total_count * 100 if total_count else 0.0

    return QuizResult(
        correct_count=correct_count,
        total_count=total_count,
        percentage=percentage,
        grade=grade_for(correct_count, quiz.grading),
        passed=correct_count >= quiz.passing_score,
        sections=tuple(section_breakdown(questions, answers)),
        missed=tuple(
            (number, question)
            for number, (question, answer) in enumerate(zip(questions, answers), start=1)
            if not answer.is_correct
        ),
    )
