from __future__ import annotations

import logging

from .results import QuizResult
from ..utils.io import Console

logger = logging.getLogger(__name__)

IMPROVEMENT_TIPS = (
    "- Review Agile principles and the sections where you scored less.",
    "- Revisit Scrum roles, events, and artifacts.",
    "- Practice PERT and project cost exercises.",
)
PERFECT_SCORE_TIP = "- Excellent work! Maintain your knowledge with occasional reviews."


def render_section_breakdown(result: QuizResult, console: Console) -> None:
    console.write_line()
    console.write_line("Section Breakdown:")
    for stats in result.sections:
        console.write_line(f"  {stats.section}: {stats.correct}/{stats.total} ({stats.percentage:.1f}%)")


def render_missed_review(result: QuizResult, console: Console) -> None:
    console.write_line()
    console.write_line("Review of Incorrect Answers:")
    for number, question in result.missed:
        console.write_line(f"Q{number}: {question.prompt}")
        console.write_line(f"   Correct: {question.correct_option}")
        console.write_line(f"   Explanation: {question.explanation}")
        console.write_line()


def render_study_recommendations(result: QuizResult, console: Console) -> None:
    console.write_line()
    console.write_line("Study Recommendations:")
    if result.correct_count < result.total_count:
        for line in IMPROVEMENT_TIPS:
            console.write_line(line)
    else:
        console.write_line(PERFECT_SCORE_TIP)


def render_report(result: QuizResult, console: Console, show_explanations: bool) -> None:
    """Print the final score, grade, verdict and breakdown.

    The incorrect-answer review is only printed when explanations were not
    already shown after each question.
    """
    console.write_line()
    console.rule()
    console.write_line("                   QUIZ COMPLETED")
    console.rule()

    console.write_line(f"Score: {result.correct_count}/{result.total_count} ({result.percentage:.1f}%)")
    console.write_line(f"Grade: {result.grade.message}")
    console.write_line(f"Result: {'PASSED ✓' if result.passed else 'FAILED ✗'}")

    render_section_breakdown(result, console)

    if not show_explanations:
        render_missed_review(result, console)

    render_study_recommendations(result, console)

    logger.info(
        "Quiz completed: score=%d/%d (%.1f%%), grade=%s, passed=%s",
        result.correct_count,
        result.total_count,
        result.percentage,
        result.grade.name,
        result.passed,
    )
