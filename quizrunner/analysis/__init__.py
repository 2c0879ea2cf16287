"""Result computation and reporting for finished quizzes."""

from .report import render_report
from .results import QuizResult, SectionStats, compute_results, grade_for, section_breakdown

__all__ = [
    "QuizResult",
    "SectionStats",
    "compute_results",
    "grade_for",
    "render_report",
    "section_breakdown",
]
