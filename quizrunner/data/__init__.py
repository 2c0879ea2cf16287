"""Data handling modules for QuizRunner."""

from .schemas import (
    GradingTable,
    GradingTier,
    Question,
    QuizDefinition,
    SessionConfig,
    UserAnswer,
)
from .loader import load_quiz, parse_quiz

__all__ = [
    "GradingTable",
    "GradingTier",
    "Question",
    "QuizDefinition",
    "SessionConfig",
    "UserAnswer",
    "load_quiz",
    "parse_quiz",
]
