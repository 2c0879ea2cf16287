"""Utilities for QuizRunner."""

from .io import Console, shuffle_list
from .logging import setup_logging

__all__ = [
    "Console",
    "setup_logging",
    "shuffle_list",
]
