"""Command-line entry points for QuizRunner."""

from .main import main

__all__ = ["main"]
