"""Interactive quiz session: preferences and question loop."""

from .configurator import configure_session, display_welcome, is_affirmative
from .runner import read_choice, run_quiz

__all__ = [
    "configure_session",
    "display_welcome",
    "is_affirmative",
    "read_choice",
    "run_quiz",
]
