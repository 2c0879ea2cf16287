"""QuizRunner package.

Terminal multiple-choice quizzes: load a quiz file, ask the questions,
report a graded score with a per-section breakdown.
"""

from .analysis import QuizResult, compute_results, grade_for, render_report
from .cli import main as cli_main
from .config import AppConfig, default_app_config
from .data import Question, QuizDefinition, UserAnswer, load_quiz
from .session import configure_session, run_quiz
from .utils import Console, setup_logging
from .utils.validation import QuizError, QuizFormatError

__all__ = [
    "__version__",
    "AppConfig",
    "default_app_config",
    "Console",
    "Question",
    "QuizDefinition",
    "QuizError",
    "QuizFormatError",
    "QuizResult",
    "UserAnswer",
    "load_quiz",
    "configure_session",
    "run_quiz",
    "compute_results",
    "grade_for",
    "render_report",
    "setup_logging",
    "cli_main",
]

__version__ = "0.1.0"
