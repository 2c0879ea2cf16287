from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from quizrunner.analysis.report import render_report
from quizrunner.analysis.results import compute_results
from quizrunner.config import AppConfig, default_app_config
from quizrunner.data.loader import load_quiz
from quizrunner.data.schemas import QuizDefinition
from quizrunner.session.configurator import configure_session, display_welcome
from quizrunner.session.runner import run_quiz
from quizrunner.utils.io import Console
from quizrunner.utils.logging import setup_logging
from quizrunner.utils.validation import QuizFormatError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quizrunner",
        description="QuizRunner - interactive multiple-choice quizzes in the terminal",
        epilog="""Examples:
  # Run the default quiz (agile_quiz.json in the current directory)
  python -m quizrunner.cli.main

  # Run a specific quiz file
  python -m quizrunner.cli.main data/agile_quiz.json

  # Reproducible shuffle order and debug logging
  python -m quizrunner.cli.main data/agile_quiz.json --seed 7 --log-level DEBUG
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("quiz_file", nargs="?", default=None, help="Path to quiz JSON/YAML file (default: from config, agile_quiz.json)")
    parser.add_argument("--config", "-c", default=None, help="Path to config JSON (optional)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the question shuffle (optional)")
    parser.add_argument("--log-level", default=None, help="Log level for the log file (default: INFO)")
    parser.add_argument("--log-dir", default=None, help="Directory for the log file (default: logs)")
    return parser


def load_for_run(path: str, console: Console, logger: logging.Logger) -> Optional[QuizDefinition]:
    """Load the quiz, reporting load failures on stderr.

    Returns:
        The loaded quiz, or None if it could not be loaded
    """
    try:
        quiz = load_quiz(path)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        logger.error("FileNotFoundError during load: %s", e)
        return None
    except QuizFormatError as e:
        print(f"Error: {e}", file=sys.stderr)
        for err in e.errors:
            print(f"  - {err}", file=sys.stderr)
        logger.error("QuizFormatError during load of '%s': %s", path, e)
        return None
    except PermissionError:
        print(f"Error: Permission denied accessing '{path}'", file=sys.stderr)
        logger.error("PermissionError during load: Cannot read quiz file '%s'", path)
        return None

    console.write_line(f"✓ Quiz data loaded successfully: {quiz.total_questions} questions")
    return quiz


def run_session(quiz: QuizDefinition, console: Console, seed: Optional[int] = None) -> None:
    """Welcome, configure, run and report one quiz session."""
    display_welcome(quiz, console)
    session, questions = configure_session(console, quiz.questions, seed=seed)
    answers = run_quiz(questions, session, console)
    result = compute_results(quiz, questions, answers)
    render_report(result, console, show_explanations=session.show_explanations)


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.config:
        try:
            cfg = AppConfig.from_json(args.config)
        except FileNotFoundError:
            print(f"Error: Config file '{args.config}' not found", file=sys.stderr)
            return 1
        except json.JSONDecodeError as e:
            print(f"Error: Invalid JSON format in '{args.config}': {e}", file=sys.stderr)
            return 1
        except TypeError as e:
            print(f"Error: Invalid config in '{args.config}': {e}", file=sys.stderr)
            return 1
    else:
        cfg = default_app_config()

    logger = setup_logging(
        args.log_dir or cfg.logging.log_dir,
        cfg.logging.filename,
        args.log_level or cfg.logging.level,
    )
    console = console or Console()
    quiz_path = args.quiz_file or cfg.quiz.path
    seed = args.seed if args.seed is not None else cfg.quiz.seed

    quiz = load_for_run(quiz_path, console, logger)
    if quiz is None:
        return 1

    try:
        run_session(quiz, console, seed=seed)
    except EOFError:
        print("\nError: Input closed before the quiz was completed", file=sys.stderr)
        logger.error("Input channel closed during quiz '%s'", quiz_path)
        return 1
    except KeyboardInterrupt:
        print("\nQuiz interrupted by user", file=sys.stderr)
        logger.info("Quiz interrupted by user (KeyboardInterrupt)")
        return 130
    except Exception as e:
        print(f"Error running quiz: {e}", file=sys.stderr)
        logger.error("Unexpected error: %s", str(e), exc_info=True)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
