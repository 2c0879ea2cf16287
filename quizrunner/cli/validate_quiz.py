from __future__ import annotations

import argparse
import sys
from pathlib import Path

from ..data.loader import load_quiz
from ..utils.validation import SchemaValidationError


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="python -m quizrunner.cli.validate_quiz",
        description=(
            "Validate a quiz JSON/YAML file before running it.\n"
            "On failure, lists every structural problem found."
        ),
    )
    ap.add_argument(
        "quiz_file",
        help="Path to quiz file",
    )
    args = ap.parse_args(argv)

    quiz_path = Path(args.quiz_file)
    if quiz_path.exists() and not quiz_path.is_file():
        print(f"[validate_quiz] Error: not a file: {quiz_path}")
        return 1

    try:
        quiz = load_quiz(quiz_path)
        print(f"[validate_quiz] OK: {quiz_path} ({quiz.total_questions} questions)")
        return 0
    except FileNotFoundError:
        print(f"[validate_quiz] Error: quiz file not found: {quiz_path}")
        return 1
    except SchemaValidationError as e:
        # Dedicated exit code for schema failures to distinguish from other errors
        print("[validate_quiz] Schema validation failed.")
        print(f"[validate_quiz] {e}")
        for err in e.errors:
            print(f"[validate_quiz]   - {err}")
        return 4
    except Exception as e:
        print(f"[validate_quiz] Unexpected error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
