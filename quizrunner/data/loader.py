"""Quiz file loading for QuizRunner."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .schemas import GradingTable, GradingTier, Question, QuizDefinition
from ..utils.io import read_json, read_yaml
from ..utils.validation import GRADE_TIERS, QuizFormatError, validate_quiz_document

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def read_quiz_document(path: Union[str, Path]) -> Any:
    """Parse a quiz file into plain Python objects without validating it.

    Raises:
        FileNotFoundError: If the file doesn't exist
        QuizFormatError: If the path is not a file or cannot be decoded
    """
    filepath = Path(path)
    if not filepath.exists():
        raise FileNotFoundError(f"Quiz file not found: {filepath}")
    if not filepath.is_file():
        raise QuizFormatError(f"Quiz path is not a file: {filepath}")

    try:
        if filepath.suffix.lower() in YAML_SUFFIXES:
            return read_yaml(filepath)
        return read_json(filepath)
    except json.JSONDecodeError as e:
        raise QuizFormatError(f"Invalid JSON in quiz file {filepath}: {e}") from e
    except yaml.YAMLError as e:
        raise QuizFormatError(f"Invalid YAML in quiz file {filepath}: {e}") from e
    except UnicodeDecodeError as e:
        raise QuizFormatError(f"Quiz file {filepath} is not valid UTF-8 text: {e}") from e


def _build_question(row: Dict[str, Any]) -> Question:
    return Question(
        id=str(row["id"]),
        section=row["section"],
        prompt=row["question"],
        options=tuple(row["options"]),
        correct_answer=row["correctAnswer"],
        explanation=row["explanation"],
    )


def _build_grading(grading: Dict[str, Any]) -> GradingTable:
    return GradingTable(tiers=tuple(
        GradingTier(
            name=name,
            minimum=grading[name].get("min", 0),
            message=grading[name]["message"],
        )
        for name in GRADE_TIERS
    ))


def parse_quiz(document: Any, source: Union[str, Path] = "<document>") -> QuizDefinition:
    """Validate a parsed document and build the quiz model from it.

    Raises:
        QuizFormatError: If required fields are absent or malformed
    """
    validate_quiz_document(document, source=source)
    quiz = document["quiz"]
    return QuizDefinition(
        title=quiz["title"],
        description=quiz["description"],
        passing_score=quiz["passingScore"],
        grading=_build_grading(quiz["grading"]),
        questions=tuple(_build_question(row) for row in quiz["questions"]),
    )


def load_quiz(path: Union[str, Path]) -> QuizDefinition:
    """Load a quiz definition from a JSON or YAML file.

    Args:
        path: Path to the quiz file

    Returns:
        QuizDefinition with questions in file order

    Raises:
        FileNotFoundError: If file doesn't exist
        QuizFormatError: If the document is malformed
    """
    filepath = Path(path)
    quiz = parse_quiz(read_quiz_document(filepath), source=filepath)
    logger.info("Loaded %d questions from %s", quiz.total_questions, filepath)
    return quiz
