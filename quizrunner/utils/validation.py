"""Schema validation utilities for quiz documents."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

logger = logging.getLogger(__name__)

GRADE_TIERS = ("excellent", "veryGood", "good", "fair", "poor")
# Options are answered with a single letter a-z.
MAX_OPTIONS = 26


class QuizError(Exception):
    """Base exception for quiz errors."""
    pass


class SchemaValidationError(QuizError, ValueError):
    """Raised when data doesn't match expected schema."""
    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors or []


class QuizFormatError(SchemaValidationError):
    """Raised when a quiz document is unreadable or structurally invalid."""
    pass


@dataclass
class FieldSpec:
    """Specification for a data field."""
    name: str
    type: Union[type, tuple]
    required: bool = True
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    validator: Optional[Callable[[Any], bool]] = None


@dataclass
class RecordSchema:
    """Schema definition for a single JSON object."""
    name: str
    fields: List[FieldSpec]


QUIZ_SCHEMA = RecordSchema(
    name="quiz",
    fields=[
        FieldSpec(name="title", type=str),
        FieldSpec(name="description", type=str),
        FieldSpec(name="passingScore", type=int, validator=lambda v: v >= 0),
        FieldSpec(name="grading", type=dict),
        FieldSpec(name="questions", type=list, min_length=1),
    ],
)

QUESTION_SCHEMA = RecordSchema(
    name="question",
    fields=[
        FieldSpec(name="id", type=(str, int)),
        FieldSpec(name="section", type=str),
        FieldSpec(name="question", type=str, min_length=1),
        FieldSpec(name="options", type=list, min_length=2, max_length=MAX_OPTIONS),
        FieldSpec(name="correctAnswer", type=int),
        FieldSpec(name="explanation", type=str),
    ],
)

TIER_SCHEMA = RecordSchema(
    name="tier",
    fields=[
        FieldSpec(name="min", type=int),
        FieldSpec(name="message", type=str),
    ],
)

# "poor" is the catch-all tier, so its threshold may be omitted.
POOR_TIER_SCHEMA = RecordSchema(
    name="poor_tier",
    fields=[
        FieldSpec(name="min", type=int, required=False),
        FieldSpec(name="message", type=str),
    ],
)


def _type_name(expected: Union[type, tuple]) -> str:
    if isinstance(expected, tuple):
        return " or ".join(t.__name__ for t in expected)
    return expected.__name__


class SchemaValidator:
    """Validator for a record schema."""

    def __init__(self, schema: RecordSchema):
        self.schema = schema

    def validate_record(self, record: Dict[str, Any]) -> List[str]:
        """Validate a single record against schema.

        Args:
            record: Record to validate

        Returns:
            List of validation errors (empty if valid)
        """
        if not isinstance(record, dict):
            return [f"expected an object, got {type(record).__name__}"]

        errors = []

        for field_spec in self.schema.fields:
            if field_spec.name not in record:
                if field_spec.required:
                    errors.append(f"Missing required field: {field_spec.name}")
                continue

            value = record[field_spec.name]

            if value is None:
                errors.append(f"Field {field_spec.name} cannot be null")
                continue

            # bool is an int subclass; never accept it for numeric fields
            expected_types = field_spec.type if isinstance(field_spec.type, tuple) else (field_spec.type,)
            if isinstance(value, bool) and bool not in expected_types:
                matches = False
            else:
                matches = any(isinstance(value, t) for t in expected_types)
            if not matches:
                errors.append(
                    f"Field {field_spec.name} has wrong type: expected {_type_name(field_spec.type)}, "
                    f"got {type(value).__name__}"
                )
                continue

            if field_spec.min_length and isinstance(value, (str, list)):
                if isinstance(value, str) and len(value.strip()) < field_spec.min_length:
                    errors.append(
                        f"Field {field_spec.name} too short: minimum {field_spec.min_length} chars"
                    )
                if isinstance(value, list) and len(value) < field_spec.min_length:
                    errors.append(
                        f"Field {field_spec.name} has too few items: minimum {field_spec.min_length}"
                    )

            if field_spec.max_length and isinstance(value, list) and len(value) > field_spec.max_length:
                errors.append(
                    f"Field {field_spec.name} has too many items: maximum {field_spec.max_length}"
                )

            if field_spec.validator:
                try:
                    if not field_spec.validator(value):
                        errors.append(f"Field {field_spec.name} failed validation")
                except Exception as e:
                    errors.append(f"Field {field_spec.name} validation error: {e}")

        return errors


def _validate_question(record: Any) -> List[str]:
    errors = SchemaValidator(QUESTION_SCHEMA).validate_record(record)
    if errors:
        return errors

    options = record["options"]
    for i, option in enumerate(options):
        if not isinstance(option, str):
            errors.append(f"options[{i}] must be a string, got {type(option).__name__}")

    answer = record["correctAnswer"]
    if not 0 <= answer < len(options):
        errors.append(
            f"correctAnswer {answer} is out of range for {len(options)} options"
        )
    return errors


def _validate_grading(grading: Dict[str, Any]) -> List[str]:
    errors = []
    for tier in GRADE_TIERS:
        if tier not in grading:
            errors.append(f"grading: missing tier '{tier}'")
            continue
        schema = POOR_TIER_SCHEMA if tier == "poor" else TIER_SCHEMA
        for e in SchemaValidator(schema).validate_record(grading[tier]):
            errors.append(f"grading.{tier}: {e}")
    return errors


def collect_quiz_errors(document: Any) -> List[str]:
    """Return every structural problem found in a parsed quiz document."""
    if not isinstance(document, dict):
        return [f"Top-level document must be an object, got {type(document).__name__}"]
    if "quiz" not in document:
        return ["Missing required top-level object: quiz"]

    quiz = document["quiz"]
    errors = SchemaValidator(QUIZ_SCHEMA).validate_record(quiz)
    if not isinstance(quiz, dict):
        return [f"quiz: {e}" for e in errors]

    if isinstance(quiz.get("grading"), dict):
        errors.extend(_validate_grading(quiz["grading"]))

    questions = quiz.get("questions")
    if isinstance(questions, list):
        seen: Dict[str, int] = {}
        for i, record in enumerate(questions):
            errors.extend(f"questions[{i}]: {e}" for e in _validate_question(record))
            if isinstance(record, dict) and isinstance(record.get("id"), (str, int)):
                qid = str(record["id"])
                if qid in seen:
                    errors.append(f"questions[{i}]: duplicate id '{qid}' (first seen at questions[{seen[qid]}])")
                else:
                    seen[qid] = i

    return errors


def validate_quiz_document(document: Any, source: Union[str, Path] = "<document>") -> None:
    """Validate a parsed quiz document.

    Args:
        document: Parsed JSON/YAML payload
        source: Where the document came from, for error messages

    Raises:
        QuizFormatError: If validation fails
    """
    errors = collect_quiz_errors(document)
    if errors:
        raise QuizFormatError(
            f"Quiz validation failed for {source} with {len(errors)} error(s)",
            errors=errors,
        )
    logger.debug("Quiz document validation passed: %s", source)
