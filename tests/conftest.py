from __future__ import annotations

import io
import json
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from quizrunner.utils.io import Console  # noqa: E402
from quizrunner.utils.logging import reset_logging  # noqa: E402


# ====================
# Quiz Fixtures
# ====================

def build_grading(excellent: int = 2, very_good: int = 1, good: int = 1, fair: int = 0, poor: int = 0) -> Dict[str, Any]:
    return {
        "excellent": {"min": excellent, "message": "Excellent!"},
        "veryGood": {"min": very_good, "message": "Very good!"},
        "good": {"min": good, "message": "Good."},
        "fair": {"min": fair, "message": "Fair."},
        "poor": {"min": poor, "message": "Needs improvement."},
    }


@pytest.fixture
def two_question_payload() -> Dict[str, Any]:
    """Two-question quiz: passing score 1, fair 0 / veryGood 1 / excellent 2."""
    return {
        "quiz": {
            "title": "Sample Quiz",
            "description": "A short sample quiz.",
            "passingScore": 1,
            "grading": build_grading(excellent=2, very_good=1, good=1, fair=0),
            "questions": [
                {
                    "id": "q1",
                    "section": "Scrum",
                    "question": "Who owns the Product Backlog?",
                    "options": ["Scrum Master", "Product Owner", "Developers", "Stakeholders"],
                    "correctAnswer": 1,
                    "explanation": "The Product Owner manages the Product Backlog.",
                },
                {
                    "id": "q2",
                    "section": "Estimation",
                    "question": "PERT expected duration for O=2, M=4, P=12?",
                    "options": ["4", "5", "6"],
                    "correctAnswer": 1,
                    "explanation": "(2 + 16 + 12) / 6 = 5.",
                },
            ],
        }
    }


@pytest.fixture
def many_question_payload() -> Dict[str, Any]:
    """Twelve questions over three sections; every correct answer is 'a'."""
    sections = ["Agile", "Scrum", "Cost"]
    return {
        "quiz": {
            "title": "Long Quiz",
            "description": "Twelve questions.",
            "passingScore": 8,
            "grading": build_grading(excellent=11, very_good=9, good=8, fair=6),
            "questions": [
                {
                    "id": f"q{i}",
                    "section": sections[i % 3],
                    "question": f"Question {i}?",
                    "options": ["right", "wrong"],
                    "correctAnswer": 0,
                    "explanation": f"Explanation {i}.",
                }
                for i in range(1, 13)
            ],
        }
    }


@pytest.fixture
def write_quiz(tmp_path):
    """Write a payload to a JSON quiz file and return its path."""
    def _write(payload: Any, name: str = "quiz.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def quiz_file(write_quiz, two_question_payload) -> Path:
    return write_quiz(two_question_payload)


@pytest.fixture
def make_console():
    """Console fed from scripted replies, writing to an in-memory buffer."""
    def _make(*replies: str) -> Console:
        text = "".join(f"{r}\n" for r in replies)
        return Console(io.StringIO(text), io.StringIO())
    return _make


@pytest.fixture(autouse=True)
def _isolated_logging():
    reset_logging()
    yield
    reset_logging()
