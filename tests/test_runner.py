"""Unit tests for the interactive question loop."""

import unittest
import io

import pytest

from quizrunner.data.loader import parse_quiz
from quizrunner.data.schemas import Question, SessionConfig
from quizrunner.session.runner import parse_choice, read_choice, run_quiz
from quizrunner.utils.io import Console


def _console(*replies: str) -> Console:
    return Console(io.StringIO("".join(f"{r}\n" for r in replies)), io.StringIO())


def _question(qid: str = "q1", section: str = "Scrum", n_options: int = 4, answer: int = 1) -> Question:
    return Question(
        id=qid,
        section=section,
        prompt=f"Prompt for {qid}?",
        options=tuple(f"option {i}" for i in range(n_options)),
        correct_answer=answer,
        explanation=f"Because of {qid}.",
    )


class TestParseChoice(unittest.TestCase):
    """Tests for mapping replies to option indexes."""

    def test_valid_letters(self):
        self.assertEqual(parse_choice("a", 4), 0)
        self.assertEqual(parse_choice("b", 4), 1)
        self.assertEqual(parse_choice("d", 4), 3)
        self.assertEqual(parse_choice("  c ", 4), 2)

    def test_rejected_replies(self):
        for reply in ["e", "A", "B", "", "ab", "1", "?", " "]:
            with self.subTest(reply=reply):
                self.assertIsNone(parse_choice(reply, 4))

    def test_two_options(self):
        self.assertEqual(parse_choice("b", 2), 1)
        self.assertIsNone(parse_choice("c", 2))


class TestReadChoice(unittest.TestCase):
    """Tests for the validation loop."""

    def test_reprompts_until_valid(self):
        console = _console("e", "A", "", "ab", "b")
        self.assertEqual(read_choice(console, 4), 1)

        out = console.stdout.getvalue()
        self.assertEqual(out.count("Your answer (a-d): "), 5)
        self.assertEqual(out.count("Invalid input. Please enter a letter from 'a' to 'd'"), 4)

    def test_closed_input_raises_eof(self):
        console = _console("z")
        with self.assertRaises(EOFError):
            read_choice(console, 3)


class TestRunQuiz(unittest.TestCase):
    """Tests for run_quiz."""

    def test_one_answer_per_question_in_order(self):
        questions = [_question("q1", answer=1), _question("q2", answer=0), _question("q3", answer=3)]
        console = _console("b", "c", "d")

        answers = run_quiz(questions, SessionConfig(), console)

        self.assertEqual([a.question_id for a in answers], ["q1", "q2", "q3"])
        self.assertEqual([a.chosen_index for a in answers], [1, 2, 3])
        self.assertEqual([a.is_correct for a in answers], [True, False, True])

    def test_question_rendering(self):
        console = _console("a")
        run_quiz([_question("q1", section="Estimation", n_options=3)], SessionConfig(), console)

        out = console.stdout.getvalue()
        self.assertIn("QUIZ STARTED", out)
        self.assertIn("Question 1/1\nSection: Estimation\n" + "-" * 50 + "\nPrompt for q1?\n\n", out)
        self.assertIn("a) option 0\nb) option 1\nc) option 2\n", out)
        self.assertIn("Your answer (a-c): ", out)

    def test_feedback_shown_when_enabled(self):
        questions = [_question("q1", answer=1), _question("q2", answer=1)]
        console = _console("b", "c")

        run_quiz(questions, SessionConfig(show_explanations=True), console)

        out = console.stdout.getvalue()
        self.assertIn("✓ CORRECT!", out)
        self.assertIn("✗ INCORRECT\nCorrect answer: b) option 1", out)
        self.assertIn("Explanation: Because of q1.", out)
        self.assertIn("Explanation: Because of q2.", out)

    def test_feedback_hidden_when_disabled(self):
        console = _console("c")
        run_quiz([_question("q1", answer=1)], SessionConfig(show_explanations=False), console)

        out = console.stdout.getvalue()
        self.assertNotIn("INCORRECT", out)
        self.assertNotIn("Explanation:", out)


def test_progress_markers_every_tenth_and_last(many_question_payload):
    quiz = parse_quiz(many_question_payload)
    console = _console(*(["a"] * quiz.total_questions))

    answers = run_quiz(quiz.questions, SessionConfig(), console)

    out = console.stdout.getvalue()
    assert len(answers) == 12
    assert "Progress: 10/12 questions completed" in out
    assert "Progress: 12/12 questions completed" in out
    assert out.count("Progress:") == 2


def test_progress_marker_single_question():
    console = _console("a")
    run_quiz([_question()], SessionConfig(), console)
    assert "Progress: 1/1 questions completed" in console.stdout.getvalue()


def test_input_closed_mid_quiz_propagates():
    console = _console("a")
    with pytest.raises(EOFError):
        run_quiz([_question("q1"), _question("q2")], SessionConfig(), console)
