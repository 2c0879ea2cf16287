from __future__ import annotations

import logging
from typing import List, Sequence

from ..data.schemas import Question, SessionConfig, UserAnswer, option_letter
from ..utils.io import Console

logger = logging.getLogger(__name__)

PROGRESS_EVERY = 10


def parse_choice(reply: str, n_options: int) -> int | None:
    """Map a reply to a 0-based option index, or None if it is not valid.

    Only a single lowercase letter within ``a`` .. last option is accepted;
    surrounding whitespace is ignored.
    """
    reply = reply.strip()
    if len(reply) != 1 or not "a" <= reply < option_letter(n_options):
        return None
    return ord(reply) - ord("a")


def read_choice(console: Console, n_options: int) -> int:
    """Prompt until the user enters a valid option letter.

    Raises:
        EOFError: If the input channel closes before a valid choice is read
    """
    last = option_letter(n_options - 1)
    while True:
        console.write_line()
        index = parse_choice(console.prompt(f"Your answer (a-{last}): "), n_options)
        if index is not None:
            return index
        console.write_line(f"Invalid input. Please enter a letter from 'a' to '{last}'")


def display_question(number: int, total: int, question: Question, console: Console) -> None:
    console.write_line(f"Question {number}/{total}")
    console.write_line(f"Section: {question.section}")
    console.rule("-", 50)
    console.write_line(question.prompt)
    console.write_line()
    for i, option in enumerate(question.options):
        console.write_line(f"{option_letter(i)}) {option}")


def show_feedback(question: Question, choice: int, console: Console) -> None:
    console.write_line()
    console.rule("-", 30)
    if question.is_correct(choice):
        console.write_line("✓ CORRECT!")
    else:
        console.write_line("✗ INCORRECT")
        console.write_line(
            f"Correct answer: {option_letter(question.correct_answer)}) {question.correct_option}"
        )
    console.write_line()
    console.write_line(f"Explanation: {question.explanation}")
    console.rule("-", 30)


def run_quiz(questions: Sequence[Question], config: SessionConfig, console: Console) -> List[UserAnswer]:
    """Present every question in order and collect one answer per question.

    Args:
        questions: Questions in presentation order
        config: Session preferences
        console: Console to interact on

    Returns:
        Answers in presentation order, one per question
    """
    console.write_line()
    console.rule()
    console.write_line("                    QUIZ STARTED")
    console.rule()

    total = len(questions)
    answers: List[UserAnswer] = []
    for number, question in enumerate(questions, start=1):
        display_question(number, total, question, console)

        choice = read_choice(console, len(question.options))
        answer = UserAnswer(
            question_id=question.id,
            chosen_index=choice,
            is_correct=question.is_correct(choice),
        )
        answers.append(answer)
        logger.debug("Answered %s with %s (correct=%s)", question.id, option_letter(choice), answer.is_correct)

        if config.show_explanations:
            show_feedback(question, choice, console)

        if number % PROGRESS_EVERY == 0 or number == total:
            console.write_line()
            console.write_line(f"Progress: {number}/{total} questions completed")

        console.write_line()

    return answers
