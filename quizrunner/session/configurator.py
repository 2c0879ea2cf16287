from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence, Tuple

from ..data.schemas import Question, QuizDefinition, SessionConfig
from ..utils.io import Console, shuffle_list

logger = logging.getLogger(__name__)

AFFIRMATIVE = {"y", "yes"}


def is_affirmative(reply: str) -> bool:
    return reply.strip().lower() in AFFIRMATIVE


def display_welcome(quiz: QuizDefinition, console: Console) -> None:
    console.write_line()
    console.rule()
    console.write_line(f"           {quiz.title}")
    console.rule()
    console.write_line(quiz.description)
    console.write_line()
    console.write_line(f"Total Questions: {quiz.total_questions}")
    console.write_line(f"Passing Score: {quiz.passing_score}/{quiz.total_questions}")
    console.rule()


def configure_session(
    console: Console,
    questions: Sequence[Question],
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Tuple[SessionConfig, List[Question]]:
    """Ask for the session preferences and order the questions accordingly.

    Args:
        console: Console to prompt on
        questions: Questions in file order
        seed: Optional seed making the shuffle reproducible
        rng: Optional random generator, takes precedence over ``seed``

    Returns:
        Tuple of (session config, questions in presentation order)
    """
    console.write_line()
    show_explanations = is_affirmative(
        console.prompt("Do you want to see explanations after each question? (y/n): ")
    )

    console.write_line()
    shuffle_questions = is_affirmative(console.prompt("Do you want to shuffle questions? (y/n): "))

    ordered = list(questions)
    if shuffle_questions:
        ordered = shuffle_list(ordered, seed=seed, rng=rng)
        console.write_line("Questions shuffled!")

    config = SessionConfig(show_explanations=show_explanations, shuffle_questions=shuffle_questions)
    logger.info(
        "Session configured: show_explanations=%s, shuffle_questions=%s",
        config.show_explanations,
        config.shuffle_questions,
    )

    console.write_line()
    console.write_line("Press Enter to start the quiz...")
    console.read_line()
    return config, ordered
