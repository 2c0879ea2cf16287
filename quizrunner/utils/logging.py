from __future__ import annotations

import logging
from logging import Logger
from pathlib import Path


def setup_logging(
    log_dir: str = "logs",
    filename: str = "quiz.log",
    level: str = "INFO",
    console_level: str = "WARNING",
) -> Logger:
    """Configure dual console/file logging using stdlib logging.

    Creates the logs directory if needed and sets a consistent formatter.
    The console handler writes to stderr at ``console_level`` so records
    do not interleave with the quiz prompts on stdout.
    Multiple calls are safe; handlers are added only once.
    """
    logger = logging.getLogger("quizrunner")
    if getattr(logger, "_configured", False):
        return logger

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    Path(log_dir).mkdir(parents=True, exist_ok=True)
    log_path = Path(log_dir) / filename

    fmt = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Console handler
    ch = logging.StreamHandler()
    ch.setLevel(getattr(logging, console_level.upper(), logging.WARNING))
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    # File handler
    fh = logging.FileHandler(str(log_path), encoding="utf-8")
    fh.setLevel(logger.level)
    fh.setFormatter(fmt)
    logger.addHandler(fh)

    logger._configured = True  # type: ignore[attr-defined]
    logger.debug("Logging configured")
    return logger


def reset_logging() -> None:
    """Detach and close handlers installed by :func:`setup_logging`."""
    logger = logging.getLogger("quizrunner")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger._configured = False  # type: ignore[attr-defined]
