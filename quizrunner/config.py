from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional

from .utils.io import read_json, write_json


@dataclass
class LoggingConfig:
    level: str = "INFO"
    log_dir: str = "logs"
    filename: str = "quiz.log"

    def file_path(self) -> Path:
        return Path(self.log_dir) / self.filename


@dataclass
class QuizConfig:
    path: str = "agile_quiz.json"
    seed: Optional[int] = None  # fixes the shuffle order when set


@dataclass
class AppConfig:
    logging: LoggingConfig = None  # type: ignore[assignment]
    quiz: QuizConfig = None  # type: ignore[assignment]

    @staticmethod
    def from_json(path: str | Path) -> "AppConfig":
        payload = read_json(path)
        if not isinstance(payload, dict):
            raise TypeError(f"config must be a JSON object, got {type(payload).__name__}")
        return AppConfig(
            logging=LoggingConfig(**payload.get("logging", {})),
            quiz=QuizConfig(**payload.get("quiz", {})),
        )

    def to_json(self, path: str | Path) -> None:
        write_json(path, {
            "logging": asdict(self.logging),
            "quiz": asdict(self.quiz),
        })


# Provide safe defaults via a factory function for top-level config
def default_app_config() -> AppConfig:
    return AppConfig(
        logging=LoggingConfig(),
        quiz=QuizConfig(),
    )
