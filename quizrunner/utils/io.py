from __future__ import annotations

import json
import random
import sys
from pathlib import Path
from typing import Any, Optional, TextIO

import yaml


def read_json(path: str | Path) -> Any:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def read_yaml(path: str | Path) -> Any:
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f)


def write_json(path: str | Path, payload: Any) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)


def shuffle_list(xs: list, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> list:
    ys = list(xs)
    if rng is not None:
        rng.shuffle(ys)
    elif seed is not None:
        rng = random.Random(seed)
        rng.shuffle(ys)
    else:
        random.shuffle(ys)
    return ys


class Console:
    """Line-oriented input/output pair threaded through every quiz stage.

    Wraps any two text streams so the interactive flow can run against the
    process terminal or against in-memory buffers.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def write_line(self, text: str = "") -> None:
        self.stdout.write(f"{text}\n")
        self.stdout.flush()

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def read_line(self) -> str:
        """Read one line without its trailing newline.

        Raises:
            EOFError: If the input channel is exhausted or closed
        """
        line = self.stdin.readline()
        if not line:
            raise EOFError("Input channel closed")
        return line.rstrip("\r\n")

    def prompt(self, text: str) -> str:
        self.write(text)
        return self.read_line()

    def rule(self, char: str = "=", width: int = 60) -> None:
        self.write_line(char * width)
