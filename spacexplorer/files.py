"""Comma-separated difficulty and high-score files."""

from __future__ import annotations

import os
from pathlib import Path

MAX_ROWS = 10
MAX_FIELDS = 10
MAX_FIELD_LENGTH = 9

DIFFICULTY_FILE = "difficulty.txt"
HIGHSCORE_FILE = "highscore.txt"

_DEFAULT_DIFFICULTIES = (
    "Easy,5,5,5,20,5\n"
    "Medium,5,3,3,10,10\n"
    "Hard,3,2,2,10,20\n"
)


def append_score(path: str | os.PathLike, name: str, difficulty: str, score: int) -> None:
    """Append one high-score line to the file."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(f"{name},{difficulty},{score}\n")


def create_default(path: str | os.PathLike) -> None:
    """Write the default contents for a known data file."""
    name = Path(path).name
    if name == DIFFICULTY_FILE:
        contents = _DEFAULT_DIFFICULTIES
    elif name == HIGHSCORE_FILE:
        contents = ""
    else:
        raise ValueError(f"unknown file name: {name}")
    Path(path).write_text(contents, encoding="utf-8")


def parse(path: str | os.PathLike) -> list[list[str]]:
    """Read up to ten rows of comma-separated fields, creating the file if missing."""
    if not Path(path).exists():
        create_default(path)
    rows: list[list[str]] = []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            for terminator in ("\r", "\n"):
                line = line.split(terminator, 1)[0]
            fields = line.split(",")[:MAX_FIELDS]
            rows.append([value[:MAX_FIELD_LENGTH] for value in fields])
            if len(rows) >= MAX_ROWS:
                break
    return rows