"""Reading puzzle inputs from files."""

from __future__ import annotations

import os
from pathlib import Path


def load_tokens(path: str | os.PathLike[str]) -> list[str]:
    """Read a file and return its whitespace-separated tokens."""
    return Path(path).read_text().split()


def load_text(path: str | os.PathLike[str]) -> str:
    """Read a file and return its contents without surrounding whitespace."""
    return Path(path).read_text().strip()