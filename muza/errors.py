from __future__ import annotations

from pathlib import Path


class MuzaError(Exception):
    """Base error for the muza tone renderer."""


class InvalidConfigError(MuzaError):
    """Raised when a tuning table or render setting cannot be used."""


class OutputSetupError(MuzaError):
    """Raised when the output root cannot be recreated."""


class RenderError(MuzaError):
    """Raised when one output file of the grid cannot be produced."""

    def __init__(self, message: str, *, job: int, degree: int, length: int, path: Path) -> None:
        super().__init__(f"{message} (octave={job} note={degree} length={length} path={path})")
        self.job = job
        self.degree = degree
        self.length = length
        self.path = path
