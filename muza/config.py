from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .ruler import Ruler
from .waveforms import WaveformName

DEFAULT_OUTPUT_DIR = Path("out")
DEFAULT_OCTAVES = 8
DEFAULT_OFFSET = 36
DEFAULT_LENGTHS: tuple[int, ...] = (1, 2, 4, 8)


class RenderConfig(BaseModel):
    """Parameters of one grid render.

    The defaults are the values the ``muza`` command renders with: eight
    octaves starting three octaves below 440 Hz, four note lengths each.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    output_dir: Path = DEFAULT_OUTPUT_DIR
    octaves: int = Field(default=DEFAULT_OCTAVES, ge=1)
    offset: int = DEFAULT_OFFSET
    lengths: tuple[int, ...] = DEFAULT_LENGTHS
    base_frequency: float = Field(default=440.0, gt=0.0, allow_inf_nan=False)
    tempo_bpm: float = Field(default=120.0, gt=0.0, allow_inf_nan=False)
    waveform: WaveformName = "sine"

    @field_validator("lengths")
    @classmethod
    def _check_lengths(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        if not value:
            raise ValueError("lengths must not be empty")
        if any(length <= 0 for length in value):
            raise ValueError("lengths must be positive")
        if len(set(value)) != len(value):
            raise ValueError("lengths must be unique")
        return value

    @property
    def cell_count(self) -> int:
        return self.octaves * 12 * len(self.lengths)

    def lowest_note(self) -> int:
        return -self.offset

    def highest_note(self) -> int:
        return self.octaves * 12 - self.offset - 1

    def to_ruler(self) -> Ruler:
        return Ruler(base_frequency=self.base_frequency, tempo_bpm=self.tempo_bpm)
