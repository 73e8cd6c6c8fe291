from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

from .errors import InvalidConfigError

DEGREES = 12

# Just-intonation ratio per scale degree, index 0 = unison.
JUST_RATIOS: tuple[float, ...] = (
    1.0,  # 0
    256.0 / 243.0,  # 1
    9.0 / 8.0,  # 2
    32.0 / 27.0,  # 3
    81.0 / 64.0,  # 4
    4.0 / 3.0,  # 5
    math.sqrt(2.0),  # 6
    3.0 / 2.0,  # 7
    128.0 / 81.0,  # 8
    27.0 / 16.0,  # 9
    16.0 / 9.0,  # 10
    256.0 / 128.0,  # 11
)


def floor_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward negative infinity (-1 -> -1, -13 -> -2 for 12)."""
    return numerator // denominator


def euclidean_mod(numerator: int, denominator: int) -> int:
    """Remainder in [0, |denominator|) for any sign of numerator."""
    divisor = abs(denominator)
    return numerator - divisor * floor_div(numerator, divisor)


@dataclass(frozen=True, slots=True)
class Ruler:
    """Tuning model mapping note indices to frequencies and lengths to seconds.

    Note 0 sounds at ``base_frequency``. Notes step through ``degree_ratios``
    and every 12 notes double the frequency, in both directions:

        ruler = Ruler()
        ruler.frequency(0)    # 440.0
        ruler.frequency(-12)  # 220.0
    """

    base_frequency: float = 440.0
    tempo_bpm: float = 120.0
    degree_ratios: tuple[float, ...] = field(default=JUST_RATIOS)

    def __post_init__(self) -> None:
        ratios = tuple(float(value) for value in self.degree_ratios)
        if len(ratios) != DEGREES:
            raise InvalidConfigError(f"degree_ratios needs {DEGREES} entries, got {len(ratios)}")
        if ratios[0] != 1.0:
            raise InvalidConfigError(f"degree_ratios[0] must be 1.0, got {ratios[0]}")
        for index, value in enumerate(ratios):
            if not math.isfinite(value) or value <= 0.0:
                raise InvalidConfigError(f"degree_ratios[{index}] must be positive and finite, got {value}")
        object.__setattr__(self, "degree_ratios", ratios)

    def clone(self) -> "Ruler":
        return replace(self)

    def ratio(self, note: int) -> float:
        return self.degree_ratios[euclidean_mod(note, DEGREES)]

    def octave_power(self, note: int) -> float:
        return 2.0 ** floor_div(note, DEGREES)

    def frequency(self, note: int) -> float:
        return self.base_frequency * self.ratio(note) * self.octave_power(note)

    def duration(self, length: float) -> float:
        # Tempo over sixty scaled by the length multiplier, in seconds.
        return self.tempo_bpm / 60.0 * length
