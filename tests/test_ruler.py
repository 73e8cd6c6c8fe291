from __future__ import annotations

import math

import pytest

from muza.errors import InvalidConfigError
from muza.ruler import JUST_RATIOS, Ruler, euclidean_mod, floor_div


def test_floor_div_rounds_toward_negative_infinity() -> None:
    assert floor_div(-1, 12) == -1
    assert floor_div(-12, 12) == -1
    assert floor_div(-13, 12) == -2
    assert floor_div(11, 12) == 0
    assert floor_div(12, 12) == 1


def test_euclidean_mod_is_never_negative() -> None:
    assert euclidean_mod(-1, 12) == 11
    assert euclidean_mod(-12, 12) == 0
    assert euclidean_mod(-13, 12) == 11
    assert euclidean_mod(25, 12) == 1
    assert euclidean_mod(-1, -12) == 11


def test_default_ruler_values() -> None:
    ruler = Ruler()
    assert ruler.base_frequency == 440.0
    assert ruler.tempo_bpm == 120.0
    assert ruler.degree_ratios == JUST_RATIOS


def test_ratio_table_keeps_degree_eleven_at_two() -> None:
    assert JUST_RATIOS[11] == 2.0
    assert JUST_RATIOS[6] == pytest.approx(math.sqrt(2.0))
    assert JUST_RATIOS[7] == 1.5


def test_ratio_unison_and_periodicity() -> None:
    ruler = Ruler()
    assert ruler.ratio(0) == 1.0
    for note in range(-48, 60):
        assert ruler.ratio(note) == ruler.ratio(note + 12)


def test_ratio_wraps_negative_notes() -> None:
    ruler = Ruler()
    assert ruler.ratio(-1) == JUST_RATIOS[11]
    assert ruler.ratio(-13) == JUST_RATIOS[11]
    assert ruler.ratio(-12) == 1.0


def test_octave_power_for_negative_notes() -> None:
    ruler = Ruler()
    assert ruler.octave_power(-1) == 0.5
    assert ruler.octave_power(-12) == 0.5
    assert ruler.octave_power(-13) == 0.25
    assert ruler.octave_power(-24) == 0.25
    assert ruler.octave_power(-25) == 0.125
    assert ruler.octave_power(0) == 1.0
    assert ruler.octave_power(11) == 1.0
    assert ruler.octave_power(12) == 2.0


def test_frequency_of_note_zero_is_base() -> None:
    assert Ruler().frequency(0) == 440.0
    assert Ruler(base_frequency=261.0).frequency(0) == 261.0


def test_frequency_doubles_every_octave() -> None:
    ruler = Ruler()
    for note in range(-36, 61):
        assert ruler.frequency(note + 12) == pytest.approx(ruler.frequency(note) * 2)


def test_frequency_below_base() -> None:
    ruler = Ruler()
    assert ruler.frequency(-12) == pytest.approx(220.0)
    assert ruler.frequency(-36) == pytest.approx(55.0)
    assert ruler.frequency(-5) == pytest.approx(220.0 * 3.0 / 2.0)


def test_duration_is_tempo_over_sixty_times_length() -> None:
    ruler = Ruler()
    assert ruler.duration(1) == 2.0
    assert ruler.duration(8) == 16.0
    assert Ruler(tempo_bpm=60.0).duration(4) == 4.0


def test_clone_is_equal_independent_value() -> None:
    ruler = Ruler(base_frequency=300.0)
    copy = ruler.clone()
    assert copy == ruler
    assert copy is not ruler


def test_ruler_is_immutable() -> None:
    ruler = Ruler()
    with pytest.raises(AttributeError):
        ruler.base_frequency = 1.0  # type: ignore[misc]


@pytest.mark.parametrize(
    "ratios",
    [
        JUST_RATIOS[:11],
        JUST_RATIOS + (2.0,),
        (1.5,) + JUST_RATIOS[1:],
        JUST_RATIOS[:5] + (0.0,) + JUST_RATIOS[6:],
        JUST_RATIOS[:5] + (float("inf"),) + JUST_RATIOS[6:],
        JUST_RATIOS[:5] + (float("nan"),) + JUST_RATIOS[6:],
    ],
)
def test_invalid_ratio_tables_are_rejected(ratios: tuple[float, ...]) -> None:
    with pytest.raises(InvalidConfigError):
        Ruler(degree_ratios=ratios)
