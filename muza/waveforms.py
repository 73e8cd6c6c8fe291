"""Periodic waveform functions mapping a phase in [0, 1) to an amplitude in [-1, 1].

Each function accepts a float or a numpy array of phases and is evaluated
elementwise.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable, Literal, TypeAlias

import numpy as np
from numpy.typing import NDArray

Phase: TypeAlias = float | NDArray[np.floating[Any]]
WaveForm: TypeAlias = Callable[[Phase], Any]
WaveformName = Literal["square", "sawtooth", "triangle", "sine"]


def square(phase: Phase) -> Any:
    return np.where(np.less(phase, 0.5), 1.0, -1.0)


def sawtooth(phase: Phase) -> Any:
    return 1.0 - 2.0 * np.asarray(phase, dtype=np.float64)


def triangle(phase: Phase) -> Any:
    x = np.asarray(phase, dtype=np.float64)
    return np.where(x < 0.25, 4.0 * x, np.where(x < 0.75, 2.0 - 4.0 * x, 4.0 * x - 4.0))


def sine(phase: Phase) -> Any:
    return np.sin(2.0 * np.pi * np.asarray(phase, dtype=np.float64))


WAVEFORMS: Mapping[WaveformName, WaveForm] = MappingProxyType(
    {
        "square": square,
        "sawtooth": sawtooth,
        "triangle": triangle,
        "sine": sine,
    }
)


def get_waveform(name: WaveformName) -> WaveForm:
    """Look up a waveform by name."""
    if name not in WAVEFORMS:
        raise ValueError(f"Unknown waveform: {name}. Valid: {list(WAVEFORMS.keys())}")
    return WAVEFORMS[name]
