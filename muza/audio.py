from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any

import numpy as np
import soundfile as sf  # type: ignore[import]
from numpy.typing import NDArray

_LOGGER = logging.getLogger("muza.audio")

FloatArray = NDArray[np.float32]

FRAME_RATE = 48_000
CHANNELS = 2
SUBTYPE = "FLOAT"


def frame_to_duration(frame: int) -> float:
    return frame / FRAME_RATE


def duration_to_frame(duration: float) -> int:
    """Number of whole frames that fit in ``duration`` seconds, floor(duration * rate)."""

    frame = max(math.floor(duration * FRAME_RATE), 0)
    # Settle float error against the inverse so whole frames map back to themselves.
    while frame > 0 and frame_to_duration(frame) > duration:
        frame -= 1
    while frame_to_duration(frame + 1) <= duration:
        frame += 1
    return frame


def frame_times(frames: int) -> NDArray[np.float64]:
    """Start time in seconds of each of the first ``frames`` frames."""
    return np.arange(frames, dtype=np.float64) / FRAME_RATE


def spread_channels(mono: NDArray[np.floating[Any]], channels: int = CHANNELS) -> FloatArray:
    """Copy a mono signal onto every channel, shape (frames, channels)."""
    column = np.asarray(mono, dtype=np.float32).reshape(-1, 1)
    return np.repeat(column, channels, axis=1)


def write_wav(
    path: str | Path,
    frames: NDArray[np.floating[Any]],
    *,
    sample_rate: int = FRAME_RATE,
) -> Path:
    """Write interleaved 32-bit float frames of shape (frames, channels) to a wav file.

    Samples are written as given; nothing is clipped or normalized.
    """

    target = Path(path)
    data: FloatArray = np.asarray(frames, dtype=np.float32)
    if data.ndim == 1:
        data = data.reshape(-1, 1)
    with sf.SoundFile(
        target,
        mode="w",
        samplerate=sample_rate,
        channels=data.shape[1],
        subtype=SUBTYPE,
        format="WAV",
    ) as handle:
        handle.write(data)
    _LOGGER.debug("Wrote %d frames to %s", data.shape[0], target)
    return target
