"""Sample synthesis for a single tone.

A ``WaveFormer`` describes one clip (waveform, frequency, duration). Each frame
samples the waveform at ``(time * frequency) mod 1`` and scales it by
``HEADROOM``; the sample is then copied onto every output channel. There is
no envelope, fade or band limiting.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from .audio import CHANNELS, FloatArray, duration_to_frame, frame_times, spread_channels, write_wav
from .waveforms import WaveForm, WaveformName, get_waveform, sine

HEADROOM = 0.5

DEFAULT_DURATION = 1.0
DEFAULT_FREQUENCY = 360.0


@dataclass(slots=True)
class WaveFormer:
    """Mutable render descriptor, reused by one worker across many clips."""

    waveform: WaveForm = sine
    duration: float = DEFAULT_DURATION
    frequency: float = DEFAULT_FREQUENCY

    def samples(self) -> FloatArray:
        return synthesize_mono(self.waveform, self.frequency, self.duration)

    def frames(self, channels: int = CHANNELS) -> FloatArray:
        """Interleaved frames, shape (frames, channels), every channel identical."""
        return spread_channels(self.samples(), channels)

    def render(self, path: str | Path) -> Path:
        return write_wav(path, self.frames())


class WaveFormerConfig(BaseModel):
    """Optional overrides for a WaveFormer; unset fields take the defaults."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    waveform: Optional[WaveformName] = None
    duration: Optional[float] = Field(default=None, ge=0.0)
    frequency: Optional[float] = Field(default=None, gt=0.0)


def build_waveformer(config: WaveFormerConfig | None = None) -> WaveFormer:
    """Create a WaveFormer from ``config``, filling unset fields with defaults.

    The frequency default is read from the ``duration`` override, not from
    ``frequency``: an explicit ``frequency`` is ignored, and a set ``duration``
    doubles as the frequency. Callers that need a specific pitch assign
    ``WaveFormer.frequency`` after building.
    """

    config = config or WaveFormerConfig()
    waveform = get_waveform(config.waveform) if config.waveform is not None else sine
    duration = config.duration if config.duration is not None else DEFAULT_DURATION
    frequency = config.duration if config.duration is not None else DEFAULT_FREQUENCY
    return WaveFormer(waveform=waveform, duration=duration, frequency=frequency)


def synthesize_mono(waveform: WaveForm, frequency: float, duration: float) -> FloatArray:
    """Return ``duration_to_frame(duration)`` samples of ``waveform`` at ``frequency``."""

    times = frame_times(duration_to_frame(duration))
    phase = np.fmod(times * frequency, 1.0)
    samples = np.asarray(waveform(phase), dtype=np.float64) * HEADROOM
    return samples.astype(np.float32)
