from __future__ import annotations

from .audio import CHANNELS, FRAME_RATE, duration_to_frame, frame_to_duration, write_wav
from .config import RenderConfig
from .errors import InvalidConfigError, MuzaError, OutputSetupError, RenderError
from .logging_utils import configure_logging
from .pipeline import GridCell, OctaveWorker, RenderReport, iter_cells, render_grid
from .ruler import JUST_RATIOS, Ruler, euclidean_mod, floor_div
from .synth import WaveFormer, WaveFormerConfig, build_waveformer, synthesize_mono
from .waveforms import WAVEFORMS, sawtooth, sine, square, triangle

__all__ = [
    "CHANNELS",
    "FRAME_RATE",
    "JUST_RATIOS",
    "WAVEFORMS",
    "GridCell",
    "InvalidConfigError",
    "MuzaError",
    "OctaveWorker",
    "OutputSetupError",
    "RenderConfig",
    "RenderError",
    "RenderReport",
    "Ruler",
    "WaveFormer",
    "WaveFormerConfig",
    "build_waveformer",
    "configure_logging",
    "duration_to_frame",
    "euclidean_mod",
    "floor_div",
    "frame_to_duration",
    "iter_cells",
    "render_grid",
    "sawtooth",
    "sine",
    "square",
    "synthesize_mono",
    "triangle",
    "write_wav",
]

__version__ = "0.1.0"
