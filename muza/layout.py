"""Output tree: ``<root>/o[job]/n[degree]/o[job] n[degree] l[length].wav``."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from .errors import OutputSetupError

_LOGGER = logging.getLogger("muza.layout")


def octave_dir(root: Path, job: int) -> Path:
    return root / f"o[{job}]"


def note_dir(root: Path, job: int, degree: int) -> Path:
    return octave_dir(root, job) / f"n[{degree}]"


def cell_path(root: Path, job: int, degree: int, length: int) -> Path:
    return note_dir(root, job, degree) / f"o[{job}] n[{degree}] l[{length}].wav"


def prepare_output_root(root: str | Path) -> Path:
    """Remove ``root`` if present and create it empty."""

    target = Path(root)
    try:
        if target.exists():
            _LOGGER.debug("Removing previous output %s", target)
            shutil.rmtree(target)
        target.mkdir(parents=True)
    except OSError as exc:
        raise OutputSetupError(f"Cannot recreate output directory {target}: {exc}") from exc
    return target
