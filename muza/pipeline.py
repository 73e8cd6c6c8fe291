"""Grid render: one thread per octave, one wav file per (octave, note, length).

Every worker gets its own copy of the ruler and its own WaveFormer, and writes
only beneath its own ``o[job]`` directory, so workers share no mutable state.
``render_grid`` starts every worker and joins all of them before returning.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from itertools import groupby
from operator import attrgetter
from pathlib import Path

from .config import RenderConfig
from .errors import RenderError
from .layout import cell_path, note_dir, octave_dir
from .ruler import DEGREES, Ruler
from .synth import build_waveformer
from .waveforms import get_waveform

_LOGGER = logging.getLogger("muza.pipeline")


@dataclass(frozen=True, slots=True)
class GridCell:
    job: int
    degree: int
    length: int
    note: int

    def path(self, root: Path) -> Path:
        return cell_path(root, self.job, self.degree, self.length)


def iter_cells(job: int, offset: int, lengths: Sequence[int]) -> Iterator[GridCell]:
    """Cells of one octave in render order: notes ascending, lengths as given."""

    start = job * DEGREES - offset
    for degree in range(DEGREES):
        for length in lengths:
            yield GridCell(job=job, degree=degree, length=length, note=start + degree)


@dataclass(slots=True)
class RenderReport:
    written: list[Path] = field(default_factory=list)
    failures: list[RenderError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def extend(self, other: "RenderReport") -> None:
        self.written.extend(other.written)
        self.failures.extend(other.failures)


class OctaveWorker(threading.Thread):
    """Renders all notes and lengths of a single octave."""

    def __init__(self, job: int, ruler: Ruler, config: RenderConfig) -> None:
        super().__init__(name=f"muza-octave-{job}")
        self.job = job
        self.ruler = ruler
        self.config = config
        self.report = RenderReport()
        self.error: BaseException | None = None

    def run(self) -> None:
        try:
            self.render()
        except BaseException as exc:
            # Re-raised by render_grid after every worker has joined.
            self.error = exc

    def render(self) -> RenderReport:
        root = self.config.output_dir
        waveformer = build_waveformer()
        waveformer.waveform = get_waveform(self.config.waveform)
        cells = iter_cells(self.job, self.config.offset, self.config.lengths)
        _LOGGER.debug("Octave %d starting at note %d", self.job, self.job * DEGREES - self.config.offset)

        dir_error: OSError | None = None
        try:
            octave_dir(root, self.job).mkdir(exist_ok=True)
        except OSError as exc:
            dir_error = exc

        for degree, group in groupby(cells, key=attrgetter("degree")):
            note_error = dir_error
            if note_error is None:
                try:
                    note_dir(root, self.job, degree).mkdir(exist_ok=True)
                except OSError as exc:
                    note_error = exc
            for cell in group:
                path = cell.path(root)
                if note_error is not None:
                    self._fail(cell, path, "Cannot create note directory", note_error)
                    continue
                waveformer.frequency = self.ruler.frequency(cell.note)
                waveformer.duration = self.ruler.duration(cell.length)
                try:
                    waveformer.render(path)
                except (OSError, RuntimeError) as exc:
                    self._discard(path)
                    self._fail(cell, path, "Cannot write tone", exc)
                    continue
                self.report.written.append(path)
                _LOGGER.debug("Wrote %s (%.3f Hz, %.3f s)", path, waveformer.frequency, waveformer.duration)

        _LOGGER.debug(
            "Octave %d done: %d written, %d failed",
            self.job,
            len(self.report.written),
            len(self.report.failures),
        )
        return self.report

    def _fail(self, cell: GridCell, path: Path, message: str, exc: BaseException) -> None:
        error = RenderError(
            f"{message}: {exc}",
            job=cell.job,
            degree=cell.degree,
            length=cell.length,
            path=path,
        )
        error.__cause__ = exc
        _LOGGER.warning("%s", error)
        self.report.failures.append(error)

    @staticmethod
    def _discard(path: Path) -> None:
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            _LOGGER.warning("Failed to remove partial file %s: %s", path, exc)


def render_grid(
    config: RenderConfig,
    ruler: Ruler | None = None,
    *,
    progress: Callable[[int, int], None] | None = None,
) -> RenderReport:
    """Render every cell of the grid and wait for all workers to finish.

    Per-file failures are collected in the returned report. An unexpected
    error inside a worker is raised once all workers have stopped.
    ``progress(joined, total)`` is called on the calling thread after each
    worker joins, in octave order.
    """

    ruler = ruler if ruler is not None else config.to_ruler()
    workers = [OctaveWorker(job, ruler.clone(), config) for job in range(config.octaves)]
    for worker in workers:
        worker.start()
    for joined, worker in enumerate(workers, start=1):
        worker.join()
        if progress is not None:
            progress(joined, len(workers))

    report = RenderReport()
    for worker in workers:
        report.extend(worker.report)
    for worker in workers:
        if worker.error is not None:
            raise worker.error

    _LOGGER.info(
        "Rendered %d of %d files into %s (%d failed)",
        len(report.written),
        config.cell_count,
        config.output_dir,
        len(report.failures),
    )
    return report
