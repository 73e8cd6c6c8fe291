from __future__ import annotations

import argparse
import logging

from rich.console import Console

from .audio import CHANNELS, FRAME_RATE
from .config import RenderConfig
from .errors import MuzaError
from .layout import prepare_output_root
from .logging_utils import configure_logging, log_exception
from .pipeline import RenderReport, render_grid
from .spinner import Spinner

_LOGGER = logging.getLogger("muza.cli")
_CONSOLE = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="muza",
        description=(
            "Render just-intonation test tones for every octave, note and length "
            "of the built-in grid into ./out."
        ),
    )


def _print_failures(report: RenderReport) -> None:
    _CONSOLE.print(f"[red]{len(report.failures)} file(s) failed:[/red]")
    for failure in report.failures:
        _CONSOLE.print(f"  {failure}", markup=False)


def run(config: RenderConfig, spinner: Spinner | None = None) -> RenderReport:
    """Recreate the output root, then render the whole grid into it."""

    ruler = config.to_ruler()
    _LOGGER.info(
        "Frequency range %.3f Hz .. %.3f Hz",
        ruler.frequency(config.lowest_note()),
        ruler.frequency(config.highest_note()),
    )
    root = prepare_output_root(config.output_dir)
    _LOGGER.debug("Output root %s ready", root)

    def progress(joined: int, total: int) -> None:
        if spinner is not None:
            spinner.update(f"Rendering {config.cell_count} tones ({joined}/{total} octaves done)")

    return render_grid(config, ruler, progress=progress)


def main(argv: list[str] | None = None) -> int:
    configure_logging(console=_CONSOLE)
    build_parser().parse_args(argv)
    config = RenderConfig()
    try:
        with Spinner(f"Rendering {config.cell_count} tones", console=_CONSOLE) as spinner:
            report = run(config, spinner)
    except MuzaError as exc:
        log_exception("muza render", exc, traceback=False)
        return 1

    if not report.ok:
        _print_failures(report)
        return 1

    _CONSOLE.print(
        f"Wrote {len(report.written)} files to {config.output_dir} "
        f"(sr={FRAME_RATE}, channels={CHANNELS})"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
