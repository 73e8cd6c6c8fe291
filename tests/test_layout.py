from __future__ import annotations

from pathlib import Path

import pytest

from muza.errors import OutputSetupError
from muza.layout import cell_path, note_dir, octave_dir, prepare_output_root


def test_cell_path_naming(tmp_path: Path) -> None:
    assert octave_dir(tmp_path, 3) == tmp_path / "o[3]"
    assert note_dir(tmp_path, 3, 11) == tmp_path / "o[3]" / "n[11]"
    assert cell_path(tmp_path, 3, 11, 8) == tmp_path / "o[3]" / "n[11]" / "o[3] n[11] l[8].wav"


def test_prepare_output_root_creates_missing(tmp_path: Path) -> None:
    root = prepare_output_root(tmp_path / "out")
    assert root.is_dir()
    assert list(root.iterdir()) == []


def test_prepare_output_root_clears_previous_run(tmp_path: Path) -> None:
    root = tmp_path / "out"
    (root / "o[0]" / "n[0]").mkdir(parents=True)
    (root / "o[0]" / "n[0]" / "old.wav").write_bytes(b"RIFF")

    prepare_output_root(root)

    assert root.is_dir()
    assert list(root.iterdir()) == []


def test_prepare_output_root_reports_setup_failure(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    with pytest.raises(OutputSetupError):
        prepare_output_root(blocker / "out")
