from pathlib import Path
import sys

import pytest

from gridlogic import cli


def _run(monkeypatch: pytest.MonkeyPatch, *args: str) -> int:
    monkeypatch.setattr(sys, "argv", ["gridlogic", *args])
    with pytest.raises(SystemExit) as excinfo:
        cli.main()
    return excinfo.value.code


def test_steps_lists_registered_steps(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(monkeypatch, "steps") == 0

    out = capsys.readouterr().out
    assert "corner_entry" in out
    assert "endpoint_neighbors" in out


def test_solve_reports_result(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    path = tmp_path / "line.yaml"
    path.write_text("\n".join(["family: net", "name: line", "tiles:", '  - "En In En"']))

    assert _run(monkeypatch, "solve", str(path)) == 0

    out = capsys.readouterr().out
    assert "puzzle: line" in out
    assert "state: solved" in out
    assert "locked=3/3" in out


def test_solve_invalid_puzzle_exits_nonzero(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    path = tmp_path / "four.yaml"
    path.write_text("\n".join(["family: loopy", "width: 1", "height: 1", "hints: [[4]]", "edges: {disabled: [0]}"]))

    assert _run(monkeypatch, "solve", str(path)) == 2
    assert "state: invalid" in capsys.readouterr().out


def test_solve_missing_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    assert _run(monkeypatch, "solve", str(tmp_path / "absent.yaml")) == 1


def test_solve_malformed_file_exits_one(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("\n".join(["family: loopy", "width: null", "height: 2"]))

    assert _run(monkeypatch, "solve", str(path)) == 1
    assert "width" in capsys.readouterr().err
