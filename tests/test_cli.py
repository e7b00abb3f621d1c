"""Tests for the enum-designer command line."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from enum_designer.cli import EXIT_ERROR, EXIT_INVALID, EXIT_OK, main


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _run(output_dir: Path, *args: str) -> int:
    return main(["--dir", str(output_dir), *args])


class TestCli:
    def test_create_list_show_delete(self, output_dir: Path, capsys: pytest.CaptureFixture) -> None:
        assert _run(output_dir, "create", "Direction", "North", "South", "--namespace", "Game.Movement") == EXIT_OK
        assert "created: Direction" in capsys.readouterr().out

        assert _run(output_dir, "list") == EXIT_OK
        assert capsys.readouterr().out.split() == ["Direction"]

        assert _run(output_dir, "show", "Direction") == EXIT_OK
        assert capsys.readouterr().out.split() == ["Game.Movement.Direction", "North", "South"]

        assert _run(output_dir, "delete", "Direction") == EXIT_OK
        assert not (output_dir / "Direction.cs").exists()

    def test_overwrite_is_reported(self, output_dir: Path, capsys: pytest.CaptureFixture) -> None:
        _run(output_dir, "create", "Color", "Red")
        capsys.readouterr()
        _run(output_dir, "create", "Color", "Blue")
        assert "overwritten: Color" in capsys.readouterr().out

    def test_invalid_input_exit_code(self, output_dir: Path) -> None:
        assert _run(output_dir, "create", "Color", "Red", "Red") == EXIT_INVALID
        assert not (output_dir / "Color.cs").exists()

    def test_no_empty_flag(self, output_dir: Path) -> None:
        assert main(["--dir", str(output_dir), "--no-empty", "create", "Nothing"]) == EXIT_INVALID

    def test_delete_missing_exit_code(self, output_dir: Path) -> None:
        assert _run(output_dir, "delete", "Missing") == EXIT_ERROR

    def test_custom_extension(self, output_dir: Path) -> None:
        assert main(["--dir", str(output_dir), "--extension", "txt", "create", "Color", "Red"]) == EXIT_OK
        assert (output_dir / "Color.txt").exists()

    def test_apply(self, output_dir: Path, tmp_path: Path) -> None:
        definitions = tmp_path / "enums.yaml"
        definitions.write_text("enums:\n  - {name: Team, values: [Red, Blue]}\n", encoding="utf-8")

        assert _run(output_dir, "apply", str(definitions)) == EXIT_OK
        assert (output_dir / "Team.cs").exists()

    def test_apply_bad_file(self, output_dir: Path, tmp_path: Path) -> None:
        definitions = tmp_path / "enums.yaml"
        definitions.write_text("enums: 3\n", encoding="utf-8")

        assert _run(output_dir, "apply", str(definitions)) == EXIT_ERROR

    def test_empty_extension_is_a_usage_error(self, output_dir: Path) -> None:
        with pytest.raises(SystemExit) as excinfo:
            _run(output_dir, "--extension", "", "create", "Color", "Red")
        assert excinfo.value.code == 2
        assert not output_dir.exists() or not any(output_dir.iterdir())
