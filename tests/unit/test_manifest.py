"""Tests for gridlogic.toml loading and puzzle discovery."""

from pathlib import Path

import pytest

from gridlogic.core.errors import ManifestError
from gridlogic.core.fileset import discover_puzzle_files
from gridlogic.core.manifest import ProjectManifest, load_manifest


def write_manifest(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "gridlogic.toml"
    path.write_text(text)
    return path


class TestLoadManifest:
    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        mf = load_manifest(tmp_path / "gridlogic.toml")
        assert mf == ProjectManifest()
        assert mf.puzzle_paths == ["."]
        assert mf.solver.max_iterations == 0
        assert mf.report.format == "text"

    def test_full_manifest(self, tmp_path: Path) -> None:
        path = write_manifest(
            tmp_path,
            """
[project]
name = "party"
puzzles = ["puzzles", "extra/one.grid"]

[solver]
max_iterations = 1000

[report]
format = "json"

[report.field_order]
Guests = ["name", "color"]
""",
        )
        mf = load_manifest(path)
        assert mf.name == "party"
        assert mf.puzzle_paths == ["puzzles", "extra/one.grid"]
        assert mf.solver.max_iterations == 1000
        assert mf.report.format == "json"
        assert mf.report.field_order == {"Guests": ["name", "color"]}

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = write_manifest(tmp_path, "[project\nname = 1\n")
        with pytest.raises(ManifestError, match="Invalid TOML"):
            load_manifest(path)

    def test_puzzles_must_be_list_of_paths(self, tmp_path: Path) -> None:
        path = write_manifest(tmp_path, '[project]\npuzzles = "puzzles/"\n')
        with pytest.raises(ManifestError, match="project.puzzles"):
            load_manifest(path)

    def test_negative_max_iterations(self, tmp_path: Path) -> None:
        path = write_manifest(tmp_path, "[solver]\nmax_iterations = -1\n")
        with pytest.raises(ManifestError, match="max_iterations"):
            load_manifest(path)

    def test_unknown_format(self, tmp_path: Path) -> None:
        path = write_manifest(tmp_path, '[report]\nformat = "yaml"\n')
        with pytest.raises(ManifestError, match="report.format"):
            load_manifest(path)

    def test_field_order_must_be_list_of_names(self, tmp_path: Path) -> None:
        path = write_manifest(tmp_path, '[report.field_order]\nGuests = "name"\n')
        with pytest.raises(ManifestError, match="field_order.Guests"):
            load_manifest(path)


class TestDiscoverPuzzleFiles:
    def test_directories_and_files(self, tmp_path: Path) -> None:
        (tmp_path / "puzzles" / "nested").mkdir(parents=True)
        (tmp_path / "puzzles" / "a.grid").write_text("")
        (tmp_path / "puzzles" / "nested" / "b.grid").write_text("")
        (tmp_path / "puzzles" / "notes.txt").write_text("")
        (tmp_path / "single.grid").write_text("")

        mf = ProjectManifest(puzzle_paths=["puzzles", "single.grid", "missing"])
        files = discover_puzzle_files(tmp_path, mf)

        names = [f.relative_to(tmp_path.resolve()).as_posix() for f in files]
        assert names == ["puzzles/a.grid", "puzzles/nested/b.grid", "single.grid"]

    def test_duplicates_collapsed(self, tmp_path: Path) -> None:
        (tmp_path / "a.grid").write_text("")
        mf = ProjectManifest(puzzle_paths=[".", "a.grid"])
        assert len(discover_puzzle_files(tmp_path, mf)) == 1

    def test_example_project(self, examples_dir: Path) -> None:
        mf = load_manifest(examples_dir / "gridlogic.toml")
        files = discover_puzzle_files(examples_dir, mf)
        assert [f.name for f in files] == ["guests.grid", "shifts.grid"]
