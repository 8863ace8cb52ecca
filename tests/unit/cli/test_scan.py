"""Unit tests for the scan command."""

import json
from pathlib import Path

from fsref.cli.main import app
from fsref.core.profiles import ProfileStore, ScanProfile, save_profiles
from typer.testing import CliRunner

runner = CliRunner()


def _scan_json(*args: str) -> list[dict[str, str]]:
    """Run fsref scan with JSON output and parse the result."""
    result = runner.invoke(app, ["scan", *args, "--format", "json"])
    assert result.exit_code == 0, result.output
    return json.loads(result.stdout)


class TestScanSelection:
    """Tests for scan flags."""

    def test_default_lists_files_and_dirs(self, scan_tree: Path) -> None:
        """Without --files/--dirs both kinds are listed, without recursion."""
        data = _scan_json(str(scan_tree))
        assert [(item["name"], item["kind"]) for item in data] == [
            ("file1.txt", "file"),
            ("subdir1", "dir"),
            ("subdir2", "dir"),
        ]

    def test_files_recursive(self, scan_tree: Path) -> None:
        """--files --recurse lists every file."""
        data = _scan_json(str(scan_tree), "--files", "--recurse")
        assert {item["name"] for item in data} == {
            "file1.txt",
            "file2.txt",
            "file3.txt",
            "file4.txt",
        }
        assert all(item["kind"] == "file" for item in data)

    def test_dirs_only(self, scan_tree: Path) -> None:
        """--dirs lists only directories."""
        data = _scan_json(str(scan_tree), "--dirs", "-r")
        assert {item["name"] for item in data} == {"subdir1", "subsubdir1", "subdir2"}

    def test_self(self, scan_tree: Path) -> None:
        """--self puts the root first."""
        data = _scan_json(str(scan_tree), "--self", "--dirs")
        assert data[0]["path"] == str(scan_tree)
        assert len(data) == 3

    def test_json_paths_are_absolute(self, scan_tree: Path) -> None:
        """JSON output carries full paths."""
        data = _scan_json(str(scan_tree), "--files")
        assert data == [
            {"path": f"{scan_tree}/file1.txt", "name": "file1.txt", "kind": "file"},
        ]


class TestScanFilters:
    """Tests for glob options."""

    def test_pattern(self, scan_tree: Path) -> None:
        """--pattern keeps matching names only."""
        data = _scan_json(str(scan_tree), "-r", "-p", "file[12].txt")
        assert {item["name"] for item in data} == {"file1.txt", "file2.txt"}

    def test_exclude(self, scan_tree: Path) -> None:
        """--exclude drops matching names (repeatable)."""
        data = _scan_json(str(scan_tree), "--files", "-r", "-x", "file1*", "-x", "file4*")
        assert {item["name"] for item in data} == {"file2.txt", "file3.txt"}

    def test_exclude_dir(self, scan_tree: Path) -> None:
        """--exclude-dir prunes recursion but keeps the directory itself."""
        data = _scan_json(str(scan_tree), "-r", "--exclude-dir", "subdir1")
        assert {item["name"] for item in data} == {
            "file1.txt",
            "subdir1",
            "subdir2",
            "file4.txt",
        }

    def test_hidden(self, scan_tree: Path) -> None:
        """Dot names appear only with --hidden."""
        (scan_tree / ".env").write_text("x")

        without = _scan_json(str(scan_tree), "--files")
        with_hidden = _scan_json(str(scan_tree), "--files", "--hidden")

        assert ".env" not in {item["name"] for item in without}
        assert ".env" in {item["name"] for item in with_hidden}

    def test_limit(self, scan_tree: Path) -> None:
        """--limit stops the scan early."""
        data = _scan_json(str(scan_tree), "--files", "-r", "--limit", "2")
        assert [item["name"] for item in data] == ["file1.txt", "file2.txt"]


class TestScanProfiles:
    """Tests for --profile."""

    def test_profile_applies_settings(self, scan_tree: Path, config_home: Path) -> None:
        """A saved profile configures the scan."""
        save_profiles(
            ProfileStore(
                profiles={"txt": ScanProfile(include_files=True, recurse=True, patterns=["*.txt"])}
            )
        )

        data = _scan_json(str(scan_tree), "--profile", "txt")

        assert len(data) == 4

    def test_flags_extend_profile(self, scan_tree: Path, config_home: Path) -> None:
        """Command line flags are merged onto the profile."""
        save_profiles(ProfileStore(profiles={"files": ScanProfile(include_files=True)}))

        data = _scan_json(str(scan_tree), "--profile", "files", "--recurse", "-x", "file3*")

        assert {item["name"] for item in data} == {"file1.txt", "file2.txt", "file4.txt"}

    def test_unknown_profile(self, scan_tree: Path, config_home: Path) -> None:
        """An unknown profile exits with code 1."""
        result = runner.invoke(app, ["scan", str(scan_tree), "--profile", "nope"])

        assert result.exit_code == 1
        assert "Profile not found: nope" in result.output


class TestScanOutput:
    """Tests for table output and errors."""

    def test_table_output(self, scan_tree: Path) -> None:
        """The table shows paths relative to the root."""
        result = runner.invoke(app, ["scan", str(scan_tree), "--files", "-r"])

        assert result.exit_code == 0
        assert "subdir1/file2.txt" in result.stdout
        assert "subdir1/subsubdir1/file3.txt" in result.stdout
        assert "Found 4 entries" in result.stdout

    def test_table_self_only(self, scan_tree: Path) -> None:
        """Only the root is listed when every child is excluded."""
        result = runner.invoke(app, ["scan", str(scan_tree), "--self", "--dirs", "-x", "sub*"])

        assert result.exit_code == 0
        assert "Found 1 entries" in result.stdout

    def test_limit_note(self, scan_tree: Path) -> None:
        """Hitting the limit is reported."""
        result = runner.invoke(app, ["scan", str(scan_tree), "-l", "1"])

        assert result.exit_code == 0
        assert "stopped at 1" in result.stdout

    def test_empty_directory(self, tmp_path: Path) -> None:
        """An empty result prints a message."""
        (tmp_path / "empty").mkdir()

        result = runner.invoke(app, ["scan", str(tmp_path / "empty")])

        assert result.exit_code == 0
        assert "No matching entries found." in result.stdout

    def test_missing_root(self, tmp_path: Path) -> None:
        """A root that does not exist exits with code 1."""
        result = runner.invoke(app, ["scan", str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "Path does not exist" in result.output

    def test_file_root(self, scan_tree: Path) -> None:
        """A file root has no entries."""
        data = _scan_json(str(scan_tree / "file1.txt"), "-r")
        assert data == []
