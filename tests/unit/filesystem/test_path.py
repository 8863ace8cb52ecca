"""Unit tests for path normalization and PathValue."""

import os
from pathlib import Path

import pytest
from fsref.core.errors import NoParentDirectoryError
from fsref.filesystem.path import PathValue, normalize


class TestNormalize:
    """Tests for the normalize function."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("a\\b", "a/b"),
            ("a//b", "a/b"),
            ("a\\\\b", "a/b"),
            ("./a/b/../../c", "c"),
            ("a/./b", "a/b"),
            ("/a/../b", "/b"),
            ("a/b/..", "a"),
            ("a/../..", ".."),
            ("../a", "../a"),
            ("../..", "../.."),
            ("/..", "/"),
            ("/a/..", "/"),
            ("C:\\Users\\..\\x", "C:/x"),
            ("C:/..", "C:"),
            (".", "."),
            ("", ""),
            ("a/b/", "a/b/"),
        ],
    )
    def test_normalize(self, raw: str, expected: str) -> None:
        """normalize produces the canonical spelling."""
        assert normalize(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        [
            "./a/b/../../c",
            "a\\.\\b\\..",
            "/x//y/./z/..",
            "../../a/./b",
            "C:\\dir\\..\\..\\other",
            "./.",
            "/",
            "a/b/../../..",
        ],
    )
    def test_normalize_is_idempotent(self, raw: str) -> None:
        """Normalizing an already normalized path changes nothing."""
        once = PathValue(raw).path
        assert normalize(once) == once


class TestPathValueProperties:
    """Tests for PathValue accessors and classification."""

    def test_segments_and_last_segment(self) -> None:
        """Segments split on the separator."""
        value = PathValue("a/b/c.txt")
        assert value.segments == ["a", "b", "c.txt"]
        assert value.last_segment == "c.txt"

    def test_last_segment_of_empty_path(self) -> None:
        """An empty path has an empty last segment."""
        assert PathValue().last_segment == ""

    def test_literal_skips_normalization(self) -> None:
        """literal stores the raw string unchanged."""
        assert PathValue.literal("a/./b").path == "a/./b"

    @pytest.mark.parametrize(
        ("raw", "absolute"),
        [
            ("/usr/bin", True),
            ("/", True),
            ("C:/Windows", True),
            ("D:", True),
            ("relative/path", False),
            ("..", False),
            ("", False),
        ],
    )
    def test_is_absolute(self, raw: str, absolute: bool) -> None:
        """Absolute paths start at a root or a drive."""
        value = PathValue(raw)
        assert value.is_absolute() is absolute
        assert value.is_relative() is not absolute


class TestPathValueResolution:
    """Tests for absolute, relative and relative_path_to."""

    def test_absolute_of_empty_path_is_working_dir(self, in_dir: Path) -> None:
        """The empty path resolves to the working directory."""
        assert PathValue().absolute().path == os.getcwd()

    def test_absolute_joins_working_dir(self, in_dir: Path) -> None:
        """Relative paths are resolved against the working directory."""
        assert PathValue("a/b").absolute().path == f"{os.getcwd()}/a/b"

    def test_absolute_keeps_absolute_path(self) -> None:
        """Absolute paths are returned unchanged."""
        assert PathValue("/srv/data").absolute().path == "/srv/data"

    def test_relative_inside_working_dir(self, in_dir: Path) -> None:
        """Paths below the working directory lose the prefix."""
        assert PathValue(f"{os.getcwd()}/x/y").relative().path == "x/y"

    def test_relative_of_working_dir_is_dot(self, in_dir: Path) -> None:
        """The working directory itself becomes '.'."""
        assert PathValue(os.getcwd()).relative().path == "."

    def test_relative_outside_working_dir_unchanged(self, in_dir: Path) -> None:
        """Paths outside the working directory stay absolute."""
        assert PathValue("/elsewhere/file").relative().path == "/elsewhere/file"

    def test_relative_path_to_sibling(self) -> None:
        """relative_path_to steps up out of the own directory first."""
        result = PathValue("/a/b").relative_path_to(PathValue("/a/c/d"))
        assert result.path == "../c/d"

    def test_relative_path_to_child(self) -> None:
        """A descendant is reached without any '..'."""
        assert PathValue("/a").relative_path_to(PathValue("/a/b/c")).path == "b/c"

    def test_relative_path_to_self_is_empty(self) -> None:
        """The path to itself is empty."""
        assert PathValue("/a/b").relative_path_to(PathValue("/a/b")).path == ""


class TestParentDirectory:
    """Tests for PathValue.parent_directory."""

    def test_parent_of_nested_path(self) -> None:
        """The last segment is removed."""
        assert PathValue("a/b/c").parent_directory().path == "a/b"

    def test_parent_ignores_trailing_separator(self) -> None:
        """A trailing separator does not count as a segment."""
        assert PathValue("a/b/").parent_directory().path == "a"

    def test_parent_of_top_level_absolute(self) -> None:
        """The parent of a top-level directory is the root."""
        assert PathValue("/a").parent_directory().path == "/"

    def test_parent_of_parent_segment(self) -> None:
        """A path ending in '..' gets another '..'."""
        assert PathValue("../..").parent_directory().path == "../../.."

    def test_parent_of_single_relative_segment(self, in_dir: Path) -> None:
        """A bare relative name resolves against the working directory."""
        assert PathValue("a").parent_directory() == PathValue(os.getcwd())

    def test_root_has_no_parent(self) -> None:
        """The filesystem root raises."""
        with pytest.raises(NoParentDirectoryError):
            PathValue("/").parent_directory()

    def test_drive_has_no_parent(self) -> None:
        """A bare drive raises."""
        with pytest.raises(NoParentDirectoryError):
            PathValue("C:").parent_directory()


class TestDerivations:
    """Tests for child, trimming and string helpers."""

    def test_child(self) -> None:
        """child appends one segment."""
        assert PathValue("a").child("b").path == "a/b"
        assert PathValue().child("b").path == "b"
        assert PathValue("/").child("etc").path == "/etc"

    def test_truediv(self) -> None:
        """The / operator is child."""
        assert (PathValue("a") / "b").path == "a/b"

    def test_trim_trailing_separator(self) -> None:
        """Trailing separators go, a bare root stays."""
        assert PathValue("a/b/").trim_trailing_separator().path == "a/b"
        assert PathValue("/").trim_trailing_separator().path == "/"

    def test_trim_end_matches(self) -> None:
        """Every trailing repetition is removed."""
        assert PathValue("file.bak.bak").trim_end_matches(".bak").path == "file"

    def test_strip_prefix_and_suffix(self) -> None:
        """Stripping returns None when the affix is absent."""
        value = PathValue("src/app.py")
        assert value.strip_prefix("src/") == PathValue("app.py")
        assert value.strip_prefix("lib/") is None
        assert value.strip_suffix(".py") == PathValue("src/app")
        assert value.strip_suffix(".rs") is None

    def test_string_passthroughs(self) -> None:
        """String helpers act on the stored path."""
        value = PathValue("Docs/Read.ME")
        assert value.startswith("Docs")
        assert value.endswith(".ME")
        assert value.find("/") == 4
        assert value.rfind(".") == 9
        assert value.split("/") == ["Docs", "Read.ME"]
        assert value.lower().path == "docs/read.me"
        assert value.upper().path == "DOCS/READ.ME"
        assert value.replace("Docs", "doc").path == "doc/Read.ME"
        assert PathValue("  a  ").strip().path == "a"
        assert PathValue("ab").repeat(2).path == "abab"

    def test_sequence_protocol(self) -> None:
        """len, in and + work on the path string."""
        value = PathValue("a/x/b")
        assert len(value) == 5
        assert "x/" in value
        assert (PathValue("notes") + ".txt").path == "notes.txt"

    def test_fspath_and_str(self) -> None:
        """PathValue is usable wherever a path string is expected."""
        value = PathValue("a\\b")
        assert os.fspath(value) == "a/b"
        assert str(value) == "a/b"
        assert repr(value) == "PathValue('a/b')"


class TestEqualityAndOrdering:
    """Tests for semantic equality, hashing and ordering."""

    def test_equal_spellings(self) -> None:
        """Different spellings of one path are equal."""
        assert PathValue("a/./b") == PathValue("a\\b")

    def test_relative_equals_absolute(self, in_dir: Path) -> None:
        """A relative path equals its absolute form."""
        relative = PathValue("a")
        absolute = PathValue(f"{os.getcwd()}/a")
        assert relative == absolute
        assert hash(relative) == hash(absolute)
        assert len({relative, absolute}) == 1

    def test_different_paths_not_equal(self) -> None:
        """Different locations are not equal."""
        assert PathValue("a") != PathValue("b")

    def test_not_equal_to_plain_string(self) -> None:
        """Comparison with other types is not supported."""
        assert PathValue("a") != "a"

    def test_sorting(self) -> None:
        """Ordering is lexicographic over the path."""
        values = [PathValue("b"), PathValue("a/z"), PathValue("a")]
        assert [v.path for v in sorted(values)] == ["a", "a/z", "b"]
