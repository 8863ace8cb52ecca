"""Normalized, string-backed filesystem path values.

A PathValue always uses ``/`` as its separator. Construction collapses
doubled separators, resolves ``..`` against the preceding segment where
possible and drops stray ``.`` segments, so two spellings of the same
relative location end up as the same string.
"""

from __future__ import annotations

import os
from functools import total_ordering

from fsref.core.errors import NoParentDirectoryError

SEPARATOR = "/"
ALT_SEPARATOR = "\\"
DOUBLE_SEPARATOR = "//"
DISK_SEPARATOR = ":"
CURRENT_SEGMENT = "."
PARENT_SEGMENT = ".."


def normalize(raw: str) -> str:
    """Normalize a raw path string.

    Args:
        raw: Path as typed by the user or returned by the OS.

    Returns:
        The path with ``/`` separators, no doubled separators, ``..``
        collapsed where a preceding named segment exists and ``.``
        segments removed (unless the path consists only of them).
    """
    path = raw.replace(ALT_SEPARATOR, SEPARATOR)
    while DOUBLE_SEPARATOR in path:
        path = path.replace(DOUBLE_SEPARATOR, SEPARATOR)

    segments = path.split(SEPARATOR)

    if CURRENT_SEGMENT in segments and not all(s == CURRENT_SEGMENT for s in segments):
        segments = [s for s in segments if s != CURRENT_SEGMENT]

    index = 1
    while index < len(segments):
        previous = segments[index - 1]
        if segments[index] == PARENT_SEGMENT and previous != PARENT_SEGMENT:
            if index - 1 == 0 and _is_root_segment(previous):
                # Nothing above the root: "/.." is "/"
                del segments[index]
            else:
                del segments[index - 1 : index + 1]
            index = 1
        else:
            index += 1

    result = SEPARATOR.join(segments)
    if not result and path.startswith(SEPARATOR):
        return SEPARATOR
    return result


def _is_root_segment(segment: str) -> bool:
    """Check whether a leading segment marks a filesystem root or drive."""
    return segment == "" or segment.endswith(DISK_SEPARATOR)


@total_ordering
class PathValue:
    """An immutable filesystem path identifier.

    Equality is semantic: two values are equal when their normalized strings
    match or when both resolve to the same absolute path. Ordering is plain
    lexicographic over the stored string and only exists for stable sorting.
    """

    __slots__ = ("_path",)

    def __init__(self, raw: str = "") -> None:
        self._path = normalize(raw)

    @classmethod
    def literal(cls, raw: str) -> PathValue:
        """Create a path without normalizing it.

        The caller is responsible for passing an already clean path; messy
        input (``.``/``..`` segments, backslashes) is stored as-is.
        """
        value = cls.__new__(cls)
        value._path = raw
        return value

    @classmethod
    def working_dir(cls) -> PathValue:
        """Get the working directory of the process."""
        return cls(os.getcwd())

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def path(self) -> str:
        """The normalized path string."""
        return self._path

    @property
    def segments(self) -> list[str]:
        """The ``/``-delimited segments of the path."""
        return self._path.split(SEPARATOR)

    @property
    def last_segment(self) -> str:
        """The final segment, or an empty string for an empty path."""
        return self._path.rsplit(SEPARATOR, 1)[-1]

    def is_absolute(self) -> bool:
        """Check if the path is anchored at a filesystem root or drive."""
        if self._path.startswith(SEPARATOR):
            return True
        return self.segments[0].endswith(DISK_SEPARATOR)

    def is_relative(self) -> bool:
        """Check if the path is relative to the working directory."""
        return not self.is_absolute()

    # =========================================================================
    # Derivations
    # =========================================================================

    def absolute(self) -> PathValue:
        """Return this path resolved against the working directory."""
        if self.is_absolute():
            return self
        working_dir = PathValue.working_dir()
        if not self._path:
            return working_dir
        return PathValue(working_dir.path + SEPARATOR + self._path)

    def relative(self) -> PathValue:
        """Return this path relative to the working directory when inside it."""
        if self.is_relative():
            return self
        working_dir = PathValue.working_dir().path
        if self._path == working_dir:
            return PathValue(CURRENT_SEGMENT)
        prefix = working_dir.rstrip(SEPARATOR) + SEPARATOR
        if self._path.startswith(prefix):
            return PathValue(self._path[len(prefix) :])
        return self

    def relative_path_to(self, other: PathValue) -> PathValue:
        """Build the ``..``-based path leading from this path to ``other``.

        This path is treated as a directory: every segment it has beyond the
        common prefix contributes one ``..``.

        Args:
            other: Target path.

        Returns:
            Relative path from this path to ``other``.
        """
        own = [s for s in self.absolute().segments if s]
        target = [s for s in other.absolute().segments if s]

        common = 0
        while common < min(len(own), len(target)) and own[common] == target[common]:
            common += 1

        steps = [PARENT_SEGMENT] * (len(own) - common) + target[common:]
        return PathValue(SEPARATOR.join(steps))

    def parent_directory(self) -> PathValue:
        """Get the directory containing this path.

        A trailing separator is ignored. A path ending in ``..`` gets another
        ``..`` appended. A relative path with a single segment is resolved
        against the working directory first.

        Returns:
            The parent directory path.

        Raises:
            NoParentDirectoryError: If the path is a filesystem root or drive.
        """
        path = self.trim_trailing_separator().path
        if path == SEPARATOR:
            msg = f'Could not get parent of "{self._path}", it is the filesystem root.'
            raise NoParentDirectoryError(msg)

        segments = path.split(SEPARATOR)
        if segments[-1] == PARENT_SEGMENT:
            return PathValue.literal(path + SEPARATOR + PARENT_SEGMENT)

        if len(segments) <= 1:
            if self.is_relative():
                return self.absolute().parent_directory()
            msg = f'Could not get parent of "{self._path}", as it only contains one segment.'
            raise NoParentDirectoryError(msg)

        parent = SEPARATOR.join(segments[:-1])
        return PathValue(parent or SEPARATOR)

    def child(self, name: str) -> PathValue:
        """Get a path one segment below this one."""
        if not self._path:
            return PathValue(name)
        return PathValue(self._path + SEPARATOR + name)

    def trim_trailing_separator(self) -> PathValue:
        """Remove trailing separators, keeping a bare root intact."""
        if self._path == SEPARATOR:
            return self
        return self.trim_end_matches(SEPARATOR)

    # =========================================================================
    # String passthroughs
    # =========================================================================

    def startswith(self, prefix: str) -> bool:
        return self._path.startswith(prefix)

    def endswith(self, suffix: str) -> bool:
        return self._path.endswith(suffix)

    def find(self, needle: str) -> int:
        return self._path.find(needle)

    def rfind(self, needle: str) -> int:
        return self._path.rfind(needle)

    def split(self, sep: str | None = None, maxsplit: int = -1) -> list[str]:
        return self._path.split(sep, maxsplit)

    def lower(self) -> PathValue:
        return PathValue(self._path.lower())

    def upper(self) -> PathValue:
        return PathValue(self._path.upper())

    def strip(self) -> PathValue:
        return PathValue(self._path.strip())

    def lstrip(self) -> PathValue:
        return PathValue(self._path.lstrip())

    def rstrip(self) -> PathValue:
        return PathValue(self._path.rstrip())

    def replace(self, old: str, new: str) -> PathValue:
        return PathValue(self._path.replace(old, new))

    def repeat(self, count: int) -> PathValue:
        return PathValue(self._path * count)

    def trim_end_matches(self, pattern: str) -> PathValue:
        """Remove every trailing repetition of ``pattern``."""
        path = self._path
        if pattern:
            while path.endswith(pattern):
                path = path[: -len(pattern)]
        return PathValue(path)

    def strip_prefix(self, prefix: str) -> PathValue | None:
        """Remove ``prefix`` once, or return None if the path lacks it."""
        if not self._path.startswith(prefix):
            return None
        return PathValue(self._path[len(prefix) :])

    def strip_suffix(self, suffix: str) -> PathValue | None:
        """Remove ``suffix`` once, or return None if the path lacks it."""
        if not self._path.endswith(suffix):
            return None
        return PathValue(self._path[: len(self._path) - len(suffix)])

    # =========================================================================
    # Dunder protocol
    # =========================================================================

    def __len__(self) -> int:
        return len(self._path)

    def __contains__(self, pattern: str) -> bool:
        return pattern in self._path

    def __add__(self, addition: str) -> PathValue:
        return PathValue(self._path + addition)

    def __truediv__(self, name: str) -> PathValue:
        return self.child(name)

    def __fspath__(self) -> str:
        return self._path

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"PathValue({self._path!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathValue):
            return NotImplemented
        if self._path == other._path:
            return True
        return self.absolute()._path == other.absolute()._path

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PathValue):
            return NotImplemented
        return self._path < other._path

    def __hash__(self) -> int:
        return hash(self.absolute()._path)
