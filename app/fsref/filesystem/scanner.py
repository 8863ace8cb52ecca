"""Lazy, filtered directory scanner.

DirectoryScanner walks a directory tree one entry at a time. Each directory
on the current path from the root gets a frame holding its cached listing
and two cursors: one for the results phase (entries of this directory that
are yielded) and one for the descend phase (subdirectories to walk into).
Nothing below a directory is listed until the scanner actually enters it.

Example:
    >>> scanner = DirectoryScanner("src").include_files().recurse()
    >>> python_files = [e for e in scanner if e.extension == "py"]
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from fsref.core.errors import ScannerStartedError
from fsref.filesystem.entry import FileEntry
from fsref.filesystem.path import PathValue

logger = logging.getLogger(__name__)

EntryFilter = Callable[[FileEntry], bool]


def _accept_all(_entry: FileEntry) -> bool:
    return True


def _reject_all(_entry: FileEntry) -> bool:
    return False


@dataclass(slots=True)
class _Frame:
    """One open directory on the traversal stack.

    Attributes:
        directory: The directory this frame scans.
        children: Cached listing, None until the frame is first visited.
        child_is_dir: Classification of each child, aligned with children.
        result_index: Next child to consider as a result.
        descend_index: Next child to consider for recursion.
    """

    directory: FileEntry
    children: tuple[FileEntry, ...] | None = None
    child_is_dir: tuple[bool, ...] = field(default_factory=tuple)
    result_index: int = 0
    descend_index: int = 0


class DirectoryScanner:
    """Lazy, forward-only iterator over the entries below a root directory.

    The scanner is configured with chainable methods and then consumed with
    ``next()``, a ``for`` loop, :meth:`next_entry` or :meth:`collect`. Once
    the first entry has been requested the configuration is frozen, and a
    consumed scanner cannot be rewound; build a new one to scan again.

    Within a directory, matching entries are yielded in name order before
    any subdirectory is entered; subdirectories are then walked depth-first
    in the same order.

    Args:
        root: Directory to scan. Made absolute, trailing separators trimmed.
    """

    def __init__(self, root: FileEntry | PathValue | str) -> None:
        root_value = FileEntry(root).path_value.absolute().trim_trailing_separator()
        self._root = FileEntry(root_value)

        self._include_self = False
        self._include_files = False
        self._include_dirs = False
        self._result_filter: EntryFilter = _accept_all
        self._recurse_filter: EntryFilter = _reject_all

        # Traversal cursor
        self._started = False
        self._stack: list[_Frame] = []
        self._listing_cache: dict[str, tuple[FileEntry, ...]] = {}

    @property
    def root(self) -> FileEntry:
        """The absolute root entry of the scan."""
        return self._root

    # =========================================================================
    # Configuration
    # =========================================================================

    def include_self(self) -> DirectoryScanner:
        """Yield the root itself (once, first) when it exists and passes the filter."""
        self._ensure_configurable()
        self._include_self = True
        return self

    def include_files(self) -> DirectoryScanner:
        """Yield files."""
        self._ensure_configurable()
        self._include_files = True
        return self

    def include_dirs(self) -> DirectoryScanner:
        """Yield directories."""
        self._ensure_configurable()
        self._include_dirs = True
        return self

    def filter(self, predicate: EntryFilter) -> DirectoryScanner:
        """Replace the result filter.

        Entries rejected here are not yielded, but rejected directories are
        still walked into when the recurse filter accepts them.
        """
        self._ensure_configurable()
        self._result_filter = predicate
        return self

    def recurse(self) -> DirectoryScanner:
        """Walk into every subdirectory."""
        return self.recurse_filter(_accept_all)

    def recurse_filter(self, predicate: EntryFilter) -> DirectoryScanner:
        """Walk into the subdirectories accepted by ``predicate``."""
        self._ensure_configurable()
        self._recurse_filter = predicate
        return self

    def _ensure_configurable(self) -> None:
        if self._started:
            msg = f"Scanner on {self._root.path} has started and can no longer be configured."
            raise ScannerStartedError(msg)

    # =========================================================================
    # Consumption
    # =========================================================================

    def __iter__(self) -> Iterator[FileEntry]:
        return self

    def __next__(self) -> FileEntry:
        entry = self._advance()
        if entry is None:
            raise StopIteration
        return entry

    def next_entry(self) -> FileEntry | None:
        """Get the next matching entry, or None when the scan is exhausted."""
        return self._advance()

    def collect(self) -> list[FileEntry]:
        """Drain the remaining entries into a list."""
        return list(self)

    # =========================================================================
    # Traversal
    # =========================================================================

    def _advance(self) -> FileEntry | None:
        """Move the cursor to the next matching entry.

        Loops over the top frame: yield its next result, otherwise push the
        next subdirectory to walk into, otherwise pop the frame and resume
        the parent where it stopped.
        """
        if not self._started:
            self._started = True
            self._stack.append(_Frame(directory=self._root))
            if self._include_self and self._root.exists() and self._result_filter(self._root):
                return self._root

        while self._stack:
            frame = self._stack[-1]
            if frame.children is None:
                self._load_frame(frame)

            entry = self._next_result(frame)
            if entry is not None:
                return entry

            subdirectory = self._next_subdirectory(frame)
            if subdirectory is not None:
                self._stack.append(_Frame(directory=subdirectory))
                continue

            self._stack.pop()

        return None

    def _load_frame(self, frame: _Frame) -> None:
        children = self._list_directory(frame.directory)
        frame.children = children
        frame.child_is_dir = tuple(child.is_dir() for child in children)

    def _next_result(self, frame: _Frame) -> FileEntry | None:
        children = frame.children or ()
        while frame.result_index < len(children):
            index = frame.result_index
            frame.result_index += 1

            child = children[index]
            enabled = self._include_dirs if frame.child_is_dir[index] else self._include_files
            if enabled and self._result_filter(child):
                return child
        return None

    def _next_subdirectory(self, frame: _Frame) -> FileEntry | None:
        children = frame.children or ()
        while frame.descend_index < len(children):
            index = frame.descend_index
            frame.descend_index += 1

            child = children[index]
            if frame.child_is_dir[index] and self._recurse_filter(child):
                return child
        return None

    def _list_directory(self, directory: FileEntry) -> tuple[FileEntry, ...]:
        """List a directory once per scan.

        A directory that cannot be read (vanished, permission denied, or not
        a directory at all) is treated as empty.
        """
        key = directory.path_value.absolute().path
        cached = self._listing_cache.get(key)
        if cached is not None:
            return cached

        children: tuple[FileEntry, ...] = ()
        if directory.is_dir():
            try:
                children = tuple(directory.list_children())
            except OSError as e:
                logger.debug("Cannot list %s, treating it as empty: %s", directory.path, e)
        else:
            logger.debug("Not a directory, nothing to list: %s", directory.path)

        self._listing_cache[key] = children
        return children

    def __repr__(self) -> str:
        return f"DirectoryScanner({self._root.path!r})"
