"""Glob-based predicates for scanner result and recurse filters.

Patterns are matched against the entry name only (not the full path) using
fnmatch-style globs.
"""

import fnmatch
from collections.abc import Iterable

from fsref.filesystem.entry import FileEntry
from fsref.filesystem.scanner import EntryFilter

# Names starting with this prefix are hidden on POSIX systems
HIDDEN_PREFIX = "."


def _matches_any(name: str, patterns: tuple[str, ...]) -> bool:
    return any(fnmatch.fnmatch(name, pattern) for pattern in patterns)


def name_matches(patterns: Iterable[str]) -> EntryFilter:
    """Accept entries whose name matches at least one glob.

    An empty pattern list accepts everything.

    Args:
        patterns: Glob patterns such as ``*.py`` or ``test_*``.

    Returns:
        Predicate over FileEntry.
    """
    frozen = tuple(patterns)

    def predicate(entry: FileEntry) -> bool:
        if not frozen:
            return True
        return _matches_any(entry.name, frozen)

    return predicate


def name_excludes(patterns: Iterable[str]) -> EntryFilter:
    """Accept entries whose name matches none of the globs."""
    frozen = tuple(patterns)

    def predicate(entry: FileEntry) -> bool:
        return not _matches_any(entry.name, frozen)

    return predicate


def exclude_hidden() -> EntryFilter:
    """Reject entries whose name starts with a dot."""

    def predicate(entry: FileEntry) -> bool:
        return not entry.name.startswith(HIDDEN_PREFIX)

    return predicate


def all_of(*predicates: EntryFilter) -> EntryFilter:
    """Combine predicates; an entry must pass every one of them."""

    def predicate(entry: FileEntry) -> bool:
        return all(p(entry) for p in predicates)

    return predicate
