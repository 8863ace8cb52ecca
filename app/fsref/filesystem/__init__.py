"""Path values, file references and the directory scanner.

This package provides the normalized PathValue type, the FileEntry
reference built on it, the lazy DirectoryScanner and glob-based filters
for configuring scans.
"""

from fsref.filesystem.entry import FileEntry
from fsref.filesystem.filters import all_of, exclude_hidden, name_excludes, name_matches
from fsref.filesystem.path import SEPARATOR, PathValue, normalize
from fsref.filesystem.scanner import DirectoryScanner, EntryFilter

__all__ = [
    "SEPARATOR",
    "DirectoryScanner",
    "EntryFilter",
    "FileEntry",
    "PathValue",
    "all_of",
    "exclude_hidden",
    "name_excludes",
    "name_matches",
    "normalize",
]
