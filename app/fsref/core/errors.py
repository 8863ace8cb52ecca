"""Exception hierarchy for fsref.

All errors raised by path, entry and scanner operations derive from
FsRefError so callers can catch the whole family in one place.
"""


class FsRefError(Exception):
    """Base exception for fsref errors."""


class NoParentDirectoryError(FsRefError):
    """Raised when a path has no parent directory to move up to."""


class EntryNotFoundError(FsRefError):
    """Raised when an operation requires an existing file or directory."""


class EntryKindError(FsRefError):
    """Raised when a file operation is attempted on a directory."""


class EntryExistsError(FsRefError):
    """Raised when creating a file or directory that already exists."""


class FileIOError(FsRefError):
    """Raised when a native filesystem call fails."""


class ScannerStartedError(FsRefError):
    """Raised when a scanner is reconfigured after iteration has started."""
