"""File and directory references.

FileEntry wraps a PathValue and adds everything that needs the operating
system: existence checks, file/directory classification, directory listing
and thin byte/text I/O wrappers.
"""

from __future__ import annotations

import logging
import os
import shutil
import stat
from pathlib import Path
from typing import TYPE_CHECKING

from fsref.core.errors import (
    EntryExistsError,
    EntryKindError,
    EntryNotFoundError,
    FileIOError,
)
from fsref.filesystem.path import CURRENT_SEGMENT, SEPARATOR, PathValue

if TYPE_CHECKING:
    from fsref.filesystem.scanner import DirectoryScanner

logger = logging.getLogger(__name__)

# Extension delimiter inside the last path segment
_EXTENSION_SEPARATOR = "."


class FileEntry:
    """A reference to a file or directory, existing or not.

    Equality and hashing follow the held PathValue, so two entries that
    resolve to the same absolute location are interchangeable.
    """

    __slots__ = ("_path_value",)

    def __init__(self, path: str | os.PathLike[str] | PathValue | FileEntry) -> None:
        if isinstance(path, FileEntry):
            self._path_value: PathValue = path._path_value
        elif isinstance(path, PathValue):
            self._path_value = path
        else:
            self._path_value = PathValue(os.fspath(path))

    @classmethod
    def literal(cls, raw: str) -> FileEntry:
        """Create an entry from an already clean path without normalizing it."""
        return cls(PathValue.literal(raw))

    @classmethod
    def working_dir(cls) -> FileEntry:
        """Get an entry for the working directory of the process."""
        return cls(PathValue.working_dir())

    # =========================================================================
    # Path properties
    # =========================================================================

    @property
    def path(self) -> str:
        """The normalized path string."""
        return self._path_value.path

    @property
    def path_value(self) -> PathValue:
        """The underlying PathValue."""
        return self._path_value

    @property
    def name(self) -> str:
        """The name of the file or directory (last path segment)."""
        return self._path_value.last_segment

    @property
    def extension(self) -> str | None:
        """The text after the final ``.`` of the name, or None without a ``.``."""
        name = self.name
        if _EXTENSION_SEPARATOR not in name:
            return None
        return name.rsplit(_EXTENSION_SEPARATOR, 1)[-1]

    @property
    def name_without_extension(self) -> str:
        """The name with its extension (and the ``.`` before it) removed."""
        extension = self.extension
        if extension is None:
            return self.name
        return self.name[: len(self.name) - len(extension) - 1]

    def absolute(self) -> FileEntry:
        return FileEntry(self._path_value.absolute())

    def relative(self) -> FileEntry:
        return FileEntry(self._path_value.relative())

    def parent_directory(self) -> FileEntry:
        """Get the directory containing this entry.

        Raises:
            NoParentDirectoryError: If the entry is a filesystem root.
        """
        return FileEntry(self._path_value.parent_directory())

    def child(self, name: str) -> FileEntry:
        """Get the entry named ``name`` inside this directory."""
        return FileEntry(self._path_value.child(name))

    # =========================================================================
    # Filesystem state
    # =========================================================================

    def exists(self) -> bool:
        """Check if the path is present and its metadata can be read."""
        try:
            os.stat(self.path)
        except (OSError, ValueError):
            return False
        return True

    def is_dir(self) -> bool:
        """Check if this entry is a directory.

        Existing paths are classified by the OS. A path that does not exist
        is assumed to be a directory unless its name has an extension.
        """
        try:
            mode = os.stat(self.path).st_mode
        except (OSError, ValueError):
            return not self.extension
        return stat.S_ISDIR(mode)

    def is_file(self) -> bool:
        """Check if this entry is a file (anything that is not a directory)."""
        return not self.is_dir()

    def is_accessible(self) -> bool:
        """Check if the entry can be opened for reading."""
        if self.is_dir():
            return True
        try:
            with open(self.path, "rb"):
                return True
        except OSError:
            return False

    def list_children(self) -> list[FileEntry]:
        """List the immediate children of this directory, sorted by name.

        Returns:
            Child entries in name order.

        Raises:
            OSError: If the directory cannot be read.
        """
        with os.scandir(self.path) as iterator:
            names = sorted(item.name for item in iterator)
        return [self._listed_child(name) for name in names]

    def _listed_child(self, name: str) -> FileEntry:
        """Join a name returned by the OS without reinterpreting its characters."""
        if not self.path or all(s == CURRENT_SEGMENT for s in self.path.split(SEPARATOR)):
            return FileEntry.literal(name)
        return FileEntry.literal(self.path.rstrip(SEPARATOR) + SEPARATOR + name)

    # =========================================================================
    # Reading
    # =========================================================================

    def read_text(self, encoding: str = "utf-8") -> str:
        """Read the whole file as text.

        Raises:
            EntryKindError: If the entry is a directory.
            EntryNotFoundError: If the file does not exist.
            FileIOError: If the file cannot be read.
        """
        self._require_existing_file("read")
        try:
            return Path(self.path).read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise FileIOError(f'Could not read file "{self.path}": {e}') from e

    def read_bytes(self) -> bytes:
        """Read the whole file as bytes."""
        self._require_existing_file("read")
        try:
            return Path(self.path).read_bytes()
        except OSError as e:
            raise FileIOError(f'Could not read file "{self.path}": {e}') from e

    def read_range(self, start: int, end: int) -> bytes:
        """Read the bytes in ``[start, end)``.

        Raises:
            FileIOError: If the file is shorter than ``end`` or cannot be read.
        """
        self._require_existing_file("read")
        length = end - start
        try:
            with open(self.path, "rb") as f:
                f.seek(start)
                data = f.read(length)
        except OSError as e:
            raise FileIOError(f'Could not read file "{self.path}": {e}') from e
        if len(data) != length:
            msg = f'Could not read {length} bytes at {start} from "{self.path}", got {len(data)}'
            raise FileIOError(msg)
        return data

    # =========================================================================
    # Writing
    # =========================================================================

    def create(self) -> None:
        """Create the file or directory, including missing ancestors.

        Raises:
            EntryExistsError: If the path already exists.
            FileIOError: If creation fails.
        """
        is_dir = self.is_dir()
        if self.exists():
            kind = "dir" if is_dir else "file"
            raise EntryExistsError(f'Could not create {kind} "{self.path}", it already exists.')

        self.guarantee_parent_directory()
        try:
            if is_dir:
                os.mkdir(self.path)
            else:
                Path(self.path).touch(exist_ok=False)
        except OSError as e:
            raise FileIOError(f'Could not create "{self.path}": {e}') from e
        logger.debug("Created %s", self.path)

    def guarantee_exists(self) -> None:
        """Create the file or directory if it does not exist yet."""
        if not self.exists():
            self.create()

    def guarantee_parent_directory(self) -> None:
        """Create every missing ancestor directory of this entry.

        Raises:
            NoParentDirectoryError: If the entry is a filesystem root.
            FileIOError: If a directory cannot be created.
        """
        parent = self.parent_directory()
        if parent.exists():
            return
        try:
            os.makedirs(parent.path, exist_ok=True)
        except OSError as e:
            raise FileIOError(f'Could not create directory "{parent.path}": {e}') from e

    def write_text(self, text: str, encoding: str = "utf-8") -> None:
        """Replace the file contents with ``text``."""
        self.write_bytes(text.encode(encoding))

    def write_bytes(self, data: bytes) -> None:
        """Replace the file contents with ``data``, creating the file if needed.

        Raises:
            EntryKindError: If the entry is a directory.
            FileIOError: If the file cannot be written.
        """
        self._require_file("write to")
        self.guarantee_parent_directory()
        try:
            Path(self.path).write_bytes(data)
        except OSError as e:
            raise FileIOError(f'Could not write to file "{self.path}": {e}') from e

    def write_bytes_at(self, start: int, data: bytes) -> None:
        """Overwrite bytes of an existing file starting at offset ``start``."""
        self._require_existing_file("write to")
        try:
            with open(self.path, "r+b") as f:
                f.seek(start)
                f.write(data)
        except OSError as e:
            raise FileIOError(f'Could not write to file "{self.path}": {e}') from e

    def append_bytes(self, data: bytes) -> None:
        """Append ``data`` to the end of an existing file."""
        self._require_existing_file("append to")
        try:
            with open(self.path, "ab") as f:
                f.write(data)
        except OSError as e:
            raise FileIOError(f'Could not append to file "{self.path}": {e}') from e

    def copy_to(self, target: FileEntry) -> int:
        """Copy this file to ``target``, creating its parent directories.

        Returns:
            Number of bytes written.
        """
        self._require_existing_file("copy")
        target.guarantee_parent_directory()
        try:
            shutil.copyfile(self.path, target.path)
            return os.path.getsize(target.path)
        except OSError as e:
            raise FileIOError(f'Could not copy "{self.path}" to "{target.path}": {e}') from e

    def delete(self) -> None:
        """Delete the file, or the directory with everything inside it.

        Raises:
            EntryNotFoundError: If the entry does not exist.
            FileIOError: If deletion fails.
        """
        if not self.exists():
            raise EntryNotFoundError(f'Could not delete "{self.path}", it does not exist.')
        try:
            if self.is_dir():
                shutil.rmtree(self.path)
            else:
                os.remove(self.path)
        except OSError as e:
            raise FileIOError(f'Could not delete "{self.path}": {e}') from e
        logger.debug("Deleted %s", self.path)

    def _require_file(self, action: str) -> None:
        if self.is_dir():
            msg = f'Could not {action} dir "{self.path}". Only able to {action} files.'
            raise EntryKindError(msg)

    def _require_existing_file(self, action: str) -> None:
        self._require_file(action)
        if not self.exists():
            raise EntryNotFoundError(f'Could not {action} file "{self.path}". File does not exist.')

    # =========================================================================
    # Scanning shortcuts
    # =========================================================================

    def scanner(self) -> DirectoryScanner:
        """Create an unconfigured scanner rooted at this entry."""
        from fsref.filesystem.scanner import DirectoryScanner

        return DirectoryScanner(self)

    def list_files(self, recurse: bool = False) -> list[FileEntry]:
        """List the files in this directory, optionally in all subdirectories."""
        scanner = self.scanner().include_files()
        if recurse:
            scanner.recurse()
        return scanner.collect()

    def list_dirs(self, recurse: bool = False) -> list[FileEntry]:
        """List the directories in this directory, optionally recursively."""
        scanner = self.scanner().include_dirs()
        if recurse:
            scanner.recurse()
        return scanner.collect()

    # =========================================================================
    # Dunder protocol
    # =========================================================================

    def __fspath__(self) -> str:
        return self.path

    def __str__(self) -> str:
        return self.path

    def __repr__(self) -> str:
        return f"FileEntry({self.path!r})"

    def __truediv__(self, name: str) -> FileEntry:
        return self.child(name)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FileEntry):
            return self._path_value == other._path_value
        if isinstance(other, PathValue):
            return self._path_value == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FileEntry):
            return NotImplemented
        return self._path_value < other._path_value

    def __hash__(self) -> int:
        return hash(self._path_value)
