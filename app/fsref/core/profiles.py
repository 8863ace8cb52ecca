"""Saved scan profiles.

A profile is a named DirectoryScanner configuration (which kinds to yield,
whether to recurse, which names to keep or skip). Profiles live in
~/.config/fsref/profiles.toml:

    [profiles.python]
    include_files = true
    recurse = true
    patterns = ["*.py"]
    exclude_dirs = [".git", "__pycache__", ".venv"]
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from fsref.core.errors import FsRefError
from fsref.core.paths import get_profiles_path
from fsref.filesystem.entry import FileEntry
from fsref.filesystem.filters import all_of, exclude_hidden, name_excludes, name_matches
from fsref.filesystem.path import PathValue
from fsref.filesystem.scanner import DirectoryScanner, EntryFilter

logger = logging.getLogger(__name__)


class ProfileError(FsRefError):
    """Base exception for profile errors."""


class ProfileNotFoundError(ProfileError):
    """Raised when a named profile does not exist."""


class ProfileParseError(ProfileError):
    """Raised when the profiles file cannot be parsed."""


class ScanProfile(BaseModel):
    """Configuration for one directory scan.

    Attributes:
        description: Optional human-readable note.
        include_self: Yield the scan root itself.
        include_files: Yield files.
        include_dirs: Yield directories.
        recurse: Walk into subdirectories.
        patterns: Globs a yielded name must match (empty = any name).
        exclude_patterns: Globs that exclude a name from the results.
        exclude_dirs: Globs naming directories that are never walked into.
        show_hidden: Include dot-prefixed names in results and recursion.
    """

    model_config = ConfigDict(extra="forbid")

    description: Annotated[str | None, Field(description="Profile description")] = None
    include_self: Annotated[bool, Field(description="Yield the scan root")] = False
    include_files: Annotated[bool, Field(description="Yield files")] = False
    include_dirs: Annotated[bool, Field(description="Yield directories")] = False
    recurse: Annotated[bool, Field(description="Walk into subdirectories")] = False
    patterns: Annotated[
        list[str],
        Field(description="Globs that yielded names must match"),
    ] = []
    exclude_patterns: Annotated[
        list[str],
        Field(description="Globs excluded from results"),
    ] = []
    exclude_dirs: Annotated[
        list[str],
        Field(description="Globs of directories not walked into"),
    ] = []
    show_hidden: Annotated[bool, Field(description="Include dot-prefixed names")] = False

    def result_filter(self) -> EntryFilter:
        """Build the result predicate described by this profile."""
        predicates = [name_matches(self.patterns), name_excludes(self.exclude_patterns)]
        if not self.show_hidden:
            predicates.append(exclude_hidden())
        return all_of(*predicates)

    def recurse_filter(self) -> EntryFilter:
        """Build the recursion predicate described by this profile."""
        predicates = [name_excludes(self.exclude_dirs)]
        if not self.show_hidden:
            predicates.append(exclude_hidden())
        return all_of(*predicates)

    def build_scanner(self, root: FileEntry | PathValue | str) -> DirectoryScanner:
        """Create a DirectoryScanner configured by this profile.

        Args:
            root: Directory to scan.

        Returns:
            A fresh, unstarted scanner.
        """
        scanner = DirectoryScanner(root).filter(self.result_filter())
        if self.include_self:
            scanner.include_self()
        if self.include_files:
            scanner.include_files()
        if self.include_dirs:
            scanner.include_dirs()
        if self.recurse:
            scanner.recurse_filter(self.recurse_filter())
        return scanner


class ProfileStore(BaseModel):
    """All saved profiles, keyed by name."""

    model_config = ConfigDict(extra="forbid")

    profiles: Annotated[
        dict[str, ScanProfile],
        Field(description="Saved scan profiles by name"),
    ] = {}


def load_profiles(path: Path | None = None) -> ProfileStore:
    """Load saved profiles from a TOML file.

    A missing file is not an error; it yields an empty store.

    Args:
        path: Path to the profiles file. If None, uses the default path.

    Returns:
        Validated ProfileStore.

    Raises:
        ProfileParseError: If the TOML syntax is invalid.
        ProfileError: If the file cannot be read or fails validation.
    """
    profiles_path = path or get_profiles_path()

    if not profiles_path.exists():
        logger.debug("No profiles file at %s", profiles_path)
        return ProfileStore()

    try:
        with open(profiles_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ProfileParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ProfileError(f"Failed to read profiles: {e}") from e

    try:
        return ProfileStore.model_validate(data)
    except ValidationError as e:
        raise ProfileError(f"Invalid profiles content: {e}") from e


def save_profiles(store: ProfileStore, path: Path | None = None) -> Path:
    """Save profiles to a TOML file.

    The file is written atomically by first writing to a temporary file
    in the same directory and then using os.replace() for atomic rename.

    Args:
        store: The profiles to save.
        path: Path to save to. If None, uses the default path.

    Returns:
        Path where the profiles were saved.

    Raises:
        ProfileError: If the file cannot be written.
    """
    profiles_path = path or get_profiles_path()
    profiles_path.parent.mkdir(parents=True, exist_ok=True)

    data = store.model_dump(mode="json", exclude_none=True)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=profiles_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(profiles_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ProfileError(f"Failed to write profiles: {e}") from e

    return profiles_path


def get_profile(name: str, path: Path | None = None) -> ScanProfile:
    """Look up a saved profile by name.

    Raises:
        ProfileNotFoundError: If no profile has that name.
    """
    store = load_profiles(path)
    try:
        return store.profiles[name]
    except KeyError:
        raise ProfileNotFoundError(f"Profile not found: {name}") from None
