"""Shared types and option definitions for CLI commands.

The scan flags are used by both ``fsref scan`` and ``fsref profile save``,
so they are declared once here.
"""

from enum import Enum
from typing import Annotated

import typer

from fsref.core.profiles import ScanProfile


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


FormatOption = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", help="Output format.", case_sensitive=False),
]
SelfOption = Annotated[bool, typer.Option("--self", help="Include the root itself.")]
FilesOption = Annotated[bool, typer.Option("--files", help="Include files.")]
DirsOption = Annotated[bool, typer.Option("--dirs", help="Include directories.")]
RecurseOption = Annotated[
    bool,
    typer.Option("--recurse", "-r", help="Walk into subdirectories."),
]
PatternOption = Annotated[
    list[str] | None,
    typer.Option("--pattern", "-p", help="Only names matching this glob (repeatable)."),
]
ExcludeOption = Annotated[
    list[str] | None,
    typer.Option("--exclude", "-x", help="Skip names matching this glob (repeatable)."),
]
ExcludeDirOption = Annotated[
    list[str] | None,
    typer.Option("--exclude-dir", help="Never walk into directories matching this glob."),
]
HiddenOption = Annotated[
    bool,
    typer.Option("--hidden", help="Include dot-prefixed names."),
]


def profile_from_options(
    *,
    include_self: bool,
    files: bool,
    dirs: bool,
    recurse: bool,
    patterns: list[str] | None,
    excludes: list[str] | None,
    exclude_dirs: list[str] | None,
    hidden: bool,
    base: ScanProfile | None = None,
) -> ScanProfile:
    """Build a ScanProfile from command line flags.

    Flags are merged onto ``base`` when given: boolean flags can only switch
    a setting on and glob lists are appended.

    Args:
        include_self: --self flag.
        files: --files flag.
        dirs: --dirs flag.
        recurse: --recurse flag.
        patterns: --pattern values.
        excludes: --exclude values.
        exclude_dirs: --exclude-dir values.
        hidden: --hidden flag.
        base: Saved profile to start from.

    Returns:
        The resulting profile.
    """
    base = base or ScanProfile()
    return base.model_copy(
        update={
            "include_self": base.include_self or include_self,
            "include_files": base.include_files or files,
            "include_dirs": base.include_dirs or dirs,
            "recurse": base.recurse or recurse,
            "patterns": [*base.patterns, *(patterns or [])],
            "exclude_patterns": [*base.exclude_patterns, *(excludes or [])],
            "exclude_dirs": [*base.exclude_dirs, *(exclude_dirs or [])],
            "show_hidden": base.show_hidden or hidden,
        }
    )
