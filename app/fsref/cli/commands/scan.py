"""Scan command implementation.

Lists the entries below a directory using the lazy DirectoryScanner.
"""

import json
from itertools import islice
from typing import Annotated

import typer
from rich.markup import escape

from fsref.cli.types import (
    DirsOption,
    ExcludeDirOption,
    ExcludeOption,
    FilesOption,
    FormatOption,
    HiddenOption,
    OutputFormat,
    PatternOption,
    RecurseOption,
    SelfOption,
    profile_from_options,
)
from fsref.core.profiles import ProfileError, ScanProfile, get_profile
from fsref.filesystem.entry import FileEntry
from fsref.utils.formatting import (
    console,
    create_entry_table,
    entry_kind,
    format_entry_row,
    print_error,
    print_info,
)


def scan(
    root: Annotated[
        str,
        typer.Argument(help="Directory to scan."),
    ] = ".",
    include_self: SelfOption = False,
    files: FilesOption = False,
    dirs: DirsOption = False,
    recurse: RecurseOption = False,
    patterns: PatternOption = None,
    excludes: ExcludeOption = None,
    exclude_dirs: ExcludeDirOption = None,
    hidden: HiddenOption = False,
    profile_name: Annotated[
        str | None,
        typer.Option("--profile", "-P", help="Start from a saved profile."),
    ] = None,
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-l", help="Stop after this many entries.", min=1),
    ] = None,
    output_format: FormatOption = OutputFormat.TABLE,
) -> None:
    """List files and directories below ROOT."""
    root_entry = FileEntry(root)
    if not root_entry.exists():
        print_error(f"Path does not exist: {root_entry.path}")
        raise typer.Exit(code=1)

    base: ScanProfile | None = None
    if profile_name is not None:
        try:
            base = get_profile(profile_name)
        except ProfileError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e

    profile = profile_from_options(
        include_self=include_self,
        files=files,
        dirs=dirs,
        recurse=recurse,
        patterns=patterns,
        excludes=excludes,
        exclude_dirs=exclude_dirs,
        hidden=hidden,
        base=base,
    )

    # No kind selected and no profile: list both
    if base is None and not files and not dirs:
        profile = profile.model_copy(update={"include_files": True, "include_dirs": True})

    scanner = profile.build_scanner(root_entry)
    entries = list(islice(scanner, limit)) if limit else scanner.collect()

    if output_format == OutputFormat.JSON:
        _print_json(entries)
        return

    if not entries:
        print_info("No matching entries found.")
        return

    _print_table(scanner.root, entries)
    console.print(f"\n[dim]Found {len(entries)} entries[/dim]")
    if limit and len(entries) == limit:
        console.print(f"[dim](stopped at {limit}, more entries may exist)[/dim]")


# === Private helper functions ===


def _display_path(root: FileEntry, entry: FileEntry) -> str:
    """Path of ``entry`` relative to the scan root, "." for the root itself."""
    return root.path_value.relative_path_to(entry.path_value).path or "."


def _print_table(root: FileEntry, entries: list[FileEntry]) -> None:
    """Display entries as a Rich table."""
    table = create_entry_table(title=escape(root.path))
    for entry in entries:
        table.add_row(*format_entry_row(entry, _display_path(root, entry)))
    console.print(table)


def _print_json(entries: list[FileEntry]) -> None:
    """Display entries as JSON."""
    data = [
        {
            "path": entry.path,
            "name": entry.name,
            "kind": entry_kind(entry),
        }
        for entry in entries
    ]
    console.print_json(json.dumps(data))
