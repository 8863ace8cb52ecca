"""Info command implementation.

Shows how a path is normalized and classified.
"""

from typing import Annotated, Any

import typer
from rich.markup import escape
from rich.table import Table

from fsref.cli.types import FormatOption, OutputFormat
from fsref.core.errors import NoParentDirectoryError
from fsref.filesystem.entry import FileEntry
from fsref.utils.formatting import console, entry_kind


def info(
    path: Annotated[
        str,
        typer.Argument(help="Path to inspect (need not exist)."),
    ],
    output_format: FormatOption = OutputFormat.TABLE,
) -> None:
    """Show the normalized form and classification of PATH."""
    details = describe_entry(FileEntry(path))

    if output_format == OutputFormat.JSON:
        console.print_json(data=details)
        return

    table = Table(show_header=False, border_style="border", title=escape(details["path"] or "."))
    table.add_column("Field", style="muted")
    table.add_column("Value")
    for key, value in details.items():
        table.add_row(key, "-" if value is None else escape(str(value)))
    console.print(table)


def describe_entry(entry: FileEntry) -> dict[str, Any]:
    """Collect the displayed facts about an entry.

    Args:
        entry: Entry to describe.

    Returns:
        Mapping of field name to value; ``parent`` is None for a root.
    """
    try:
        parent: str | None = entry.parent_directory().path
    except NoParentDirectoryError:
        parent = None

    return {
        "path": entry.path,
        "absolute": entry.absolute().path,
        "name": entry.name,
        "extension": entry.extension,
        "kind": entry_kind(entry),
        "exists": entry.exists(),
        "parent": parent,
    }
