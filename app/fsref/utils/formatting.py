"""Shared Rich consoles and output helpers for the CLI.

Both consoles use the theme from :mod:`fsref.core.theme`. Messages passed to
the ``print_*`` helpers are printed literally, so paths containing square
brackets are never taken for markup.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from fsref.core.theme import get_theme

if TYPE_CHECKING:
    from fsref.filesystem.entry import FileEntry


def _themed_console(*, stderr: bool = False) -> Console:
    """Build a themed console; interactive streams get full hex colors."""
    stream = sys.stderr if stderr else sys.stdout
    return Console(
        theme=get_theme(),
        stderr=stderr,
        color_system="truecolor" if stream.isatty() else "auto",
    )


console = _themed_console()
err_console = _themed_console(stderr=True)


def entry_kind(entry: FileEntry) -> str:
    """Get the display kind of an entry: "dir" or "file"."""
    return "dir" if entry.is_dir() else "file"


def create_entry_table(title: str) -> Table:
    """Create the table used to list scan results.

    Args:
        title: Table title (markup is allowed, escape user paths).

    Returns:
        Table with Path and Kind columns.
    """
    table = Table(title=title, header_style="bold_header", border_style="border")
    table.add_column("Path", overflow="fold")
    table.add_column("Kind", width=4)
    return table


def format_entry_row(entry: FileEntry, display_path: str) -> tuple[str, str]:
    """Render one scan result as (path, kind) cells with Rich markup."""
    kind = entry_kind(entry)
    return (f"[entry.{kind}]{escape(display_path)}[/]", f"[muted]{kind}[/]")


def print_info(message: str) -> None:
    console.print(Text(message, style="info"))


def print_success(message: str) -> None:
    console.print(Text(message, style="success"))


def print_warning(message: str) -> None:
    err_console.print(Text.assemble(("Warning:", "warning"), " ", message))


def print_error(message: str) -> None:
    err_console.print(Text.assemble(("Error:", "error"), " ", message))
