"""fsref command line entry point.

Builds the Typer application, wires the global options and registers the
``scan``, ``info`` and ``profile`` commands.
"""

from typing import Annotated

import typer

from fsref import __version__
from fsref.cli.commands import info, profile, scan
from fsref.utils.logging import setup_logging

app = typer.Typer(
    name="fsref",
    help="Inspect paths and scan directory trees.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _print_version(requested: bool) -> None:
    if requested:
        typer.echo(f"fsref version {__version__}")
        raise typer.Exit()


VersionOption = Annotated[
    bool,
    typer.Option(
        "--version",
        "-V",
        callback=_print_version,
        is_eager=True,
        help="Show the version and exit.",
    ),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Log debug messages to stderr."),
]


@app.callback()
def main(version: VersionOption = False, verbose: VerboseOption = False) -> None:
    """fsref - normalized paths and lazy directory scans.

    Scan directories with file/directory selection, glob filters and
    controlled recursion, inspect how paths are normalized, and keep
    reusable scan settings as named profiles.
    """
    setup_logging(verbose=verbose)


app.command("scan")(scan.scan)
app.command("info")(info.info)
app.add_typer(profile.app, name="profile")


if __name__ == "__main__":
    app()
