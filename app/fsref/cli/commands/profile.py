"""Profile management commands.

Saved profiles are named scan configurations stored in
~/.config/fsref/profiles.toml and used with ``fsref scan --profile NAME``.
"""

from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

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
from fsref.core.profiles import (
    ProfileError,
    ScanProfile,
    get_profile,
    load_profiles,
    save_profiles,
)
from fsref.utils.formatting import (
    console,
    print_error,
    print_info,
    print_success,
    print_warning,
)

app = typer.Typer(
    help="Manage saved scan profiles.",
    no_args_is_help=True,
)

NameArgument = Annotated[str, typer.Argument(help="Profile name.")]


@app.command("list")
def list_profiles(
    output_format: FormatOption = OutputFormat.TABLE,
) -> None:
    """List saved profiles."""
    try:
        store = load_profiles()
    except ProfileError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        console.print_json(data=store.model_dump(mode="json")["profiles"])
        return

    if not store.profiles:
        print_info("No saved profiles. Create one with 'fsref profile save NAME'.")
        return

    table = Table(
        title="Scan Profiles",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Name", style="bold")
    table.add_column("Kinds")
    table.add_column("Recurse", width=7)
    table.add_column("Description", style="muted")
    for name, profile in sorted(store.profiles.items()):
        table.add_row(
            escape(name),
            _describe_kinds(profile),
            "yes" if profile.recurse else "no",
            escape(profile.description or ""),
        )
    console.print(table)


@app.command()
def show(
    name: NameArgument,
    output_format: FormatOption = OutputFormat.TABLE,
) -> None:
    """Show the settings of one profile."""
    try:
        profile = get_profile(name)
    except ProfileError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        console.print_json(data=profile.model_dump(mode="json"))
        return

    table = Table(show_header=False, border_style="border", title=escape(name))
    table.add_column("Setting", style="muted")
    table.add_column("Value")
    for key, value in profile.model_dump().items():
        if isinstance(value, list):
            value = ", ".join(value) or "-"
        table.add_row(key, "-" if value is None else escape(str(value)))
    console.print(table)


@app.command()
def save(
    name: NameArgument,
    include_self: SelfOption = False,
    files: FilesOption = False,
    dirs: DirsOption = False,
    recurse: RecurseOption = False,
    patterns: PatternOption = None,
    excludes: ExcludeOption = None,
    exclude_dirs: ExcludeDirOption = None,
    hidden: HiddenOption = False,
    description: Annotated[
        str | None,
        typer.Option("--description", "-d", help="Short note about the profile."),
    ] = None,
) -> None:
    """Save (or overwrite) a profile built from scan flags."""
    profile = profile_from_options(
        include_self=include_self,
        files=files,
        dirs=dirs,
        recurse=recurse,
        patterns=patterns,
        excludes=excludes,
        exclude_dirs=exclude_dirs,
        hidden=hidden,
    )
    if description is not None:
        profile = profile.model_copy(update={"description": description})

    if not (profile.include_self or profile.include_files or profile.include_dirs):
        print_warning("Profile selects no entries; add --files, --dirs or --self.")

    try:
        store = load_profiles()
        replaced = name in store.profiles
        store.profiles[name] = profile
        path = save_profiles(store)
    except ProfileError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    action = "Updated" if replaced else "Saved"
    print_success(f"{action} profile '{name}' in {path}")


@app.command()
def remove(name: NameArgument) -> None:
    """Delete a saved profile."""
    try:
        store = load_profiles()
        if name not in store.profiles:
            print_error(f"Profile not found: {name}")
            raise typer.Exit(code=1)
        del store.profiles[name]
        save_profiles(store)
    except ProfileError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Removed profile '{name}'")


def _describe_kinds(profile: ScanProfile) -> str:
    """Summarize which kinds of entries a profile yields."""
    kinds = [
        label
        for enabled, label in (
            (profile.include_self, "self"),
            (profile.include_files, "files"),
            (profile.include_dirs, "dirs"),
        )
        if enabled
    ]
    return ", ".join(kinds) or "-"
