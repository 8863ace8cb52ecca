"""Console color theme.

Colors come from two TOML layers, each holding a ``[colors]`` table: the
default theme shipped in ``fsref/data/theme.toml`` and an optional user file
at ~/.config/fsref/theme.toml that may override any subset of keys. A broken
user file is logged and ignored.
"""

import logging
import re
import tomllib
from functools import cache
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from fsref.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


class ThemeColors(BaseModel):
    """Hex colors used by the CLI (``#RGB`` or ``#RRGGBB``)."""

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"

    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    directory: str = "#0e8ac8"
    file: str = "#ffffff"

    @field_validator("*", mode="before")
    @classmethod
    def check_hex(cls, value: object) -> str:
        if not isinstance(value, str) or not _HEX_COLOR.fullmatch(value.strip()):
            msg = f"expected a hex color like #0e8ac8, got {value!r}"
            raise ValueError(msg)
        return value.strip()

    def styles(self) -> dict[str, str]:
        """Map Rich style names used by the CLI to these colors."""
        return {
            "text": self.text,
            "muted": self.muted,
            "dim": self.muted,
            "header": self.header,
            "bold_header": f"bold {self.header}",
            "border": self.border,
            "success": self.success,
            "warning": self.warning,
            "error": f"bold {self.error}",
            "info": self.info,
            "entry.dir": f"bold {self.directory}",
            "entry.file": self.file,
        }


def get_bundled_theme_path() -> Traversable:
    """Location of the default theme shipped with the package."""
    return resources.files("fsref.data") / "theme.toml"


def read_color_layer(source: Path | Traversable) -> dict[str, str]:
    """Read the ``[colors]`` table of a theme file.

    Non-string values are dropped. A missing file gives an empty layer.

    Raises:
        ValueError: If the file is not valid TOML or ``colors`` is not a table.
    """
    try:
        with source.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"invalid TOML in {source}: {e}") from e

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        raise ValueError(f"'colors' in {source} must be a table")
    return {key: value for key, value in colors.items() if isinstance(value, str)}


def load_theme(user_path: Path | None = None) -> ThemeColors:
    """Merge the bundled colors with the user's overrides.

    Args:
        user_path: Override file. If None, uses the default path.

    Returns:
        Validated colors. Falls back to the bundled colors when the user
        file is unreadable or invalid.
    """
    bundled = read_color_layer(get_bundled_theme_path())
    user_path = user_path or get_user_theme_path()

    try:
        overrides = read_color_layer(user_path)
        return ThemeColors(**{**bundled, **overrides})
    except (ValueError, OSError) as e:
        logger.warning("Ignoring user theme %s: %s", user_path, e)

    try:
        return ThemeColors(**bundled)
    except ValidationError as e:
        logger.error("Bundled theme is invalid, using built-in colors: %s", e)
        return ThemeColors()


@cache
def get_theme() -> Theme:
    """Get the Rich theme for the shared consoles (loaded once)."""
    return Theme(load_theme().styles())


def reload_theme() -> Theme:
    """Drop the cached theme and load it again."""
    get_theme.cache_clear()
    return get_theme()
