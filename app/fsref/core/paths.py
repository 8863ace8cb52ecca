"""Locations of fsref's configuration files.

Follows the XDG Base Directory layout: ``$XDG_CONFIG_HOME/fsref`` when the
variable is set and non-empty, ``~/.config/fsref`` otherwise. Nothing here
creates directories; writers create them on demand.
"""

import os
from pathlib import Path

APP_NAME = "fsref"

PROFILES_FILENAME = "profiles.toml"
THEME_FILENAME = "theme.toml"


def get_config_dir() -> Path:
    """Get the fsref configuration directory."""
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / APP_NAME


def get_profiles_path() -> Path:
    """Get the saved scan profiles file (``profiles.toml``)."""
    return get_config_dir() / PROFILES_FILENAME


def get_user_theme_path() -> Path:
    """Get the user color overrides file (``theme.toml``)."""
    return get_config_dir() / THEME_FILENAME
