"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import logging
import os
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def _restore_package_logger() -> Iterator[None]:
    """Undo handler and level changes made by setup_logging during a test."""
    logger = logging.getLogger("fsref")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def scan_tree(tmp_path: Path) -> Path:
    """Create a small directory tree to scan.

    Layout::

        root/
            file1.txt
            subdir1/
                file2.txt
                subsubdir1/
                    file3.txt
            subdir2/
                file4.txt
    """
    root = tmp_path / "root"
    (root / "subdir1" / "subsubdir1").mkdir(parents=True)
    (root / "subdir2").mkdir()
    (root / "file1.txt").write_text("one")
    (root / "subdir1" / "file2.txt").write_text("two")
    (root / "subdir1" / "subsubdir1" / "file3.txt").write_text("three")
    (root / "subdir2" / "file4.txt").write_text("four")
    return root


@pytest.fixture
def config_home(tmp_path: Path) -> Iterator[Path]:
    """Point XDG_CONFIG_HOME at a temporary directory."""
    config = tmp_path / "config"
    with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(config)}):
        yield config


@pytest.fixture
def in_dir(tmp_path: Path) -> Iterator[Path]:
    """Run the test with tmp_path as the working directory."""
    previous = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(previous)
