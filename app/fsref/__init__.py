"""fsref - normalized paths, file references and a lazy directory scanner."""

__version__ = "0.1.0"

from fsref.filesystem import DirectoryScanner, FileEntry, PathValue  # noqa: E402

__all__ = ["DirectoryScanner", "FileEntry", "PathValue", "__version__"]
