"""Bundled data files for fsref."""
