"""Remap github-painter style commit templates into a rolling 53-week window."""

__version__ = "0.1.0"
