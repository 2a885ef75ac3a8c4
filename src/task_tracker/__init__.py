"""Command-line task tracker backed by a single text store file."""

__version__ = "0.1.0"
