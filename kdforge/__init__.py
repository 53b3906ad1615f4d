"""Implicit k-d tree helpers: level sorting, stackless traversal, datasets and storage."""

__version__ = "0.1.0"