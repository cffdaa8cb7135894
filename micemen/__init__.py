"""A two-player terminal puzzle game of shifting columns of walls and mice."""

__version__ = "0.1.0"