"""Searching for and drawing rectangular collages from images of differing sizes."""

__version__ = "0.1.0"