"""Small programming puzzles and their solutions, and a collage builder."""

__version__ = "0.1.0"