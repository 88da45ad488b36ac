"""Chessgrip — pick up and move chess pieces on a clickable board."""

__version__ = "0.1.0"
