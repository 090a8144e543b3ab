"""A Lights Out style terminal puzzle, an animated half-block canvas and small helpers."""

__version__ = "0.0.1"