"""
PictureBox Errors

Typed exceptions raised by the shape algebra.
"""


class PictureBoxError(Exception):
    """Base error for the package."""


class ShapeValidationError(PictureBoxError, ValueError):
    """A shape, point or picture was constructed from malformed values."""
