"""
PictureBox

A recursive vector-graphics shape algebra: shapes, pictures, bounding
boxes through clipped sub-pictures, and deterministic text rendering.
"""

from .core import (
    PictureBoxError, ShapeValidationError,
    Point, Bounds, Shape,
    Circle, Rectangle, Line, Text, Clipped,
    empty, union, intersect,
    Picture,
    shape_bounds, bounds_of
)
from .io import render, render_shape, render_bounds

__version__ = "0.1.0"

__all__ = [
    'PictureBoxError', 'ShapeValidationError',
    'Point', 'Bounds', 'Shape',
    'Circle', 'Rectangle', 'Line', 'Text', 'Clipped',
    'empty', 'union', 'intersect',
    'Picture',
    'shape_bounds', 'bounds_of',
    'render', 'render_shape', 'render_bounds',
]
