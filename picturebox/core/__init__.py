"""
PictureBox Core Module

Contains the shape algebra:
- Point, Bounds: immutable geometry values
- Shapes: Circle, Rectangle, Line, Text, Clipped
- Picture: ordered, immutable sequence of shapes
- Bounds engine: shape_bounds, bounds_of
"""

# Import order matters - shapes first, then picture, then the engine
from .errors import PictureBoxError, ShapeValidationError
from .shapes import (
    Point, Bounds, Shape,
    Circle, Rectangle, Line, Text,
    empty, union, intersect
)
from .picture import Picture, Clipped
from .bounds import shape_bounds, bounds_of

__all__ = [
    'PictureBoxError', 'ShapeValidationError',
    'Point', 'Bounds', 'Shape',
    'Circle', 'Rectangle', 'Line', 'Text', 'Clipped',
    'empty', 'union', 'intersect',
    'Picture',
    'shape_bounds', 'bounds_of'
]
