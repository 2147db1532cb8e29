"""
PictureBox Bounds Engine

Folds a picture into a single Bounds, descending through clipped
sub-pictures.

``union`` is commutative and associative with ``Bounds.EMPTY`` as its
identity, so the result does not depend on shape order or on how the
fold is split up.
"""

import logging
from typing import Iterator, Optional

from .picture import Clipped, PictureLike
from .shapes import Bounds, Circle, Line, Rectangle, Shape, Text, empty, union

logger = logging.getLogger(__name__)

_DONE = object()


def shape_bounds(shape: Shape) -> Bounds:
    """
    Map a single shape to its tight bounding box.

    Raises:
        TypeError: if ``shape`` is not one of the five shape variants
    """
    if isinstance(shape, Circle):
        c, r = shape.center, shape.radius
        return Bounds(top=c.y - r, left=c.x - r, bottom=c.y + r, right=c.x + r)
    elif isinstance(shape, Rectangle):
        c = shape.center
        half_w = shape.width / 2
        half_h = shape.height / 2
        return Bounds(top=c.y - half_h, left=c.x - half_w,
                      bottom=c.y + half_h, right=c.x + half_w)
    elif isinstance(shape, Line):
        return Bounds.from_points((shape.start, shape.end))
    elif isinstance(shape, Text):
        loc = shape.location
        return Bounds(top=loc.y, left=loc.x, bottom=loc.y, right=loc.x)
    elif isinstance(shape, Clipped):
        return bounds_of((shape,))
    raise TypeError(f"Unhandled shape variant: {type(shape).__name__}")


class _Frame:
    """One picture being folded: its remaining shapes and bounds so far."""

    __slots__ = ('shapes', 'clip', 'bounds')

    def __init__(self, shapes: Iterator[Shape], clip: Optional[Bounds]):
        self.shapes = shapes
        self.clip = clip
        self.bounds = empty()


def bounds_of(picture: PictureLike) -> Bounds:
    """
    Compute the bounds of every shape in ``picture``.

    Clipped sub-pictures are folded with an explicit stack of frames, so
    nesting depth is not limited by the interpreter's recursion limit.

    Args:
        picture: a Picture, or any iterable of shapes

    Returns:
        The union of each shape's bounds; ``Bounds.EMPTY`` for an empty picture
    """
    frames = [_Frame(iter(picture), None)]
    while True:
        frame = frames[-1]
        shape = next(frame.shapes, _DONE)
        if shape is _DONE:
            frames.pop()
            if not frames:
                return frame.bounds
            clipped = frame.clip.intersect(frame.bounds)
            if clipped.is_empty and not frame.bounds.is_empty:
                logger.debug("Clip %s hides sub-picture bounds %s", frame.clip, frame.bounds)
            frames[-1].bounds = union(frames[-1].bounds, clipped)
        elif isinstance(shape, Clipped):
            frames.append(_Frame(iter(shape.picture), shape.clip))
        else:
            frame.bounds = union(frame.bounds, shape_bounds(shape))
