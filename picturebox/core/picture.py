"""
PictureBox Picture Model

A Picture is an ordered, immutable sequence of shapes. Order is paint
order: it matters for rendering but not for bounds.

Clipped lives here rather than in ``shapes.py`` because it owns a nested
Picture, which makes the shape algebra recursive.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple, Union

from .errors import ShapeValidationError
from .shapes import Bounds, Shape


@dataclass(frozen=True)
class Picture:
    """
    An ordered sequence of shapes.

    Pictures are never modified in place: ``add_shape``, ``extend`` and
    ``+`` all return a new Picture and leave the receiver untouched.
    """
    shapes: Tuple[Shape, ...] = ()

    def __post_init__(self):
        shapes = tuple(self.shapes)
        for index, shape in enumerate(shapes):
            if not isinstance(shape, Shape):
                raise TypeError(
                    f"Picture item {index} is not a Shape: {type(shape).__name__}"
                )
        object.__setattr__(self, 'shapes', shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self.shapes)

    def __len__(self) -> int:
        return len(self.shapes)

    def __getitem__(self, index: int) -> Shape:
        return self.shapes[index]

    def __add__(self, other: 'Picture') -> 'Picture':
        if not isinstance(other, Picture):
            return NotImplemented
        return Picture(self.shapes + other.shapes)

    def __str__(self) -> str:
        from ..io.text_render import render
        return render(self)

    def add_shape(self, shape: Shape) -> 'Picture':
        """Return a new picture with ``shape`` painted last."""
        return Picture(self.shapes + (shape,))

    def extend(self, shapes: Iterable[Shape]) -> 'Picture':
        """Return a new picture with ``shapes`` appended in order."""
        return Picture(self.shapes + tuple(shapes))

    def clipped(self, clip: Bounds) -> 'Clipped':
        """Wrap this picture as a sub-picture restricted to ``clip``."""
        return Clipped(self, clip)

    def get_bounding_box(self) -> Bounds:
        """Bounds of every shape in the picture (``Bounds.EMPTY`` if none)."""
        from .bounds import bounds_of
        return bounds_of(self)


@dataclass(frozen=True, slots=True)
class Clipped(Shape):
    """A nested picture whose visible extent is restricted to ``clip``."""
    picture: Picture
    clip: Bounds

    def __post_init__(self):
        picture = self.picture
        if isinstance(picture, (list, tuple)):
            picture = Picture(picture)
        if not isinstance(picture, Picture):
            raise ShapeValidationError(
                f"Clipped.picture must be a Picture, got {type(picture).__name__}"
            )
        if not isinstance(self.clip, Bounds):
            raise ShapeValidationError(
                f"Clipped.clip must be a Bounds, got {type(self.clip).__name__}"
            )
        object.__setattr__(self, 'picture', picture)


PictureLike = Union[Picture, Iterable[Shape]]
