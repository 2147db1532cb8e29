"""
PictureBox Core Shapes Module

Defines the value types of the shape algebra: Point, Bounds and the
leaf shape variants (Circle, Rectangle, Line, Text).

Coordinates follow screen convention: y grows downward, so a Bounds'
``top`` is its minimum vertical coordinate and ``bottom`` its maximum.
"""

from dataclasses import dataclass
from typing import ClassVar, Iterable
import math

from .errors import ShapeValidationError


def _as_float(value, name: str) -> float:
    """Coerce a numeric field to float, rejecting non-numbers and NaN."""
    if isinstance(value, (bool, str, bytes)):
        raise ShapeValidationError(f"{name} must be a number, got {value!r}")
    try:
        result = float(value)
    except (TypeError, ValueError) as e:
        raise ShapeValidationError(f"{name} must be a number, got {value!r}") from e
    if math.isnan(result):
        raise ShapeValidationError(f"{name} must not be NaN")
    return result


def _as_coordinate(value, name: str) -> float:
    result = _as_float(value, name)
    if math.isinf(result):
        raise ShapeValidationError(f"{name} must be finite, got {result}")
    return result


def _as_length(value, name: str) -> float:
    """Coerce a size (radius, width, height): finite and non-negative."""
    result = _as_coordinate(value, name)
    if result < 0:
        raise ShapeValidationError(f"{name} must not be negative, got {result}")
    return result


@dataclass(frozen=True)
class Point:
    """A 2D point."""
    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, 'x', _as_coordinate(self.x, "Point.x"))
        object.__setattr__(self, 'y', _as_coordinate(self.y, "Point.y"))

    def __add__(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Point') -> 'Point':
        return Point(self.x - other.x, self.y - other.y)

    def distance_to(self, other: 'Point') -> float:
        """Calculate Euclidean distance to another point."""
        return math.sqrt((self.x - other.x)**2 + (self.y - other.y)**2)


@dataclass(frozen=True)
class Bounds:
    """
    Axis-aligned bounding rectangle.

    A well-formed bounds has ``top <= bottom`` and ``left <= right``.
    ``Bounds.EMPTY`` (also returned by ``empty()``) is the identity for
    ``union``: it is stored as an inverted rectangle of infinities, but
    ``union`` and ``intersect`` check ``is_empty`` explicitly rather than
    relying on the sentinel arithmetic.
    """
    top: float
    left: float
    bottom: float
    right: float

    EMPTY: ClassVar['Bounds']

    def __post_init__(self):
        for name in ('top', 'left', 'bottom', 'right'):
            object.__setattr__(self, name, _as_float(getattr(self, name), f"Bounds.{name}"))
        inverted = self.top > self.bottom or self.left > self.right
        if inverted and not self._is_sentinel():
            raise ShapeValidationError(
                f"Bounds edges are inverted: top={self.top}, left={self.left}, "
                f"bottom={self.bottom}, right={self.right}"
            )

    def _is_sentinel(self) -> bool:
        return (self.top == math.inf and self.left == math.inf and
                self.bottom == -math.inf and self.right == -math.inf)

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> 'Bounds':
        """Smallest bounds containing every point (empty for no points)."""
        points = list(points)
        if not points:
            return cls.EMPTY
        return cls(
            top=min(p.y for p in points),
            left=min(p.x for p in points),
            bottom=max(p.y for p in points),
            right=max(p.x for p in points)
        )

    @property
    def is_empty(self) -> bool:
        return self._is_sentinel()

    @property
    def width(self) -> float:
        if self.is_empty:
            return 0.0
        return self.right - self.left

    @property
    def height(self) -> float:
        if self.is_empty:
            return 0.0
        return self.bottom - self.top

    @property
    def center(self) -> Point:
        if self.is_empty:
            raise ShapeValidationError("Empty bounds have no center")
        return Point(
            (self.left + self.right) / 2,
            (self.top + self.bottom) / 2
        )

    def contains(self, point: Point) -> bool:
        """Check if point is inside bounding box."""
        if self.is_empty:
            return False
        return (self.left <= point.x <= self.right and
                self.top <= point.y <= self.bottom)

    def intersects(self, other: 'Bounds') -> bool:
        """Check if two bounding boxes overlap."""
        return not self.intersect(other).is_empty

    def union(self, other: 'Bounds') -> 'Bounds':
        """Smallest bounds containing both ``self`` and ``other``."""
        if self.is_empty:
            return other
        if other.is_empty:
            return self
        return Bounds(
            top=min(self.top, other.top),
            left=min(self.left, other.left),
            bottom=max(self.bottom, other.bottom),
            right=max(self.right, other.right)
        )

    def intersect(self, other: 'Bounds') -> 'Bounds':
        """Overlapping rectangle, or ``Bounds.EMPTY`` when there is none."""
        if self.is_empty or other.is_empty:
            return Bounds.EMPTY
        top = max(self.top, other.top)
        left = max(self.left, other.left)
        bottom = min(self.bottom, other.bottom)
        right = min(self.right, other.right)
        if right < left or bottom < top:
            return Bounds.EMPTY
        return Bounds(top=top, left=left, bottom=bottom, right=right)


Bounds.EMPTY = Bounds(math.inf, math.inf, -math.inf, -math.inf)


def empty() -> Bounds:
    """Return the identity element for ``union``."""
    return Bounds.EMPTY


def union(a: Bounds, b: Bounds) -> Bounds:
    return a.union(b)


def intersect(a: Bounds, b: Bounds) -> Bounds:
    return a.intersect(b)


class Shape:
    """
    Base class for the closed set of drawable variants.

    The variants are Circle, Rectangle, Line, Text and Clipped (defined in
    ``picture.py`` because it owns a nested Picture). Code that inspects a
    shape dispatches over exactly these five and raises ``TypeError`` for
    anything else.
    """

    __slots__ = ()

    def get_bounding_box(self) -> Bounds:
        """Return the tight axis-aligned bounding box of this shape."""
        from .bounds import shape_bounds
        return shape_bounds(self)


def _check_point(value, name: str) -> None:
    if not isinstance(value, Point):
        raise ShapeValidationError(f"{name} must be a Point, got {type(value).__name__}")


@dataclass(frozen=True, slots=True)
class Circle(Shape):
    """A circle given by its center and radius."""
    center: Point
    radius: float

    def __post_init__(self):
        _check_point(self.center, "Circle.center")
        object.__setattr__(self, 'radius', _as_length(self.radius, "Circle.radius"))


@dataclass(frozen=True, slots=True)
class Rectangle(Shape):
    """An axis-aligned rectangle centered on ``center``."""
    center: Point
    width: float
    height: float

    def __post_init__(self):
        _check_point(self.center, "Rectangle.center")
        object.__setattr__(self, 'width', _as_length(self.width, "Rectangle.width"))
        object.__setattr__(self, 'height', _as_length(self.height, "Rectangle.height"))


@dataclass(frozen=True, slots=True)
class Line(Shape):
    """A straight line segment."""
    start: Point
    end: Point

    def __post_init__(self):
        _check_point(self.start, "Line.start")
        _check_point(self.end, "Line.end")


@dataclass(frozen=True, slots=True)
class Text(Shape):
    """
    A text label anchored at ``location``.

    Font metrics are not modelled: a text shape's bounds are the single
    point at its location.
    """
    location: Point
    content: str

    def __post_init__(self):
        _check_point(self.location, "Text.location")
        if not isinstance(self.content, str):
            raise ShapeValidationError(
                f"Text.content must be a str, got {type(self.content).__name__}"
            )
