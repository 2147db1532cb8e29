"""
Text Renderer for PictureBox

Produces a deterministic, human-readable string for a picture, e.g.::

    [Line [start: (0, 0), end: (1, 1)]]

Shapes appear in picture order. Every field is printed, numbers keep full
float precision and text content is quoted with ``repr``, so two pictures
render to the same string only if they are equal.
"""

from ..core.picture import Clipped, PictureLike
from ..core.shapes import Bounds, Circle, Line, Point, Rectangle, Shape, Text

SHAPE_SEPARATOR = ", "


def format_number(value: float) -> str:
    # Integral values print without the trailing ".0"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _format_point(point: Point) -> str:
    return f"({format_number(point.x)}, {format_number(point.y)})"


def _fields(**fields: str) -> str:
    return "[" + ", ".join(f"{name}: {text}" for name, text in fields.items()) + "]"


def render_bounds(bounds: Bounds) -> str:
    """Render a bounds as ``Bounds [top: .., left: .., bottom: .., right: ..]``."""
    if bounds.is_empty:
        return "Bounds [empty]"
    return "Bounds " + _fields(
        top=format_number(bounds.top),
        left=format_number(bounds.left),
        bottom=format_number(bounds.bottom),
        right=format_number(bounds.right),
    )


def _render_leaf(shape: Shape) -> str:
    if isinstance(shape, Circle):
        return "Circle " + _fields(
            center=_format_point(shape.center),
            radius=format_number(shape.radius),
        )
    elif isinstance(shape, Rectangle):
        return "Rectangle " + _fields(
            center=_format_point(shape.center),
            width=format_number(shape.width),
            height=format_number(shape.height),
        )
    elif isinstance(shape, Line):
        return "Line " + _fields(
            start=_format_point(shape.start),
            end=_format_point(shape.end),
        )
    elif isinstance(shape, Text):
        return "Text " + _fields(
            location=_format_point(shape.location),
            content=repr(shape.content),
        )
    raise TypeError(f"Unhandled shape variant: {type(shape).__name__}")


def _picture_items(picture: PictureLike) -> list:
    """Brackets, separators and shapes of a picture, in output order."""
    items = ["["]
    for index, shape in enumerate(picture):
        if not isinstance(shape, Shape):
            raise TypeError(f"Unhandled shape variant: {type(shape).__name__}")
        if index:
            items.append(SHAPE_SEPARATOR)
        items.append(shape)
    items.append("]")
    return items


def _render_items(items: list) -> str:
    # Literal strings are emitted as-is; clipped shapes are expanded in place
    parts = []
    pending = list(reversed(items))
    while pending:
        item = pending.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, Clipped):
            pending.append(", clip: " + render_bounds(item.clip) + "]")
            pending.extend(reversed(_picture_items(item.picture)))
            pending.append("Clipped [picture: ")
        else:
            parts.append(_render_leaf(item))
    return "".join(parts)


def render_shape(shape: Shape) -> str:
    """
    Render one shape, naming each of its fields.

    Raises:
        TypeError: if ``shape`` is not one of the five shape variants
    """
    if isinstance(shape, Clipped):
        return _render_items([shape])
    return _render_leaf(shape)


def render(picture: PictureLike) -> str:
    """
    Render a picture (or any iterable of shapes) as a bracketed list.

    Nested clipped pictures are expanded from an explicit work list, so
    deep nesting does not hit the interpreter's recursion limit.
    """
    return _render_items(_picture_items(picture))
