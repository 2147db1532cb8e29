"""
SVG Export for PictureBox

Converts a picture into an SVG document. Clipped sub-pictures become
groups that reference a ``<clipPath>`` rectangle in ``<defs>``.
"""

import logging
import xml.etree.ElementTree as ET
from itertools import count

from ..core.bounds import bounds_of
from ..core.picture import Clipped, PictureLike
from ..core.shapes import Bounds, Circle, Line, Rectangle, Shape, Text
from .text_render import format_number

logger = logging.getLogger(__name__)

SVG_NS = 'http://www.w3.org/2000/svg'


class _SvgBuilder:
    """Builds the element tree for one export, numbering clip paths."""

    def __init__(self, view: Bounds):
        self.view = view
        self.svg = ET.Element('svg')
        self.svg.set('xmlns', SVG_NS)
        self.svg.set('width', format_number(view.width))
        self.svg.set('height', format_number(view.height))
        self.svg.set('viewBox', ' '.join(format_number(v) for v in
                                         (view.left, view.top, view.width, view.height)))
        self._defs = None
        self._clip_ids = count(1)

    def _add_clip_path(self, clip: Bounds) -> str:
        if self._defs is None:
            self._defs = ET.Element('defs')
            self.svg.insert(0, self._defs)
        clip_id = f'clip{next(self._clip_ids)}'
        clip_path = ET.SubElement(self._defs, 'clipPath')
        clip_path.set('id', clip_id)
        _set_rect(ET.SubElement(clip_path, 'rect'), clip)
        return clip_id

    def add_picture(self, parent: ET.Element, picture: PictureLike) -> None:
        for shape in picture:
            self.add_shape(parent, shape)

    def add_shape(self, parent: ET.Element, shape: Shape) -> None:
        if isinstance(shape, Circle):
            elem = ET.SubElement(parent, 'circle')
            elem.set('cx', format_number(shape.center.x))
            elem.set('cy', format_number(shape.center.y))
            elem.set('r', format_number(shape.radius))
        elif isinstance(shape, Rectangle):
            _set_rect(ET.SubElement(parent, 'rect'), shape.get_bounding_box())
        elif isinstance(shape, Line):
            elem = ET.SubElement(parent, 'line')
            elem.set('x1', format_number(shape.start.x))
            elem.set('y1', format_number(shape.start.y))
            elem.set('x2', format_number(shape.end.x))
            elem.set('y2', format_number(shape.end.y))
        elif isinstance(shape, Text):
            elem = ET.SubElement(parent, 'text')
            elem.set('x', format_number(shape.location.x))
            elem.set('y', format_number(shape.location.y))
            elem.set('stroke', 'none')
            elem.set('fill', 'currentColor')
            elem.text = shape.content
        elif isinstance(shape, Clipped):
            group = ET.SubElement(parent, 'g')
            # Clip edges may be infinite; SVG needs a finite rectangle
            clip = shape.clip.intersect(self.view)
            if clip.is_empty:
                return
            group.set('clip-path', f'url(#{self._add_clip_path(clip)})')
            self.add_picture(group, shape.picture)
        else:
            raise TypeError(f"Unhandled shape variant: {type(shape).__name__}")


def _set_rect(elem: ET.Element, bounds: Bounds) -> None:
    elem.set('x', format_number(bounds.left))
    elem.set('y', format_number(bounds.top))
    elem.set('width', format_number(bounds.width))
    elem.set('height', format_number(bounds.height))


def _view_bounds(picture: PictureLike, margin: float) -> Bounds:
    bounds = bounds_of(picture)
    if bounds.is_empty:
        bounds = Bounds(0, 0, 0, 0)
    return Bounds(
        top=bounds.top - margin,
        left=bounds.left - margin,
        bottom=bounds.bottom + margin,
        right=bounds.right + margin
    )


def build_svg(picture: PictureLike, margin: float = 1.0,
              stroke: str = '#000000') -> ET.Element:
    """
    Build the SVG element tree for a picture.

    Args:
        picture: the picture to export
        margin: space added around the picture's bounds in the viewBox
        stroke: stroke colour for every shape

    Returns:
        The root ``<svg>`` element
    """
    if margin < 0:
        raise ValueError(f"margin must not be negative, got {margin}")
    picture = list(picture)
    builder = _SvgBuilder(_view_bounds(picture, margin))
    g = ET.SubElement(builder.svg, 'g')
    g.set('stroke', stroke)
    g.set('color', stroke)
    g.set('fill', 'none')
    builder.add_picture(g, picture)
    return builder.svg


def to_svg(picture: PictureLike, margin: float = 1.0, stroke: str = '#000000') -> str:
    """Export a picture as an SVG document string."""
    svg = build_svg(picture, margin, stroke)
    ET.indent(svg, space="  ")
    return ET.tostring(svg, encoding='unicode')


def export_svg(picture: PictureLike, filepath: str, margin: float = 1.0,
               stroke: str = '#000000') -> None:
    """Export a picture to an SVG file."""
    tree = ET.ElementTree(build_svg(picture, margin, stroke))
    ET.indent(tree, space="  ")
    tree.write(filepath, encoding='unicode', xml_declaration=True)
    logger.info("Exported SVG to %s", filepath)
