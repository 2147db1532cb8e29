"""
Raster Preview for PictureBox

Paints a picture onto an offscreen QImage with QPainter and returns the
pixels as a grayscale numpy array. Clipped sub-pictures are painted with
the painter's clip rectangle set to the intersection of every enclosing
clip.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QColor, QGuiApplication, QImage, QPainter, QPen

from ..core.bounds import bounds_of
from ..core.picture import Clipped, PictureLike
from ..core.shapes import Bounds, Circle, Line, Rectangle, Shape, Text

logger = logging.getLogger(__name__)

_app: Optional[QGuiApplication] = None
_DONE = object()


@dataclass
class PreviewSettings:
    """Image size and colours for a raster preview."""
    width: int = 400             # pixels
    height: int = 300            # pixels
    margin: int = 10             # pixels kept clear around the picture
    pen_width: float = 1.0       # pixels, independent of zoom
    background: int = 255        # grey level (0-255)
    ink: int = 0                 # grey level (0-255)

    def validate(self) -> Tuple[bool, str]:
        """
        Validate the settings.

        Returns:
            (is_valid, error_message)
        """
        if self.width <= 0 or self.height <= 0:
            return False, "Image width and height must be positive"
        if self.margin < 0:
            return False, "Margin must not be negative"
        if 2 * self.margin >= min(self.width, self.height):
            return False, "Margin leaves no room for the picture"
        if self.pen_width <= 0:
            return False, "Pen width must be positive"
        for name in ('background', 'ink'):
            if not 0 <= getattr(self, name) <= 255:
                return False, f"{name} must be a grey level between 0 and 255"
        return True, ""


def _ensure_gui_application() -> None:
    """QPainter needs a QGuiApplication for text; create an offscreen one."""
    global _app
    if QGuiApplication.instance() is not None:
        return
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    _app = QGuiApplication([])
    logger.debug("Created offscreen QGuiApplication for raster preview")


def _qrect(bounds: Bounds) -> QRectF:
    return QRectF(bounds.left, bounds.top, bounds.width, bounds.height)


class _PicturePainter:
    """Draws shapes in picture coordinates through a fitted transform."""

    def __init__(self, painter: QPainter):
        self.painter = painter

    def draw_picture(self, picture: PictureLike, clip: Bounds) -> None:
        """
        Draw every shape, nesting painter state for each clipped sub-picture.

        Each frame on the stack is a picture still being drawn and the clip
        in force for it; every frame above the first holds a painter save().
        """
        p = self.painter
        frames = [(iter(picture), clip)]
        while frames:
            shapes, current_clip = frames[-1]
            shape = next(shapes, _DONE)
            if shape is _DONE:
                frames.pop()
                if frames:
                    p.restore()
            elif isinstance(shape, Clipped):
                inner_clip = current_clip.intersect(shape.clip)
                if inner_clip.is_empty:
                    continue
                p.save()
                p.setClipRect(_qrect(inner_clip), Qt.ClipOperation.ReplaceClip)
                frames.append((iter(shape.picture), inner_clip))
            else:
                self.draw_shape(shape)

    def draw_shape(self, shape: Shape) -> None:
        p = self.painter
        if isinstance(shape, Circle):
            p.drawEllipse(QPointF(shape.center.x, shape.center.y),
                          shape.radius, shape.radius)
        elif isinstance(shape, Rectangle):
            p.drawRect(_qrect(shape.get_bounding_box()))
        elif isinstance(shape, Line):
            p.drawLine(QPointF(shape.start.x, shape.start.y),
                       QPointF(shape.end.x, shape.end.y))
        elif isinstance(shape, Text):
            p.drawText(QPointF(shape.location.x, shape.location.y), shape.content)
        else:
            raise TypeError(f"Unhandled shape variant: {type(shape).__name__}")


def _fit_scale(view: Bounds, avail_w: float, avail_h: float) -> float:
    scale_x = avail_w / view.width if view.width > 0 else float('inf')
    scale_y = avail_h / view.height if view.height > 0 else float('inf')
    scale = min(scale_x, scale_y)
    return 1.0 if scale == float('inf') else scale


def paint_image(picture: PictureLike, settings: Optional[PreviewSettings] = None) -> QImage:
    """
    Paint a picture onto a new grayscale QImage.

    The picture's bounds are scaled uniformly to fit inside the image
    margins and centered. A picture with empty bounds gives a blank image.
    """
    settings = settings or PreviewSettings()
    is_valid, error = settings.validate()
    if not is_valid:
        raise ValueError(error)

    _ensure_gui_application()
    picture = list(picture)

    image = QImage(settings.width, settings.height, QImage.Format.Format_Grayscale8)
    bg = settings.background
    image.fill(QColor(bg, bg, bg))

    view = bounds_of(picture)
    if view.is_empty:
        return image

    avail_w = settings.width - 2 * settings.margin
    avail_h = settings.height - 2 * settings.margin
    scale = _fit_scale(view, avail_w, avail_h)
    offset_x = settings.margin + (avail_w - view.width * scale) / 2 - view.left * scale
    offset_y = settings.margin + (avail_h - view.height * scale) / 2 - view.top * scale

    painter = QPainter(image)
    try:
        ink = settings.ink
        pen = QPen(QColor(ink, ink, ink))
        pen.setWidthF(settings.pen_width)
        pen.setCosmetic(True)
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.translate(offset_x, offset_y)
        painter.scale(scale, scale)
        _PicturePainter(painter).draw_picture(picture, view)
    finally:
        painter.end()
    return image


def image_to_array(image: QImage) -> np.ndarray:
    """Copy a Format_Grayscale8 QImage into a (height, width) uint8 array."""
    ptr = image.constBits()
    ptr.setsize(image.sizeInBytes())
    rows = np.frombuffer(ptr, dtype=np.uint8).reshape(image.height(), image.bytesPerLine())
    return rows[:, :image.width()].copy()


def rasterize(picture: PictureLike, settings: Optional[PreviewSettings] = None) -> np.ndarray:
    """Render a picture to a grayscale numpy array of shape (height, width)."""
    return image_to_array(paint_image(picture, settings))


def save_png(picture: PictureLike, filepath: str,
             settings: Optional[PreviewSettings] = None) -> None:
    """Write a raster preview of a picture to a PNG file."""
    image = paint_image(picture, settings)
    if not image.save(filepath, "PNG"):
        raise OSError(f"Could not write PNG preview to {filepath}")
    logger.info("Saved PNG preview to %s", filepath)
