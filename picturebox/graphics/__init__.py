"""
PictureBox Graphics Module

Raster previews of pictures, painted with QPainter:
- PreviewSettings: image size and colours
- rasterize: picture to grayscale numpy array
- save_png: picture to PNG file
"""

from .raster import PreviewSettings, paint_image, image_to_array, rasterize, save_png

__all__ = [
    'PreviewSettings',
    'paint_image',
    'image_to_array',
    'rasterize',
    'save_png',
]
