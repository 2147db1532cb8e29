"""
PictureBox I/O Module

Handles textual and SVG output of pictures.
"""

from .text_render import render, render_shape, render_bounds
from .svg_export import build_svg, to_svg, export_svg

__all__ = ['render', 'render_shape', 'render_bounds', 'build_svg', 'to_svg', 'export_svg']
