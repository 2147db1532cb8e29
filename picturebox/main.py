#!/usr/bin/env python3
"""
PictureBox - Main Entry Point

Builds the demo picture, prints its text rendering and bounds, and
optionally writes SVG and PNG previews.
Run with: python -m picturebox.main
"""

import argparse
import logging
import sys
from typing import List, Optional

from .core import Bounds, Circle, Line, Picture, Point, Rectangle, Text, bounds_of
from .io import export_svg, render, render_bounds

logger = logging.getLogger(__name__)


def demo_picture() -> Picture:
    """A picture using every shape kind, including a clipped sub-picture."""
    inset = Picture([
        Circle(Point(60, 20), 15),
        Line(Point(40, 0), Point(80, 40)),
    ])
    return Picture([
        Circle(Point(0, 0), 10),
        Rectangle(Point(20, 5), 30, 10),
        Line(Point(-10, 30), Point(40, 30)),
        Text(Point(0, 40), "Hello"),
        inset.clipped(Bounds(top=10, left=50, bottom=30, right=70)),
    ])


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="picturebox",
        description="Render the demo picture and report its bounds",
    )
    parser.add_argument("--svg", metavar="PATH", help="write an SVG export")
    parser.add_argument("--png", metavar="PATH", help="write a raster preview")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for PictureBox."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        picture = demo_picture()
        print(render(picture))
        print(render_bounds(bounds_of(picture)))

        if args.svg:
            export_svg(picture, args.svg)
        if args.png:
            # Qt is only needed for raster output
            from .graphics import save_png
            save_png(picture, args.png)
        return 0
    except (OSError, ValueError) as e:
        logger.error("Fatal error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
