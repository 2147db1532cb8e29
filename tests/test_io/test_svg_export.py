"""
Tests for SVG export.
"""

import os
import tempfile
import unittest
import xml.etree.ElementTree as ET

from picturebox.core import (
    Bounds, Circle, Clipped, Line, Picture, Point, Rectangle, Shape, Text, empty
)
from picturebox.io import build_svg, export_svg, to_svg

NS = {'svg': 'http://www.w3.org/2000/svg'}


class TestBuildSvg(unittest.TestCase):
    """Test the element tree built for a picture."""

    def test_view_box_from_bounds(self):
        svg = build_svg(Picture([Circle(Point(0, 0), 10)]), margin=1)
        self.assertEqual(svg.get('viewBox'), '-11 -11 22 22')
        self.assertEqual(svg.get('width'), '22')

    def test_empty_picture(self):
        svg = build_svg(Picture(), margin=0)
        self.assertEqual(svg.get('viewBox'), '0 0 0 0')
        self.assertEqual(len(svg.find('g')), 0)

    def test_shape_elements(self):
        picture = Picture([
            Circle(Point(0, 0), 10),
            Rectangle(Point(10, 10), 4, 2),
            Line(Point(0, 0), Point(1, 1)),
            Text(Point(3, 4), "a < b"),
        ])
        g = build_svg(picture).find('g')
        self.assertEqual([child.tag for child in g], ['circle', 'rect', 'line', 'text'])

        rect = g.find('rect')
        self.assertEqual(
            (rect.get('x'), rect.get('y'), rect.get('width'), rect.get('height')),
            ('8', '9', '4', '2')
        )
        line = g.find('line')
        self.assertEqual(line.get('x2'), '1')
        self.assertEqual(g.find('text').text, "a < b")

    def test_clipped_uses_clip_path(self):
        inner = Picture([Circle(Point(0, 0), 10)])
        clip = Bounds(top=-5, left=-5, bottom=5, right=5)
        svg = build_svg(Picture([Clipped(inner, clip)]), margin=0)

        clip_path = svg.find('defs/clipPath')
        self.assertIsNotNone(clip_path)
        clip_id = clip_path.get('id')
        self.assertEqual(clip_path.find('rect').get('width'), '10')

        group = svg.find('g/g')
        self.assertEqual(group.get('clip-path'), f'url(#{clip_id})')
        self.assertEqual(group[0].tag, 'circle')

    def test_clip_ids_unique(self):
        clip = Bounds(top=0, left=0, bottom=5, right=5)
        inner = Picture([Circle(Point(1, 1), 1)])
        picture = Picture([Clipped(inner, clip), Clipped(Picture([Clipped(inner, clip)]), clip)])
        ids = [cp.get('id') for cp in build_svg(picture).iter('clipPath')]
        self.assertEqual(len(ids), 3)
        self.assertEqual(len(set(ids)), 3)

    def test_empty_clip_draws_nothing(self):
        inner = Picture([Circle(Point(0, 0), 10)])
        svg = build_svg(Picture([Line(Point(0, 0), Point(1, 1)), Clipped(inner, empty())]))
        groups = svg.findall('g/g')
        self.assertEqual(len(groups), 1)
        self.assertEqual(len(groups[0]), 0)
        self.assertIsNone(svg.find('defs'))

    def test_negative_margin(self):
        with self.assertRaises(ValueError):
            build_svg(Picture(), margin=-1)

    def test_unhandled_variant(self):
        class Star(Shape):
            pass

        with self.assertRaises(TypeError):
            build_svg([Star()])


class TestSvgOutput(unittest.TestCase):
    """Test serialised SVG documents."""

    def test_to_svg_parses(self):
        text = to_svg(Picture([Circle(Point(0, 0), 10)]))
        root = ET.fromstring(text)
        self.assertEqual(root.tag, '{http://www.w3.org/2000/svg}svg')
        self.assertEqual(len(root.findall('.//svg:circle', NS)), 1)

    def test_export_svg_writes_file(self):
        picture = Picture([Line(Point(0, 0), Point(10, 10))])
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'out.svg')
            export_svg(picture, path)
            with open(path, 'r', encoding='utf-8') as f:
                content = f.read()
        self.assertTrue(content.startswith('<?xml'))
        self.assertEqual(len(ET.fromstring(content.split('?>', 1)[1].strip()).findall('.//svg:line', NS)), 1)


if __name__ == '__main__':
    unittest.main()
