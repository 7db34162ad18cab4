"""
Style tile export (palette_renderer).
Run from project root: python -m pytest tests/ -v
"""
import random
import tempfile
import unittest
from pathlib import Path

from PIL import Image

from brandforge.assembler import assemble_brand
from brandforge.color_math import hex_to_rgb
from brandforge.models import BrandInputs
from brandforge.palette_renderer import STRIP_GAP, export_style_tile, render_style_tile, strip_layout


class TestStyleTile(unittest.TestCase):

    def setUp(self):
        kit = assemble_brand(BrandInputs(name="Luminary", industry="Technology"), rng=random.Random(9))
        # plain ASCII icon so the bitmap fallback font can draw it too
        self.kit = kit.model_copy(update={"logo_icon": "*"})

    def test_size_and_hero_color(self):
        img = render_style_tile(self.kit, width=1000, height=500)
        self.assertEqual(img.size, (1000, 500))
        self.assertEqual(img.mode, "RGB")
        self.assertEqual(img.getpixel((3, 3)), hex_to_rgb(self.kit.color("Primary").hex))

    def test_strip_colors_follow_palette_order(self):
        width, height = 1000, 500
        img = render_style_tile(self.kit, width=width, height=height)
        hero_h, strip_w, footer_h, _ = strip_layout(width, height, len(self.kit.colors))
        y = hero_h + (height - hero_h - footer_h) // 2
        for i, color in enumerate(self.kit.colors):
            x = i * (strip_w + STRIP_GAP) + strip_w - 6
            self.assertEqual(img.getpixel((x, y)), hex_to_rgb(color.hex), color.role)

    def test_export_writes_png(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = export_style_tile(self.kit, Path(tmp) / "out" / "tile.png", width=600, height=300)
            self.assertTrue(path.exists())
            with Image.open(path) as img:
                self.assertEqual(img.format, "PNG")
                self.assertEqual(img.size, (600, 300))


if __name__ == "__main__":
    unittest.main()
