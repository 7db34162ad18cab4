"""
palette_renderer.py — Render a BrandKit as a style tile PNG (export kit).

Layout:
  ┌────────────────────────────────────────────┐
  │              ◆  LUMINARY                   │  ← hero band in Primary,
  │            Built for tomorrow.             │    text in Background
  ├────────┬────────┬────────┬────────┬────────┤
  │PRIMARY │SECOND. │ACCENT  │BACKGR. │TEXT    │  ← role badge
  │        │        │        │        │        │
  │NAME    │NAME    │NAME    │NAME    │NAME    │  ← color name
  ├────────┼────────┼────────┼────────┼────────┤
  │#HEX    │#HEX    │#HEX    │#HEX    │#HEX    │  ← hex + CMYK footer
  │C M Y K │        │        │        │        │
  └────────┴────────┴────────┴────────┴────────┘

Usage:
    from brandforge.palette_renderer import export_style_tile

    path = export_style_tile(kit, "out/luminary_style_tile.png")
"""

from __future__ import annotations

from pathlib import Path
from typing import Tuple, Union

from PIL import Image, ImageDraw, ImageFont

from .color_math import brightness, hex_to_rgb, rgb_to_cmyk
from .models import BrandKit

HERO_RATIO = 0.42    # share of the height used by the hero band
STRIP_GAP = 3
NAME_PAD = 18

# ── Font helpers ────────────────────────────────────────────────────────────

_FONT_CANDIDATES = [
    "/System/Library/Fonts/HelveticaNeue.ttc",
    "/System/Library/Fonts/Helvetica.ttc",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
    "/usr/share/fonts/truetype/freefont/FreeSans.ttf",
]

_FONT_BOLD_CANDIDATES = [
    "/System/Library/Fonts/HelveticaNeue.ttc",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf",
    "/usr/share/fonts/truetype/freefont/FreeSansBold.ttf",
]


def _load_font(size: int, bold: bool = False) -> ImageFont.FreeTypeFont:
    candidates = _FONT_BOLD_CANDIDATES if bold else _FONT_CANDIDATES
    for path in candidates:
        try:
            return ImageFont.truetype(path, size)
        except OSError:
            continue
    return ImageFont.load_default()


def _text_size(draw: ImageDraw.ImageDraw, text: str, font) -> Tuple[int, int]:
    bb = draw.textbbox((0, 0), text, font=font)
    return bb[2] - bb[0], bb[3] - bb[1]


# ── Color utilities ─────────────────────────────────────────────────────────

def _text_color(bg_rgb: Tuple[int, int, int]) -> Tuple[int, int, int]:
    """Return white or near-black text for best contrast."""
    return (255, 255, 255) if brightness(bg_rgb) < 145 else (20, 20, 20)


def _muted_text_color(bg_rgb: Tuple[int, int, int]) -> Tuple[int, int, int]:
    if brightness(bg_rgb) < 145:
        return (210, 210, 215)
    return (70, 70, 80)


def _footer_bg(bg_rgb: Tuple[int, int, int]) -> Tuple[int, int, int]:
    """Slightly darker/lighter footer strip for contrast."""
    factor = 0.80 if brightness(bg_rgb) > 100 else 1.25
    return tuple(min(255, max(0, int(c * factor))) for c in bg_rgb)


# ── Core renderer ───────────────────────────────────────────────────────────

def strip_layout(width: int, height: int, n: int) -> Tuple[int, int, int, int]:
    """(hero_h, strip_w, footer_h, remainder) for a tile of the given size."""
    hero_h = int(height * HERO_RATIO)
    strip_h = height - hero_h
    footer_h = max(80, int(strip_h * 0.25))
    total_gap = STRIP_GAP * (n - 1)
    strip_w = (width - total_gap) // n
    remainder = width - total_gap - strip_w * n
    return hero_h, strip_w, footer_h, remainder


def render_style_tile(kit: BrandKit, width: int = 2400, height: int = 1200) -> Image.Image:
    """Render the kit's hero band and palette strips as an RGB image."""
    by_role = {c.role: c for c in kit.colors}
    primary_rgb = hex_to_rgb(by_role["Primary"].hex)
    hero_text_rgb = hex_to_rgb(by_role["Background"].hex)

    n = len(kit.colors)
    hero_h, strip_w, footer_h, remainder = strip_layout(width, height, n)

    img = Image.new("RGB", (width, height), (12, 12, 16))
    draw = ImageDraw.Draw(img)

    # ── Hero band ───────────────────────────────────────────────────────────
    draw.rectangle([0, 0, width - 1, hero_h - 1], fill=primary_rgb)

    font_logo = _load_font(max(24, hero_h // 4), bold=True)
    font_tag = _load_font(max(14, hero_h // 10))

    logo_line = f"{kit.logo_icon}  {kit.logo_text}"
    lw, lh = _text_size(draw, logo_line, font_logo)
    tw, th = _text_size(draw, kit.tagline, font_tag)
    block_h = lh + 24 + th
    top = (hero_h - block_h) // 2
    draw.text(((width - lw) // 2, top), logo_line, fill=hero_text_rgb, font=font_logo)
    draw.text(((width - tw) // 2, top + lh + 24), kit.tagline, fill=hero_text_rgb, font=font_tag)

    # ── Strips ──────────────────────────────────────────────────────────────
    font_name = _load_font(max(12, min(28, int(strip_w * 0.06))), bold=True)
    font_hex = _load_font(max(10, min(22, int(strip_w * 0.05))))
    font_small = _load_font(max(9, min(16, int(strip_w * 0.04))))

    for i, color in enumerate(kit.colors):
        rgb = hex_to_rgb(color.hex)
        footer_rgb = _footer_bg(rgb)

        sw = strip_w + (remainder if i == n - 1 else 0)
        sx = i * (strip_w + STRIP_GAP)
        fill_bottom = height - footer_h

        draw.rectangle([sx, hero_h, sx + sw - 1, fill_bottom - 1], fill=rgb)
        draw.rectangle([sx, fill_bottom, sx + sw - 1, height - 1], fill=footer_rgb)

        draw.text((sx + NAME_PAD, hero_h + 10), color.role.upper(),
                  fill=_muted_text_color(rgb), font=font_small)

        name_short = color.name[:15]
        _, nh = _text_size(draw, name_short, font_name)
        draw.text((sx + NAME_PAD, fill_bottom - nh - 14), name_short.upper(),
                  fill=_text_color(rgb), font=font_name)

        footer_y = fill_bottom + 10
        draw.text((sx + NAME_PAD, footer_y), color.hex,
                  fill=_text_color(footer_rgb), font=font_hex)
        footer_y += _text_size(draw, color.hex, font_hex)[1] + 6
        c, m, y, k = rgb_to_cmyk(*rgb)
        draw.text((sx + NAME_PAD, footer_y), f"C{c} M{m} Y{y} K{k}",
                  fill=_muted_text_color(footer_rgb), font=font_small)

    return img


# ── Standalone export ───────────────────────────────────────────────────────

def export_style_tile(
    kit: BrandKit,
    output_path: Union[str, Path],
    width: int = 2400,
    height: int = 1200,
) -> Path:
    """Render the style tile and save as PNG. Returns the saved path."""
    img = render_style_tile(kit, width=width, height=height)
    out = Path(output_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    img.save(str(out), "PNG")
    return out
