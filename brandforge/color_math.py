"""
color_math.py — Small color conversions shared by the palette engine,
the accessibility checker and the export renderer.

HSL values follow the CSS convention used throughout BrandForge:
  H: degrees 0–360, S: percent 0–100, L: percent 0–100
"""

from __future__ import annotations

import math
from typing import Tuple


def normalize_hue(hue: float) -> float:
    """Wrap any real hue (including negatives) into [0, 360)."""
    h = hue % 360.0
    # -1e-15 % 360 rounds to 360.0
    return 0.0 if h >= 360.0 else h


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation a → b, t in [0, 1]."""
    return a + (b - a) * t


def round_half_up(value: float) -> int:
    """Nearest integer, .5 rounding up (Python's round() goes to even)."""
    return int(math.floor(value + 0.5))


# ── HSL ↔ RGB ─────────────────────────────────────────────────────────────────

def hsl_to_rgb(h: float, s: float, l: float) -> Tuple[int, int, int]:
    """HSL (H: 0–360, S/L: 0–100) → RGB (0–255), channels rounded."""
    H = normalize_hue(h)
    S = clamp(s, 0.0, 100.0) / 100.0
    L = clamp(l, 0.0, 100.0) / 100.0

    C = (1 - abs(2 * L - 1)) * S
    X = C * (1 - abs((H / 60) % 2 - 1))
    m = L - C / 2
    if   H < 60:  r, g, b = C, X, 0.0
    elif H < 120: r, g, b = X, C, 0.0
    elif H < 180: r, g, b = 0.0, C, X
    elif H < 240: r, g, b = 0.0, X, C
    elif H < 300: r, g, b = X, 0.0, C
    else:         r, g, b = C, 0.0, X

    return (
        round_half_up((r + m) * 255),
        round_half_up((g + m) * 255),
        round_half_up((b + m) * 255),
    )


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f"#{r:02X}{g:02X}{b:02X}"


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """HSL → '#RRGGBB' (uppercase)."""
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def hex_to_rgb(hex_str: str) -> Tuple[int, int, int]:
    h = hex_str.strip().lstrip("#")
    if len(h) == 3:
        h = "".join(c * 2 for c in h)
    if len(h) != 6:
        raise ValueError(f"Not a hex color: {hex_str!r}")
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def rgb_to_cmyk(r: int, g: int, b: int) -> Tuple[int, int, int, int]:
    """Convert RGB (0-255) → CMYK (0-100 percent)."""
    if r == g == b == 0:
        return 0, 0, 0, 100
    rf, gf, bf = r / 255, g / 255, b / 255
    k = 1 - max(rf, gf, bf)
    c = (1 - rf - k) / (1 - k)
    m = (1 - gf - k) / (1 - k)
    y = (1 - bf - k) / (1 - k)
    return round(c * 100), round(m * 100), round(y * 100), round(k * 100)


# ── Luminance ─────────────────────────────────────────────────────────────────

def brightness(rgb: Tuple[int, int, int]) -> float:
    """Perceived brightness 0–255, used to pick label colors on swatches."""
    return 0.299 * rgb[0] + 0.587 * rgb[1] + 0.114 * rgb[2]


def relative_luminance(hex_str: str) -> float:
    """WCAG 2.x relative luminance (0 = black, 1 = white)."""

    def _linear(c: int) -> float:
        cs = c / 255
        if cs <= 0.03928:
            return cs / 12.92
        return ((cs + 0.055) / 1.055) ** 2.4

    r, g, b = hex_to_rgb(hex_str)
    return 0.2126 * _linear(r) + 0.7152 * _linear(g) + 0.0722 * _linear(b)
