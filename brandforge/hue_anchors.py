"""
hue_anchors.py — Curated designer hue anchors.

Raw hues computed by the palette engine are snapped to the nearest anchor
so every generated Primary sits on a hue a designer would actually pick.
The yellow / yellow-green stretch (45°–90°) is deliberately sparse.
"""

from __future__ import annotations

from typing import Tuple

from .color_math import normalize_hue

# Iteration order matters: on an exact tie the first anchor wins.
ANCHOR_HUES: Tuple[float, ...] = (
    0, 8, 15, 22, 30, 38, 45,           # reds → ambers
    62,                                 # olive gold
    90, 105, 120, 135, 145,             # greens
    155, 165, 175, 185, 195, 200,       # teals → cyans
    210, 220, 228, 235, 245,            # blues
    255, 265, 275, 285, 295,            # indigos → purples
    305, 315, 325, 335, 345, 352,       # magentas → rose
)


def hue_distance(a: float, b: float) -> float:
    """Shortest angular distance between two hues, in degrees (0–180)."""
    d = abs(normalize_hue(a) - normalize_hue(b))
    return min(d, 360.0 - d)


def snap_to_anchor(hue: float) -> float:
    """Return the anchor hue closest to `hue` (any real value, wraps at 360)."""
    h = normalize_hue(hue)
    best = ANCHOR_HUES[0]
    best_dist = hue_distance(h, best)
    for anchor in ANCHOR_HUES[1:]:
        dist = hue_distance(h, anchor)
        if dist < best_dist:
            best, best_dist = anchor, dist
    return float(best)


def largest_anchor_gap() -> float:
    """Widest circular gap between consecutive anchors."""
    ordered = sorted(ANCHOR_HUES)
    gaps = [b - a for a, b in zip(ordered, ordered[1:])]
    gaps.append(360 - ordered[-1] + ordered[0])
    return float(max(gaps))
