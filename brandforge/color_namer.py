"""
color_namer.py — Descriptive names for generated colors.

Lookup order:
  lightness > 90  → pastel name by hue bucket
  lightness < 20  → deep name by hue bucket
  otherwise       → hue band, then a 2×2 grid of
                    (saturation > 60) × (lightness > 52)
"""

from __future__ import annotations

from typing import Tuple

from .color_math import normalize_hue

# (upper hue bound exclusive, name) — scanned in order
PASTEL_NAMES: Tuple[Tuple[float, str], ...] = (
    (20,  "Blush"),
    (50,  "Peach"),
    (70,  "Cream"),
    (160, "Mint"),
    (200, "Ice"),
    (260, "Powder Blue"),
    (320, "Lavender"),
    (360, "Petal"),
)

DEEP_NAMES: Tuple[Tuple[float, str], ...] = (
    (20,  "Maroon"),
    (50,  "Espresso"),
    (70,  "Dark Olive"),
    (160, "Deep Forest"),
    (200, "Deep Teal"),
    (260, "Midnight Navy"),
    (320, "Deep Plum"),
    (360, "Black Cherry"),
)

# (start inclusive, end exclusive, (vivid-light, vivid-dark, muted-light, muted-dark))
# The red band wraps: 345–360 and 0–15.
HUE_BANDS: Tuple[Tuple[float, float, Tuple[str, str, str, str]], ...] = (
    (345, 15,  ("Scarlet",     "Crimson",      "Dusty Rose",  "Oxblood")),
    (15,  30,  ("Tangerine",   "Rust",         "Apricot",     "Sienna")),
    (30,  45,  ("Amber",       "Burnt Orange", "Sand",        "Bronze")),
    (45,  55,  ("Marigold",    "Ochre",        "Wheat",       "Brass")),
    (55,  65,  ("Lemon",       "Mustard",      "Butter",      "Olive")),
    (65,  90,  ("Chartreuse",  "Moss",         "Pistachio",   "Olive Drab")),
    (90,  120, ("Lime",        "Fern",         "Sage",        "Lichen")),
    (120, 145, ("Kelly Green", "Forest",       "Celadon",     "Pine")),
    (145, 165, ("Emerald",     "Jade",         "Seafoam",     "Spruce")),
    (165, 180, ("Aquamarine",  "Teal",         "Sea Glass",   "Slate Teal")),
    (180, 195, ("Turquoise",   "Peacock",      "Aqua Mist",   "Lagoon")),
    (195, 210, ("Cerulean",    "Prussian",     "Sky",         "Steel Blue")),
    (210, 230, ("Azure",       "Sapphire",     "Cornflower",  "Denim")),
    (230, 250, ("Royal Blue",  "Navy",         "Periwinkle",  "Slate Blue")),
    (250, 270, ("Violet",      "Indigo",       "Wisteria",    "Dusk")),
    (270, 290, ("Amethyst",    "Royal Purple", "Lilac",       "Aubergine")),
    (290, 310, ("Orchid",      "Plum",         "Mauve",       "Eggplant")),
    (310, 330, ("Fuchsia",     "Mulberry",     "Orchid Pink", "Wine")),
    (330, 345, ("Hot Pink",    "Raspberry",    "Blush Pink",  "Burgundy")),
)


def _bucket(hue: float, table: Tuple[Tuple[float, str], ...]) -> str:
    for upper, name in table:
        if hue < upper:
            return name
    return table[-1][1]


def _in_band(hue: float, start: float, end: float) -> bool:
    if start <= end:
        return start <= hue < end
    return hue >= start or hue < end


def name_color(h: float, s: float, l: float) -> str:
    """Map an (h, s, l) triple to a human-readable color name."""
    hue = normalize_hue(h)

    if l > 90:
        return _bucket(hue, PASTEL_NAMES)
    if l < 20:
        return _bucket(hue, DEEP_NAMES)

    for start, end, names in HUE_BANDS:
        if _in_band(hue, start, end):
            vivid_light, vivid_dark, muted_light, muted_dark = names
            if s > 60:
                return vivid_light if l > 52 else vivid_dark
            return muted_light if l > 52 else muted_dark

    # unreachable: HUE_BANDS covers the full circle
    return "Gray"
