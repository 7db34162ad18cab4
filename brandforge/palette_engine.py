"""
palette_engine.py — Procedural brand palette synthesis.

Turns (industry, core values, six personality sliders) into five color roles:

  Primary     industry hue → value shift → slider nudges → anchor snap → nudge
  Secondary   analogous to Primary (±25–35°), softer
  Accent      triadic (playful) → complementary (serious), vivid
  Background  Primary hue, near-white
  Text        complement of Primary, near-black

Each role gets its own hue / saturation / lightness formula with small random
jitter, is clamped to a role-specific range, passed through the designer
override rules (bans.py) and finally converted to hex and a descriptive name.

Randomness comes from an injected source exposing `uniform(a, b)`; pass a
seeded `random.Random` (or any fixed-sequence object) for reproducible output.

Usage:
    from brandforge.palette_engine import generate_palette

    colors = generate_palette("Technology", ["Trust"], [50, 50, 50, 50, 50, 50])
    # → [Color(name='Azure', hex='#...', role='Primary'), ...]
"""

from __future__ import annotations

import random
from typing import Dict, List, Optional, Protocol, Sequence, Tuple

from .bans import enforce_bans
from .color_math import clamp, hsl_to_hex, lerp, normalize_hue
from .color_namer import name_color
from .hue_anchors import snap_to_anchor
from .models import COLOR_ROLES, MAX_SELECTIONS, Color, Sliders

HSL = Tuple[float, float, float]


class RandomSource(Protocol):
    def uniform(self, a: float, b: float) -> float: ...


# ── Lookup tables ─────────────────────────────────────────────────────────────

INDUSTRY_HUES: Dict[str, float] = {
    "Technology":        210,
    "Food & Beverage":    25,
    "Health & Wellness": 150,
    "Fashion":           330,
    "Finance":           220,
    "Education":         200,
    "Real Estate":        30,
    "Travel":            190,
    "Entertainment":     280,
    "Non-Profit":        165,
    "E-Commerce":         15,
    "Creative Agency":   300,
    "SaaS":              235,
    "Local Business":     35,
}
DEFAULT_INDUSTRY_HUE = 200.0

VALUE_HUE_SHIFTS: Dict[str, float] = {
    "Trust":          10,
    "Innovation":     20,
    "Sustainability": -40,
    "Quality":         0,
    "Creativity":     35,
    "Simplicity":      5,
    "Community":     -15,
    "Integrity":       8,
    "Passion":       -30,
    "Excellence":     15,
    "Courage":       -25,
    "Empathy":       -20,
    "Fun":            30,
}
VALUE_SHIFT_DAMPING = 0.4

# Jitter amplitudes (±)
BASE_HUE_JITTER = 6.0
PRIMARY_SAT_JITTER = 4.0
PRIMARY_LIGHT_JITTER = 3.0
SECONDARY_SAT_JITTER = 3.0
SECONDARY_LIGHT_JITTER = 3.0
ACCENT_SAT_JITTER = 4.0
ACCENT_LIGHT_JITTER = 3.0

MAX_PERSONALITY_NUDGE = 15.0


def _jitter(rng: RandomSource, amount: float) -> float:
    return rng.uniform(-amount, amount)


# ── Hue pipeline ──────────────────────────────────────────────────────────────

def industry_hue(industry: str) -> float:
    """Base hue for an industry; unknown / free-text industries get 200°."""
    if industry in INDUSTRY_HUES:
        return float(INDUSTRY_HUES[industry])
    key = industry.strip().lower()
    for name, hue in INDUSTRY_HUES.items():
        if name.lower() == key:
            return float(hue)
    return DEFAULT_INDUSTRY_HUE


def value_shift(values: Sequence[str]) -> float:
    """Dampened mean hue shift of the selected core values (unknown → 0)."""
    selected = list(values)[:MAX_SELECTIONS]
    if not selected:
        return 0.0
    shifts = [float(VALUE_HUE_SHIFTS.get(v, 0.0)) for v in selected]
    return VALUE_SHIFT_DAMPING * (sum(shifts) / len(shifts))


def slider_nudge(sl: Sliders) -> float:
    """Formal brands drift cooler-left, authoritative brands drift right."""
    return (sl.casual_formal - 0.5) * -15 + (sl.friend_authority - 0.5) * 10


def personality_nudge(sl: Sliders) -> float:
    """Post-anchor nudge, capped at ±15°."""
    nudge = (sl.playful_serious - 0.5) * 10 + (sl.young_mature - 0.5) * -8
    return clamp(nudge, -MAX_PERSONALITY_NUDGE, MAX_PERSONALITY_NUDGE)


def primary_hue(
    industry: str,
    values: Sequence[str],
    sl: Sliders,
    rng: RandomSource,
) -> float:
    hue = industry_hue(industry) + _jitter(rng, BASE_HUE_JITTER)
    hue += value_shift(values)
    hue += slider_nudge(sl)
    return snap_to_anchor(hue) + personality_nudge(sl)


# ── Role formulas ─────────────────────────────────────────────────────────────

def synthesize_hsl(
    industry: str,
    values: Sequence[str],
    sliders: Sequence[float],
    rng: Optional[RandomSource] = None,
) -> Dict[str, HSL]:
    """
    Raw (pre-override) HSL triple for each role.

    Hues are normalized to [0, 360); saturation / lightness are already
    clamped to each role's range.
    """
    rng = rng or random.Random()
    sl = Sliders.from_values(sliders)

    # Primary
    p_h = primary_hue(industry, values, sl, rng)
    p_s = (
        lerp(75, 55, sl.young_mature)
        + (0.5 - sl.playful_serious) * 10
        + (0.5 - sl.loud_quiet) * 10
        + _jitter(rng, PRIMARY_SAT_JITTER)
    )
    p_s = clamp(p_s, 52, 78)
    p_l = clamp(lerp(55, 40, sl.mass_elite) + _jitter(rng, PRIMARY_LIGHT_JITTER), 38, 57)

    # Secondary — analogous, direction flips for formal brands
    direction = -1.0 if sl.casual_formal > 0.5 else 1.0
    s_h = p_h + direction * lerp(25, 35, sl.friend_authority)
    s_s = clamp(
        p_s - lerp(15, 25, sl.young_mature) + _jitter(rng, SECONDARY_SAT_JITTER),
        32, 58,
    )
    s_l = clamp(lerp(60, 45, sl.mass_elite) + _jitter(rng, SECONDARY_LIGHT_JITTER), 43, 62)

    # Accent — triadic when playful, complementary when serious
    a_h = p_h + lerp(120, 180, sl.playful_serious)
    a_s = clamp(p_s + 15 + _jitter(rng, ACCENT_SAT_JITTER), 67, 93)
    a_l = clamp(lerp(55, 45, sl.loud_quiet) + _jitter(rng, ACCENT_LIGHT_JITTER), 43, 57)

    # Background
    b_h = p_h
    b_s = clamp(lerp(15, 5, sl.casual_formal), 5, 15)
    b_l = clamp(lerp(98, 95, sl.mass_elite), 95, 98)

    # Text
    t_h = p_h + 180
    t_s = clamp(lerp(25, 10, sl.loud_quiet), 10, 25)
    t_l = clamp(lerp(18, 8, sl.mass_elite), 8, 18)

    return {
        "Primary":    (normalize_hue(p_h), p_s, p_l),
        "Secondary":  (normalize_hue(s_h), s_s, s_l),
        "Accent":     (normalize_hue(a_h), a_s, a_l),
        "Background": (normalize_hue(b_h), b_s, b_l),
        "Text":       (normalize_hue(t_h), t_s, t_l),
    }


def build_color(role: str, h: float, s: float, l: float) -> Color:
    """Run the override rules on a triple and turn it into a named Color."""
    h, s, l = enforce_bans(h, s, l)
    return Color(name=name_color(h, s, l), hex=hsl_to_hex(h, s, l), role=role, hsl=(h, s, l))


# ── Public API ────────────────────────────────────────────────────────────────

def generate_palette(
    industry: str,
    values: Sequence[str],
    sliders: Sequence[float],
    rng: Optional[RandomSource] = None,
) -> List[Color]:
    """
    Generate a five-color brand palette.

    Args:
        industry: One of models.INDUSTRIES, or free text (falls back to 200°)
        values:   Up to 3 core values; extras are ignored
        sliders:  Six 0–100 slider values in models.SLIDER_AXES order
        rng:      Random source for jitter (default: a fresh random.Random)

    Returns:
        [Primary, Secondary, Accent, Background, Text]
    """
    triples = synthesize_hsl(industry, values, sliders, rng=rng)
    return [build_color(role, *triples[role]) for role in COLOR_ROLES]
