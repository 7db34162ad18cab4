"""
assembler.py — Combine the generated palette with fonts, personality traits,
a tagline and a logo prompt into a BrandKit.

Everything here is table lookup plus random pool selection; the only
"design" logic is picking a vibe from the sliders, which decides which
font and trait pools are used.
"""

from __future__ import annotations

import random
from typing import Dict, List, Optional, Sequence

from .models import SLIDER_AXES, BrandInputs, BrandKit, Color, FontPair, Sliders
from .palette_engine import generate_palette

# ── Vibes ─────────────────────────────────────────────────────────────────────

VIBES: List[str] = [
    "Minimal & Clean", "Bold & Energetic", "Luxurious & Premium", "Playful & Fun",
    "Earthy & Organic", "Techy & Modern", "Classic & Timeless", "Edgy & Disruptive",
]
DEFAULT_VIBE = "Minimal & Clean"

TECH_INDUSTRIES = {"Technology", "SaaS", "E-Commerce"}
EARTHY_INDUSTRIES = {"Food & Beverage", "Health & Wellness", "Non-Profit"}
EDGY_VALUES = {"Courage", "Innovation", "Creativity"}

FONT_PAIRS: Dict[str, List[FontPair]] = {
    "Minimal & Clean":     [FontPair(heading="Inter", body="Inter"),
                            FontPair(heading="Helvetica Neue", body="Georgia")],
    "Bold & Energetic":    [FontPair(heading="Impact", body="Arial"),
                            FontPair(heading="Bebas Neue", body="Open Sans")],
    "Luxurious & Premium": [FontPair(heading="Playfair Display", body="Lato"),
                            FontPair(heading="Didot", body="Garamond")],
    "Playful & Fun":       [FontPair(heading="Fredoka One", body="Nunito"),
                            FontPair(heading="Baloo 2", body="Quicksand")],
    "Earthy & Organic":    [FontPair(heading="Merriweather", body="Source Sans Pro"),
                            FontPair(heading="Libre Baskerville", body="Cabin")],
    "Techy & Modern":      [FontPair(heading="JetBrains Mono", body="Inter"),
                            FontPair(heading="Space Grotesk", body="IBM Plex Sans")],
    "Classic & Timeless":  [FontPair(heading="Garamond", body="Caslon"),
                            FontPair(heading="Baskerville", body="Palatino")],
    "Edgy & Disruptive":   [FontPair(heading="Anton", body="Roboto Mono"),
                            FontPair(heading="Oswald", body="Source Code Pro")],
}

VIBE_TRAITS: Dict[str, List[List[str]]] = {
    "Minimal & Clean":     [["Refined", "Intentional", "Calm", "Precise"],
                            ["Elegant", "Focused", "Quiet", "Thoughtful"]],
    "Bold & Energetic":    [["Fearless", "Loud", "Dynamic", "Unstoppable"],
                            ["Fierce", "Vibrant", "Electric", "Relentless"]],
    "Luxurious & Premium": [["Sophisticated", "Exclusive", "Curated", "Opulent"],
                            ["Refined", "Prestigious", "Timeless", "Elegant"]],
    "Playful & Fun":       [["Joyful", "Witty", "Friendly", "Spontaneous"],
                            ["Cheerful", "Quirky", "Warm", "Adventurous"]],
    "Earthy & Organic":    [["Grounded", "Authentic", "Nurturing", "Sustainable"],
                            ["Wholesome", "Natural", "Honest", "Rooted"]],
    "Techy & Modern":      [["Innovative", "Sharp", "Forward", "Disruptive"],
                            ["Smart", "Agile", "Precise", "Cutting-edge"]],
    "Classic & Timeless":  [["Trustworthy", "Dignified", "Enduring", "Authoritative"],
                            ["Noble", "Established", "Reliable", "Respected"]],
    "Edgy & Disruptive":   [["Rebellious", "Raw", "Provocative", "Unapologetic"],
                            ["Defiant", "Gritty", "Unconventional", "Bold"]],
}

# Keyed by pole name from SLIDER_AXES
POLE_TRAITS: Dict[str, List[str]] = {
    "Friend":    ["Approachable", "Warm", "Friendly"],
    "Authority": ["Authoritative", "Confident", "Expert"],
    "Young":     ["Fresh", "Youthful", "Energetic"],
    "Mature":    ["Seasoned", "Established", "Wise"],
    "Playful":   ["Witty", "Cheerful", "Spirited"],
    "Serious":   ["Focused", "Earnest", "Principled"],
    "Mass":      ["Accessible", "Inclusive", "Everyday"],
    "Elite":     ["Exclusive", "Premium", "Curated"],
    "Casual":    ["Relaxed", "Easygoing", "Laid-back"],
    "Formal":    ["Polished", "Refined", "Professional"],
    "Loud":      ["Bold", "Vibrant", "Outspoken"],
    "Quiet":     ["Calm", "Understated", "Thoughtful"],
}
TRAIT_COUNT = 4
LEAN_THRESHOLD = 0.15   # distance from the slider midpoint that counts as a lean

TAGLINES: Dict[str, List[str]] = {
    "Technology":        ["Built for tomorrow.", "Code meets craft.", "Engineering the future."],
    "Food & Beverage":   ["Taste the difference.", "Crafted with care.", "From our kitchen to yours."],
    "Health & Wellness": ["Your best self, daily.", "Wellness redefined.", "Thrive naturally."],
    "Fashion":           ["Wear your story.", "Style without compromise.", "Designed to move."],
    "Finance":           ["Your money, your terms.", "Wealth made simple.", "Smart money moves."],
    "Education":         ["Learn without limits.", "Knowledge, amplified.", "Unlock your potential."],
    "Real Estate":       ["Find your place.", "Spaces that inspire.", "Home starts here."],
    "Travel":            ["Go further.", "The world, closer.", "Every trip, a story."],
    "Entertainment":     ["Press play on wonder.", "Made to be remembered.", "Showtime, every time."],
    "Non-Profit":        ["Together, we rise.", "Change starts here.", "Small acts, big impact."],
    "E-Commerce":        ["Shop smarter.", "Delivered with delight.", "Everything, effortlessly."],
    "Creative Agency":   ["Ideas that move.", "Create fearlessly.", "Vision to reality."],
    "SaaS":              ["Simplify everything.", "Work smarter.", "Scale with confidence."],
    "Local Business":    ["Community first.", "Your neighbor, your partner.", "Local roots, real results."],
}
FALLBACK_TAGLINES = ["Make your mark.", "Something different.", "Built to last."]

LOGO_ICONS = ["◆", "✦", "⬡", "◎", "△", "⬢", "◈", "▲", "●", "✧", "⟁", "⊕", "⊗", "⬣", "◉"]

MAX_LOGO_VARIANTS = 4


# ── Selection helpers ─────────────────────────────────────────────────────────

def pick_vibe(industry: str, values: Sequence[str], sl: Sliders) -> str:
    """Map sliders, industry and values onto one of the eight vibes."""
    chosen = set(values)
    if sl.young_mature < 0.35 and sl.casual_formal < 0.35 and chosen & EDGY_VALUES:
        return "Edgy & Disruptive"
    if sl.loud_quiet < 0.35:
        return "Playful & Fun" if sl.playful_serious < 0.4 else "Bold & Energetic"
    if sl.mass_elite > 0.65 and sl.casual_formal > 0.55:
        return "Luxurious & Premium"
    if sl.young_mature > 0.6 and sl.playful_serious > 0.6:
        return "Classic & Timeless"
    if "Sustainability" in chosen or industry in EARTHY_INDUSTRIES:
        return "Earthy & Organic"
    if industry in TECH_INDUSTRIES or "Innovation" in chosen:
        return "Techy & Modern"
    if sl.playful_serious < 0.35:
        return "Playful & Fun"
    return DEFAULT_VIBE


def pick_traits(sl: Sliders, vibe: str, rng: random.Random) -> List[str]:
    """
    One trait per clearly-leaning slider axis (strongest lean first),
    topped up from the vibe's trait pool.
    """
    leans = []
    for (left, right), value in zip(SLIDER_AXES, sl):
        lean = abs(value - 0.5)
        if lean >= LEAN_THRESHOLD:
            leans.append((lean, left if value < 0.5 else right))
    leans.sort(key=lambda item: item[0], reverse=True)

    traits: List[str] = []
    for _, pole in leans:
        options = [t for t in POLE_TRAITS[pole] if t not in traits]
        if options:
            traits.append(rng.choice(options))
        if len(traits) == TRAIT_COUNT:
            return traits

    pool = rng.choice(VIBE_TRAITS.get(vibe, VIBE_TRAITS[DEFAULT_VIBE]))
    for trait in pool:
        if len(traits) == TRAIT_COUNT:
            break
        if trait not in traits:
            traits.append(trait)
    return traits


def pick_tagline(industry: str, rng: random.Random) -> str:
    return rng.choice(TAGLINES.get(industry, FALLBACK_TAGLINES))


# ── Logo prompt ───────────────────────────────────────────────────────────────

def _style_phrase(style: str, name: str) -> str:
    initial = name[:1].upper()
    phrases = {
        "Wordmark":       f'a typographic wordmark spelling "{name}"',
        "Lettermark":     f'a lettermark built from the letter "{initial}"',
        "Icon + Wordmark": f'a simple icon paired with the wordmark "{name}"',
        "Emblem":         f'an emblem badge enclosing the name "{name}"',
        "Abstract Mark":  "an abstract geometric mark with no text",
        "Mascot":         "a friendly mascot character with no text",
    }
    return phrases.get(style, f'a logo for "{name}"')


def build_logo_prompt(inputs: BrandInputs, colors: Sequence[Color], traits: Sequence[str]) -> str:
    """Image-generation prompt for the logo mark."""
    by_role = {c.role: c for c in colors}
    primary, accent, background = by_role["Primary"], by_role["Accent"], by_role["Background"]

    industry = inputs.industry if inputs.industry != "Other" else "independent"
    parts = [
        f"Design {_style_phrase(inputs.logo_style, inputs.name)} "
        f"for {inputs.name}, a {industry} brand.",
    ]
    if inputs.description:
        parts.append(inputs.description.rstrip(".") + ".")
    if inputs.audiences:
        parts.append(f"It should appeal to {', '.join(inputs.audiences)}.")
    if traits:
        parts.append(f"Personality: {', '.join(t.lower() for t in traits)}.")
    parts.append(
        f"Use {primary.name} ({primary.hex}) as the main color "
        f"with {accent.name} ({accent.hex}) as a sparing accent, "
        f"on a plain {background.hex} background."
    )
    parts.append(
        "Flat vector, centered, generous padding, no mockup, "
        "no gradients, no photorealism."
    )
    return " ".join(parts)


def logo_variant_prompts(prompt: str, n: int = 1) -> List[str]:
    """Up to four prompts; every variant after the first is tagged."""
    count = max(0, min(n, MAX_LOGO_VARIANTS))
    return [prompt + (f" (variation {i + 1})" if i > 0 else "") for i in range(count)]


# ── Public API ────────────────────────────────────────────────────────────────

def assemble_brand(
    inputs: BrandInputs,
    rng: Optional[random.Random] = None,
    palette: Optional[List[Color]] = None,
) -> BrandKit:
    """
    Build a complete BrandKit from wizard inputs.

    A fresh palette is generated unless one is passed in (e.g. when only the
    fonts / copy should be re-rolled).
    """
    rng = rng or random.Random()
    sl = inputs.normalized_sliders()

    colors = palette or generate_palette(inputs.industry, inputs.values, inputs.sliders, rng=rng)
    vibe = pick_vibe(inputs.industry, inputs.values, sl)
    fonts = rng.choice(FONT_PAIRS[vibe])
    traits = pick_traits(sl, vibe, rng)

    return BrandKit(
        name=inputs.name,
        tagline=pick_tagline(inputs.industry, rng),
        colors=list(colors),
        fonts=fonts,
        personality=traits,
        vibe=vibe,
        logo_text=inputs.name.upper(),
        logo_icon=rng.choice(LOGO_ICONS),
        logo_prompt=build_logo_prompt(inputs, colors, traits),
    )
