"""
models.py — Data model for the brand wizard and the generated brand kit.

  BrandInputs  — everything the wizard collects
  Sliders      — the six personality axes, normalized to 0–1
  Color        — one palette entry (name, hex, role)
  BrandKit     — the assembled brand package
"""

from __future__ import annotations

import math
from typing import List, Literal, NamedTuple, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .color_math import clamp

# ── Vocabulary ────────────────────────────────────────────────────────────────

INDUSTRIES: List[str] = [
    "Technology", "Food & Beverage", "Health & Wellness", "Fashion", "Finance",
    "Education", "Real Estate", "Travel", "Entertainment", "Non-Profit",
    "E-Commerce", "Creative Agency", "SaaS", "Local Business", "Other",
]

CORE_VALUES: List[str] = [
    "Trust", "Innovation", "Sustainability", "Quality", "Creativity",
    "Simplicity", "Community", "Integrity", "Passion", "Excellence",
    "Courage", "Empathy", "Fun",
]

AUDIENCES: List[str] = [
    "Gen Z", "Millennials", "Professionals", "Parents", "Students",
    "Small Businesses", "Enterprises", "Creatives", "Luxury Buyers", "Seniors",
]

LOGO_STYLES: List[str] = [
    "Wordmark", "Lettermark", "Icon + Wordmark", "Emblem", "Abstract Mark", "Mascot",
]

# (left pole, right pole) — index order is fixed
SLIDER_AXES: List[Tuple[str, str]] = [
    ("Friend", "Authority"),
    ("Young", "Mature"),
    ("Playful", "Serious"),
    ("Mass", "Elite"),
    ("Casual", "Formal"),
    ("Loud", "Quiet"),
]

MAX_SELECTIONS = 3
NEUTRAL_SLIDER = 50.0

ColorRole = Literal["Primary", "Secondary", "Accent", "Background", "Text"]
COLOR_ROLES: Tuple[str, ...] = ("Primary", "Secondary", "Accent", "Background", "Text")


def clamp_sliders(values: Sequence[float]) -> List[float]:
    """Six slider values clamped to 0–100; missing or non-finite axes read as neutral."""
    out = [
        clamp(float(v), 0.0, 100.0) if math.isfinite(float(v)) else NEUTRAL_SLIDER
        for v in list(values)[: len(SLIDER_AXES)]
    ]
    out += [NEUTRAL_SLIDER] * (len(SLIDER_AXES) - len(out))
    return out


class Sliders(NamedTuple):
    """Personality axes normalized to 0–1 (0 = left pole)."""

    friend_authority: float
    young_mature: float
    playful_serious: float
    mass_elite: float
    casual_formal: float
    loud_quiet: float

    @classmethod
    def from_values(cls, values: Sequence[float]) -> "Sliders":
        return cls(*(v / 100.0 for v in clamp_sliders(values)))


# ── Palette ───────────────────────────────────────────────────────────────────

class Color(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Descriptive color name, e.g. 'Cerulean'")
    hex: str = Field(description="Uppercase hex code, e.g. '#1A2B3C'")
    role: ColorRole = Field(description="Palette slot this color fills")
    hsl: Tuple[float, float, float] = Field(
        exclude=True,
        description="Post-override (h, s, l) triple the name and hex were derived from",
    )


# ── Wizard inputs ─────────────────────────────────────────────────────────────

class BrandInputs(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Brand name as typed by the user")
    industry: str = Field(default="Other", description="One of INDUSTRIES, or free text")
    values: List[str] = Field(default_factory=list, description="Up to 3 of CORE_VALUES")
    audiences: List[str] = Field(default_factory=list, description="Up to 3 of AUDIENCES")
    sliders: List[float] = Field(
        default_factory=lambda: [NEUTRAL_SLIDER] * len(SLIDER_AXES),
        description="Six personality sliders, 0–100, in SLIDER_AXES order",
    )
    logo_style: str = Field(default="Icon + Wordmark", description="One of LOGO_STYLES")
    description: str = Field(default="", description="Optional one-sentence description")

    @field_validator("name")
    @classmethod
    def _require_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("brand name is required")
        return v

    @field_validator("industry")
    @classmethod
    def _default_industry(cls, v: str) -> str:
        return v.strip() or "Other"

    @field_validator("values", "audiences")
    @classmethod
    def _first_three(cls, v: List[str]) -> List[str]:
        cleaned = [item.strip() for item in v if item and item.strip()]
        return cleaned[:MAX_SELECTIONS]

    @field_validator("sliders", mode="before")
    @classmethod
    def _clamp(cls, v) -> List[float]:
        return clamp_sliders(v or [])

    def normalized_sliders(self) -> Sliders:
        return Sliders.from_values(self.sliders)


# ── Brand kit ─────────────────────────────────────────────────────────────────

class FontPair(BaseModel):
    model_config = ConfigDict(frozen=True)

    heading: str
    body: str


class BrandKit(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    tagline: str
    colors: List[Color] = Field(description="Primary, Secondary, Accent, Background, Text")
    fonts: FontPair
    personality: List[str] = Field(description="Four trait labels")
    vibe: str = Field(description="Overall aesthetic the kit was assembled for")
    logo_text: str
    logo_icon: str
    logo_prompt: str = Field(description="Image-generation prompt for the logo mark")

    def color(self, role: str) -> Color:
        for c in self.colors:
            if c.role == role:
                return c
        raise KeyError(role)
