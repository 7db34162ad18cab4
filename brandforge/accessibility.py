"""
accessibility.py — WCAG 2.x contrast checks for a generated palette.

Every foreground role is measured against the Background color:
  AA        ≥ 4.5   body text
  AA large  ≥ 3.0   headings / large text, UI components
  AAA       ≥ 7.0   enhanced
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .color_math import relative_luminance
from .models import Color

AA_NORMAL = 4.5
AA_LARGE = 3.0
AAA_NORMAL = 7.0

FOREGROUND_ROLES = ("Text", "Primary", "Secondary", "Accent")


def contrast_ratio(hex_a: str, hex_b: str) -> float:
    """(L1 + 0.05) / (L2 + 0.05), lighter color on top. Range 1–21."""
    la = relative_luminance(hex_a)
    lb = relative_luminance(hex_b)
    lighter, darker = max(la, lb), min(la, lb)
    return (lighter + 0.05) / (darker + 0.05)


@dataclass
class ContrastCheck:
    foreground: Color
    background: Color
    ratio: float

    @property
    def passes_aa(self) -> bool:
        return self.ratio >= AA_NORMAL

    @property
    def passes_aa_large(self) -> bool:
        return self.ratio >= AA_LARGE

    @property
    def passes_aaa(self) -> bool:
        return self.ratio >= AAA_NORMAL

    @property
    def grade(self) -> str:
        if self.passes_aaa:
            return "AAA"
        if self.passes_aa:
            return "AA"
        if self.passes_aa_large:
            return "AA Large"
        return "Fail"


def check_palette(colors: Sequence[Color]) -> List[ContrastCheck]:
    """Contrast of each foreground role against Background, in role order."""
    by_role = {c.role: c for c in colors}
    background = by_role.get("Background")
    if background is None:
        return []
    return [
        ContrastCheck(
            foreground=by_role[role],
            background=background,
            ratio=contrast_ratio(by_role[role].hex, background.hex),
        )
        for role in FOREGROUND_ROLES
        if role in by_role
    ]
