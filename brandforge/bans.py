"""
bans.py — Designer override rules.

A single pass of guard + override corrections that steer a generated
(h, s, l) triple away from color regions that read badly in a brand
palette. Rules run in the listed order and each one sees the values the
previous rules produced; the pass is not repeated to a fixpoint.

  1. Yellow-green  — hue 65–85°, saturation > 50   → saturation 48
  2. Pure yellow   — hue 50–60°                    → hue 45 (≥55°) or 35
  3. Neon          — saturation > 85, lightness > 60 → lightness 58
  4. Muddy brown   — hue 20–40°, sat 20–40, light 30–45 → saturation 55
"""

from __future__ import annotations

from typing import Callable, List, Tuple

HSL = Tuple[float, float, float]


def _yellow_green(h: float, s: float, l: float) -> HSL:
    if 65 <= h <= 85 and s > 50:
        s = 48.0
    return h, s, l


def _pure_yellow(h: float, s: float, l: float) -> HSL:
    if 50 <= h <= 60:
        h = 45.0 if h >= 55 else 35.0
    return h, s, l


def _neon(h: float, s: float, l: float) -> HSL:
    if s > 85 and l > 60:
        l = 58.0
    return h, s, l


def _muddy_brown(h: float, s: float, l: float) -> HSL:
    if 20 <= h <= 40 and 20 <= s <= 40 and 30 <= l <= 45:
        s = 55.0
    return h, s, l


BAN_RULES: List[Callable[[float, float, float], HSL]] = [
    _yellow_green,
    _pure_yellow,
    _neon,
    _muddy_brown,
]


def enforce_bans(h: float, s: float, l: float) -> HSL:
    """Apply every override rule once, in order."""
    for rule in BAN_RULES:
        h, s, l = rule(h, s, l)
    return h, s, l
