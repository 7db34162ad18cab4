"""
share_link.py — Encode wizard inputs into a shareable URL and back.

  https://brandforge.app/?name=Luminary&industry=Technology&values=Trust,Quality
      &audiences=Professionals&sliders=50,70,60,40,55,30&style=Wordmark&desc=...

Only the inputs travel in the link; the palette is regenerated on open, so a
shared link reproduces the theme rather than the exact hex values.
"""

from __future__ import annotations

import math
import os
from typing import Dict, List
from urllib.parse import parse_qs, urlencode, urlsplit

from pydantic import ValidationError

from .models import NEUTRAL_SLIDER, SLIDER_AXES, BrandInputs

DEFAULT_SHARE_URL = "https://brandforge.app/"


class ShareLinkError(ValueError):
    """The URL does not carry a usable set of brand inputs."""


def share_base_url() -> str:
    return os.environ.get("BRANDFORGE_SHARE_URL", DEFAULT_SHARE_URL)


def encode_share_link(inputs: BrandInputs, base_url: str = "") -> str:
    base = base_url or share_base_url()
    params: Dict[str, str] = {
        "name": inputs.name,
        "industry": inputs.industry,
        "sliders": ",".join(f"{v:g}" for v in inputs.sliders),
        "style": inputs.logo_style,
    }
    if inputs.values:
        params["values"] = ",".join(inputs.values)
    if inputs.audiences:
        params["audiences"] = ",".join(inputs.audiences)
    if inputs.description:
        params["desc"] = inputs.description
    sep = "&" if "?" in base else "?"
    return f"{base}{sep}{urlencode(params)}"


def _split_list(raw: str) -> List[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


def _parse_sliders(raw: str) -> List[float]:
    sliders: List[float] = []
    for item in raw.split(",")[: len(SLIDER_AXES)]:
        try:
            value = float(item)
        except ValueError:
            value = NEUTRAL_SLIDER
        sliders.append(value if math.isfinite(value) else NEUTRAL_SLIDER)
    return sliders


def decode_share_link(url: str) -> BrandInputs:
    """Rebuild BrandInputs from a share URL. Sliders are clamped, gaps are neutral."""
    query = parse_qs(urlsplit(url).query)

    def first(key: str, default: str = "") -> str:
        return query.get(key, [default])[0]

    name = first("name")
    if not name.strip():
        raise ShareLinkError(f"Share link has no brand name: {url}")

    fields = {
        "name": name,
        "industry": first("industry", "Other"),
        "values": _split_list(first("values")),
        "audiences": _split_list(first("audiences")),
        "sliders": _parse_sliders(first("sliders")) if "sliders" in query else [],
        "description": first("desc"),
    }
    if "style" in query:
        fields["logo_style"] = first("style")

    try:
        return BrandInputs(**fields)
    except ValidationError as e:
        raise ShareLinkError(f"Invalid share link: {e}") from e
