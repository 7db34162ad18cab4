"""
voice.py — Sample brand copy phrased from the personality sliders.

Two slider readings drive the register:
  formality  — casual ↔ formal, averaged with friend ↔ authority
  energy     — loud ↔ quiet (inverted) averaged with playful ↔ serious (inverted)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .models import BrandKit, Sliders


@dataclass
class BrandVoice:
    tone: List[str] = field(default_factory=list)   # short tone descriptors
    headline: str = ""
    call_to_action: str = ""
    about: str = ""

    def as_lines(self) -> List[str]:
        return [
            f"Tone: {', '.join(self.tone)}",
            f"Headline: {self.headline}",
            f"CTA: {self.call_to_action}",
            f"About: {self.about}",
        ]


def _register(sl: Sliders) -> tuple:
    formality = (sl.casual_formal + sl.friend_authority) / 2
    energy = ((1 - sl.loud_quiet) + (1 - sl.playful_serious)) / 2
    return formality, energy


def brand_voice(kit: BrandKit, sliders: Sliders) -> BrandVoice:
    formality, energy = _register(sliders)
    name = kit.name
    traits = [t.lower() for t in kit.personality]

    tone = ["formal" if formality > 0.6 else "conversational" if formality < 0.4 else "clear"]
    tone.append("high-energy" if energy > 0.6 else "measured" if energy < 0.4 else "upbeat")
    tone.extend(traits[:2])

    if energy > 0.6:
        headline = f"Meet {name}. {kit.tagline}"
        cta = "Jump in today!" if formality < 0.5 else "Get started today."
    elif formality > 0.6:
        headline = f"{name}: {kit.tagline}"
        cta = "Request a consultation."
    else:
        headline = kit.tagline
        cta = f"Discover {name}."

    trait_text = ", ".join(traits[:-1]) + f" and {traits[-1]}" if len(traits) > 1 else "".join(traits)
    if formality > 0.6:
        about = f"{name} is committed to being {trait_text} in everything it delivers."
    else:
        about = f"We're {name}, and we like to keep things {trait_text}."

    return BrandVoice(tone=tone, headline=headline, call_to_action=cta, about=about)
