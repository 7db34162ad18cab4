"""
logo_client.py — Generate logo images from the kit's logo prompt.

Providers (tried in order for every variation):
  1. Gemini image models via google-genai  — needs GEMINI_API_KEY
  2. OpenAI dall-e-3 over plain HTTPS      — needs OPENAI_API_KEY

A provider without an API key is skipped. A provider that errors is logged
and the next one is tried. Only when no variation produced an image does the
call fail.

Usage:
    from brandforge.logo_client import generate_logo_images

    images = generate_logo_images(kit.logo_prompt, n=2)
    for i, img in enumerate(images):
        img.save(Path("out") / f"logo_{i + 1}.png")
"""

from __future__ import annotations

import base64
import json
import logging
import os
import urllib.request
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Protocol, Sequence

from google import genai
from google.genai import types

from .assembler import logo_variant_prompts

logger = logging.getLogger(__name__)

OPENAI_IMAGES_URL = "https://api.openai.com/v1/images/generations"

# Model ladder, best-effort: later entries only used if earlier ones are unavailable
GEMINI_IMAGE_MODELS = [
    "gemini-2.5-flash-image",
    "gemini-2.0-flash-exp-image-generation",
]


class LogoGenerationError(RuntimeError):
    """No provider returned an image for any variation."""


@dataclass
class LogoImage:
    provider: str
    prompt: str
    data: Optional[bytes] = None    # raw image bytes (Gemini)
    url: Optional[str] = None       # hosted image URL (OpenAI)

    def save(self, path: Path, timeout: int = 30) -> Path:
        """Write the image to disk, downloading it first if only a URL is known."""
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        data = self.data
        if data is None and self.url:
            with urllib.request.urlopen(self.url, timeout=timeout) as resp:
                data = resp.read()
        if data is None:
            raise LogoGenerationError(f"{self.provider} image has neither data nor URL")
        out.write_bytes(data)
        return out


class ImageProvider(Protocol):
    name: str

    @property
    def available(self) -> bool: ...

    def generate(self, prompt: str) -> Optional[LogoImage]: ...


# ── Gemini ────────────────────────────────────────────────────────────────────

class GeminiImageProvider:
    name = "gemini"

    def __init__(self, api_key: Optional[str] = None):
        self.api_key = api_key if api_key is not None else os.environ.get("GEMINI_API_KEY", "")

    @property
    def available(self) -> bool:
        return bool(self.api_key)

    def generate(self, prompt: str) -> Optional[LogoImage]:
        client = genai.Client(api_key=self.api_key)
        response = None
        for model in GEMINI_IMAGE_MODELS:
            try:
                response = client.models.generate_content(
                    model=model,
                    contents=prompt,
                    config=types.GenerateContentConfig(
                        response_modalities=["IMAGE", "TEXT"],
                    ),
                )
                break
            except Exception as e:
                if any(k in str(e).lower() for k in ("not found", "permission", "not supported")):
                    logger.info(f"Gemini model {model} unavailable ({e}) — trying next")
                    continue
                raise

        if response is None:
            return None

        for candidate in response.candidates or []:
            for part in candidate.content.parts or []:
                if getattr(part, "inline_data", None) and part.inline_data.data:
                    data = part.inline_data.data
                    if isinstance(data, str):
                        data = base64.b64decode(data)
                    return LogoImage(provider=self.name, prompt=prompt, data=data)
        return None


# ── OpenAI ────────────────────────────────────────────────────────────────────

class OpenAIImageProvider:
    name = "openai"

    def __init__(self, api_key: Optional[str] = None, timeout: int = 60):
        self.api_key = api_key if api_key is not None else os.environ.get("OPENAI_API_KEY", "")
        self.timeout = timeout

    @property
    def available(self) -> bool:
        return bool(self.api_key)

    def generate(self, prompt: str) -> Optional[LogoImage]:
        body = json.dumps({
            "model": "dall-e-3",
            "prompt": prompt,
            "n": 1,
            "size": "1024x1024",
            "quality": "standard",
        }).encode("utf-8")
        req = urllib.request.Request(
            OPENAI_IMAGES_URL,
            data=body,
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            },
            method="POST",
        )
        with urllib.request.urlopen(req, timeout=self.timeout) as resp:
            data = json.loads(resp.read().decode("utf-8"))

        items = data.get("data") or []
        if items and items[0].get("url"):
            return LogoImage(provider=self.name, prompt=prompt, url=items[0]["url"])
        return None


def default_providers() -> List[ImageProvider]:
    return [GeminiImageProvider(), OpenAIImageProvider()]


# ── Public API ────────────────────────────────────────────────────────────────

def generate_logo_images(
    prompt: str,
    n: int = 1,
    providers: Optional[Sequence[ImageProvider]] = None,
) -> List[LogoImage]:
    """
    Generate up to four logo variations.

    Raises:
        ValueError:          empty prompt
        LogoGenerationError: no provider configured, or every attempt failed
    """
    if not prompt or not prompt.strip():
        raise ValueError("prompt is required")

    candidates = list(providers) if providers is not None else default_providers()
    usable = [p for p in candidates if p.available]
    if not usable:
        raise LogoGenerationError(
            "No image provider configured — set GEMINI_API_KEY or OPENAI_API_KEY"
        )

    results: List[LogoImage] = []
    for i, variant in enumerate(logo_variant_prompts(prompt, n)):
        for provider in usable:
            try:
                image = provider.generate(variant)
            except Exception as e:
                logger.warning(f"{provider.name} failed on variation {i + 1}: {e}")
                continue
            if image is not None:
                results.append(image)
                break
            logger.warning(f"{provider.name} returned no image for variation {i + 1}")
        else:
            logger.warning(f"Variation {i + 1}: every provider failed")

    if not results:
        raise LogoGenerationError("All image generations failed")
    logger.info(f"Generated {len(results)} logo image(s)")
    return results
