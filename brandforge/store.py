"""
store.py — Local key-value persistence for flags, brand history and the
last wizard session.

Anything that needs persistence takes a KeyValueStore, so tests run on
MemoryStore and the CLI uses JsonFileStore:

    store   = JsonFileStore(default_store_path())
    flags   = FeatureFlags(store)
    history = BrandHistory(store)

The palette engine never touches a store.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

from .models import BrandInputs, BrandKit

logger = logging.getLogger(__name__)

FLAGS_KEY = "brandforge_flags"
BRANDS_KEY = "brandforge_brands"
SESSION_KEY = "brandforge_session"


class KeyValueStore(Protocol):
    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...


class MemoryStore:
    """Dict-backed store."""

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = dict(data or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value


class JsonFileStore:
    """
    Single JSON document on disk. The whole file is rewritten on every set().

    A missing, unreadable or corrupt file reads as an empty store.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Store {self.path} unreadable ({e}) — starting empty")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Store {self.path} is not a JSON object — starting empty")
            return {}
        return data

    def get(self, key: str, default: Any = None) -> Any:
        return self._load().get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = self._load()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


def default_store_path() -> Path:
    home = os.environ.get("BRANDFORGE_HOME") or str(Path.home() / ".brandforge")
    return Path(home) / "store.json"


# ── Feature flags ─────────────────────────────────────────────────────────────

FLAG_DEFINITIONS: List[Dict[str, str]] = [
    {"name": "shareable-link", "description": "Shareable Brand Link — encode brand inputs in a URL for sharing"},
    {"name": "export-kit",     "description": "Export Brand Kit — save the style tile as a PNG image"},
    {"name": "brand-voice",    "description": "Brand Voice Generator — sample copy based on brand personality"},
    {"name": "prompt-editor",  "description": "Logo Prompt Editor — view and edit the AI prompt for logo generation"},
    {"name": "a11y-checker",   "description": "Palette Accessibility Checker — WCAG contrast ratio analysis"},
]
FLAG_NAMES = [f["name"] for f in FLAG_DEFINITIONS]


class FeatureFlags:
    def __init__(self, store: KeyValueStore):
        self.store = store

    def _flags(self) -> Dict[str, Any]:
        flags = self.store.get(FLAGS_KEY, {})
        return flags if isinstance(flags, dict) else {}

    def get(self, name: str) -> bool:
        """True only when the flag was explicitly switched on."""
        self._check(name)
        return self._flags().get(name) is True

    def set(self, name: str, value: bool) -> None:
        self._check(name)
        flags = self._flags()
        flags[name] = bool(value)
        self.store.set(FLAGS_KEY, flags)
        logger.info(f"Flag {name} → {'on' if value else 'off'}")

    def all(self) -> Dict[str, bool]:
        return {name: self.get(name) for name in FLAG_NAMES}

    @staticmethod
    def _check(name: str) -> None:
        if name not in FLAG_NAMES:
            raise KeyError(f"Unknown flag '{name}'. Available: {', '.join(FLAG_NAMES)}")


# ── Brand history / session ───────────────────────────────────────────────────

class BrandHistory:
    def __init__(self, store: KeyValueStore):
        self.store = store

    def save(self, kit: BrandKit) -> Dict[str, Any]:
        """Append a snapshot of the kit, stamped with createdAt."""
        entry = kit.model_dump(mode="json")
        entry["createdAt"] = datetime.now().isoformat(timespec="seconds")
        saved = self.list()
        saved.append(entry)
        self.store.set(BRANDS_KEY, saved)
        return entry

    def list(self) -> List[Dict[str, Any]]:
        saved = self.store.get(BRANDS_KEY, [])
        return list(saved) if isinstance(saved, list) else []

    def clear(self) -> None:
        self.store.set(BRANDS_KEY, [])

    def save_session(self, inputs: BrandInputs) -> None:
        self.store.set(SESSION_KEY, inputs.model_dump(mode="json"))

    def load_session(self) -> Optional[BrandInputs]:
        data = self.store.get(SESSION_KEY)
        if not isinstance(data, dict):
            return None
        try:
            return BrandInputs(**data)
        except ValueError as e:
            # pydantic.ValidationError subclasses ValueError
            logger.warning(f"Discarding saved session: {e}")
            return None
