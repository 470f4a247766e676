from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from app.domain.game import DEFAULT_MAX_GUESSES

logger = logging.getLogger(__name__)

DEFAULT_REJECT_SIGNAL_MS = 500


class SettingsStore:
    """YAML-backed settings store.

    Responsibilities:
      - Load/save settings.yaml atomically
      - Provide typed helpers for the game settings

    settings.yaml structure (every key optional):
      max_guesses: 5
      reject_signal_ms: 500
      word_list: data/words.yaml
    """

    def __init__(self, settings_path: str | None = None) -> None:
        if settings_path is None:
            # Default to project root next to main.py.
            # This resolves to: <project_root>/settings.yaml
            project_root = Path(__file__).resolve().parents[2]
            self._path = project_root / "settings.yaml"
        else:
            self._path = Path(settings_path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        try:
            p = self._path
            if not p.exists():
                return {}
            with p.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
                return data if isinstance(data, dict) else {}
        except (OSError, UnicodeError, yaml.YAMLError) as e:
            logger.warning("Failed to load settings %s: %s", self._path, e)
            return {}

    def save(self, data: dict[str, Any]) -> None:
        try:
            p = self._path
            p.parent.mkdir(parents=True, exist_ok=True)
            tmp = p.with_suffix(p.suffix + ".tmp")
            with tmp.open("w", encoding="utf-8") as f:
                yaml.safe_dump(data or {}, f, allow_unicode=True, sort_keys=True)
            os.replace(str(tmp), str(p))
        except (OSError, yaml.YAMLError) as e:
            # Best-effort persistence; callers should not crash on save failures.
            logger.warning("Failed to save settings %s: %s", self._path, e)

    def _int_value(self, key: str, default: int, minimum: int) -> int:
        v = self.load().get(key, default)
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            return int(default)
        return max(minimum, int(v))

    def _set(self, key: str, value: Any) -> None:
        s = self.load()
        s[key] = value
        self.save(s)

    def get_max_guesses(self) -> int:
        return self._int_value("max_guesses", DEFAULT_MAX_GUESSES, 1)

    def set_max_guesses(self, value: int) -> None:
        self._set("max_guesses", max(1, int(value)))

    def get_reject_signal_ms(self) -> int:
        return self._int_value("reject_signal_ms", DEFAULT_REJECT_SIGNAL_MS, 0)

    def set_reject_signal_ms(self, value: int) -> None:
        self._set("reject_signal_ms", max(0, int(value)))

    def get_word_list_path(self) -> Path | None:
        """Return the configured word list, resolved against the settings file."""
        v = self.load().get("word_list")
        if not isinstance(v, str) or not v.strip():
            return None
        p = Path(v.strip()).expanduser()
        if not p.is_absolute():
            p = self._path.parent / p
        return p

    def set_word_list_path(self, value: str | None) -> None:
        s = self.load()
        if value:
            s["word_list"] = str(value)
        else:
            s.pop("word_list", None)
        self.save(s)
