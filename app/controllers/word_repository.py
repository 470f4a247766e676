from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Any

import yaml

from app.domain.game import WORD_LENGTH, WordEntry
from app.domain.hangul_compose import is_hangul_syllable

logger = logging.getLogger(__name__)

# Used when data/words.yaml is missing or holds no usable entry
FALLBACK_ENTRY = WordEntry(word="사람", meaning="Person")


class WordRepository:
    """Load target words from data/words.yaml and pick one per game.

    Expected YAML shape:

        words:
          - word: 사람
            meaning: Person

    Entries that are not exactly two complete syllables are skipped.
    """

    def __init__(self, *, data_path: Path | None = None, rng: random.Random | None = None) -> None:
        self._data_path = data_path or (Path(__file__).resolve().parents[2] / "data" / "words.yaml")
        self._rng = rng or random.Random()
        self._entries: list[WordEntry] = []
        self._by_word: dict[str, WordEntry] = {}

        self._load()

    @property
    def data_path(self) -> Path:
        return self._data_path

    @property
    def entries(self) -> list[WordEntry]:
        return list(self._entries)

    def meaning_for(self, word: str) -> str | None:
        entry = self._by_word.get(word)
        return entry.meaning if entry is not None else None

    def choose(self) -> WordEntry:
        """Return one entry uniformly at random."""
        return self._rng.choice(self._entries)

    def _load(self) -> None:
        data = self._read_yaml()
        items = data.get("words", []) if isinstance(data, dict) else []
        if not isinstance(items, list):
            items = []
        for raw in items:
            entry = self._parse_item(raw)
            if entry is None:
                logger.warning("Skipping invalid word entry: %r", raw)
                continue
            if entry.word in self._by_word:
                continue
            self._entries.append(entry)
            self._by_word[entry.word] = entry

        if not self._entries:
            logger.warning("No usable words in %s; using fallback", self._data_path)
            self._entries.append(FALLBACK_ENTRY)
            self._by_word[FALLBACK_ENTRY.word] = FALLBACK_ENTRY

    def _read_yaml(self) -> dict[str, Any]:
        try:
            if not self._data_path.exists():
                return {}
            raw = self._data_path.read_text(encoding="utf-8")
            data = yaml.safe_load(raw)
            return data if isinstance(data, dict) else {}
        except (OSError, UnicodeError, yaml.YAMLError) as e:
            logger.warning("Failed to read word list %s: %s", self._data_path, e)
            return {}

    @staticmethod
    def _parse_item(raw: Any) -> WordEntry | None:
        if not isinstance(raw, dict):
            return None

        word = raw.get("word")
        meaning = raw.get("meaning", "")
        if not isinstance(word, str):
            return None
        word = word.strip()
        if len(word) != WORD_LENGTH or not all(is_hangul_syllable(c) for c in word):
            return None

        return WordEntry(word=word, meaning=meaning.strip() if isinstance(meaning, str) else "")
