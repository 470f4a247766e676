# tests/conftest.py
import os
from typing import Callable, Iterable

import pytest

# Headless Qt for CI; must be set before any QApplication exists
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from app.domain.game import GameSession, WordEntry
from app.domain.hangul_unicode import atomic_units


def fixed_chooser(*words: str) -> Callable[[], WordEntry]:
    """Return a choose_word callable cycling through `words`."""
    entries = [WordEntry(word=w, meaning="meaning of {}".format(w)) for w in words]
    state = {"i": 0}

    def _choose() -> WordEntry:
        entry = entries[state["i"] % len(entries)]
        state["i"] += 1
        return entry

    return _choose


def units_for(word: str) -> list[str]:
    """The jamo a user would type for `word`."""
    return [u for ch in word for u in atomic_units(ch)]


def type_word(submit: Callable[[str], object], word: str) -> None:
    for unit in units_for(word):
        submit(unit)


@pytest.fixture
def make_session() -> Callable[..., GameSession]:
    def _make(target: str = "사람", *more: str, max_guesses: int = 5) -> GameSession:
        return GameSession(fixed_chooser(target, *more), max_guesses=max_guesses)

    return _make


@pytest.fixture
def play() -> Callable[[GameSession, Iterable[str]], None]:
    """Type and submit each word of `words` in order."""

    def _play(session: GameSession, words: Iterable[str]) -> None:
        for word in words:
            type_word(session.submit_unit, word)
            session.submit_guess()

    return _play
