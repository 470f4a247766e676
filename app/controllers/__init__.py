"""
Controller package exports.

This file exists to make controller modules discoverable to static analysis
(PyCharm inspections) and to provide a stable import surface.
"""

# Canonical controllers
from .game_controller import GameController  # noqa: F401
from .word_repository import WordRepository  # noqa: F401

__all__ = [
    "GameController",
    "WordRepository",
]
