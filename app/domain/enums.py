from __future__ import annotations

"""Shared enums for the game (domain layer, Qt-free)."""

from enum import Enum, IntEnum


class CharStatus(IntEnum):
    """Match classification for a jamo, component or syllable.

    Values are the precedence used when folding results into the keyboard
    hints: a higher value always wins.
    """

    NONE = 0
    ABSENT = 1
    MISPLACED_SYLLABLE = 2
    PRESENT = 3
    CORRECT = 4


def outranks(new: CharStatus, current: CharStatus) -> bool:
    """Return True if `new` strictly improves on `current`."""
    return int(new) > int(current)


class VowelLayout(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    MIXED = "mixed"


class GameStatus(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class InputOutcome(Enum):
    """What happened to a keystroke or submit request."""

    ACCEPTED = "accepted"
    # Invalid attempt: state unchanged, caller should signal the user.
    REJECTED = "rejected"
    # Silent no-op (finished game, empty buffer).
    IGNORED = "ignored"
