from __future__ import annotations

"""Hangul Unicode decomposition helpers.

This module is *domain* logic (no Qt dependencies).

It provides:
  - `decompose()` for splitting a syllable into (lead, vowel, tail)
  - `split_composite()` for splitting a composite vowel / final into its
    two simple jamo

Notes:
  - Results are compatibility jamo so they can be compared directly with
    keyboard input and with the tables in `app/domain/hangul_compose.py`.
"""

from app.domain.hangul_compose import (
    CHOSEONG,
    JONGSEONG,
    JONGSEONG_PARTS,
    JUNGSEONG,
    N_COUNT,
    S_BASE,
    T_COUNT,
    VOWEL_PARTS,
    is_hangul_syllable,
)


def decompose(block: str) -> tuple[str, ...]:
    """Return `(lead, vowel, tail)` for a precomposed syllable.

    The tail is "" when the syllable has no final. Anything that is not a
    single syllable (loose jamo, Latin letters, punctuation) is returned
    unchanged as a one-element tuple.
    """
    if not is_hangul_syllable(block):
        return (block,)

    code = ord(block) - S_BASE
    tail_index = code % T_COUNT
    vowel_index = (code % N_COUNT) // T_COUNT
    lead_index = code // N_COUNT

    return CHOSEONG[lead_index], JUNGSEONG[vowel_index], JONGSEONG[tail_index]


def decompose_indices(block: str) -> tuple[int, int, int] | None:
    """Return the raw table indices for `block`, or None if not a syllable."""
    if not is_hangul_syllable(block):
        return None
    code = ord(block) - S_BASE
    return code // N_COUNT, (code % N_COUNT) // T_COUNT, code % T_COUNT


def split_composite(component: str) -> list[str]:
    """Split a component into the atomic jamo it was typed from.

    ㅘ -> [ㅗ, ㅏ], ㄺ -> [ㄹ, ㄱ], ㄱ -> [ㄱ], "" -> [].
    """
    if not component:
        return []
    parts = VOWEL_PARTS.get(component) or JONGSEONG_PARTS.get(component)
    if parts is not None:
        return list(parts)
    return [component]


def atomic_parts(block: str) -> list[list[str]]:
    """Decompose `block` and split every slot into atomic jamo."""
    return [split_composite(component) for component in decompose(block)]


def atomic_units(block: str) -> list[str]:
    """Flat list of atomic jamo in typing order (e.g. 닭 -> ㄷ ㅏ ㄹ ㄱ)."""
    return [unit for parts in atomic_parts(block) for unit in parts]
