from __future__ import annotations

"""Jamo input automaton (domain layer).

Turns the stream of jamo typed on a 2-set keyboard into syllables the way a
standard Korean IME segments them:

- a consonant followed by a vowel opens a syllable
- two vowels that form a composite vowel (ㅗ+ㅏ -> ㅘ) are merged
- a consonant after the vowel becomes the final, unless a vowel follows it,
  in which case it is left to open the next syllable
- two finals that form a cluster (ㄹ+ㄱ -> ㄺ) are merged, unless a vowel
  follows the second one

Anything that cannot start a syllable is passed through as a loose jamo.
"""

from typing import Sequence

from app.domain.hangul_compose import (
    COMPOSITE_JONGSEONG,
    COMPOSITE_VOWELS,
    choseong_index,
    compose_from_indices,
    is_jongseong,
    is_jungseong,
    jongseong_index,
    jungseong_index,
)


def _at(units: Sequence[str], i: int) -> str | None:
    return units[i] if 0 <= i < len(units) else None


def _is_vowel_at(units: Sequence[str], i: int) -> bool:
    unit = _at(units, i)
    return unit is not None and is_jungseong(unit)


def assemble(units: Sequence[str]) -> list[str]:
    """Group typed jamo into syllables (or loose jamo).

    Single left-to-right scan without backtracking. Never raises.

    >>> assemble(["ㅎ", "ㅏ", "ㄴ", "ㄱ", "ㅡ", "ㄹ"])
    ['한', '글']
    """
    result: list[str] = []
    i = 0
    n = len(units)

    while i < n:
        unit = units[i]
        lead_index = choseong_index(unit)

        # Loose vowel, loose final-only consonant (ㄳ, ...) or foreign input
        if lead_index is None:
            result.append(unit)
            i += 1
            continue

        # Bare consonant
        if not _is_vowel_at(units, i + 1):
            result.append(unit)
            i += 1
            continue

        vowel = units[i + 1]
        cursor = i + 2

        if _is_vowel_at(units, cursor):
            composite = COMPOSITE_VOWELS.get((vowel, units[cursor]))
            if composite is not None:
                vowel = composite
                cursor += 1

        tail = ""
        candidate = _at(units, cursor)
        if candidate is not None and is_jongseong(candidate) and not _is_vowel_at(units, cursor + 1):
            tail = candidate
            cursor += 1

            extension = _at(units, cursor)
            if extension is not None:
                cluster = COMPOSITE_JONGSEONG.get((tail, extension))
                if cluster is not None and not _is_vowel_at(units, cursor + 1):
                    tail = cluster
                    cursor += 1

        # vowel and tail were validated above, so neither lookup misses
        vowel_index = jungseong_index(vowel) or 0
        tail_index = jongseong_index(tail) or 0
        result.append(compose_from_indices(lead_index, vowel_index, tail_index))
        i = cursor

    return result


def count_blocks(units: Sequence[str]) -> int:
    """Number of syllables/loose jamo `units` currently assembles into."""
    return len(assemble(units))
