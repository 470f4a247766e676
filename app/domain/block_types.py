from __future__ import annotations

"""Domain mapping for how a syllable's vowel shapes the block layout.

This module is the single source of truth for:
  - The vowel -> VowelLayout mapping
  - classify_vowel_layout()

It contains *no* Qt dependencies. The grid cells use it to decide whether the
components of a submitted syllable are stacked or placed side by side.
"""

from typing import Final

from app.domain.enums import VowelLayout
from app.domain.hangul_compose import VOWEL_PARTS


# -----------------------------------------------------------------------------
# Vowel -> VowelLayout mapping
# -----------------------------------------------------------------------------
#
# Notes on the three layouts:
#   HORIZONTAL : ㅗ/ㅜ families and ㅡ sit below the lead consonant
#   VERTICAL   : ㅏ/ㅓ families and ㅣ sit to the right of the lead consonant
#   MIXED      : composite vowels wrap the lead consonant on both sides

HORIZONTAL_VOWELS: Final[frozenset[str]] = frozenset({"ㅗ", "ㅛ", "ㅜ", "ㅠ", "ㅡ"})


def classify_vowel_layout(vowel: str) -> VowelLayout:
    """Return the VowelLayout for a (compatibility) vowel jamo.

    Unknown input falls through to VERTICAL.
    """
    v = str(vowel)
    if v in VOWEL_PARTS:
        return VowelLayout.MIXED
    if v in HORIZONTAL_VOWELS:
        return VowelLayout.HORIZONTAL
    return VowelLayout.VERTICAL
