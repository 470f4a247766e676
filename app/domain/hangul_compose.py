from __future__ import annotations

"""Hangul composition helpers (domain layer).

This module contains *no* Qt/UI dependencies.

It centralises:
- Hangul Jamo ordering constants (compatibility jamo)
- The composite vowel / composite final consonant tables
- Pure functions for composing LVT syllables

Primary API:
- compose_from_indices(lead_index, vowel_index, tail_index)
- compose_lvt(lead, vowel, tail)
"""

from typing import Final


# -----------------------------------------------------------------------------
# Domain data: compatibility jamo ordering
# -----------------------------------------------------------------------------

# Leading consonants (Choseong) in standard Unicode Hangul order
CHOSEONG: Final[tuple[str, ...]] = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ",
    "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

# Vowels (Jungseong) in standard Unicode Hangul order
JUNGSEONG: Final[tuple[str, ...]] = (
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ",
    "ㅗ", "ㅘ", "ㅙ", "ㅚ", "ㅛ",
    "ㅜ", "ㅝ", "ㅞ", "ㅟ", "ㅠ",
    "ㅡ", "ㅢ", "ㅣ",
)

# Trailing consonants (Jongseong) in standard Unicode Hangul order
# Index 0 is "no final"
JONGSEONG: Final[tuple[str, ...]] = (
    "",
    "ㄱ", "ㄲ", "ㄳ",
    "ㄴ", "ㄵ", "ㄶ",
    "ㄷ",
    "ㄹ", "ㄺ", "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ", "ㅀ",
    "ㅁ",
    "ㅂ", "ㅄ",
    "ㅅ", "ㅆ",
    "ㅇ",
    "ㅈ", "ㅊ",
    "ㅋ",
    "ㅌ",
    "ㅍ",
    "ㅎ",
)

# Two simple vowels typed in sequence -> one composite vowel
COMPOSITE_VOWELS: Final[dict[tuple[str, str], str]] = {
    ("ㅗ", "ㅏ"): "ㅘ",
    ("ㅗ", "ㅐ"): "ㅙ",
    ("ㅗ", "ㅣ"): "ㅚ",
    ("ㅜ", "ㅓ"): "ㅝ",
    ("ㅜ", "ㅔ"): "ㅞ",
    ("ㅜ", "ㅣ"): "ㅟ",
    ("ㅡ", "ㅣ"): "ㅢ",
}

# Two simple consonants typed in sequence -> one composite final (gyeopbatchim)
COMPOSITE_JONGSEONG: Final[dict[tuple[str, str], str]] = {
    ("ㄱ", "ㅅ"): "ㄳ",
    ("ㄴ", "ㅈ"): "ㄵ",
    ("ㄴ", "ㅎ"): "ㄶ",
    ("ㄹ", "ㄱ"): "ㄺ",
    ("ㄹ", "ㅁ"): "ㄻ",
    ("ㄹ", "ㅂ"): "ㄼ",
    ("ㄹ", "ㅅ"): "ㄽ",
    ("ㄹ", "ㅌ"): "ㄾ",
    ("ㄹ", "ㅍ"): "ㄿ",
    ("ㄹ", "ㅎ"): "ㅀ",
    ("ㅂ", "ㅅ"): "ㅄ",
}

VOWEL_PARTS: Final[dict[str, tuple[str, str]]] = {v: k for k, v in COMPOSITE_VOWELS.items()}
JONGSEONG_PARTS: Final[dict[str, tuple[str, str]]] = {v: k for k, v in COMPOSITE_JONGSEONG.items()}

# Unicode Hangul Syllables block
S_BASE: Final[int] = 0xAC00
S_LAST: Final[int] = 0xD7A3
V_COUNT: Final[int] = 21
T_COUNT: Final[int] = 28
N_COUNT: Final[int] = V_COUNT * T_COUNT  # 588


# -----------------------------------------------------------------------------
# Internal lookup maps
# -----------------------------------------------------------------------------

_CHO_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(CHOSEONG)}
_JUNG_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(JUNGSEONG)}
_JONG_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(JONGSEONG)}


# -----------------------------------------------------------------------------
# Role predicates
# -----------------------------------------------------------------------------

def is_choseong(unit: str) -> bool:
    return unit in _CHO_MAP


def is_jungseong(unit: str) -> bool:
    return unit in _JUNG_MAP


def is_jongseong(unit: str) -> bool:
    """True for a non-empty final consonant (simple or composite)."""
    return bool(unit) and unit in _JONG_MAP


def is_hangul_syllable(value: str) -> bool:
    """True if `value` is exactly one precomposed Hangul syllable."""
    if not isinstance(value, str) or len(value) != 1:
        return False
    return S_BASE <= ord(value) <= S_LAST


def choseong_index(unit: str) -> int | None:
    return _CHO_MAP.get(unit)


def jungseong_index(unit: str) -> int | None:
    return _JUNG_MAP.get(unit)


def jongseong_index(unit: str) -> int | None:
    return _JONG_MAP.get(unit)


# -----------------------------------------------------------------------------
# Domain logic
# -----------------------------------------------------------------------------

def compose_from_indices(lead_index: int, vowel_index: int, tail_index: int = 0) -> str:
    """Compose a syllable from table indices.

    Uses the Unicode Hangul Syllables algorithm:
    SBase + LIndex * 588 + VIndex * 28 + TIndex

    Raises:
        ValueError: if any index falls outside its table.
    """
    if not 0 <= lead_index < len(CHOSEONG):
        raise ValueError("Invalid lead index: %r" % (lead_index,))
    if not 0 <= vowel_index < len(JUNGSEONG):
        raise ValueError("Invalid vowel index: %r" % (vowel_index,))
    if not 0 <= tail_index < len(JONGSEONG):
        raise ValueError("Invalid tail index: %r" % (tail_index,))

    return chr(S_BASE + lead_index * N_COUNT + vowel_index * T_COUNT + tail_index)


def compose_lvt(lead: str, vowel: str, tail: str = "") -> str:
    """Compose a Hangul syllable from compatibility jamo.

    Args:
        lead: choseong (e.g., "ㄱ")
        vowel: jungseong (e.g., "ㅏ")
        tail: jongseong (e.g., "ㄴ") or "" for no final

    Returns:
        A composed Hangul syllable (e.g., "간") or "" if inputs are invalid.
    """
    l = (lead or "").strip()
    v = (vowel or "").strip()
    t = (tail or "").strip()

    if not l or not v:
        return ""

    li = _CHO_MAP.get(l)
    vi = _JUNG_MAP.get(v)
    ti = _JONG_MAP.get(t)

    if li is None or vi is None or ti is None:
        return ""

    return compose_from_indices(li, vi, ti)
