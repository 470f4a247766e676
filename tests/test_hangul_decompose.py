import pytest

from app.domain.hangul_compose import (
    COMPOSITE_JONGSEONG,
    COMPOSITE_VOWELS,
    S_BASE,
    S_LAST,
    compose_from_indices,
    compose_lvt,
)
from app.domain.hangul_unicode import (
    atomic_parts,
    atomic_units,
    decompose,
    decompose_indices,
    split_composite,
)


def _all_syllables():
    return (chr(code) for code in range(S_BASE, S_LAST + 1))


def test_decompose_simple_syllables():
    assert decompose("가") == ("ㄱ", "ㅏ", "")
    assert decompose("각") == ("ㄱ", "ㅏ", "ㄱ")
    assert decompose("한") == ("ㅎ", "ㅏ", "ㄴ")


@pytest.mark.parametrize(
    "syllable,expected",
    [
        ("과", ("ㄱ", "ㅘ", "")),
        ("왜", ("ㅇ", "ㅙ", "")),
        ("괴", ("ㄱ", "ㅚ", "")),
        ("원", ("ㅇ", "ㅝ", "ㄴ")),
        ("웨", ("ㅇ", "ㅞ", "")),
        ("위", ("ㅇ", "ㅟ", "")),
        ("의", ("ㅇ", "ㅢ", "")),
    ],
)
def test_decompose_composite_vowels(syllable, expected):
    assert decompose(syllable) == expected


@pytest.mark.parametrize(
    "syllable,expected",
    [
        ("몫", ("ㅁ", "ㅗ", "ㄳ")),
        ("앉", ("ㅇ", "ㅏ", "ㄵ")),
        ("않", ("ㅇ", "ㅏ", "ㄶ")),
        ("닭", ("ㄷ", "ㅏ", "ㄺ")),
        ("삶", ("ㅅ", "ㅏ", "ㄻ")),
        ("밟", ("ㅂ", "ㅏ", "ㄼ")),
        ("곬", ("ㄱ", "ㅗ", "ㄽ")),
        ("핥", ("ㅎ", "ㅏ", "ㄾ")),
        ("읊", ("ㅇ", "ㅡ", "ㄿ")),
        ("잃", ("ㅇ", "ㅣ", "ㅀ")),
        ("없", ("ㅇ", "ㅓ", "ㅄ")),
    ],
)
def test_decompose_composite_finals(syllable, expected):
    assert decompose(syllable) == expected


@pytest.mark.parametrize("value", ["A", "!", "ㄱ", "ㅏ", ""])
def test_decompose_passes_through_non_syllables(value):
    assert decompose(value) == (value,)


def test_every_syllable_round_trips():
    for ch in _all_syllables():
        indices = decompose_indices(ch)
        assert indices is not None
        assert compose_from_indices(*indices) == ch
        assert compose_lvt(*decompose(ch)) == ch


def test_decompose_indices_none_for_non_syllable():
    assert decompose_indices("ㄱ") is None


def test_split_composite_pairs_round_trip():
    for pair, composite in COMPOSITE_VOWELS.items():
        parts = split_composite(composite)
        assert parts == list(pair)
        assert COMPOSITE_VOWELS[tuple(parts)] == composite
    for pair, composite in COMPOSITE_JONGSEONG.items():
        parts = split_composite(composite)
        assert parts == list(pair)
        assert COMPOSITE_JONGSEONG[tuple(parts)] == composite


def test_split_composite_simple_and_empty():
    assert split_composite("ㄱ") == ["ㄱ"]
    assert split_composite("ㅏ") == ["ㅏ"]
    assert split_composite("ㄲ") == ["ㄲ"]  # tense consonants are atomic
    assert split_composite("") == []


def test_atomic_parts_and_units():
    assert atomic_parts("닭") == [["ㄷ"], ["ㅏ"], ["ㄹ", "ㄱ"]]
    assert atomic_parts("과") == [["ㄱ"], ["ㅗ", "ㅏ"], []]
    assert atomic_units("원") == ["ㅇ", "ㅜ", "ㅓ", "ㄴ"]
