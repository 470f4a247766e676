"""
Tests for the vowel layout classification used by the grid cells.
"""

import pytest

from app.domain.block_types import classify_vowel_layout
from app.domain.enums import VowelLayout
from app.domain.hangul_compose import JUNGSEONG


@pytest.mark.classification
@pytest.mark.parametrize("vowel", ["ㅗ", "ㅛ", "ㅜ", "ㅠ", "ㅡ"])
def test_horizontal_vowels(vowel):
    assert classify_vowel_layout(vowel) is VowelLayout.HORIZONTAL


@pytest.mark.classification
@pytest.mark.parametrize("vowel", ["ㅘ", "ㅙ", "ㅚ", "ㅝ", "ㅞ", "ㅟ", "ㅢ"])
def test_composite_vowels_are_mixed(vowel):
    assert classify_vowel_layout(vowel) is VowelLayout.MIXED


@pytest.mark.classification
@pytest.mark.parametrize("vowel", ["ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ", "ㅣ"])
def test_vertical_vowels(vowel):
    assert classify_vowel_layout(vowel) is VowelLayout.VERTICAL


@pytest.mark.classification
def test_every_vowel_has_exactly_one_layout():
    counts = {layout: 0 for layout in VowelLayout}
    for vowel in JUNGSEONG:
        counts[classify_vowel_layout(vowel)] += 1
    assert counts == {VowelLayout.HORIZONTAL: 5, VowelLayout.MIXED: 7, VowelLayout.VERTICAL: 9}


@pytest.mark.classification
def test_unknown_input_is_vertical():
    assert classify_vowel_layout("A") is VowelLayout.VERTICAL
