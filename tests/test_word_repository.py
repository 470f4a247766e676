import random
from pathlib import Path

from app.controllers.word_repository import FALLBACK_ENTRY, WordRepository
from app.domain.hangul_compose import is_hangul_syllable


def _write(tmp_path: Path, text: str) -> Path:
    p = tmp_path / "words.yaml"
    p.write_text(text, encoding="utf-8")
    return p


def test_bundled_word_list_is_usable():
    repo = WordRepository()
    assert repo.data_path.name == "words.yaml"
    assert len(repo.entries) >= 20
    for entry in repo.entries:
        assert len(entry.word) == 2
        assert all(is_hangul_syllable(c) for c in entry.word)
        assert entry.meaning


def test_loads_entries_and_meanings(tmp_path):
    p = _write(
        tmp_path,
        "words:\n"
        "  - word: 사과\n"
        "    meaning: Apple\n"
        "  - word: 한글\n"
        "    meaning: Korean alphabet\n",
    )
    repo = WordRepository(data_path=p)
    assert [e.word for e in repo.entries] == ["사과", "한글"]
    assert repo.meaning_for("한글") == "Korean alphabet"
    assert repo.meaning_for("바다") is None


def test_invalid_entries_are_skipped(tmp_path):
    p = _write(
        tmp_path,
        "words:\n"
        "  - word: 사\n"
        "  - word: 사람들\n"
        "  - word: ab\n"
        "  - just a string\n"
        "  - word: 12\n"
        "  - word: 바다\n"
        "  - word: 바다\n"
        "    meaning: duplicate\n",
    )
    repo = WordRepository(data_path=p)
    assert [e.word for e in repo.entries] == ["바다"]
    assert repo.meaning_for("바다") == ""


def test_missing_file_uses_fallback(tmp_path):
    repo = WordRepository(data_path=tmp_path / "missing.yaml")
    assert repo.entries == [FALLBACK_ENTRY]
    assert repo.choose() == FALLBACK_ENTRY


def test_malformed_yaml_uses_fallback(tmp_path):
    p = _write(tmp_path, "words: [unclosed\n")
    repo = WordRepository(data_path=p)
    assert repo.entries == [FALLBACK_ENTRY]


def test_wrong_shape_uses_fallback(tmp_path):
    p = _write(tmp_path, "words: 사과\n")
    assert WordRepository(data_path=p).entries == [FALLBACK_ENTRY]


def test_choose_is_driven_by_rng(tmp_path):
    p = _write(
        tmp_path,
        "words:\n  - word: 사과\n  - word: 한글\n  - word: 바다\n",
    )
    a = WordRepository(data_path=p, rng=random.Random(7))
    b = WordRepository(data_path=p, rng=random.Random(7))
    picks_a = [a.choose().word for _ in range(10)]
    picks_b = [b.choose().word for _ in range(10)]
    assert picks_a == picks_b
    assert set(picks_a) <= {"사과", "한글", "바다"}
