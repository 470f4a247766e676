from pathlib import Path

import yaml

from app.services.settings_store import DEFAULT_REJECT_SIGNAL_MS, SettingsStore


def _store(tmp_path: Path) -> SettingsStore:
    return SettingsStore(str(tmp_path / "settings.yaml"))


def test_defaults_when_file_missing(tmp_path):
    store = _store(tmp_path)
    assert store.load() == {}
    assert store.get_max_guesses() == 5
    assert store.get_reject_signal_ms() == DEFAULT_REJECT_SIGNAL_MS
    assert store.get_word_list_path() is None


def test_round_trip(tmp_path):
    store = _store(tmp_path)
    store.set_max_guesses(6)
    store.set_reject_signal_ms(250)

    reopened = _store(tmp_path)
    assert reopened.get_max_guesses() == 6
    assert reopened.get_reject_signal_ms() == 250
    assert not (tmp_path / "settings.yaml.tmp").exists()


def test_setters_clamp(tmp_path):
    store = _store(tmp_path)
    store.set_max_guesses(0)
    store.set_reject_signal_ms(-10)
    assert store.get_max_guesses() == 1
    assert store.get_reject_signal_ms() == 0


def test_invalid_values_fall_back_to_defaults(tmp_path):
    p = tmp_path / "settings.yaml"
    p.write_text("max_guesses: lots\nreject_signal_ms: true\n", encoding="utf-8")
    store = SettingsStore(str(p))
    assert store.get_max_guesses() == 5
    assert store.get_reject_signal_ms() == DEFAULT_REJECT_SIGNAL_MS


def test_malformed_yaml_is_ignored(tmp_path):
    p = tmp_path / "settings.yaml"
    p.write_text("max_guesses: [1,\n", encoding="utf-8")
    store = SettingsStore(str(p))
    assert store.load() == {}
    assert store.get_max_guesses() == 5


def test_non_mapping_yaml_is_ignored(tmp_path):
    p = tmp_path / "settings.yaml"
    p.write_text("- 1\n- 2\n", encoding="utf-8")
    assert SettingsStore(str(p)).load() == {}


def test_word_list_resolves_relative_to_settings_file(tmp_path):
    store = _store(tmp_path)
    store.set_word_list_path("lists/words.yaml")
    assert store.get_word_list_path() == tmp_path / "lists" / "words.yaml"

    absolute = tmp_path / "elsewhere.yaml"
    store.set_word_list_path(str(absolute))
    assert store.get_word_list_path() == absolute

    store.set_word_list_path(None)
    assert store.get_word_list_path() is None


def test_save_preserves_other_keys_and_unicode(tmp_path):
    store = _store(tmp_path)
    store.save({"note": "한글", "max_guesses": 3})
    store.set_reject_signal_ms(100)

    data = yaml.safe_load((tmp_path / "settings.yaml").read_text(encoding="utf-8"))
    assert data == {"note": "한글", "max_guesses": 3, "reject_signal_ms": 100}
    assert "한글" in (tmp_path / "settings.yaml").read_text(encoding="utf-8")
