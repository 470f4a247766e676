from __future__ import annotations

from pathlib import Path
from typing import Any, Final

import yaml


# ---------------------------------------------------------------------
# Defaults (used if YAML is missing or malformed)
# ---------------------------------------------------------------------

# Standard 2-set (dubeolsik) layout, unshifted
_DEFAULT_KEYBOARD_ROWS: Final[tuple[tuple[str, ...], ...]] = (
    ("ㅂ", "ㅈ", "ㄷ", "ㄱ", "ㅅ", "ㅛ", "ㅕ", "ㅑ", "ㅐ", "ㅔ"),
    ("ㅁ", "ㄴ", "ㅇ", "ㄹ", "ㅎ", "ㅗ", "ㅓ", "ㅏ", "ㅣ"),
    ("ㅋ", "ㅌ", "ㅊ", "ㅍ", "ㅠ", "ㅜ", "ㅡ"),
)

_DEFAULT_SHIFT_MAP: Final[dict[str, str]] = {
    "ㅂ": "ㅃ",
    "ㅈ": "ㅉ",
    "ㄷ": "ㄸ",
    "ㄱ": "ㄲ",
    "ㅅ": "ㅆ",
    "ㅐ": "ㅒ",
    "ㅔ": "ㅖ",
}

# Physical QWERTY key -> jamo (upper case only where Shift changes the jamo)
_DEFAULT_QWERTY_MAP: Final[dict[str, str]] = {
    "q": "ㅂ", "Q": "ㅃ",
    "w": "ㅈ", "W": "ㅉ",
    "e": "ㄷ", "E": "ㄸ",
    "r": "ㄱ", "R": "ㄲ",
    "t": "ㅅ", "T": "ㅆ",
    "y": "ㅛ",
    "u": "ㅕ",
    "i": "ㅑ",
    "o": "ㅐ", "O": "ㅒ",
    "p": "ㅔ", "P": "ㅖ",
    "a": "ㅁ",
    "s": "ㄴ",
    "d": "ㅇ",
    "f": "ㄹ",
    "g": "ㅎ",
    "h": "ㅗ",
    "j": "ㅓ",
    "k": "ㅏ",
    "l": "ㅣ",
    "z": "ㅋ",
    "x": "ㅌ",
    "c": "ㅊ",
    "v": "ㅍ",
    "b": "ㅠ",
    "n": "ㅜ",
    "m": "ㅡ",
}


# ---------------------------------------------------------------------
# YAML loading
# ---------------------------------------------------------------------

_YAML_CACHE: dict[str, Any] | None = None
_YAML_CACHE_PATH: Path | None = None
_YAML_CACHE_MTIME_NS: int | None = None


def _project_root() -> Path:
    # app/domain/jamo_data.py -> app/domain -> app -> <project_root>
    return Path(__file__).resolve().parents[2]


def _keyboard_yaml_path() -> Path:
    return _project_root() / "data" / "keyboard.yaml"


def _load_yaml() -> dict[str, Any]:
    """Load keyboard layout YAML if present.

    Failure is non-fatal; defaults will be used.

    Expected file: data/keyboard.yaml
    """
    global _YAML_CACHE, _YAML_CACHE_PATH, _YAML_CACHE_MTIME_NS

    try:
        path = _keyboard_yaml_path()
        if not path.exists():
            _YAML_CACHE = {}
            _YAML_CACHE_PATH = path
            _YAML_CACHE_MTIME_NS = None
            return {}

        mtime_ns = path.stat().st_mtime_ns
        if _YAML_CACHE is not None and _YAML_CACHE_PATH == path and _YAML_CACHE_MTIME_NS == mtime_ns:
            return dict(_YAML_CACHE)

        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
            parsed = data if isinstance(data, dict) else {}

        _YAML_CACHE = dict(parsed)
        _YAML_CACHE_PATH = path
        _YAML_CACHE_MTIME_NS = mtime_ns
        return dict(_YAML_CACHE)
    except (OSError, UnicodeError, yaml.YAMLError):
        return {}


def _str_mapping(value: Any) -> dict[str, str] | None:
    if not isinstance(value, dict):
        return None
    if not all(isinstance(k, str) and isinstance(v, str) for k, v in value.items()):
        return None
    return dict(value)


# ---------------------------------------------------------------------
# Public API (domain-level)
# ---------------------------------------------------------------------

def get_keyboard_rows() -> list[list[str]]:
    """Return the on-screen keyboard rows (unshifted jamo)."""
    data = _load_yaml()
    rows = data.get("rows")
    if isinstance(rows, list) and rows and all(
        isinstance(row, list) and row and all(isinstance(k, str) and k.strip() for k in row) for row in rows
    ):
        return [[k.strip() for k in row] for row in rows]
    return [list(row) for row in _DEFAULT_KEYBOARD_ROWS]


def get_shift_map() -> dict[str, str]:
    """Return the jamo -> shifted jamo map (ㄱ -> ㄲ, ...)."""
    override = _str_mapping(_load_yaml().get("shift"))
    return override if override is not None else dict(_DEFAULT_SHIFT_MAP)


def get_qwerty_map() -> dict[str, str]:
    """Return the physical key -> jamo map."""
    override = _str_mapping(_load_yaml().get("qwerty"))
    return override if override is not None else dict(_DEFAULT_QWERTY_MAP)


def shifted(unit: str, shift: bool) -> str:
    """Return the jamo a key produces with Shift held (or not)."""
    if not shift:
        return unit
    return get_shift_map().get(unit, unit)


def jamo_for_key(text: str) -> str | None:
    """Map the text of a physical key press to a jamo, or None.

    Jamo typed directly (e.g. from an OS-level Korean IME) pass through.
    """
    if not text:
        return None
    mapped = get_qwerty_map().get(text)
    if mapped is not None:
        return mapped
    # Shift on a key with no shifted jamo (e.g. "H") types the plain jamo
    mapped = get_qwerty_map().get(text.lower())
    if mapped is not None:
        return mapped
    if len(text) == 1 and 0x3131 <= ord(text) <= 0x3163:
        return text
    return None


# Public domain-data defaults (use the getters for YAML-backed values)
DEFAULT_KEYBOARD_ROWS: Final[tuple[tuple[str, ...], ...]] = _DEFAULT_KEYBOARD_ROWS
DEFAULT_SHIFT_MAP: Final[dict[str, str]] = _DEFAULT_SHIFT_MAP
DEFAULT_QWERTY_MAP: Final[dict[str, str]] = _DEFAULT_QWERTY_MAP
