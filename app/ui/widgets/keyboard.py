from __future__ import annotations

from typing import Callable, Mapping, Optional

from PyQt6.QtWidgets import QHBoxLayout, QPushButton, QVBoxLayout, QWidget

from app.domain.enums import CharStatus
from app.domain.jamo_data import get_keyboard_rows, shifted
from app.ui.colours import KEY_DEFAULT, style_for, tile_stylesheet

UnitFn = Callable[[str], None]
VoidFn = Callable[[], None]


class OnScreenKeyboard(QWidget):
    """2-set on-screen keyboard with Shift, Backspace and Enter.

    Keys are coloured from the keyboard-hint map. Callbacks are injected so
    the widget knows nothing about the game.
    """

    def __init__(
        self,
        on_unit: UnitFn,
        on_delete: VoidFn,
        on_enter: VoidFn,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("onScreenKeyboard")

        self._on_unit = on_unit
        self._on_delete = on_delete
        self._on_enter = on_enter
        self._shift = False
        self._hints: dict[str, CharStatus] = {}
        # base jamo -> button
        self._keys: dict[str, QPushButton] = {}

        outer = QVBoxLayout(self)
        outer.setContentsMargins(4, 4, 4, 4)
        outer.setSpacing(6)

        rows = get_keyboard_rows()
        for r, row in enumerate(rows):
            line = QHBoxLayout()
            line.setSpacing(4)
            if r == len(rows) - 1:
                self._shift_button = QPushButton("⇧", self)
                self._shift_button.setObjectName("keyShift")
                self._shift_button.setCheckable(True)
                self._shift_button.toggled.connect(self.set_shift)
                line.addWidget(self._shift_button)
            for unit in row:
                btn = QPushButton(unit, self)
                btn.setObjectName("key_{}".format(unit))
                btn.setMinimumSize(32, 44)
                btn.clicked.connect(lambda _checked=False, u=unit: self._press(u))
                self._keys[unit] = btn
                line.addWidget(btn)
            if r == len(rows) - 1:
                delete = QPushButton("⌫", self)
                delete.setObjectName("keyDelete")
                delete.clicked.connect(lambda _checked=False: self._on_delete())
                line.addWidget(delete)
            outer.addLayout(line)

        enter = QPushButton("INPUT (입력)", self)
        enter.setObjectName("keyEnter")
        enter.setMinimumHeight(44)
        enter.clicked.connect(lambda _checked=False: self._on_enter())
        outer.addWidget(enter)

        self._refresh()

    # --- Public API ---

    def is_shifted(self) -> bool:
        return self._shift

    def set_shift(self, value: bool) -> None:
        value = bool(value)
        if value == self._shift:
            return
        self._shift = value
        if self._shift_button.isChecked() != value:
            self._shift_button.setChecked(value)
        self._refresh()

    def key(self, unit: str) -> Optional[QPushButton]:
        """Return the button for an unshifted jamo."""
        return self._keys.get(unit)

    def set_hints(self, hints: Mapping[str, CharStatus]) -> None:
        self._hints = dict(hints)
        self._refresh()

    # --- Internals ---

    def _display_unit(self, unit: str) -> str:
        return shifted(unit, self._shift)

    def _press(self, unit: str) -> None:
        self._on_unit(self._display_unit(unit))

    def _refresh(self) -> None:
        for unit, btn in self._keys.items():
            shown = self._display_unit(unit)
            btn.setText(shown)
            status = self._hints.get(shown, CharStatus.NONE)
            style = KEY_DEFAULT if status is CharStatus.NONE else style_for(status)
            btn.setStyleSheet(tile_stylesheet(style, border_px=1))
            btn.setProperty("status", status.name)
