from __future__ import annotations

from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QFrame, QHBoxLayout, QLabel, QSizePolicy, QWidget

from app.domain.block_types import classify_vowel_layout
from app.domain.enums import CharStatus, VowelLayout
from app.domain.evaluator import JamoResult, SyllableResult
from app.ui.colours import CURRENT_BORDER, EMPTY_CELL, style_for, tile_stylesheet
from app.ui.fit_text import AutoFitLabel
from app.ui.util.layout import clear_layout, ensure_vbox


class SyllableCell(QFrame):
    """One square syllable tile of the guess grid.

    Three modes:
      - empty:   nothing typed yet
      - preview: the syllable (or loose jamo) being typed, shown whole
      - result:  a submitted syllable, shown as coloured lead/vowel/tail tiles
                 arranged by the vowel's layout
    """

    def __init__(self, parent: Optional[QWidget] = None, *, size_px: int = 88) -> None:
        super().__init__(parent)
        self.setObjectName("syllableCell")
        self.setFixedSize(size_px, size_px)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)

        self._mode = "empty"
        self._char = ""
        self._result: Optional[SyllableResult] = None
        self._layout = ensure_vbox(self, spacing=1)
        self.set_empty()

    # --- Introspection (used by tests and accessibility) ---

    def mode(self) -> str:
        return self._mode

    def text(self) -> str:
        return self._char

    def result(self) -> Optional[SyllableResult]:
        return self._result

    def part_tiles(self) -> list[QLabel]:
        return list(self.findChildren(QLabel, "jamoTile"))

    # --- Rendering ---

    def set_empty(self) -> None:
        self._mode = "empty"
        self._char = ""
        self._result = None
        clear_layout(self._layout)
        self.setStyleSheet(
            "QFrame#syllableCell {{ background-color: {}; border-radius: 8px; }}".format(EMPTY_CELL.bg)
        )
        self.setAccessibleName("")

    def set_preview(self, char: str) -> None:
        self._mode = "preview"
        self._char = char
        self._result = None
        clear_layout(self._layout)

        style = style_for(CharStatus.NONE)
        self.setStyleSheet(
            "QFrame#syllableCell {{ background-color: {}; border: 2px solid {}; border-radius: 8px; }}".format(
                style.bg, CURRENT_BORDER
            )
        )
        label = AutoFitLabel(char, self)
        label.setObjectName("previewGlyph")
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        label.setStyleSheet("color: {}; font-weight: bold;".format(style.text))
        self._layout.addWidget(label)
        self.setAccessibleName(char)

    def set_result(self, result: SyllableResult) -> None:
        self._mode = "result"
        self._char = result.char
        self._result = result
        clear_layout(self._layout)

        border = style_for(result.status).border
        self.setStyleSheet(
            "QFrame#syllableCell {{ background-color: #0f172a; border: 4px solid {}; border-radius: 8px; }}".format(
                border
            )
        )

        lead, vowel, tail = (list(result.parts) + [JamoResult("", CharStatus.NONE)] * 3)[:3]
        has_tail = bool(tail.char)

        if classify_vowel_layout(vowel.char) is VowelLayout.HORIZONTAL:
            # Stacked: lead over vowel over tail
            self._layout.addWidget(self._tile(lead), 1)
            self._layout.addWidget(self._tile(vowel), 1)
            if has_tail:
                self._layout.addWidget(self._tile(tail), 1)
        else:
            # Side by side on top, tail underneath
            top = QHBoxLayout()
            top.setContentsMargins(0, 0, 0, 0)
            top.setSpacing(1)
            top.addWidget(self._tile(lead), 1)
            top.addWidget(self._tile(vowel), 1)
            self._layout.addLayout(top, 2)
            if has_tail:
                self._layout.addWidget(self._tile(tail), 1)

        self.setAccessibleName("{} {}".format(result.char, result.status.name.lower()))

    def _tile(self, part: JamoResult) -> QLabel:
        tile = AutoFitLabel(part.char, self, padding_px=2)
        tile.setObjectName("jamoTile")
        tile.setAlignment(Qt.AlignmentFlag.AlignCenter)
        tile.setStyleSheet(tile_stylesheet(style_for(part.status)))
        tile.setProperty("status", part.status.name)
        if part.is_composite:
            tile.setToolTip(
                " + ".join("{} ({})".format(a, s.name.lower()) for a, s in zip(part.atoms, part.sub_statuses))
            )
        return tile
