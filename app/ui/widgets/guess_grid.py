from __future__ import annotations

from typing import Optional, Sequence

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QGridLayout, QWidget

from app.domain.evaluator import GuessRecord
from app.domain.game import WORD_LENGTH
from app.ui.widgets.syllable_cell import SyllableCell


class GuessGrid(QWidget):
    """`rows` x 2 syllable cells: submitted guesses, the typing row, empty rows."""

    def __init__(
        self,
        parent: Optional[QWidget] = None,
        *,
        rows: int = 5,
        columns: int = WORD_LENGTH,
        cell_px: int = 88,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("guessGrid")

        self._columns = int(columns)
        self._cell_px = int(cell_px)
        self._cells: list[list[SyllableCell]] = []

        self._layout = QGridLayout(self)
        self._layout.setSpacing(8)
        self._layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.set_row_count(rows)

    def row_count(self) -> int:
        return len(self._cells)

    def cell(self, row: int, column: int) -> SyllableCell:
        return self._cells[row][column]

    def set_row_count(self, rows: int) -> None:
        rows = max(1, int(rows))
        while len(self._cells) > rows:
            for cell in self._cells.pop():
                self._layout.removeWidget(cell)
                cell.deleteLater()
        while len(self._cells) < rows:
            r = len(self._cells)
            row_cells = []
            for c in range(self._columns):
                cell = SyllableCell(self, size_px=self._cell_px)
                self._layout.addWidget(cell, r, c)
                row_cells.append(cell)
            self._cells.append(row_cells)

    def show_state(self, guesses: Sequence[GuessRecord], preview: Sequence[str]) -> None:
        """Redraw all rows from the guess history and the current preview."""
        current_row = len(guesses)
        for r, row_cells in enumerate(self._cells):
            for c, cell in enumerate(row_cells):
                if r < current_row:
                    syllables = guesses[r].syllables
                    if c < len(syllables):
                        cell.set_result(syllables[c])
                    else:
                        cell.set_empty()
                elif r == current_row and c < len(preview):
                    cell.set_preview(preview[c])
                else:
                    cell.set_empty()
