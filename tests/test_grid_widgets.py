import pytest
from PyQt6.QtWidgets import QHBoxLayout, QLabel

from app.domain.enums import CharStatus
from app.domain.evaluator import evaluate
from app.domain.jamo_data import shifted
from app.ui.widgets.guess_grid import GuessGrid
from app.ui.widgets.keyboard import OnScreenKeyboard
from app.ui.widgets.syllable_cell import SyllableCell


def _result(guess, target, index=0):
    record, _ = evaluate(list(guess), list(target))
    return record.syllables[index]


@pytest.fixture
def cell(qtbot):
    c = SyllableCell(size_px=88)
    qtbot.addWidget(c)
    return c


@pytest.mark.qt
class TestSyllableCell:
    def test_starts_empty(self, cell):
        assert cell.mode() == "empty"
        assert cell.text() == ""
        assert cell.part_tiles() == []

    def test_preview_shows_glyph(self, cell):
        cell.set_preview("과")
        assert cell.mode() == "preview"
        glyph = cell.findChild(QLabel, "previewGlyph")
        assert glyph is not None
        assert glyph.text() == "과"

    def test_horizontal_vowel_stacks_tiles(self, cell):
        cell.set_result(_result("국수", "국수"))
        assert [t.text() for t in cell.part_tiles()] == ["ㄱ", "ㅜ", "ㄱ"]
        # lead, vowel and tail are direct rows of the cell layout
        assert cell.layout().count() == 3

    def test_vertical_vowel_puts_lead_beside_vowel(self, cell):
        cell.set_result(_result("각사", "각사"))
        layout = cell.layout()
        assert layout.count() == 2
        assert isinstance(layout.itemAt(0).layout(), QHBoxLayout)
        assert [t.text() for t in cell.part_tiles()] == ["ㄱ", "ㅏ", "ㄱ"]

    def test_empty_tail_has_no_tile(self, cell):
        cell.set_result(_result("가나", "가나"))
        assert len(cell.part_tiles()) == 2

    def test_composite_part_has_sub_status_tooltip(self, cell):
        result = _result("과일", "가을")
        cell.set_result(result)
        assert cell.result() is result
        vowel_tile = cell.part_tiles()[1]
        assert vowel_tile.text() == "ㅘ"
        assert vowel_tile.property("status") == CharStatus.PRESENT.name
        assert vowel_tile.toolTip() == "ㅗ (absent) + ㅏ (present)"

    def test_set_empty_clears_tiles(self, cell):
        cell.set_result(_result("사람", "사람"))
        cell.set_empty()
        assert cell.mode() == "empty"
        assert cell.part_tiles() == []


@pytest.mark.qt
class TestGuessGrid:
    def test_rows_follow_history_then_preview(self, qtbot):
        grid = GuessGrid(rows=3)
        qtbot.addWidget(grid)
        record, _ = evaluate(["사", "랑"], ["사", "람"])

        grid.show_state([record], ["하", "ㄴ"])
        assert [grid.cell(0, c).mode() for c in range(2)] == ["result", "result"]
        assert [grid.cell(1, c).text() for c in range(2)] == ["하", "ㄴ"]
        assert [grid.cell(2, c).mode() for c in range(2)] == ["empty", "empty"]

        grid.show_state([], [])
        assert all(grid.cell(r, c).mode() == "empty" for r in range(3) for c in range(2))

    def test_partial_preview_leaves_second_cell_empty(self, qtbot):
        grid = GuessGrid(rows=2)
        qtbot.addWidget(grid)
        grid.show_state([], ["가"])
        assert grid.cell(0, 0).mode() == "preview"
        assert grid.cell(0, 1).mode() == "empty"

    def test_set_row_count(self, qtbot):
        grid = GuessGrid(rows=5)
        qtbot.addWidget(grid)
        grid.set_row_count(6)
        assert grid.row_count() == 6
        grid.set_row_count(2)
        assert grid.row_count() == 2
        grid.set_row_count(0)
        assert grid.row_count() == 1


@pytest.mark.qt
class TestOnScreenKeyboard:
    def test_shift_labels_and_presses_follow_the_shift_map(self, qtbot):
        typed = []
        keyboard = OnScreenKeyboard(typed.append, lambda: None, lambda: None)
        qtbot.addWidget(keyboard)
        units = ["ㄱ", "ㅂ", "ㅔ", "ㅏ", "ㅎ"]

        keyboard.set_shift(True)
        for unit in units:
            assert keyboard.key(unit).text() == shifted(unit, True)
            keyboard.key(unit).click()
        assert typed == [shifted(u, True) for u in units]
        assert typed[:3] == ["ㄲ", "ㅃ", "ㅖ"]

        keyboard.set_shift(False)
        assert keyboard.key("ㄱ").text() == "ㄱ"

    def test_hint_colours_follow_shifted_jamo(self, qtbot):
        keyboard = OnScreenKeyboard(lambda _u: None, lambda: None, lambda: None)
        qtbot.addWidget(keyboard)
        keyboard.set_hints({"ㄲ": CharStatus.CORRECT})
        assert keyboard.key("ㄱ").property("status") == "NONE"
        keyboard.set_shift(True)
        assert keyboard.key("ㄱ").property("status") == "CORRECT"
