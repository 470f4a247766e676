"""Main window factory.

This module owns construction and UI wiring for the application's main window.

Public API:
- create_main_window(controller, ...): builds and returns the main window
  without starting the Qt event loop, enabling UI tests to instantiate the
  window headlessly.

Design notes:
- The entrypoint responsibilities (QApplication creation and app.exec())
  stay in `main.py`.
- All game mutation goes through the GameController; the window only
  redraws on `state_changed`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QKeyEvent
from PyQt6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from app.controllers.game_controller import GameController
from app.domain.enums import GameStatus
from app.ui.colours import SHAKE_BORDER
from app.ui.widgets.guess_grid import GuessGrid
from app.ui.widgets.keyboard import OnScreenKeyboard

logger = logging.getLogger(__name__)

HELP_TEXT = (
    "Guess the 2-syllable word in {max_guesses} or fewer tries.\n\n"
    "Each jamo of your guess is coloured:\n"
    "  Green: correct jamo in the correct position.\n"
    "  Yellow: in the correct syllable, but in the wrong position.\n"
    "  Orange: in the word, but in the other syllable.\n"
    "  Gray: not in the word.\n\n"
    "Composite vowels and finals (ㅘ, ㄺ, ...) are scored per half.\n"
    "Use the New Word button to start over with a different word."
)

ConfirmFn = Callable[[], bool]
VoidFn = Callable[[], None]


@dataclass(frozen=True)
class MainWindowHandles:
    """Stable handles for tests (stored on `window._handles`)."""

    grid: GuessGrid
    keyboard: OnScreenKeyboard
    new_word_button: QPushButton
    help_button: QPushButton
    game_over_panel: QFrame
    game_over_title: QLabel
    game_over_word: QLabel
    game_over_meaning: QLabel
    play_again_button: QPushButton


class GameWindow(QWidget):
    """Top-level game window; forwards physical key presses to the controller."""

    def __init__(self, controller: GameController, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._controller = controller
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

    @property
    def controller(self) -> GameController:
        return self._controller

    def keyPressEvent(self, event: QKeyEvent) -> None:  # noqa: N802
        key = event.key()
        if key == Qt.Key.Key_Backspace:
            self._controller.delete_last()
            return
        if key in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
            self._controller.submit_guess()
            return
        text = event.text()
        if text and not (event.modifiers() & Qt.KeyboardModifier.ControlModifier):
            self._controller.handle_key_text(text)
            return
        super().keyPressEvent(event)


def _confirm_new_game(parent: QWidget) -> bool:
    answer = QMessageBox.question(
        parent,
        "Start New Game?",
        "Are you sure you want to give up on this word? Your progress will be lost.",
        QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
        QMessageBox.StandardButton.No,
    )
    return answer == QMessageBox.StandardButton.Yes


def _show_help(parent: QWidget, max_guesses: int) -> None:
    QMessageBox.information(parent, "How to Play", HELP_TEXT.format(max_guesses=max_guesses))


def create_main_window(
    controller: GameController,
    *,
    confirm_fn: Optional[ConfirmFn] = None,
    help_fn: Optional[VoidFn] = None,
    expose_handles: bool = True,
) -> GameWindow:
    """Create and return the application's main window.

    This function must NOT call app.exec(). It assumes a QApplication exists.

    Args:
        controller: the game controller the window drives and observes.
        confirm_fn: asks whether to abandon a game in progress; defaults to a
            QMessageBox (tests inject a stub).
        help_fn: shows the help text; defaults to a QMessageBox.
        expose_handles: If True, attaches `window._handles` for tests.
    """
    window = GameWindow(controller)
    window.setObjectName("GameWindow")
    window.setWindowTitle("KR_DLE")

    session = controller.session
    confirm = confirm_fn or (lambda: _confirm_new_game(window))
    show_help = help_fn or (lambda: _show_help(window, session.max_guesses))

    root = QVBoxLayout(window)
    root.setContentsMargins(12, 8, 12, 8)
    root.setSpacing(8)

    # --- Header ---
    header = QHBoxLayout()
    title = QLabel("KR_DLE", window)
    title.setObjectName("titleLabel")
    title.setStyleSheet("font-size: 20px; font-weight: 600;")
    header.addWidget(title)
    header.addStretch(1)
    new_word_button = QPushButton("New Word", window)
    new_word_button.setObjectName("btnNewWord")
    new_word_button.setToolTip("Get a new word")
    help_button = QPushButton("?", window)
    help_button.setObjectName("btnHelp")
    help_button.setToolTip("Help")
    header.addWidget(new_word_button)
    header.addWidget(help_button)
    root.addLayout(header)

    # --- Grid ---
    grid_frame = QFrame(window)
    grid_frame.setObjectName("gridFrame")
    grid_layout = QVBoxLayout(grid_frame)
    grid = GuessGrid(grid_frame, rows=session.max_guesses)
    grid_layout.addWidget(grid)
    root.addWidget(grid_frame, 1)

    # --- Game over panel (hidden while playing) ---
    panel = QFrame(window)
    panel.setObjectName("gameOverPanel")
    panel_layout = QVBoxLayout(panel)
    over_title = QLabel(panel)
    over_title.setObjectName("gameOverTitle")
    over_title.setAlignment(Qt.AlignmentFlag.AlignCenter)
    over_title.setStyleSheet("font-size: 24px; font-weight: bold;")
    caption = QLabel("THE WORD WAS", panel)
    caption.setAlignment(Qt.AlignmentFlag.AlignCenter)
    over_word = QLabel(panel)
    over_word.setObjectName("gameOverWord")
    over_word.setAlignment(Qt.AlignmentFlag.AlignCenter)
    over_word.setStyleSheet("font-size: 40px; font-weight: bold;")
    over_meaning = QLabel(panel)
    over_meaning.setObjectName("gameOverMeaning")
    over_meaning.setAlignment(Qt.AlignmentFlag.AlignCenter)
    play_again = QPushButton("Play Again", panel)
    play_again.setObjectName("btnPlayAgain")
    for w in (over_title, caption, over_word, over_meaning, play_again):
        panel_layout.addWidget(w)
    panel.setVisible(False)
    root.addWidget(panel)

    # --- Keyboard ---
    keyboard = OnScreenKeyboard(
        on_unit=controller.input_unit,
        on_delete=controller.delete_last,
        on_enter=controller.submit_guess,
        parent=window,
    )
    root.addWidget(keyboard)

    # --- Wiring ---
    def _refresh() -> None:
        grid.show_state(controller.guesses, controller.preview)
        keyboard.set_hints(controller.hints)

        status = controller.status
        if status is GameStatus.PLAYING:
            panel.setVisible(False)
            return
        over_title.setText("Correct!" if status is GameStatus.WON else "Game Over")
        over_title.setStyleSheet(
            "font-size: 24px; font-weight: bold; color: {};".format("#10b981" if status is GameStatus.WON else "#f97316")
        )
        over_word.setText(session.target)
        over_meaning.setText(session.meaning)
        panel.setVisible(True)

    def _on_shake(active: bool) -> None:
        grid_frame.setProperty("shaking", bool(active))
        grid_frame.setStyleSheet(
            "QFrame#gridFrame {{ border: 2px solid {}; border-radius: 12px; }}".format(SHAKE_BORDER) if active else ""
        )

    def _on_finished(status: GameStatus) -> None:
        logger.info("Game finished: %s", status.value)

    controller.state_changed.connect(_refresh)
    controller.shake_changed.connect(_on_shake)
    controller.game_finished.connect(_on_finished)
    new_word_button.clicked.connect(lambda _checked=False: controller.request_new_game(confirm))
    play_again.clicked.connect(lambda _checked=False: controller.new_game())
    help_button.clicked.connect(lambda _checked=False: show_help())

    _refresh()

    if expose_handles:
        window._handles = MainWindowHandles(  # type: ignore[attr-defined]
            grid=grid,
            keyboard=keyboard,
            new_word_button=new_word_button,
            help_button=help_button,
            game_over_panel=panel,
            game_over_title=over_title,
            game_over_word=over_word,
            game_over_meaning=over_meaning,
            play_again_button=play_again,
        )

    return window
