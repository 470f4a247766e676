"""Qt-facing wrapper around a GameSession.

The controller owns the single synchronous path that mutates the game:
on-screen key taps, physical key presses, submit and new game all end up in
one of its methods, and every mutation is followed by `state_changed`.

The only timed behaviour is the "shake": an invalid attempt emits
`shake_changed(True)` and a single-shot QTimer clears it again.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from app.domain.enums import CharStatus, GameStatus, InputOutcome
from app.domain.evaluator import GuessRecord
from app.domain.game import DEFAULT_MAX_GUESSES, GameSession, WordEntry
from app.domain.jamo_data import jamo_for_key
from app.services.settings_store import DEFAULT_REJECT_SIGNAL_MS

logger = logging.getLogger(__name__)

ConfirmFn = Callable[[], bool]


class GameController(QObject):
    """Owns one GameSession and exposes it to the widgets."""

    state_changed = pyqtSignal()
    shake_changed = pyqtSignal(bool)
    game_finished = pyqtSignal(object)

    def __init__(
        self,
        choose_word: Callable[[], WordEntry],
        *,
        max_guesses: int = DEFAULT_MAX_GUESSES,
        reject_signal_ms: int = DEFAULT_REJECT_SIGNAL_MS,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)

        self._session = GameSession(choose_word, max_guesses=max_guesses)
        self._reject_signal_ms = max(0, int(reject_signal_ms))
        self._shaking = False

        self._shake_timer: QTimer = QTimer(self)
        self._shake_timer.setSingleShot(True)
        self._shake_timer.timeout.connect(self._clear_shake)  # type: ignore

    # ----------------------------
    # State for the presentation layer
    # ----------------------------

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def status(self) -> GameStatus:
        return self._session.status

    @property
    def preview(self) -> list[str]:
        return self._session.preview

    @property
    def guesses(self) -> tuple[GuessRecord, ...]:
        return self._session.guesses

    @property
    def hints(self) -> dict[str, CharStatus]:
        return self._session.hints

    @property
    def is_shaking(self) -> bool:
        return self._shaking

    # ----------------------------
    # Entry points
    # ----------------------------

    def input_unit(self, unit: str) -> InputOutcome:
        return self._apply(self._session.submit_unit(unit))

    def delete_last(self) -> InputOutcome:
        return self._apply(self._session.delete_last())

    def submit_guess(self) -> InputOutcome:
        outcome = self._apply(self._session.submit_guess())
        if outcome is InputOutcome.ACCEPTED and self._session.status is not GameStatus.PLAYING:
            self.game_finished.emit(self._session.status)
        return outcome

    def new_game(self) -> WordEntry:
        entry = self._session.new_game()
        self._shake_timer.stop()
        self._set_shake(False)
        self.state_changed.emit()
        return entry

    def request_new_game(self, confirm: Optional[ConfirmFn] = None) -> bool:
        """Start a new game, asking first if that would abandon progress."""
        in_progress = self._session.status is GameStatus.PLAYING and bool(self._session.guesses)
        if in_progress and confirm is not None and not confirm():
            return False
        self.new_game()
        return True

    def handle_key_text(self, text: str) -> InputOutcome:
        """Feed the text of a physical key press through the QWERTY map."""
        unit = jamo_for_key(text)
        if unit is None:
            return InputOutcome.IGNORED
        return self.input_unit(unit)

    # ----------------------------
    # Internals
    # ----------------------------

    def _apply(self, outcome: InputOutcome) -> InputOutcome:
        if outcome is InputOutcome.ACCEPTED:
            self.state_changed.emit()
        elif outcome is InputOutcome.REJECTED:
            self._signal_reject()
        return outcome

    def _signal_reject(self) -> None:
        self._set_shake(True)
        self._shake_timer.start(self._reject_signal_ms)

    def _clear_shake(self) -> None:
        self._set_shake(False)

    def _set_shake(self, value: bool) -> None:
        if self._shaking == value:
            return
        self._shaking = value
        self.shake_changed.emit(value)
