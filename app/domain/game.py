from __future__ import annotations

"""Game session state machine (domain layer, Qt-free).

One `GameSession` per window. All mutation goes through four entry points:

- submit_unit(unit)  append a typed jamo to the input buffer
- delete_last()      backspace
- submit_guess()     evaluate the buffer against the target
- new_game()         pick a new target and reset everything

Invalid attempts are reported as `InputOutcome.REJECTED` and leave the state
untouched; they are never raised.
"""

import logging
from dataclasses import dataclass
from typing import Callable

from app.domain.enums import CharStatus, GameStatus, InputOutcome
from app.domain.evaluator import GuessRecord, evaluate
from app.domain.hangul_compose import is_hangul_syllable
from app.domain.jamo_automaton import assemble

logger = logging.getLogger(__name__)

DEFAULT_MAX_GUESSES = 5
WORD_LENGTH = 2


@dataclass(frozen=True)
class WordEntry:
    word: str
    meaning: str

    @property
    def syllables(self) -> tuple[str, ...]:
        return tuple(self.word)


class GameSession:
    """Target, input buffer, guess history and keyboard hints for one game."""

    def __init__(
        self,
        choose_word: Callable[[], WordEntry],
        *,
        max_guesses: int = DEFAULT_MAX_GUESSES,
        word_length: int = WORD_LENGTH,
    ) -> None:
        self._choose_word = choose_word
        self._max_guesses = max(1, int(max_guesses))
        self._word_length = int(word_length)

        self._entry: WordEntry | None = None
        self._buffer: list[str] = []
        self._guesses: list[GuessRecord] = []
        self._hints: dict[str, CharStatus] = {}
        self._status = GameStatus.PLAYING

        self.new_game()

    # --- Read-only state -------------------------------------------------

    @property
    def entry(self) -> WordEntry:
        # Always set: __init__ calls new_game()
        return self._entry  # type: ignore[return-value]

    @property
    def target(self) -> str:
        return self.entry.word

    @property
    def meaning(self) -> str:
        return self.entry.meaning

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def max_guesses(self) -> int:
        return self._max_guesses

    @property
    def guesses(self) -> tuple[GuessRecord, ...]:
        return tuple(self._guesses)

    @property
    def hints(self) -> dict[str, CharStatus]:
        return dict(self._hints)

    @property
    def buffer(self) -> tuple[str, ...]:
        return tuple(self._buffer)

    @property
    def preview(self) -> list[str]:
        """The buffer as the IME would currently display it."""
        return assemble(self._buffer)

    @property
    def remaining_guesses(self) -> int:
        return self._max_guesses - len(self._guesses)

    # --- Entry points ----------------------------------------------------

    def new_game(self) -> WordEntry:
        entry = self._choose_word()
        if len(entry.word) != self._word_length or not all(is_hangul_syllable(c) for c in entry.word):
            raise ValueError("Target must be %d Hangul syllables: %r" % (self._word_length, entry.word))

        self._entry = entry
        self._buffer = []
        self._guesses = []
        self._hints = {}
        self._status = GameStatus.PLAYING
        logger.info("New game started (%d guesses allowed)", self._max_guesses)
        return entry

    def submit_unit(self, unit: str) -> InputOutcome:
        if self._status is not GameStatus.PLAYING:
            return InputOutcome.IGNORED

        candidate = self._buffer + [unit]
        if len(assemble(candidate)) > self._word_length:
            logger.debug("Rejected %r: would exceed %d syllables", unit, self._word_length)
            return InputOutcome.REJECTED

        self._buffer = candidate
        return InputOutcome.ACCEPTED

    def delete_last(self) -> InputOutcome:
        if self._status is not GameStatus.PLAYING or not self._buffer:
            return InputOutcome.IGNORED
        self._buffer.pop()
        return InputOutcome.ACCEPTED

    def submit_guess(self) -> InputOutcome:
        if self._status is not GameStatus.PLAYING:
            return InputOutcome.IGNORED

        assembled = assemble(self._buffer)
        if len(assembled) != self._word_length:
            logger.debug("Rejected guess %r: need %d syllables", assembled, self._word_length)
            return InputOutcome.REJECTED
        if not all(is_hangul_syllable(block) for block in assembled):
            logger.debug("Rejected guess %r: incomplete syllable", assembled)
            return InputOutcome.REJECTED

        record, self._hints = evaluate(assembled, self.entry.syllables, self._hints)
        self._guesses.append(record)
        self._buffer = []
        logger.debug("Guess %d/%d recorded: %s", len(self._guesses), self._max_guesses, record.word)

        if "".join(assembled) == self.target:
            self._status = GameStatus.WON
            logger.info("Game won in %d guess(es)", len(self._guesses))
        elif len(self._guesses) >= self._max_guesses:
            self._status = GameStatus.LOST
            logger.info("Game lost; target was %s", self.target)
        return InputOutcome.ACCEPTED
