from __future__ import annotations

"""Guess evaluation (domain layer).

Scores a guessed word against the target jamo by jamo. Every syllable is
decomposed into (lead, vowel, tail) and every composite component is split
into its two simple jamo, so half of ㅘ can match while the other half misses.

Three passes, each run over the whole word before the next starts:

1. CORRECT            component identical to the target's at the same slot
2. PRESENT            jamo still available in the same target syllable
3. MISPLACED_SYLLABLE jamo still available somewhere in the target word

Two depletable pools keep duplicates honest: one per target syllable and one
for the whole word. Passes 1 and 2 consume from both, pass 3 only from the
word pool.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Mapping, Sequence

from app.domain.enums import CharStatus, outranks
from app.domain.hangul_compose import is_hangul_syllable
from app.domain.hangul_unicode import decompose, split_composite


@dataclass(frozen=True)
class JamoResult:
    """One component of a guessed syllable (lead, vowel or tail)."""

    char: str
    status: CharStatus
    atoms: tuple[str, ...] = ()
    sub_statuses: tuple[CharStatus, ...] = ()

    @property
    def is_composite(self) -> bool:
        return len(self.atoms) > 1


@dataclass(frozen=True)
class SyllableResult:
    char: str
    status: CharStatus
    parts: tuple[JamoResult, ...]


@dataclass(frozen=True)
class GuessRecord:
    syllables: tuple[SyllableResult, ...]

    @property
    def word(self) -> str:
        return "".join(s.char for s in self.syllables)

    @property
    def is_all_correct(self) -> bool:
        return all(s.status is CharStatus.CORRECT for s in self.syllables)


class _Atom:
    """Mutable per-jamo scratch state used while the passes run."""

    __slots__ = ("unit", "status")

    def __init__(self, unit: str) -> None:
        self.unit = unit
        self.status = CharStatus.NONE


def _take(pool: Counter[str], unit: str) -> bool:
    if pool[unit] > 0:
        pool[unit] -= 1
        return True
    return False


def rollup(statuses: Sequence[CharStatus]) -> CharStatus:
    """Fold jamo statuses into one component/syllable status.

    CORRECT only if every jamo is CORRECT; otherwise the first of PRESENT,
    MISPLACED_SYLLABLE found; otherwise ABSENT. No jamo at all means NONE.
    """
    if not statuses:
        return CharStatus.NONE
    if all(s is CharStatus.CORRECT for s in statuses):
        return CharStatus.CORRECT
    if any(s is CharStatus.PRESENT for s in statuses):
        return CharStatus.PRESENT
    if any(s is CharStatus.MISPLACED_SYLLABLE for s in statuses):
        return CharStatus.MISPLACED_SYLLABLE
    return CharStatus.ABSENT


def merge_hints(
    hints: Mapping[str, CharStatus] | None,
    updates: Sequence[tuple[str, CharStatus]],
) -> dict[str, CharStatus]:
    """Return a copy of `hints` improved by `updates` (never downgraded)."""
    merged: dict[str, CharStatus] = dict(hints or {})
    for unit, status in updates:
        if outranks(status, merged.get(unit, CharStatus.NONE)):
            merged[unit] = status
    return merged


def evaluate(
    guess: Sequence[str],
    target: Sequence[str],
    hints: Mapping[str, CharStatus] | None = None,
) -> tuple[GuessRecord, dict[str, CharStatus]]:
    """Score `guess` against `target` and fold the result into `hints`.

    Args:
        guess: guessed syllables (e.g. ["사", "랑"])
        target: target syllables, same length as `guess`
        hints: keyboard hints accumulated from earlier guesses; not mutated

    Returns:
        (GuessRecord, updated keyboard hints)

    Raises:
        ValueError: if the lengths differ or any block is not a syllable.
    """
    guess = list(guess)
    target = list(target)
    if len(guess) != len(target):
        raise ValueError("Guess has %d syllables, target has %d" % (len(guess), len(target)))
    for block in guess + target:
        if not is_hangul_syllable(block):
            raise ValueError("Not a complete Hangul syllable: %r" % (block,))

    guess_parts = [decompose(block) for block in guess]
    target_parts = [decompose(block) for block in target]

    block_pools: list[Counter[str]] = []
    word_pool: Counter[str] = Counter()
    for components in target_parts:
        pool: Counter[str] = Counter()
        for component in components:
            pool.update(split_composite(component))
        block_pools.append(pool)
        word_pool.update(pool)

    # atoms[block][slot] -> list of _Atom
    atoms = [[[_Atom(u) for u in split_composite(c)] for c in components] for components in guess_parts]

    # Pass 1: CORRECT
    for b, components in enumerate(guess_parts):
        for slot, component in enumerate(components):
            if not component or component != target_parts[b][slot]:
                continue
            for atom in atoms[b][slot]:
                atom.status = CharStatus.CORRECT
                _take(block_pools[b], atom.unit)
                _take(word_pool, atom.unit)

    # Pass 2: PRESENT (same syllable)
    for b, slots in enumerate(atoms):
        for slot_atoms in slots:
            for atom in slot_atoms:
                if atom.status is not CharStatus.NONE:
                    continue
                if _take(block_pools[b], atom.unit):
                    atom.status = CharStatus.PRESENT
                    _take(word_pool, atom.unit)

    # Pass 3: MISPLACED_SYLLABLE (elsewhere in the word)
    for slots in atoms:
        for slot_atoms in slots:
            for atom in slot_atoms:
                if atom.status is not CharStatus.NONE:
                    continue
                if _take(word_pool, atom.unit):
                    atom.status = CharStatus.MISPLACED_SYLLABLE

    syllables: list[SyllableResult] = []
    updates: list[tuple[str, CharStatus]] = []
    for b, components in enumerate(guess_parts):
        parts: list[JamoResult] = []
        block_statuses: list[CharStatus] = []
        for slot, component in enumerate(components):
            for atom in atoms[b][slot]:
                if atom.status is CharStatus.NONE:
                    atom.status = CharStatus.ABSENT
            sub = tuple(atom.status for atom in atoms[b][slot])
            parts.append(
                JamoResult(
                    char=component,
                    status=rollup(sub),
                    atoms=tuple(atom.unit for atom in atoms[b][slot]),
                    sub_statuses=sub,
                )
            )
            block_statuses.extend(sub)
            updates.extend((atom.unit, atom.status) for atom in atoms[b][slot])
        syllables.append(SyllableResult(char=guess[b], status=rollup(block_statuses), parts=tuple(parts)))

    return GuessRecord(syllables=tuple(syllables)), merge_hints(hints, updates)
