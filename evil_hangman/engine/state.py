"""
Immutable game state and the adversarial update step.

- new_game: build the opening state from a dictionary.
- record:   apply one guessed letter and return (next_state, occurrences).

Every call returns a fresh GameState; nothing is mutated in place, so a state
can be kept around (e.g. for history or tests) without being disturbed by
later guesses.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import FrozenSet, Iterable, Tuple

from .errors import EmptyStateError, GameOverError, InvalidConfiguration
from .families import family_sizes, partition, select_family
from .patterns import blank, count_letter, is_complete
from .validation import is_word, normalize_letter, normalize_word

logger = logging.getLogger(__name__)

DEFAULT_MAX_GUESSES = 6


@dataclass(frozen=True)
class GameState:
    length: int
    max_guesses: int
    guesses_left: int
    pattern: str
    candidates: FrozenSet[str]
    guessed: FrozenSet[str] = field(default_factory=frozenset)
    # False: only misses cost a guess (standard Hangman). The core default
    # charges every guess.
    charge_hits: bool = True

    @property
    def is_solved(self) -> bool:
        return is_complete(self.pattern)

    @property
    def is_over(self) -> bool:
        return self.is_solved or self.guesses_left <= 0


def new_game(
        dictionary: Iterable[str],
        length: int,
        max_guesses: int = DEFAULT_MAX_GUESSES,
        *,
        charge_hits: bool = True,
) -> GameState:
    """
    Opening state: every distinct dictionary word of `length`, nothing revealed.

    Words are stripped and lowercased first; anything that isn't made of ASCII
    letters is skipped. An empty candidate set is allowed here and only
    surfaces as EmptyStateError once the board is queried or a guess recorded.

    Raises:
      InvalidConfiguration if length <= 0 or max_guesses < 0.
    """
    if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
        raise InvalidConfiguration(f"length must be a positive integer; got {length!r}")
    if isinstance(max_guesses, bool) or not isinstance(max_guesses, int) or max_guesses < 0:
        raise InvalidConfiguration(f"max_guesses must be a non-negative integer; got {max_guesses!r}")

    words = set()
    for raw in dictionary:
        w = normalize_word(raw)
        if len(w) == length and is_word(w):
            words.add(w)

    if not words:
        logger.warning("No dictionary words of length %d", length)
    else:
        logger.debug("New game: length=%d, max_guesses=%d, %d candidates", length, max_guesses, len(words))

    return GameState(
        length=length,
        max_guesses=max_guesses,
        guesses_left=max_guesses,
        pattern=blank(length),
        candidates=frozenset(words),
        charge_hits=charge_hits,
    )


def record(state: GameState, letter: str) -> Tuple[GameState, int]:
    """
    Apply a guessed letter adversarially.

    Steps:
      1) partition the candidates by the pattern `letter` would reveal,
      2) keep the largest family (ties: fewest new reveals, then smallest pattern),
      3) add the letter to the guessed set and charge one guess (clamped at 0).

    Returns:
      (next_state, occurrences) where occurrences is how many positions of
      the new pattern show `letter`. Zero means the guess missed.

    Raises:
      EmptyStateError if there are no candidates to partition.
      GameOverError   if no guesses are left.
      InvalidGuess    if `letter` isn't a single ASCII letter.
    """
    letter = normalize_letter(letter)
    if not state.candidates:
        raise EmptyStateError(f"No candidate words of length {state.length}")
    if state.guesses_left <= 0:
        raise GameOverError("No guesses left")

    families = partition(state.candidates, state.pattern, letter)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Guess %r families: %s", letter, family_sizes(families))

    pattern, words = select_family(families, state.pattern)
    occurrences = count_letter(pattern, letter)

    cost = 1 if (state.charge_hits or occurrences == 0) else 0
    nxt = replace(
        state,
        pattern=pattern,
        candidates=frozenset(words),
        guessed=state.guessed | {letter},
        guesses_left=max(0, state.guesses_left - cost),
    )
    logger.debug(
        "Guess %r -> %s (%d candidates, %d occurrence(s), %d guesses left)",
        letter, pattern, len(words), occurrences, nxt.guesses_left,
    )
    return nxt, occurrences
