"""
HangmanManager: a stateful wrapper around the immutable engine.

The game loop talks to one manager per session. Each record() swaps in the
GameState returned by engine.state.record; the queries read the current one.
Instances are not thread-safe: a session must not record from two tasks at
once.
"""

from __future__ import annotations

import random
from typing import FrozenSet, Iterable, Optional

from .errors import EmptyStateError
from .patterns import render
from .state import DEFAULT_MAX_GUESSES, GameState, new_game, record


class HangmanManager:

    def __init__(
            self,
            dictionary: Iterable[str],
            length: int,
            max_guesses: int = DEFAULT_MAX_GUESSES,
            *,
            charge_hits: bool = True,
    ):
        self.state: GameState = new_game(dictionary, length, max_guesses, charge_hits=charge_hits)

    @property
    def length(self) -> int:
        return self.state.length

    def words(self) -> FrozenSet[str]:
        """Words still consistent with every guess so far."""
        return self.state.candidates

    def guesses_left(self) -> int:
        return self.state.guesses_left

    def guesses(self) -> FrozenSet[str]:
        """Every letter passed to record()."""
        return self.state.guessed

    def pattern(self) -> str:
        """
        Board as shown to the player, e.g. "- a -".

        Raises:
          EmptyStateError if no word is consistent with the game.
        """
        self._require_candidates()
        return render(self.state.pattern)

    def record(self, letter: str) -> int:
        """
        Record a guess and return how many times it now shows on the board.
        See engine.state.record for the selection rule and errors.
        """
        self.state, occurrences = record(self.state, letter)
        return occurrences

    def is_solved(self) -> bool:
        return self.state.is_solved

    def is_over(self) -> bool:
        return self.state.is_over

    def reveal_word(self, rng: Optional[random.Random] = None) -> str:
        """
        Commit to one remaining candidate, e.g. to show the "secret" after a loss.
        Without an RNG the alphabetically first candidate is returned.
        """
        self._require_candidates()
        pool = sorted(self.state.candidates)
        return rng.choice(pool) if rng is not None else pool[0]

    def _require_candidates(self) -> None:
        if not self.state.candidates:
            raise EmptyStateError(f"No candidate words of length {self.state.length}")
