"""
Consistent Frequency guesser.

Idea:
  Rebuild the words the board still allows: a dictionary word is consistent
  if replaying every played letter on it reproduces the visible pattern
  (this covers both the revealed positions and the misses).
  Play the unguessed letter that appears in the MOST consistent words
  (counted once per word). Tie-break: seeded RNG.

If nothing in the guesser's dictionary fits (e.g. the engine uses a different
list), fall back to English frequency order.
"""

from __future__ import annotations
from collections import Counter
from typing import List

from evil_hangman.engine.patterns import replay
from .base import BaseGuesser, register
from .english_freq import ENGLISH_ORDER


def consistent_words(words: List[str], pattern: str, guessed) -> List[str]:
    return [w for w in words if replay(w, guessed) == pattern]


@register
class ConsistentFreqGuesser(BaseGuesser):
    id = "consistent_freq"
    name = "Consistent Frequency"
    version = "1.0.0"

    def next_letter(self, state: dict) -> str:
        guessed = state["guessed"]
        pool = self.unguessed(state)

        words = consistent_words(self.dictionary, state["pattern"], guessed)
        counts: Counter = Counter()
        for w in words:
            counts.update(ch for ch in set(w) if ch not in guessed)

        if not counts:
            return next(ch for ch in ENGLISH_ORDER if ch in pool)

        top = max(counts.values())
        best = sorted(ch for ch, c in counts.items() if c == top)
        return best[self.rng.randrange(len(best))]
