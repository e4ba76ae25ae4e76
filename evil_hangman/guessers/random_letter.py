"""
Random Letter guesser.

Strategy:
  - Pick uniformly at random (seeded) among letters not yet played.

A baseline to verify the pipeline; the adversary should beat it nearly
every time.
"""

from __future__ import annotations

from .base import BaseGuesser, register


@register
class RandomLetterGuesser(BaseGuesser):
    id = "random_letter"
    name = "Random Letter"
    version = "1.0.0"

    def next_letter(self, state: dict) -> str:
        pool = self.unguessed(state)
        return pool[self.rng.randrange(len(pool))]
