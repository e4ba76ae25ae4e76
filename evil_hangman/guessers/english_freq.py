"""
English Frequency guesser.

Strategy:
  - Walk a fixed English letter-frequency order and play the first letter
    not yet guessed. Ignores the board entirely.
"""

from __future__ import annotations

from .base import BaseGuesser, register

ENGLISH_ORDER = "etaoinshrdlcumwfgypbvkjxqz"


@register
class EnglishFreqGuesser(BaseGuesser):
    id = "english_freq"
    name = "English Frequency"
    version = "1.0.0"

    def next_letter(self, state: dict) -> str:
        pool = self.unguessed(state)
        return next(ch for ch in ENGLISH_ORDER if ch in pool)
