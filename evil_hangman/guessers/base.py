from __future__ import annotations
import random
import string
from typing import Dict, List, Type

from evil_hangman.engine.validation import is_word, normalize_word

ALPHABET = string.ascii_lowercase

# ---- Global guesser registry ----
REGISTRY: Dict[str, Type["BaseGuesser"]] = {}


def register(cls: Type["BaseGuesser"]) -> Type["BaseGuesser"]:
    """
    Decorator: @register on a guesser class adds it to REGISTRY by its `id`.
    """
    gid = getattr(cls, "id", None)
    if not gid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if gid in REGISTRY:
        raise ValueError(f"Duplicate guesser id: {gid}")
    REGISTRY[gid] = cls
    return cls


# ---- Base class that guessers inherit ----
class BaseGuesser:
    """
    A guesser only sees what a human player would: the board pattern, the
    letters already played and the guesses left. It never sees the engine's
    candidate set.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.length: int = 0
        self.dictionary: List[str] = []
        self.rng = random.Random()

    def reset(self, *, dictionary: List[str], length: int,
              seed: int | None = None) -> None:
        # Same hygiene as the engine, so both see the same words.
        seen = set()
        self.dictionary = []
        for raw in dictionary:
            w = normalize_word(raw)
            if len(w) == length and is_word(w) and w not in seen:
                seen.add(w)
                self.dictionary.append(w)
        self.length = int(length)
        if seed is not None:
            self.rng.seed(seed)

    def next_letter(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")

    @staticmethod
    def unguessed(state: dict) -> List[str]:
        """
        Letters not played yet, in alphabet order.

        Raises ValueError once all of them are used. Engine words are ASCII
        only, so by then the board is already fully revealed.
        """
        guessed = state["guessed"]
        pool = [ch for ch in ALPHABET if ch not in guessed]
        if not pool:
            raise ValueError("Every letter has already been played")
        return pool
