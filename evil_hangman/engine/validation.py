"""
Lightweight guess validation.

The engine itself only insists that a guess is one alphabetic character
(normalize_letter). Repeats are legal for the engine: they simply cost a
guess. A console game loop should discourage them, which is what
validate_letter is for.
"""

from typing import Iterable

from .errors import InvalidGuess


def normalize_word(word: str) -> str:
    return word.strip().lower()


def is_word(word: str) -> bool:
    """A playable word: non-empty and made of ASCII letters only."""
    return word.isascii() and word.isalpha()


def normalize_letter(letter: str) -> str:
    """
    Lowercase a single-letter guess.

    Raises:
      InvalidGuess if `letter` isn't exactly one ASCII letter.
    """
    if not isinstance(letter, str):
        raise InvalidGuess(f"Guess must be a string; got {type(letter).__name__}")
    ch = letter.strip().lower()
    if len(ch) != 1 or not is_word(ch):
        raise InvalidGuess(f"Guess must be a single ASCII letter; got {letter!r}")
    return ch


def validate_letter(letter: str, guessed: Iterable[str] = ()) -> bool:
    """
    Return True if `letter` is a fresh single-letter guess.

    Args:
      letter  : raw user input
      guessed : letters already played (case-insensitive)
    """
    try:
        ch = normalize_letter(letter)
    except InvalidGuess:
        return False
    return ch not in {g.lower() for g in guessed}
