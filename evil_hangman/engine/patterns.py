"""
Reveal-pattern arithmetic for a single word.

Conventions:
  - a pattern is a plain string with one symbol per word position
  - '-' (PLACEHOLDER) : position not revealed yet
  - 'a'..'z'          : letter revealed at that position

Patterns only ever gain letters: revealing a guess keeps every position that
an earlier guess already uncovered.

Examples:
  reveal("-a-", "bat", "t") -> "-at"
  reveal("-a-", "car", "t") -> "-a-"
  render("-at")             -> "- a t"
"""

from typing import Iterable

PLACEHOLDER = "-"
SEPARATOR = " "


def blank(length: int) -> str:
    """Pattern with every position hidden."""
    return PLACEHOLDER * length


def reveal(pattern: str, word: str, letter: str) -> str:
    """
    Return `pattern` with every position where `word` has `letter` revealed.

    Preconditions:
      - len(pattern) == len(word)
    """
    assert len(pattern) == len(word), "Pattern and word must be the same length"
    return "".join(letter if ch == letter else p for p, ch in zip(pattern, word))


def replay(word: str, guesses: Iterable[str]) -> str:
    """
    Pattern that `word` shows after every letter in `guesses` was played,
    starting from a blank board. Order doesn't matter.
    """
    pattern = blank(len(word))
    for letter in guesses:
        pattern = reveal(pattern, word, letter)
    return pattern


def count_letter(pattern: str, letter: str) -> int:
    return pattern.count(letter)


def new_reveals(previous: str, pattern: str) -> int:
    """Number of positions hidden in `previous` but shown in `pattern`."""
    return sum(1 for old, new in zip(previous, pattern) if old == PLACEHOLDER and new != PLACEHOLDER)


def is_complete(pattern: str) -> bool:
    return PLACEHOLDER not in pattern


def render(pattern: str) -> str:
    """Board string for display: one symbol per position, space separated."""
    return SEPARATOR.join(pattern)
