"""
Pattern families: partition the candidate set by the pattern a guess would show.

Given:
  - the current candidates
  - the displayed pattern
  - a guessed letter

Return:
  - a mapping pattern -> set of words that would produce it

The adversary keeps the family that helps the guesser least:
  1) the largest family,
  2) on a size tie, the family that reveals the fewest new positions
     (a miss beats a hit),
  3) then the lexicographically smallest pattern, so replays are reproducible.
"""

from collections import defaultdict
from typing import Dict, Iterable, Set, Tuple

from .patterns import new_reveals, reveal

Families = Dict[str, Set[str]]


def partition(candidates: Iterable[str], pattern: str, letter: str) -> Families:
    """
    Group `candidates` by the pattern each would produce for `letter`.

    Words that don't contain `letter` share the family keyed by `pattern`
    itself. The returned mapping is fresh on every call.
    """
    families: Families = defaultdict(set)
    for word in candidates:
        families[reveal(pattern, word, letter)].add(word)
    return dict(families)


def _rank(previous: str, key: str, size: int) -> Tuple[int, int, str]:
    # Smaller tuple wins.
    return -size, new_reveals(previous, key), key


def select_family(families: Families, previous: str) -> Tuple[str, Set[str]]:
    """
    Pick the adversarial family.

    Args:
      families : output of partition()
      previous : pattern displayed before the guess (used for the tie-break)

    Returns:
      (pattern, words) of the selected family.

    Raises:
      ValueError if `families` is empty.
    """
    if not families:
        raise ValueError("Cannot select from an empty family map")
    key = min(families, key=lambda k: _rank(previous, k, len(families[k])))
    return key, families[key]


def family_sizes(families: Families) -> Dict[str, int]:
    """Pattern -> family size, largest first (for logs and reports)."""
    return dict(sorted(((k, len(v)) for k, v in families.items()), key=lambda kv: (-kv[1], kv[0])))
