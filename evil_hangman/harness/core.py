"""
Experiment harness core primitives.

- run_game:  play one evil-hangman game with a given guesser.
- run_batch: play many games back-to-back with derived seeds.

The adversary is deterministic, so per-game variation comes only from the
guesser's seeded RNG. These functions are UI-agnostic so they can be reused by
the batch CLI, a notebook or tests.
"""

from __future__ import annotations
import logging
import time
from typing import Dict, List, Iterable, Tuple

from evil_hangman.engine import DEFAULT_MAX_GUESSES, HangmanManager, validate_letter

logger = logging.getLogger(__name__)


def run_game(
        guesser,
        dictionary: Iterable[str],
        *,
        length: int,
        max_guesses: int = DEFAULT_MAX_GUESSES,
        seed: int | None = None,
        charge_hits: bool = True,
) -> Dict:
    """
    Play until the word is fully revealed or the guess budget runs out.

    Args:
        guesser:     an object implementing BaseGuesser with next_letter(state)
        dictionary:  word list shared by the engine and the guesser
        length:      word length
        max_guesses: guess budget
        seed:        RNG seed for the guesser's tie-breaks
        charge_hits: False to charge misses only

    Returns:
        dict with keys:
            success (bool), guesses (int), misses (int), time_ms (float),
            history (list[(letter, count, pattern)]), pattern (str),
            remaining (int), word (str)

    Raises:
        EmptyStateError if the dictionary has no word of `length`.
        ValueError if the guesser plays an invalid or repeated letter.
    """
    words = list(dictionary)
    manager = HangmanManager(words, length, max_guesses, charge_hits=charge_hits)
    manager.pattern()  # surfaces EmptyStateError before the guesser runs

    guesser.reset(dictionary=words, length=length, seed=seed)

    history: List[Tuple[str, int, str]] = []
    total_ms = 0.0

    while not manager.is_over():
        state = {
            "length": length,
            "pattern": manager.state.pattern,
            "guessed": manager.guesses(),
            "guesses_left": manager.guesses_left(),
            "rng": guesser.rng,
        }
        t0 = time.perf_counter_ns()
        letter = guesser.next_letter(state)
        total_ms += (time.perf_counter_ns() - t0) / 1_000_000.0

        if not validate_letter(letter, manager.guesses()):
            raise ValueError(f"Guesser {guesser.id!r} played invalid or repeated letter {letter!r}")

        count = manager.record(letter)
        history.append((letter.lower(), count, manager.state.pattern))

    result = {
        "success": manager.is_solved(),
        "guesses": len(history),
        "misses": sum(1 for _, c, _ in history if c == 0),
        "time_ms": total_ms,
        "history": history,
        "pattern": manager.state.pattern,
        "remaining": len(manager.words()),
        "word": manager.reveal_word(),
    }
    logger.debug("Game over: %s", {k: v for k, v in result.items() if k != "history"})
    return result


def run_batch(
        guesser,
        dictionary: Iterable[str],
        *,
        length: int,
        games: int,
        max_guesses: int = DEFAULT_MAX_GUESSES,
        seed: int | None = None,
        charge_hits: bool = True,
) -> List[Dict]:
    """
    Run `games` games back-to-back.

    Each game's seed is derived from the base seed (seed + index) so runs are
    reproducible but not identical across games.
    """
    words = list(dictionary)
    out: List[Dict] = []
    for idx in range(1, games + 1):
        game_seed = None if seed is None else (seed + idx)
        r = run_game(
            guesser, words, length=length, max_guesses=max_guesses,
            seed=game_seed, charge_hits=charge_hits,
        )
        out.append(r)
    return out
