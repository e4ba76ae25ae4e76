# apps/cli/play.py
"""
Console evil hangman.

This script:
  1) Validates the dictionary (prints counts + SHA, checks the word length).
  2) Builds a HangmanManager for the requested length and guess budget.
  3) Loops: prompt for a letter, record it, print the board, until the word
     is fully revealed or the guesses run out.

Usage:
    python -m apps.cli.play --length 5 --max-guesses 8
"""

from __future__ import annotations

import argparse
import logging
import sys

from evil_hangman.datasets import DEFAULT_DICTIONARY, load_dictionary, pretty_summary, validate_dictionary
from evil_hangman.engine import DEFAULT_MAX_GUESSES, HangmanError, HangmanManager, validate_letter

logger = logging.getLogger("evil_hangman.play")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _board(manager: HangmanManager, show_count: bool) -> str:
    lines = [
        f"guesses left: {manager.guesses_left()}",
        f"guessed     : {' '.join(sorted(manager.guesses())) or '(none)'}",
        f"current     : {manager.pattern()}",
    ]
    if show_count:
        lines.append(f"words left  : {len(manager.words())}")
    return "\n".join(lines)


def play(manager: HangmanManager, *, show_count: bool = False, read=input) -> bool:
    """
    Run the interactive loop. Returns True if the player revealed the word.
    `read` is injectable so the loop can be driven from tests.
    """
    while not manager.is_over():
        print()
        print(_board(manager, show_count))
        raw = read("Your guess? ").strip()

        if not validate_letter(raw, manager.guesses()):
            if len(raw) == 1 and raw.lower() in manager.guesses():
                print("You already guessed that")
            else:
                print("Please enter a single letter")
            continue

        letter = raw.lower()
        count = manager.record(letter)
        if count == 0:
            print(f"Sorry, there are no {letter}'s")
        elif count == 1:
            print(f"Yes, there is one {letter}")
        else:
            print(f"Yes, there are {count} {letter}'s")

    print()
    print(f"answer = {manager.reveal_word()}")
    if manager.is_solved():
        print(f"You beat me with {manager.guesses_left()} guess(es) to spare")
        return True
    print("Sorry, you lose")
    return False


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="evil hangman: the computer cheats")
    ap.add_argument("--dictionary", default=str(DEFAULT_DICTIONARY), help="word-per-line dictionary")
    ap.add_argument("--length", type=int, default=5, help="word length")
    ap.add_argument("--max-guesses", type=int, default=DEFAULT_MAX_GUESSES, help="guess budget")
    ap.add_argument("--misses-only", action="store_true",
                    help="only wrong guesses cost a turn (default: every guess does)")
    ap.add_argument("--show-count", action="store_true",
                    help="print how many candidate words remain (debug)")
    ap.add_argument("--log-level", default="WARNING", type=str.upper,
                    choices=LOG_LEVELS, help="logging level")
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    rep = validate_dictionary(args.dictionary, length=args.length)
    print(pretty_summary(rep))
    if not rep["passed"]:
        for issue in rep["issues"]:
            logger.error(issue)
        return 2

    try:
        manager = HangmanManager(
            load_dictionary(args.dictionary), args.length, args.max_guesses,
            charge_hits=not args.misses_only,
        )
        play(manager, show_count=args.show_count)
    except HangmanError as e:
        logger.error("%s", e)
        return 1
    except (KeyboardInterrupt, EOFError):
        print()
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
