# apps/cli/run.py
"""
CLI entry point for benchmarking guessers against the evil hangman engine.

This script:
  1) Validates the dictionary (prints counts + SHA, checks the word length).
  2) Loads the dictionary and instantiates the requested guesser.
  3) Plays a batch of games with a progress bar and writes:
       - CSV:  per-game results + letter/count/pattern history columns
       - JSON: manifest with config, dictionary report, summary, git commit

Usage:
    python -m apps.cli.run --guesser consistent_freq --length 5 --games 50
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List

import numpy as np
from tqdm import tqdm

from evil_hangman.datasets import DEFAULT_DICTIONARY, load_dictionary, pretty_summary, validate_dictionary
from evil_hangman.engine import DEFAULT_MAX_GUESSES, HangmanError
from evil_hangman.guessers import create_guesser, get_guesser_ids
from evil_hangman.harness import run_game
from evil_hangman.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown

logger = logging.getLogger("evil_hangman.run")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def summarize(results: List[Dict]) -> Dict:
    """Win rate and miss/guess statistics for a batch."""
    if not results:
        return {"games": 0}
    wins = np.array([r["success"] for r in results], dtype=bool)
    misses = np.array([r["misses"] for r in results], dtype=float)
    guesses = np.array([r["guesses"] for r in results], dtype=float)
    return {
        "games": len(results),
        "win_rate": float(wins.mean()),
        "misses_mean": float(misses.mean()),
        "misses_median": float(np.median(misses)),
        "misses_p90": float(np.percentile(misses, 90)),
        "guesses_mean": float(guesses.mean()),
    }


def main(argv=None) -> int:
    """
    Parse CLI args, validate the dictionary, run the batch with progress, and write outputs.
    """
    guesser_choices = ", ".join(get_guesser_ids())

    ap = argparse.ArgumentParser(description="evil hangman: run guesser experiments")
    ap.add_argument("--guesser", default="consistent_freq",
                    help=f"guesser id (one of: {guesser_choices})")
    ap.add_argument("--length", type=int, default=5, help="word length")
    ap.add_argument("--max-guesses", type=int, default=DEFAULT_MAX_GUESSES, help="guess budget")
    ap.add_argument("--misses-only", action="store_true",
                    help="only wrong guesses cost a turn (default: every guess does)")
    ap.add_argument("--dictionary", default=str(DEFAULT_DICTIONARY), help="word-per-line dictionary")
    ap.add_argument("--games", type=int, default=20, help="number of games to play")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-progress", action="store_true", help="disable the progress bar")
    ap.add_argument("--log-level", default="INFO", type=str.upper,
                    choices=LOG_LEVELS, help="logging level")
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate dictionary
    rep = validate_dictionary(args.dictionary, length=args.length)
    print(pretty_summary(rep))
    if not rep["passed"]:
        for issue in rep["issues"]:
            logger.error(issue)
        return 2

    # 2) Load words, instantiate guesser
    words = load_dictionary(args.dictionary)
    try:
        guesser = create_guesser(args.guesser)
    except ValueError as e:
        logger.error("%s", e)
        return 2

    # 3) Run batch with progress
    results = []
    games = tqdm(range(1, args.games + 1), ncols=80, desc="Playing", unit="game",
                 disable=args.no_progress or not sys.stderr.isatty())
    try:
        for idx in games:
            r = run_game(
                guesser, words, length=args.length, max_guesses=args.max_guesses,
                seed=args.seed + idx, charge_hits=not args.misses_only,
            )
            r["guesser_id"] = guesser.id
            results.append(r)
    except HangmanError as e:
        logger.error("%s", e)
        return 1

    summary = summarize(results)
    logger.info("Summary: %s", summary)

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_guesses=args.max_guesses, length=args.length)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dictionary": rep,
        "summary": summary,
        "guesser_id": guesser.id,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
