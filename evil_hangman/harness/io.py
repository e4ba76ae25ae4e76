"""
I/O utilities for experiment runs.

Responsibilities:
- write_csv:      flatten per-game results into a tidy CSV (one row per game).
- write_manifest: dump a JSON manifest with config, dictionary report and summary.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Patterns are prefixed with an apostrophe to keep Excel from interpreting
  strings like "-a-" as formulas.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def _excel_safe_pattern(patt: str) -> str:
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str, max_guesses: int, length: int) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      guesser, length, word, success, guesses, misses, remaining, time_ms,
      letter_1, count_1, patt_1, ..., letter_K, count_K, patt_K

    K is `max_guesses`, or the longest history in `results` when misses are
    the only thing charged and games run longer.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    turns = max([max_guesses] + [len(r.get("history", [])) for r in results])
    fields = ["guesser", "length", "word", "success", "guesses", "misses", "remaining", "time_ms"]
    for i in range(1, turns + 1):
        fields += [f"letter_{i}", f"count_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "guesser": r.get("guesser_id", "?"),
                "length": length,
                "word": r["word"],
                "success": r["success"],
                "guesses": r["guesses"],
                "misses": r["misses"],
                "remaining": r["remaining"],
                "time_ms": round(float(r["time_ms"]), 3),
            }

            hist = r.get("history", [])
            for i in range(1, turns + 1):
                if i <= len(hist):
                    letter, count, patt = hist[i - 1]
                    row[f"letter_{i}"] = letter
                    row[f"count_{i}"] = count
                    row[f"patt_{i}"] = _excel_safe_pattern(patt)
                else:
                    row[f"letter_{i}"] = ""
                    row[f"count_{i}"] = ""
                    row[f"patt_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest for a run.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (guesser, length, dictionary, seed, games, outdir)
      - dictionary: output of datasets.validate_dictionary(...)
      - summary: win rate and miss statistics
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, default=str)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
