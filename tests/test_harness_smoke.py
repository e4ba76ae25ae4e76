import csv
from pathlib import Path

import pytest
from evil_hangman.engine import EmptyStateError, replay
from evil_hangman.guessers import create_guesser
from evil_hangman.guessers.base import BaseGuesser
from evil_hangman.harness import run_batch, run_game, write_csv, write_manifest

WORDS = ["bat", "cat", "car", "can", "bar", "ban"]


def test_run_game_smoke():
    guesser = create_guesser("consistent_freq")
    r = run_game(guesser, WORDS, length=3, max_guesses=26, seed=42)
    assert r["success"] is True
    assert r["remaining"] == 1 and r["word"] == r["pattern"]
    # every reported pattern follows from the letters played so far
    played = []
    for letter, count, patt in r["history"]:
        played.append(letter)
        assert replay(r["word"], played) == patt
        assert patt.count(letter) == count
    assert r["misses"] == sum(1 for _, c, _ in r["history"] if c == 0)


def test_run_game_loses_with_small_budget():
    guesser = create_guesser("random_letter")
    r = run_game(guesser, WORDS, length=3, max_guesses=1, seed=1)
    assert r["guesses"] == 1
    assert r["success"] is False
    assert r["word"] in WORDS


def test_run_game_empty_dictionary():
    with pytest.raises(EmptyStateError):
        run_game(create_guesser("english_freq"), WORDS, length=8, seed=1)


class _StuckGuesser(BaseGuesser):
    id = "stuck"

    def next_letter(self, state: dict) -> str:
        return "a"


def test_run_game_rejects_repeated_letter():
    with pytest.raises(ValueError):
        run_game(_StuckGuesser(), WORDS, length=3, max_guesses=6, seed=1)


def test_run_batch_and_write_outputs(tmp_path: Path):
    guesser = create_guesser("english_freq")
    results = run_batch(guesser, WORDS, length=3, games=3, max_guesses=6, seed=7)
    assert len(results) == 3
    for r in results:
        r["guesser_id"] = guesser.id

    out = write_csv(results, str(tmp_path / "run.csv"), max_guesses=6, length=3)
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 3
    assert rows[0]["guesser"] == "english_freq"
    assert rows[0]["patt_1"].startswith("'")

    m = write_manifest({"run_id": "x", "summary": {"games": 3}}, str(tmp_path / "m.json"))
    assert Path(m).exists()


def test_run_game_mixed_case_dictionary_matches_lowercase():
    upper = run_game(create_guesser("consistent_freq"), ["BAT", "CAT", "CAR", "CAN"],
                     length=3, max_guesses=26, seed=3)
    lower = run_game(create_guesser("consistent_freq"), ["bat", "cat", "car", "can"],
                     length=3, max_guesses=26, seed=3)
    assert upper["history"] == lower["history"]
    assert upper["success"] is True


def test_run_game_non_ascii_words_are_skipped():
    with pytest.raises(EmptyStateError):
        run_game(create_guesser("english_freq"), ["café"], length=4, max_guesses=30, seed=1)

    r = run_game(create_guesser("english_freq"), ["café", "cafe"], length=4, max_guesses=30, seed=1)
    assert r["success"] is True and r["word"] == "cafe"
