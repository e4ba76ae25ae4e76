import random
import string

import pytest
from evil_hangman.datasets import load_dictionary
from evil_hangman.engine import new_game, partition, record, replay


@pytest.fixture(scope="module")
def dictionary():
    return load_dictionary()


@pytest.mark.parametrize("length", [3, 4, 5, 6])
@pytest.mark.parametrize("seed", range(8))
def test_invariants_hold_for_random_guess_sequences(dictionary, length, seed):
    rng = random.Random(seed)
    letters = list(string.ascii_lowercase)
    rng.shuffle(letters)

    state = new_game(dictionary, length, max_guesses=len(letters))
    assert state.candidates

    for letter in letters:
        if state.is_over:
            break
        prev = state
        families = partition(prev.candidates, prev.pattern, letter)
        state, count = record(prev, letter)

        # consistency: every candidate replays to the displayed pattern
        assert all(replay(w, state.guessed) == state.pattern for w in state.candidates)

        # largest family kept
        assert len(state.candidates) == max(len(v) for v in families.values())

        # narrowing
        assert len(state.candidates) <= len(prev.candidates)
        if len(families) > 1:
            assert len(state.candidates) < len(prev.candidates)

        # accounting
        assert state.guesses_left == prev.guesses_left - 1
        assert state.guessed == prev.guessed | {letter}

        # occurrence count
        assert count == state.pattern.count(letter)
        assert (count == 0) == (state.pattern == prev.pattern)
