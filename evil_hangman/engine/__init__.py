from .errors import EmptyStateError, GameOverError, HangmanError, InvalidConfiguration, InvalidGuess
from .families import partition, select_family
from .manager import HangmanManager
from .patterns import PLACEHOLDER, render, replay, reveal
from .state import DEFAULT_MAX_GUESSES, GameState, new_game, record
from .validation import is_word, normalize_word, validate_letter

__all__ = [
    "HangmanManager", "GameState", "new_game", "record",
    "partition", "select_family", "reveal", "replay", "render",
    "validate_letter", "is_word", "normalize_word",
    "PLACEHOLDER", "DEFAULT_MAX_GUESSES",
    "HangmanError", "EmptyStateError", "InvalidConfiguration", "InvalidGuess", "GameOverError",
]
