"""Exceptions raised by the hangman engine."""


class HangmanError(Exception):
    """Base class for engine errors."""


class EmptyStateError(HangmanError, RuntimeError):
    """
    No candidate word is consistent with the game so far.

    In practice this means the dictionary holds no word of the requested
    length; it is a configuration problem, not a normal game outcome.
    """


class InvalidConfiguration(HangmanError, ValueError):
    """Word length or guess budget rejected at construction."""


class InvalidGuess(HangmanError, ValueError):
    """A guess that isn't a single alphabetic character."""


class GameOverError(HangmanError, RuntimeError):
    """A guess was recorded after the guess budget reached zero."""
