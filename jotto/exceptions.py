"""
Game Exceptions

Error types raised by the Jotto game core.
"""


class JottoError(ValueError):
    """Base class for all game errors."""


class InvalidInputError(JottoError):
    """A guess is not exactly five alphabetic characters."""


class EmptyCandidateListError(JottoError):
    """There are no candidate words to draw a secret from."""


class StorageError(JottoError):
    """The key-value store could not be read or written."""
