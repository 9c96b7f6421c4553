"""Exceptions raised by the solver core and its collaborators.

The core errors also subclass ValueError: they all signal caller misuse
(bad word, empty input), never a transient condition worth retrying.
"""


class WordleError(Exception):
    """Base class for everything this package raises on purpose."""


class LengthMismatch(WordleError, ValueError):
    """A guess or target is not exactly WORD_LENGTH letters."""

    def __init__(self, word: str, expected: int = 5):
        self.word = word
        self.expected = expected
        super().__init__(f"{word!r} has {len(word)} letters, expected exactly {expected}")


class EmptyCandidateSet(WordleError, ValueError):
    """Scoring was requested against zero candidates."""


class NoCandidatesAvailable(WordleError, ValueError):
    """Guess selection was requested against an empty pool."""


class WordListError(WordleError):
    """A word list file could not be parsed."""


class DailyPuzzleError(WordleError):
    """The remote daily puzzle could not be fetched or was malformed."""
