"""
Exceptions raised by the recognition engine.
"""


class RecognitionError(Exception):
    """Base class for all recognition errors."""


class EmptyQuery(RecognitionError):
    """The drawn path has no points."""


class NoPath(RecognitionError):
    """A word has no mappable letters, so no ideal path exists."""

    def __init__(self, word: str):
        super().__init__(f"No path for word {word!r}")
        self.word = word


class NotInitialized(RecognitionError):
    """Dictionary or key layout is missing or empty."""


class InvalidParameter(RecognitionError, ValueError):
    """A parameter is out of range (negative window, k <= 0, ...)."""


class RecognitionCancelled(RecognitionError):
    """The recognition call was abandoned before the scan finished."""
