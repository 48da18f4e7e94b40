"""Exceptions raised while repairing stuck queue items."""

from .base import ArrRepairException


class HistoryExhaustedError(ArrRepairException):
    """Raised when the history has no more pages to fetch."""

    pass


class GuessError(ArrRepairException):
    """Base class for filename guessing failures."""

    pass


class FilenameGuessError(GuessError):
    """Raised when the on-disk filename cannot be guessed."""

    pass


class FinalNameGuessError(GuessError):
    """Raised when the corrected filename cannot be guessed."""

    pass


class RelocationError(ArrRepairException):
    """Raised when a file cannot be moved to its corrected location."""

    pass


class SourceFileNotFoundError(RelocationError):
    """Raised when the guessed file does not exist under the download folder."""

    pass


class SourceCleanupError(RelocationError):
    """Raised when the copy succeeded but the original file could not be removed."""

    def __init__(self, message: str, destination=None):
        super().__init__(message)
        self.destination = destination


class QueueCleanupError(ArrRepairException):
    """Raised after cleanup when one or more queue entries could not be cleared."""

    def __init__(self, failures: list[str], cleared: int = 0):
        super().__init__(", ".join(failures))
        self.failures = list(failures)
        self.cleared = cleared
