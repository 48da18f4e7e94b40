"""Custom exceptions for Arr Repair."""

from .api import (
    ApiConnectionError,
    ApiError,
    ApiRequestError,
    AuthorizationError,
    CommandTimeoutError,
    UnsupportedOperationError,
)
from .base import ArrRepairException, ConfigError
from .repair import (
    FilenameGuessError,
    FinalNameGuessError,
    GuessError,
    HistoryExhaustedError,
    QueueCleanupError,
    RelocationError,
    SourceCleanupError,
    SourceFileNotFoundError,
)

__all__ = [
    "ArrRepairException",
    "ConfigError",
    "ApiError",
    "AuthorizationError",
    "ApiConnectionError",
    "ApiRequestError",
    "UnsupportedOperationError",
    "CommandTimeoutError",
    "HistoryExhaustedError",
    "GuessError",
    "FilenameGuessError",
    "FinalNameGuessError",
    "RelocationError",
    "SourceFileNotFoundError",
    "SourceCleanupError",
    "QueueCleanupError",
]
