"""Business logic services for Arr Repair."""

from .api_client import ArrApiClient, RadarrClient, SonarrClient, create_client
from .command_waiter import RemoteCommandWaiter
from .file_relocator import FileRelocator
from .filename_resolver import FilenameResolver
from .history_matcher import HistoryCursor, QueueHistoryMatcher
from .queue_cleaner import QueueCleaner

__all__ = [
    "ArrApiClient",
    "SonarrClient",
    "RadarrClient",
    "create_client",
    "RemoteCommandWaiter",
    "HistoryCursor",
    "QueueHistoryMatcher",
    "FilenameResolver",
    "FileRelocator",
    "QueueCleaner",
]
