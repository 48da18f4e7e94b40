"""Data model for a stuck queue entry paired with its history record."""

from dataclasses import dataclass
from pathlib import Path

from .history import HistoryRecord
from .queue import QueueEntry


@dataclass
class MatchedItem:
    """A stuck queue entry and the history record of its original release.

    Created by the matcher, updated once the file has been moved, and
    consumed by the queue cleaner. Never persisted.
    """

    queue_entry: QueueEntry
    history_record: HistoryRecord
    has_been_renamed: bool = False
    source_path: Path | None = None
    destination_path: Path | None = None
    source_left_behind: bool = False  # Copy succeeded but the original could not be deleted

    @property
    def title(self) -> str:
        return self.queue_entry.title

    @property
    def has_single_message(self) -> bool:
        """Check if the server reported exactly one status message."""
        return len(self.queue_entry.status_messages) == 1

    def mark_renamed(self, source: Path, destination: Path) -> None:
        self.source_path = source
        self.destination_path = destination
        self.has_been_renamed = True

    def __str__(self) -> str:
        state = "renamed" if self.has_been_renamed else "pending"
        return f"{self.title} ({self.queue_entry.episode}, {state})"
