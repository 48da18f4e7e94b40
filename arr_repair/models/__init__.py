"""Data models for Arr Repair."""

from .command import CommandBody, CommandState, CommandStatus, MediaItem
from .history import HistoryPage, HistoryRecord
from .matched_item import MatchedItem
from .processing import RepairResult
from .queue import (
    STATUS_COMPLETED,
    TRACKED_STATUS_OK,
    TRACKED_STATUS_WARNING,
    EpisodeRef,
    QueueEntry,
    StatusMessage,
)

__all__ = [
    "EpisodeRef",
    "StatusMessage",
    "QueueEntry",
    "HistoryRecord",
    "HistoryPage",
    "MatchedItem",
    "CommandBody",
    "CommandState",
    "CommandStatus",
    "MediaItem",
    "RepairResult",
    "STATUS_COMPLETED",
    "TRACKED_STATUS_OK",
    "TRACKED_STATUS_WARNING",
]
