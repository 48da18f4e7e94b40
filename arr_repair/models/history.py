"""Data models for the server download history."""

from dataclasses import dataclass, field
from typing import Any

from .queue import EpisodeRef, QueueEntry


@dataclass(frozen=True)
class HistoryRecord:
    """A past download event, carrying the original release title."""

    download_id: str
    source_title: str
    episode: EpisodeRef = field(default_factory=EpisodeRef)
    tracked_download_status: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "HistoryRecord":
        return cls(
            download_id=data.get("downloadId", ""),
            source_title=data.get("sourceTitle", ""),
            episode=EpisodeRef.from_api(data.get("episode")),
            tracked_download_status=data.get("trackedDownloadStatus", ""),
        )

    def matches(self, entry: QueueEntry) -> bool:
        """Check if this record describes the given queue entry."""
        return self.download_id == entry.download_id and self.episode.same_episode(entry.episode)


@dataclass(frozen=True)
class HistoryPage:
    """One page of the server history.

    A page reporting a page size of zero means there is no more data.
    """

    page: int
    page_size: int
    total_records: int = 0
    records: list[HistoryRecord] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "HistoryPage":
        return cls(
            page=data.get("page", 0),
            page_size=data.get("pageSize", 0),
            total_records=data.get("totalRecords", 0),
            records=[HistoryRecord.from_api(r) for r in data.get("records") or []],
        )

    @property
    def is_empty(self) -> bool:
        return self.page_size == 0 or not self.records
