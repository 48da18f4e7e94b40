"""Data models for the download queue."""

from dataclasses import dataclass, field
from typing import Any

STATUS_COMPLETED = "Completed"
TRACKED_STATUS_OK = "Ok"
TRACKED_STATUS_WARNING = "Warning"


@dataclass(frozen=True)
class EpisodeRef:
    """Episode reference attached to queue and history entries.

    Movies carry an empty reference (season and episode 0).
    """

    id: int = 0
    season_number: int = 0
    episode_number: int = 0
    has_file: bool = False

    @classmethod
    def from_api(cls, data: dict[str, Any] | None) -> "EpisodeRef":
        data = data or {}
        return cls(
            id=data.get("id", 0),
            season_number=data.get("seasonNumber", 0),
            episode_number=data.get("episodeNumber", 0),
            has_file=bool(data.get("hasFile", False)),
        )

    def same_episode(self, other: "EpisodeRef") -> bool:
        """Check if both references point to the same season and episode."""
        return (
            self.season_number == other.season_number
            and self.episode_number == other.episode_number
        )

    def __str__(self) -> str:
        return f"S{self.season_number:02d}E{self.episode_number:02d}"


@dataclass(frozen=True)
class StatusMessage:
    """A status message reported by the server for a queue entry."""

    title: str
    messages: list[str] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "StatusMessage":
        return cls(title=data.get("title", ""), messages=list(data.get("messages", [])))


@dataclass(frozen=True)
class QueueEntry:
    """A download in progress, or stuck, in the server queue."""

    id: int
    download_id: str
    title: str
    status: str
    tracked_download_status: str
    episode: EpisodeRef = field(default_factory=EpisodeRef)
    target_path: str = ""  # Series or movie folder the server expects
    series_id: int | None = None
    movie_id: int | None = None
    status_messages: list[StatusMessage] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "QueueEntry":
        """Build a queue entry from the server JSON."""
        series = data.get("series") or {}
        movie = data.get("movie") or {}
        return cls(
            id=data["id"],
            download_id=data.get("downloadId", ""),
            title=data.get("title", ""),
            status=data.get("status", ""),
            tracked_download_status=data.get("trackedDownloadStatus", ""),
            episode=EpisodeRef.from_api(data.get("episode")),
            target_path=series.get("path") or movie.get("path") or "",
            series_id=series.get("id") or data.get("seriesId"),
            movie_id=movie.get("id") or data.get("movieId"),
            status_messages=[StatusMessage.from_api(m) for m in data.get("statusMessages") or []],
        )

    @property
    def is_completed(self) -> bool:
        return self.status == STATUS_COMPLETED

    @property
    def is_flagged(self) -> bool:
        return self.tracked_download_status == TRACKED_STATUS_WARNING

    @property
    def is_stuck(self) -> bool:
        """Check if the download finished but the server could not import it."""
        return self.is_completed and self.is_flagged

    def __str__(self) -> str:
        return f"QueueEntry(id={self.id}, title={self.title!r}, {self.episode})"
