"""Data models for remote server commands."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class CommandState(str, Enum):
    """Lifecycle state of a remote command."""

    QUEUED = "queued"
    STARTED = "started"
    COMPLETED = "completed"
    FAILED = "failed"
    ABORTED = "aborted"
    CANCELLED = "cancelled"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str | None) -> "CommandState":
        try:
            return cls((value or "").lower())
        except ValueError:
            return cls.UNKNOWN

    @property
    def is_terminal_failure(self) -> bool:
        return self in (CommandState.FAILED, CommandState.ABORTED, CommandState.CANCELLED)


@dataclass(frozen=True)
class CommandBody:
    """A command to submit to the server."""

    name: str
    series_ids: list[int] | None = None
    movie_ids: list[int] | None = None
    path: str | None = None

    def to_api(self) -> dict[str, Any]:
        """Serialize to the server JSON, omitting unset fields."""
        body: dict[str, Any] = {"name": self.name}
        if self.series_ids:
            body["seriesIds"] = list(self.series_ids)
        if self.movie_ids:
            body["movieIds"] = list(self.movie_ids)
        if self.path:
            body["path"] = self.path
        return body


@dataclass(frozen=True)
class CommandStatus:
    """Status of a submitted command."""

    id: int
    name: str
    state: CommandState = CommandState.UNKNOWN

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "CommandStatus":
        # Older servers report "state", newer ones "status"
        return cls(
            id=data.get("id", 0),
            name=data.get("name", ""),
            state=CommandState.parse(data.get("state") or data.get("status")),
        )

    @property
    def is_completed(self) -> bool:
        return self.state == CommandState.COMPLETED


@dataclass(frozen=True)
class MediaItem:
    """A freshly fetched episode or movie, used to check if the file was picked up."""

    id: int
    has_file: bool = False

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "MediaItem":
        return cls(id=data.get("id", 0), has_file=bool(data.get("hasFile", False)))
