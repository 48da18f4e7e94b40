"""Protocol for the media server API used by the repair pipeline."""

from typing import Protocol

from arr_repair.models import (
    CommandBody,
    CommandStatus,
    HistoryPage,
    MediaItem,
    QueueEntry,
)


class ArrApiProtocol(Protocol):
    """Interface for a Sonarr/Radarr style server.

    The transport (HTTP, JSON) is an implementation detail; the repair
    services only depend on these operations.
    """

    @property
    def server_type(self) -> str:
        """Flavor of the server ('sonarr' or 'radarr')."""
        ...

    def get_queue(self) -> list[QueueEntry]:
        """Fetch the full download queue, in server order."""
        ...

    def get_history(self, page: int) -> HistoryPage:
        """Fetch one page of the download history (1-based)."""
        ...

    def delete_queue_item(self, item_id: int) -> None:
        """Remove one entry from the queue.

        Raises:
            ApiRequestError: If the server does not confirm the deletion
        """
        ...

    def execute_command(self, command: CommandBody) -> CommandStatus:
        """Submit a command and return its initial status."""
        ...

    def get_command_status(self, command_id: int) -> CommandStatus:
        """Fetch the current status of a submitted command."""
        ...

    def fetch_media_item(self, entry: QueueEntry) -> MediaItem:
        """Fetch the episode or movie a queue entry refers to."""
        ...

    def media_id(self, entry: QueueEntry) -> int | None:
        """Series or movie id a queue entry belongs to."""
        ...

    def supports(self, capability: str) -> bool:
        """Check if this server flavor implements a command capability."""
        ...

    def scan_command(self) -> CommandBody:
        """Command that rescans the library from disk."""
        ...

    def rename_command(self, ids: list[int]) -> CommandBody:
        """Command that renames files of the given series/movies."""
        ...

    def check_finished_downloads_command(self) -> CommandBody:
        """Command that makes the server re-check finished downloads."""
        ...

    def download_scan_command(self, path: str) -> CommandBody:
        """Command that imports files from a download folder.

        Raises:
            UnsupportedOperationError: If the flavor lacks this command
        """
        ...
