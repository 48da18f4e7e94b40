"""Clients for the Sonarr and Radarr HTTP APIs."""

import logging
from typing import Any

import requests

from arr_repair.config import SERVER_TYPE_RADARR, SERVER_TYPE_SONARR, ArrRepairConfig
from arr_repair.exceptions import (
    ApiConnectionError,
    ApiRequestError,
    AuthorizationError,
    UnsupportedOperationError,
)
from arr_repair.models import (
    CommandBody,
    CommandStatus,
    HistoryPage,
    MediaItem,
    QueueEntry,
)

logger = logging.getLogger(__name__)

# Command capabilities a flavor may or may not implement
CAPABILITY_SCAN = "scan"
CAPABILITY_RENAME = "rename"
CAPABILITY_CHECK_FINISHED = "check_finished_downloads"
CAPABILITY_DOWNLOAD_SCAN = "download_scan"


class ArrApiClient:
    """Shared transport for Sonarr/Radarr servers (stateless service).

    Every request carries the API key as the ``apikey`` query parameter.
    Not used directly: the flavor specific commands, media lookups and
    ids of ``ArrApiProtocol`` live in ``SonarrClient`` and ``RadarrClient``.
    """

    SERVER_TYPE = ""
    CAPABILITIES: frozenset[str] = frozenset()

    QUEUE_ENDPOINT = "/queue"
    HISTORY_ENDPOINT = "/history"
    COMMAND_ENDPOINT = "/command"

    def __init__(self, config: ArrRepairConfig):
        """Initialize the API client.

        Args:
            config: Configuration with server URL, API key and timeouts
        """
        self.config = config

    @property
    def server_type(self) -> str:
        return self.SERVER_TYPE

    def supports(self, capability: str) -> bool:
        """Check if this flavor implements a command capability."""
        return capability in self.CAPABILITIES

    # -- transport ---------------------------------------------------------

    def _url(self, endpoint: str) -> str:
        return f"{self.config.server_url}{self.config.api_path}{endpoint}"

    def _request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> requests.Response:
        """Send one request to the server.

        Raises:
            AuthorizationError: If the server answers 401
            ApiConnectionError: If the server cannot be reached
            ApiRequestError: If the server answers with another error status
        """
        query = {"apikey": self.config.api_key}
        if params:
            query.update(params)

        try:
            response = requests.request(
                method,
                self._url(endpoint),
                params=query,
                json=json_body,
                timeout=self.config.request_timeout,
            )
        except requests.exceptions.ConnectionError as e:
            raise ApiConnectionError(
                f"Cannot connect to {self.server_type} at {self.config.server_url}"
            ) from e
        except requests.RequestException as e:
            raise ApiRequestError(f"{method} {endpoint} failed: {e}") from e

        if response.status_code == 401:
            raise AuthorizationError("authorization invalid")
        if not 200 <= response.status_code < 300:
            raise ApiRequestError(
                f"{method} {endpoint} returned status code {response.status_code}",
                status_code=response.status_code,
            )
        return response

    def _get_json(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        response = self._request("GET", endpoint, params=params)
        try:
            return response.json()
        except ValueError as e:
            raise ApiRequestError(f"GET {endpoint} returned invalid JSON") from e

    # -- queue and history -------------------------------------------------

    def get_queue(self) -> list[QueueEntry]:
        """Fetch the full download queue.

        Returns:
            Queue entries in server order
        """
        data = self._get_json(self.QUEUE_ENDPOINT)
        # v3 servers wrap the queue in a paged envelope
        if isinstance(data, dict):
            data = data.get("records", [])
        return [QueueEntry.from_api(item) for item in data]

    def delete_queue_item(self, item_id: int) -> None:
        """Remove one entry from the queue.

        Raises:
            ApiRequestError: If the server does not confirm the deletion
        """
        try:
            self._request("DELETE", f"{self.QUEUE_ENDPOINT}/{item_id}")
        except ApiRequestError as e:
            raise ApiRequestError(
                f"error deleting item {item_id} from queue, status code {e.status_code}",
                status_code=e.status_code,
            ) from e

    def get_history(self, page: int) -> HistoryPage:
        """Fetch one page of the download history.

        Args:
            page: 1-based page number

        Returns:
            The page; a page size of 0 means there is no more data
        """
        data = self._get_json(
            self.HISTORY_ENDPOINT,
            params={"page": page, "pageSize": self.config.history_page_size},
        )
        return HistoryPage.from_api(data)

    # -- commands ----------------------------------------------------------

    def execute_command(self, command: CommandBody) -> CommandStatus:
        """Submit a command and return its initial status."""
        logger.info(f"executing: {command.name}")
        response = self._request("POST", self.COMMAND_ENDPOINT, json_body=command.to_api())
        try:
            return CommandStatus.from_api(response.json())
        except ValueError as e:
            raise ApiRequestError(f"command {command.name} returned invalid JSON") from e

    def get_command_status(self, command_id: int) -> CommandStatus:
        """Fetch the current status of a submitted command."""
        return CommandStatus.from_api(self._get_json(f"{self.COMMAND_ENDPOINT}/{command_id}"))

    def check_finished_downloads_command(self) -> CommandBody:
        return CommandBody(name="CheckForFinishedDownload")

    def download_scan_command(self, path: str) -> CommandBody:
        raise UnsupportedOperationError(self.server_type, "DownloadScan")


class SonarrClient(ArrApiClient):
    """Sonarr flavor: episodes grouped in series."""

    SERVER_TYPE = SERVER_TYPE_SONARR
    CAPABILITIES = frozenset(
        {CAPABILITY_SCAN, CAPABILITY_RENAME, CAPABILITY_CHECK_FINISHED, CAPABILITY_DOWNLOAD_SCAN}
    )
    EPISODE_ENDPOINT = "/episode"

    def scan_command(self) -> CommandBody:
        return CommandBody(name="RescanSeries")

    def rename_command(self, ids: list[int]) -> CommandBody:
        return CommandBody(name="RenameSeries", series_ids=list(ids))

    def download_scan_command(self, path: str) -> CommandBody:
        return CommandBody(name="DownloadedEpisodesScan", path=path)

    def fetch_media_item(self, entry: QueueEntry) -> MediaItem:
        return MediaItem.from_api(self._get_json(f"{self.EPISODE_ENDPOINT}/{entry.episode.id}"))

    def media_id(self, entry: QueueEntry) -> int | None:
        return entry.series_id


class RadarrClient(ArrApiClient):
    """Radarr flavor: standalone movies."""

    SERVER_TYPE = SERVER_TYPE_RADARR
    CAPABILITIES = frozenset({CAPABILITY_SCAN, CAPABILITY_RENAME, CAPABILITY_CHECK_FINISHED})
    MOVIE_ENDPOINT = "/movie"

    def scan_command(self) -> CommandBody:
        return CommandBody(name="RescanMovie")

    def rename_command(self, ids: list[int]) -> CommandBody:
        return CommandBody(name="RenameMovies", movie_ids=list(ids))

    def fetch_media_item(self, entry: QueueEntry) -> MediaItem:
        return MediaItem.from_api(self._get_json(f"{self.MOVIE_ENDPOINT}/{entry.movie_id}"))

    def media_id(self, entry: QueueEntry) -> int | None:
        return entry.movie_id


def create_client(config: ArrRepairConfig) -> ArrApiClient:
    """Create the client matching the configured server type."""
    if config.server_type == SERVER_TYPE_RADARR:
        return RadarrClient(config)
    return SonarrClient(config)
