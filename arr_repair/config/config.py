"""Configuration classes for Arr Repair."""

from dataclasses import dataclass, field
from pathlib import Path

from arr_repair.exceptions import ConfigError

SERVER_TYPE_SONARR = "sonarr"
SERVER_TYPE_RADARR = "radarr"
SERVER_TYPES = (SERVER_TYPE_SONARR, SERVER_TYPE_RADARR)


@dataclass(frozen=True)
class WaitPolicy:
    """Polling policy for remote commands.

    Attributes:
        poll_interval: Seconds between two status checks
        max_wait: Seconds to wait for a single submission before retrying
        retries: Number of submit+poll attempts
    """

    poll_interval: float = 5.0
    max_wait: float = 30.0
    retries: int = 3

    def __post_init__(self):
        if self.poll_interval <= 0:
            raise ValueError("poll_interval must be positive")
        if self.max_wait < self.poll_interval:
            raise ValueError("max_wait must be at least poll_interval")
        if self.retries < 1:
            raise ValueError("retries must be at least 1")


@dataclass(frozen=True)
class ArrRepairConfig:
    """Immutable configuration for a repair run.

    All configuration is frozen (immutable) so that a run cannot
    change its own settings halfway through.
    """

    # Server settings
    server_url: str = "http://localhost:8989"
    api_key: str = ""
    server_type: str = SERVER_TYPE_SONARR
    api_path: str = "/api"
    request_timeout: float = 30.0  # Seconds per HTTP request

    # Filesystem settings
    download_folder: Path = field(default_factory=lambda: Path.home() / "Downloads")

    # History pagination
    history_page_size: int = 10

    # Command polling
    poll_interval: float = 5.0
    max_wait: float = 30.0
    command_retries: int = 3

    # Behaviour
    rename_after_fix: bool = False  # Ask the server to rename fixed series/movies
    dry_run: bool = False

    def __post_init__(self):
        """Convert string paths to Path objects and normalize the server type."""
        if isinstance(self.download_folder, str):
            object.__setattr__(self, "download_folder", Path(self.download_folder))
        object.__setattr__(self, "server_type", self.server_type.lower())
        object.__setattr__(self, "server_url", self.server_url.rstrip("/"))

    @property
    def wait_policy(self) -> WaitPolicy:
        """Build the polling policy for remote commands."""
        return WaitPolicy(
            poll_interval=self.poll_interval,
            max_wait=self.max_wait,
            retries=self.command_retries,
        )

    def validate(self) -> None:
        """Check that the settings needed to talk to the server are present.

        Raises:
            ConfigError: If a required setting is missing or invalid
        """
        if not self.server_url:
            raise ConfigError("Server URL is not set")
        if not self.api_key:
            raise ConfigError("API key is not set")
        if self.server_type not in SERVER_TYPES:
            raise ConfigError(
                f"Unknown server type {self.server_type!r}, expected one of {', '.join(SERVER_TYPES)}"
            )
        if not self.download_folder.is_dir():
            raise ConfigError(f"Download folder does not exist: {self.download_folder}")
        if self.history_page_size < 1:
            raise ConfigError("history_page_size must be at least 1")
        try:
            WaitPolicy(self.poll_interval, self.max_wait, self.command_retries)
        except ValueError as e:
            raise ConfigError(f"Invalid polling settings: {e}") from e
