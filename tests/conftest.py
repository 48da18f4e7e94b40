"""Pytest configuration and shared fixtures."""

import pytest

from arr_repair.config import ArrRepairConfig
from arr_repair.models import (
    EpisodeRef,
    HistoryPage,
    HistoryRecord,
    MatchedItem,
    QueueEntry,
    StatusMessage,
)
from arr_repair.presenters import NullPresenter


@pytest.fixture
def temp_dir(tmp_path):
    """Provide a temporary directory for test files."""
    return tmp_path


@pytest.fixture
def download_dir(temp_dir):
    """Provide the download client folder."""
    path = temp_dir / "downloads"
    path.mkdir()
    return path


@pytest.fixture
def series_dir(temp_dir):
    """Provide a series folder the server expects files in."""
    path = temp_dir / "tv" / "Show"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def test_config(download_dir):
    """Provide a test configuration with temporary paths."""
    return ArrRepairConfig(
        server_url="http://sonarr.test:8989",
        api_key="secret",
        server_type="sonarr",
        download_folder=download_dir,
        poll_interval=5.0,
        max_wait=30.0,
        command_retries=3,
    )


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


@pytest.fixture
def make_queue_entry(series_dir):
    """Factory fixture for creating QueueEntry instances with sensible defaults."""

    def _make(
        id=7,
        download_id="DL7",
        title="Show.S02E05.XviD-GRP",
        status="Completed",
        tracked_download_status="Warning",
        season=2,
        episode=5,
        episode_id=105,
        messages=("Show.S02E05.XviD-GRP",),
        target_path=None,
        series_id=1,
        movie_id=None,
    ):
        return QueueEntry(
            id=id,
            download_id=download_id,
            title=title,
            status=status,
            tracked_download_status=tracked_download_status,
            episode=EpisodeRef(id=episode_id, season_number=season, episode_number=episode),
            target_path=str(series_dir) if target_path is None else target_path,
            series_id=series_id,
            movie_id=movie_id,
            status_messages=[StatusMessage(title=m) for m in messages],
        )

    return _make


@pytest.fixture
def make_history_record():
    """Factory fixture for creating HistoryRecord instances."""

    def _make(download_id="DL7", source_title="Show.S02E05.XviD-GRP", season=2, episode=5):
        return HistoryRecord(
            download_id=download_id,
            source_title=source_title,
            episode=EpisodeRef(season_number=season, episode_number=episode),
            tracked_download_status="Warning",
        )

    return _make


@pytest.fixture
def make_history_page():
    """Factory fixture for creating HistoryPage instances."""

    def _make(page=1, records=(), page_size=10):
        return HistoryPage(page=page, page_size=page_size, records=list(records))

    return _make


@pytest.fixture
def make_matched_item(make_queue_entry, make_history_record):
    """Factory fixture for creating MatchedItem instances."""

    def _make(entry=None, record=None, **entry_kwargs):
        return MatchedItem(
            queue_entry=entry or make_queue_entry(**entry_kwargs),
            history_record=record or make_history_record(),
        )

    return _make


class RecordingPresenter:
    """A real presenter implementation that records all calls for assertion."""

    def __init__(self):
        self.infos = []
        self.successes = []
        self.warnings = []
        self.errors = []
        self.matched = []
        self.results = []

    def show_info(self, message: str) -> None:
        self.infos.append(message)

    def show_success(self, message: str) -> None:
        self.successes.append(message)

    def show_warning(self, message: str) -> None:
        self.warnings.append(message)

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    def show_matched_items(self, items) -> None:
        self.matched.append(list(items))

    def show_repair_result(self, result) -> None:
        self.results.append(result)


@pytest.fixture
def recording_presenter():
    """Provide a presenter that records all calls for assertion."""
    return RecordingPresenter()


class FakeClock:
    """Monotonic clock advanced by the fake sleep."""

    def __init__(self, start=1000.0):
        self.now = start
        self.sleeps = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def fake_clock():
    """Provide a fake clock with a matching sleep function."""
    return FakeClock()
