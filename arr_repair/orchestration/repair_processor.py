"""Orchestrator for a full repair run."""

import logging
import time

from arr_repair.config import ArrRepairConfig
from arr_repair.exceptions import (
    ArrRepairException,
    CommandTimeoutError,
    GuessError,
    QueueCleanupError,
    RelocationError,
    UnsupportedOperationError,
)
from arr_repair.interfaces import ArrApiProtocol, PresenterProtocol
from arr_repair.models import MatchedItem, RepairResult
from arr_repair.services import (
    FilenameResolver,
    FileRelocator,
    HistoryCursor,
    QueueCleaner,
    QueueHistoryMatcher,
    RemoteCommandWaiter,
)
from arr_repair.services.api_client import CAPABILITY_RENAME

logger = logging.getLogger(__name__)


class RepairProcessor:
    """Orchestrate the repair of stuck queue entries."""

    def __init__(
        self,
        config: ArrRepairConfig,
        api: ArrApiProtocol,
        presenter: PresenterProtocol,
        matcher: QueueHistoryMatcher | None = None,
        resolver: FilenameResolver | None = None,
        relocator: FileRelocator | None = None,
        waiter: RemoteCommandWaiter | None = None,
        cleaner: QueueCleaner | None = None,
    ):
        """Initialize the repair processor.

        Args:
            config: Configuration
            api: Sonarr/Radarr server
            presenter: Output presenter
            matcher: Queue/history matcher
            resolver: Filename resolver
            relocator: File relocator
            waiter: Remote command waiter
            cleaner: Queue cleaner
        """
        self.config = config
        self.api = api
        self.presenter = presenter
        self.matcher = matcher or QueueHistoryMatcher()
        self.resolver = resolver or FilenameResolver()
        self.relocator = relocator or FileRelocator(config)
        self.waiter = waiter or RemoteCommandWaiter(api, config.wait_policy)
        self.cleaner = cleaner or QueueCleaner(api, self.waiter)

    def find_stuck_items(self) -> list[MatchedItem]:
        """Pair every stuck queue entry with its history record.

        Raises:
            ApiError: If the queue or the history cannot be fetched
        """
        queue = self.api.get_queue()
        cursor = HistoryCursor(self.api.get_history, self.api.get_history(1))
        return self.matcher.match(queue, cursor)

    def fix_item(self, item: MatchedItem) -> str | None:
        """Move the file of one matched item to its corrected name.

        Returns:
            None on success, otherwise the reason the item was skipped
        """
        try:
            filename = self.resolver.guess_filename(item.queue_entry)
            final_name = self.resolver.guess_final_name(item, filename)
            destination = self.relocator.relocate(item, filename, final_name)
        except (GuessError, RelocationError) as e:
            logger.error(f"error fixing show {item.title}: {e}")
            return str(e)

        if self.config.dry_run:
            self.presenter.show_info(f"  {item.title} -> {destination}")
        elif item.source_left_behind:
            self.presenter.show_warning(
                f"{item.title}: moved to {destination}, original could not be deleted"
            )
        else:
            self.presenter.show_success(f"{item.title} -> {destination.name}")
        return None

    def rename_fixed(self, items: list[MatchedItem], deadline: float | None = None) -> None:
        """Ask the server to apply its own naming to the repaired series/movies."""
        if not self.api.supports(CAPABILITY_RENAME):
            return

        ids = []
        for item in items:
            media_id = self.api.media_id(item.queue_entry)
            if item.has_been_renamed and media_id is not None and media_id not in ids:
                ids.append(media_id)
        if not ids:
            return

        try:
            self.waiter.execute_and_wait(self.api.rename_command(ids), deadline=deadline)
        except (CommandTimeoutError, UnsupportedOperationError) as e:
            self.presenter.show_warning(f"Rename command did not complete: {e}")

    def process(self, deadline: float | None = None) -> RepairResult:
        """Run the whole repair.

        This orchestrates all services to:
        1. Match stuck queue entries with their history
        2. Move the files to their corrected names
        3. Rescan the library and clear the repaired entries

        Args:
            deadline: Optional absolute ``time.monotonic()`` value after
                which command waits are abandoned

        Returns:
            RepairResult with statistics; ``errors`` holds run-level failures
        """
        start_time = time.time()
        result = RepairResult()

        try:
            # Phase 1: Match queue with history
            self.presenter.show_info("Step 1/3 \u2014 Matching stuck downloads with history")
            items = self.find_stuck_items()
            result.candidates_found = len(items)
            if items:
                self.presenter.show_success(f"Found {len(items)} stuck downloads")
                self.presenter.show_matched_items(items)
            else:
                self.presenter.show_info("No stuck downloads found")

            # Phase 2: Move files
            if items:
                self.presenter.show_info("Step 2/3 \u2014 Moving files to their expected names")
            for item in items:
                reason = self.fix_item(item)
                if reason is not None:
                    result.skipped.append(f"{item.title}: {reason}")
            result.files_renamed = sum(1 for item in items if item.has_been_renamed)

            if self.config.dry_run:
                self.presenter.show_info("Dry run, skipping rescan and queue cleanup")
                return result

            # Phase 3: Rescan and clean the queue
            self.presenter.show_info("Step 3/3 \u2014 Rescanning library and clearing the queue")
            self.cleaner.rescan(deadline=deadline)

            # The server only renames files it picked up in the rescan
            if self.config.rename_after_fix:
                self.rename_fixed(items, deadline=deadline)

            try:
                result.entries_cleared = self.cleaner.clean(items)
            except QueueCleanupError as e:
                result.entries_cleared = e.cleared
                raise

            self.presenter.show_success(f"Cleared {result.entries_cleared} entries from the queue")
            return result

        except ArrRepairException as e:
            result.errors.append(str(e))
            self.presenter.show_error(f"Error: {e}")
            return result
        except Exception as e:
            logger.exception("Unexpected error during repair")
            result.errors.append(f"Unexpected error: {e}")
            self.presenter.show_error(f"Unexpected error: {e}")
            return result
        finally:
            result.elapsed_time = time.time() - start_time
