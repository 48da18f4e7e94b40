"""Service that clears repaired entries from the server queue."""

import logging

from arr_repair.exceptions import ApiError, AuthorizationError, QueueCleanupError
from arr_repair.interfaces import ArrApiProtocol
from arr_repair.models import MatchedItem

from .command_waiter import RemoteCommandWaiter

logger = logging.getLogger(__name__)


class QueueCleaner:
    """Rescan the library, then delete queue entries the server now recognises."""

    def __init__(self, api: ArrApiProtocol, waiter: RemoteCommandWaiter):
        """Initialize the cleaner.

        Args:
            api: Server holding the queue
            waiter: Waiter used to run the rescan command
        """
        self.api = api
        self.waiter = waiter

    def rescan(self, deadline: float | None = None) -> None:
        """Run the library rescan and wait for it to complete.

        Raises:
            CommandTimeoutError: If the rescan did not complete in time
        """
        logger.info("executing rescan")
        self.waiter.execute_and_wait(self.api.scan_command(), deadline=deadline)

    def is_detected(self, item: MatchedItem) -> bool:
        """Check if the server now has a file for the item's episode or movie."""
        return self.api.fetch_media_item(item.queue_entry).has_file

    def clean(self, items: list[MatchedItem]) -> int:
        """Delete the queue entries of renamed items the server picked up.

        A failure on one item never stops the others; all failures are
        reported together at the end.

        Args:
            items: Matched items, in queue order

        Returns:
            Number of queue entries deleted

        Raises:
            AuthorizationError: If the server rejects the API key
            QueueCleanupError: If one or more entries could not be cleared
        """
        failures: list[str] = []
        cleared = 0

        for item in items:
            if not item.has_been_renamed:
                continue

            entry = item.queue_entry
            try:
                if not self.is_detected(item):
                    logger.info(f"{entry.title} not detected by the server yet, keeping it queued")
                    continue
                self.api.delete_queue_item(entry.id)
            except AuthorizationError:
                raise
            except ApiError as e:
                logger.error(f"clearing {entry.title} from the queue failed: {e}")
                failures.append(f"{entry.title} (queue id {entry.id}): {e}")
                continue

            cleared += 1
            logger.info(f"episode cleared from the queue: {entry.title}")

        if failures:
            raise QueueCleanupError(failures, cleared=cleared)
        return cleared
