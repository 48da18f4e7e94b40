"""Service that pairs stuck queue entries with their history records."""

import logging
from collections.abc import Callable, Iterator

from arr_repair.exceptions import HistoryExhaustedError
from arr_repair.models import HistoryPage, HistoryRecord, MatchedItem, QueueEntry

logger = logging.getLogger(__name__)


class HistoryCursor:
    """Lazily extended view over the paginated server history.

    Pages are fetched in increasing order and never twice. Once a fetch
    reports no more data (page size 0 or no records) the cursor is
    exhausted and stops fetching.
    """

    def __init__(
        self,
        fetch_page: Callable[[int], HistoryPage],
        first_page: HistoryPage | None = None,
    ):
        """Initialize the cursor.

        Args:
            fetch_page: Function returning the given 1-based history page
            first_page: Already fetched first page, if any
        """
        self._fetch_page = fetch_page
        self._records: list[HistoryRecord] = []
        self._last_page = 0
        self._exhausted = False

        if first_page is not None:
            self._add(first_page, first_page.page or 1)

    @property
    def records(self) -> list[HistoryRecord]:
        return list(self._records)

    @property
    def last_page(self) -> int:
        """Number of the last page loaded (0 before any page)."""
        return self._last_page

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def _add(self, page: HistoryPage, number: int) -> None:
        self._last_page = number
        if page.is_empty:
            self._exhausted = True
            return
        self._records.extend(page.records)

    def extend(self) -> list[HistoryRecord]:
        """Fetch the next page and return its records.

        Raises:
            HistoryExhaustedError: If the history has no more pages
            ApiError: If the page cannot be fetched
        """
        if self._exhausted:
            raise HistoryExhaustedError(f"history exhausted after page {self._last_page}")

        next_page = self._last_page + 1
        page = self._fetch_page(next_page)

        before = len(self._records)
        self._add(page, next_page)
        if self._exhausted:
            raise HistoryExhaustedError(
                f"history fetched 0 results on page {next_page}, no more items"
            )
        return self._records[before:]

    def iter_records(self) -> Iterator[HistoryRecord]:
        """Iterate over every record, fetching further pages on demand."""
        index = 0
        while True:
            while index < len(self._records):
                yield self._records[index]
                index += 1
            try:
                self.extend()
            except HistoryExhaustedError:
                return


class QueueHistoryMatcher:
    """Pair "completed but flagged" queue entries with their history records."""

    def find_record(self, entry: QueueEntry, cursor: HistoryCursor) -> HistoryRecord | None:
        """Find the history record describing a queue entry.

        Searches the records already loaded first, then pulls further
        history pages until a match is found or the history runs out.
        """
        for record in cursor.iter_records():
            if record.matches(entry):
                return record
        return None

    def match(self, queue: list[QueueEntry], cursor: HistoryCursor) -> list[MatchedItem]:
        """Produce the matched items for the stuck entries of a queue.

        Args:
            queue: Full queue, in server order
            cursor: History cursor, usually holding the first page

        Returns:
            Matched items in queue order
        """
        items: list[MatchedItem] = []
        for entry in queue:
            if not entry.is_stuck:
                continue

            record = self.find_record(entry, cursor)
            if record is None:
                logger.warning(
                    f"no history record found for {entry.title} "
                    f"(download {entry.download_id}, {entry.episode}) after "
                    f"{cursor.last_page} history pages, skipping"
                )
                continue

            logger.info(f"failed show detected: {entry.title}")
            items.append(MatchedItem(queue_entry=entry, history_record=record))

        return items
