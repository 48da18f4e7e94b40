"""Service for guessing the on-disk and corrected filenames of a stuck download."""

import logging
import re

from arr_repair.exceptions import FilenameGuessError, FinalNameGuessError
from arr_repair.models import MatchedItem, QueueEntry

logger = logging.getLogger(__name__)

# Season/episode tag between two separators, e.g. ".2x05." or "-s02e05_"
EPISODE_TAG_PATTERN = re.compile(r"[.\-_ ]([\-_0-9sSeExX]{1,10})[.\-_ ]")


def canonical_episode_tag(season: int, episode: int) -> str:
    """Build the ``.SxxExx.`` fragment the server recognises."""
    return f".S{season:02d}E{episode:02d}."


class FilenameResolver:
    """Guess filenames for a matched item (stateless service).

    Both guesses are heuristics built on the status messages the server
    reports for the queue entry and on the original release title.
    """

    def guess_filename(self, entry: QueueEntry) -> str:
        """Guess the name of the file currently on disk.

        A single status message holds the filename verbatim. Otherwise the
        first message whose title has the season and episode numbers at
        most four characters apart is used.

        Raises:
            FilenameGuessError: If no status message looks like the file
        """
        messages = entry.status_messages
        if len(messages) == 1:
            return messages[0].title

        episode = entry.episode
        pattern = re.compile(rf"{episode.season_number}.{{0,4}}{episode.episode_number}")
        for message in messages:
            if pattern.search(message.title):
                return message.title

        raise FilenameGuessError(f"impossible to guess file name for {entry.title}")

    def guess_final_name(self, item: MatchedItem, filename: str) -> str:
        """Guess the filename (without extension) the server expects.

        Starts from the release title in the history. When the server
        reported several status messages, the first season/episode tag of
        the title is replaced by the canonical ``.SxxExx.`` tag.

        Args:
            item: Matched queue entry and history record
            filename: On-disk filename guessed earlier, used in errors

        Raises:
            FinalNameGuessError: If the release title has no season/episode tag
        """
        final_title = item.history_record.source_title
        logger.debug(f"final title initial: {final_title}")
        if item.has_single_message:
            return final_title

        match = EPISODE_TAG_PATTERN.search(final_title)
        if match is None:
            raise FinalNameGuessError(f"unable to guess final episode name of {filename}")

        episode = item.queue_entry.episode
        tag = canonical_episode_tag(episode.season_number, episode.episode_number)
        final_title = final_title.replace(match.group(0), tag, 1)
        logger.debug(f"final title final: {final_title}")
        return final_title


def parse_episode_tag(title: str) -> tuple[int, int] | None:
    """Read season and episode back from a canonical ``.SxxExx.`` tag."""
    match = re.search(r"\.S(\d{2,})E(\d{2,})\.", title)
    if match is None:
        return None
    return int(match.group(1)), int(match.group(2))
