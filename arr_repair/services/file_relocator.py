"""Service that moves a downloaded file to the location the server expects."""

import logging
from pathlib import Path

from arr_repair.config import ArrRepairConfig
from arr_repair.exceptions import RelocationError, SourceCleanupError, SourceFileNotFoundError
from arr_repair.models import MatchedItem
from arr_repair.utils import copy_file_complete, find_file, find_file_by_stem

logger = logging.getLogger(__name__)


class FileRelocator:
    """Find a downloaded file and move it into the series/movie folder."""

    def __init__(self, config: ArrRepairConfig):
        """Initialize the relocator.

        Args:
            config: Configuration with the download folder and dry-run flag
        """
        self.config = config

    @property
    def download_folder(self) -> Path:
        return self.config.download_folder

    def locate(self, filename: str) -> Path:
        """Find a file under the download folder.

        An exact base name match wins; otherwise a file with the same name
        and any extension is accepted.

        Raises:
            SourceFileNotFoundError: If nothing in the tree matches
        """
        path = find_file(self.download_folder, filename)
        if path is None:
            path = find_file_by_stem(self.download_folder, filename)
        if path is None:
            raise SourceFileNotFoundError(
                f"{filename} doesn't exist inside {self.download_folder}"
            )
        return path

    @staticmethod
    def destination_for(item: MatchedItem, source: Path, final_name: str) -> Path:
        """Build the corrected path, keeping the extension of the source file.

        Raises:
            RelocationError: If the server reported no series/movie folder
        """
        if not item.queue_entry.target_path:
            raise RelocationError(f"no series or movie folder known for {item.title}")
        extension = source.suffix
        name = final_name if final_name.endswith(extension) else final_name + extension
        return Path(item.queue_entry.target_path) / name

    def move(self, source: Path, destination: Path) -> None:
        """Copy a file to its destination, then delete the original.

        Raises:
            RelocationError: If the destination cannot be written; the
                source is left untouched
            SourceCleanupError: If the copy succeeded but the source could
                not be deleted
        """
        if not destination.parent.is_dir():
            raise RelocationError(f"destination folder doesn't exist: {destination.parent}")
        if destination.exists():
            raise RelocationError(f"destination already exists: {destination}")

        try:
            copy_file_complete(source, destination)
        except OSError as e:
            raise RelocationError(f"writing to {destination} failed: {e}") from e

        try:
            source.unlink()
        except OSError as e:
            raise SourceCleanupError(
                f"failed removing original file {source}: {e}", destination=destination
            ) from e

    def relocate(self, item: MatchedItem, filename: str, final_name: str) -> Path:
        """Move the file of a matched item to its corrected location.

        The item is marked renamed once the destination is fully written.
        If only the deletion of the original fails, the move counts as done
        and the item is flagged with ``source_left_behind``.
        In dry-run mode the planned destination is returned and nothing
        is touched.

        Args:
            item: Matched item to repair
            filename: Guessed on-disk filename
            final_name: Guessed corrected filename, without extension

        Returns:
            Destination path of the file

        Raises:
            RelocationError: If the file cannot be found or moved
        """
        source = self.locate(filename)
        destination = self.destination_for(item, source, final_name)

        if self.config.dry_run:
            logger.info(f"dry run: would rename {source} to {destination}")
            return destination

        logger.info(f"renaming {source} to {destination}")
        try:
            self.move(source, destination)
        except SourceCleanupError as e:
            # The destination is complete, only the original is left behind
            logger.warning(f"{e}; keeping {destination} and leaving the original in place")
            item.mark_renamed(source, destination)
            item.source_left_behind = True
            return destination

        item.mark_renamed(source, destination)
        return destination
