"""Tests for file_relocator module."""

from pathlib import Path
from unittest.mock import patch

import pytest

from arr_repair.config import ArrRepairConfig
from arr_repair.exceptions import RelocationError, SourceCleanupError, SourceFileNotFoundError
from arr_repair.services.file_relocator import FileRelocator


@pytest.fixture
def relocator(test_config):
    return FileRelocator(test_config)


class TestLocate:
    """Tests for FileRelocator.locate."""

    def test_exact_name(self, relocator, download_dir):
        (download_dir / "grp").mkdir()
        target = download_dir / "grp" / "show.2x05.mkv"
        target.write_bytes(b"x")

        assert relocator.locate("show.2x05.mkv") == target

    def test_name_without_extension(self, relocator, download_dir):
        target = download_dir / "Show.S02E05.XviD-GRP.avi"
        target.write_bytes(b"x")

        assert relocator.locate("Show.S02E05.XviD-GRP") == target

    def test_not_found(self, relocator, download_dir):
        with pytest.raises(SourceFileNotFoundError, match="doesn't exist inside"):
            relocator.locate("missing.mkv")


class TestDestinationFor:
    """Tests for FileRelocator.destination_for."""

    def test_keeps_source_extension(self, make_matched_item, series_dir):
        item = make_matched_item()
        destination = FileRelocator.destination_for(
            item, Path("/dl/show.2x05.mkv"), "Show.S02E05.XviD-GRP"
        )
        assert destination == series_dir / "Show.S02E05.XviD-GRP.mkv"

    def test_extension_not_doubled(self, make_matched_item, series_dir):
        item = make_matched_item()
        destination = FileRelocator.destination_for(
            item, Path("/dl/Show.S02E05.mkv"), "Show.S02E05.mkv"
        )
        assert destination == series_dir / "Show.S02E05.mkv"


class TestRelocate:
    """Tests for FileRelocator.relocate."""

    def test_moves_file_and_marks_item(
        self, relocator, make_matched_item, download_dir, series_dir
    ):
        source = download_dir / "show.2x05.mkv"
        source.write_bytes(b"episode")
        item = make_matched_item()

        destination = relocator.relocate(item, "show.2x05.mkv", "Show.S02E05.XviD-GRP")

        assert destination == series_dir / "Show.S02E05.XviD-GRP.mkv"
        assert destination.read_bytes() == b"episode"
        assert not source.exists()
        assert item.has_been_renamed
        assert item.source_path == source
        assert item.destination_path == destination

    def test_not_found_leaves_item_unrenamed(self, relocator, make_matched_item):
        item = make_matched_item()

        with pytest.raises(SourceFileNotFoundError):
            relocator.relocate(item, "missing.mkv", "Show.S02E05")

        assert not item.has_been_renamed

    def test_copy_failure_leaves_source_and_no_destination(
        self, relocator, make_matched_item, download_dir, series_dir
    ):
        source = download_dir / "show.2x05.mkv"
        source.write_bytes(b"episode")
        item = make_matched_item()

        with (
            patch(
                "arr_repair.utils.file_utils.shutil.copyfileobj",
                side_effect=OSError("disk full"),
            ),
            pytest.raises(RelocationError, match="disk full"),
        ):
            relocator.relocate(item, "show.2x05.mkv", "Show.S02E05")

        assert source.read_bytes() == b"episode"
        assert list(series_dir.iterdir()) == []
        assert not item.has_been_renamed

    def test_missing_destination_folder(self, relocator, make_matched_item, download_dir, tmp_path):
        (download_dir / "show.2x05.mkv").write_bytes(b"episode")
        item = make_matched_item(target_path=str(tmp_path / "nowhere"))

        with pytest.raises(RelocationError, match="destination folder"):
            relocator.relocate(item, "show.2x05.mkv", "Show.S02E05")

        assert (download_dir / "show.2x05.mkv").exists()
        assert not item.has_been_renamed

    def test_unknown_destination_folder(
        self, relocator, make_matched_item, download_dir, tmp_path, monkeypatch
    ):
        """An entry without a series/movie folder never lands in the working directory."""
        source = download_dir / "show.2x05.mkv"
        source.write_bytes(b"episode")
        workdir = tmp_path / "workdir"
        workdir.mkdir()
        monkeypatch.chdir(workdir)
        item = make_matched_item(target_path="")

        with pytest.raises(RelocationError, match="no series or movie folder"):
            relocator.relocate(item, "show.2x05.mkv", "Show.S02E05")

        assert source.read_bytes() == b"episode"
        assert list(workdir.iterdir()) == []
        assert not item.has_been_renamed

    def test_existing_destination_not_overwritten(
        self, relocator, make_matched_item, download_dir, series_dir
    ):
        (download_dir / "show.2x05.mkv").write_bytes(b"new")
        (series_dir / "Show.S02E05.mkv").write_bytes(b"old")
        item = make_matched_item()

        with pytest.raises(RelocationError, match="already exists"):
            relocator.relocate(item, "show.2x05.mkv", "Show.S02E05")

        assert (series_dir / "Show.S02E05.mkv").read_bytes() == b"old"

    def test_source_delete_failure_counts_as_moved(
        self, relocator, make_matched_item, download_dir, series_dir
    ):
        """The destination is complete; the item is renamed and flagged."""
        source = download_dir / "show.2x05.mkv"
        source.write_bytes(b"episode")
        item = make_matched_item()

        with patch.object(Path, "unlink", side_effect=PermissionError("read-only")):
            destination = relocator.relocate(item, "show.2x05.mkv", "Show.S02E05")

        assert destination.read_bytes() == b"episode"
        assert source.exists()
        assert item.has_been_renamed
        assert item.source_left_behind

    def test_move_raises_source_cleanup_error(self, relocator, download_dir, series_dir):
        source = download_dir / "a.mkv"
        source.write_bytes(b"episode")
        destination = series_dir / "b.mkv"

        with (
            patch.object(Path, "unlink", side_effect=PermissionError("read-only")),
            pytest.raises(SourceCleanupError) as excinfo,
        ):
            relocator.move(source, destination)

        assert excinfo.value.destination == destination

    def test_dry_run_touches_nothing(self, make_matched_item, download_dir, series_dir):
        config = ArrRepairConfig(api_key="k", download_folder=download_dir, dry_run=True)
        source = download_dir / "show.2x05.mkv"
        source.write_bytes(b"episode")
        item = make_matched_item()

        destination = FileRelocator(config).relocate(item, "show.2x05.mkv", "Show.S02E05")

        assert destination == series_dir / "Show.S02E05.mkv"
        assert source.exists()
        assert not destination.exists()
        assert not item.has_been_renamed
