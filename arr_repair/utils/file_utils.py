"""File system utilities."""

import os
import shutil
from pathlib import Path

TEMP_SUFFIX = ".arr-repair.part"


def find_file(root: Path, filename: str) -> Path | None:
    """Search a directory tree for a file with an exact base name.

    The walk stops at the first match.

    Args:
        root: Directory to search recursively
        filename: Base name to look for (extension included)

    Returns:
        Path of the first matching file, or None if there is none
    """
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        if filename in filenames:
            return Path(dirpath) / filename
    return None


def find_file_by_stem(root: Path, stem: str) -> Path | None:
    """Search a directory tree for a file whose name, minus its extension, is ``stem``.

    Args:
        root: Directory to search recursively
        stem: Base name without extension

    Returns:
        Path of the first matching file, or None if there is none
    """
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for name in sorted(filenames):
            if Path(name).stem == stem and not name.endswith(TEMP_SUFFIX):
                return Path(dirpath) / name
    return None


def copy_file_complete(source: Path, destination: Path) -> Path:
    """Copy a file so the destination is either absent or fully written.

    The content goes to a temporary sibling first and is renamed into
    place once complete. The temporary file is removed on failure.

    Raises:
        OSError: If reading, writing or renaming fails
    """
    temp_path = destination.with_name(destination.name + TEMP_SUFFIX)
    try:
        with source.open("rb") as src, temp_path.open("wb") as dst:
            shutil.copyfileobj(src, dst)
        os.replace(temp_path, destination)
    except OSError:
        temp_path.unlink(missing_ok=True)
        raise
    return destination
