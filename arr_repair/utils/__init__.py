"""Utility functions for Arr Repair."""

from .file_utils import copy_file_complete, find_file, find_file_by_stem

__all__ = [
    "find_file",
    "find_file_by_stem",
    "copy_file_complete",
]
