"""Filesystem helpers."""

import os
from pathlib import Path


def dir_is_empty(path: str | Path) -> bool:
    """Return True if the directory exists and is empty.

    Raises:
        FileNotFoundError: If path does not exist
        NotADirectoryError: If path is not a directory
    """
    with os.scandir(path) as entries:
        return next(entries, None) is None
