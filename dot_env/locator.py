"""Locate a `.env` file in a directory (non-recursive)."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional


def find_env_file(filename: str = ".env", directory: str | os.PathLike[str] | None = None) -> Optional[Path]:
    """Find a regular file named exactly *filename*.

    Only the top level of *directory* (default: current working directory) is
    scanned. The name comparison is exact and case-sensitive. Iteration order is
    whatever the platform returns, and the first match wins.

    Args:
        filename: File name to look for (default: ".env").
        directory: Directory to scan instead of the current working directory.

    Returns:
        Path of the matching file, or None if the filename is empty or nothing
        matches.
    """
    if not filename:
        return None

    root = Path(directory) if directory is not None else Path.cwd()
    try:
        with os.scandir(root) as entries:
            for entry in entries:
                if entry.name == filename and entry.is_file():
                    return Path(entry.path)
    except OSError:
        # missing, not a directory, or unreadable
        return None
    return None
