"""Directory listing."""

import os
from pathlib import Path


def list_entries(directory: str | os.PathLike) -> list[str]:
    """
    List entry names directly inside a directory, sorted.

    Self/parent markers never appear. An unreadable or missing directory
    yields an empty list.
    """
    try:
        return sorted(entry.name for entry in Path(directory).iterdir())
    except OSError:
        return []
