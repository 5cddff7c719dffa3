"""
Recursive Directory Removal.

Key features:
- Depth-first removal of files, then the emptied directory
- Each failed unlink/rmdir is reported and skipped, never raised
- Symbolic links are unlinked, never descended into
"""

import os
from pathlib import Path

from wp_automator.tree.listing import list_entries
from wp_automator.tree.result import MessageSink, TreeResult


def remove_tree(directory: str | os.PathLike, sink: MessageSink = print) -> TreeResult:
    """
    Recursively delete a directory and everything beneath it.

    A path that is not a directory is a no-op. A symbolic link to a
    directory is removed as a link; its target is left alone.

    Args:
        directory: Directory to remove
        sink: Receives one line per failure

    Returns:
        TreeResult with every item that could not be removed
    """
    directory = Path(directory)
    result = TreeResult()

    if directory.is_symlink():
        if directory.is_dir():
            _unlink(directory, sink, result)
        return result

    if not directory.is_dir():
        return result

    _remove(directory, sink, result)
    return result


def _remove(directory: Path, sink: MessageSink, result: TreeResult) -> None:
    for name in list_entries(directory):
        path = directory / name
        if path.is_dir() and not path.is_symlink():
            _remove(path, sink, result)
        else:
            _unlink(path, sink, result)

    try:
        directory.rmdir()
        result.processed += 1
    except OSError as e:
        result.fail(
            directory, "rmdir", f"Failed to remove directory: {directory}", sink, e
        )


def _unlink(path: Path, sink: MessageSink, result: TreeResult) -> None:
    try:
        path.unlink()
        result.processed += 1
    except OSError as e:
        result.fail(path, "delete", f"Failed to delete file: {path}", sink, e)
