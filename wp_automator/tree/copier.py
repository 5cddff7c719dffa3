"""
Recursive Directory Copy.

Key features:
- Creates missing destination directories with a fixed mode
- Overwrites existing destination files
- Each failed file copy is reported and skipped, never raised
- Symbolic links are followed, but a directory already on the current
  walk path is not entered again
"""

import os
import shutil
from pathlib import Path

from wp_automator.tree.listing import list_entries
from wp_automator.tree.result import MessageSink, TreeResult


def copy_tree(
    source: str | os.PathLike,
    destination: str | os.PathLike,
    sink: MessageSink = print,
    mode: int = 0o755,
) -> TreeResult:
    """
    Recursively copy every file and subdirectory of source into destination.

    Args:
        source: Directory to copy from
        destination: Directory to copy into (created when missing)
        sink: Receives one line per failure
        mode: Permission mode for created directories

    Returns:
        TreeResult with every item that could not be copied
    """
    result = TreeResult()
    _copy(Path(source), Path(destination), sink, mode, result, frozenset())
    return result


def _copy(
    source: Path,
    destination: Path,
    sink: MessageSink,
    mode: int,
    result: TreeResult,
    ancestors: frozenset[str],
) -> None:
    if not source.is_dir():
        result.fail(
            source, "missing", f"Source directory does not exist: {source}", sink
        )
        return

    real = os.path.realpath(source)
    if real in ancestors:
        result.fail(source, "loop", f"Skipping directory loop: {source}", sink)
        return

    if not destination.is_dir():
        try:
            os.makedirs(destination, mode=mode, exist_ok=True)
        except OSError as e:
            result.fail(
                destination,
                "mkdir",
                f"Failed to create directory: {destination}",
                sink,
                e,
            )
            return

    ancestors = ancestors | {real}

    for name in list_entries(source):
        source_path = source / name
        destination_path = destination / name

        if source_path.is_dir():
            _copy(source_path, destination_path, sink, mode, result, ancestors)
            continue

        try:
            shutil.copyfile(source_path, destination_path)
            result.processed += 1
        except OSError as e:
            result.fail(
                source_path,
                "copy",
                f"Failed to copy file: {source_path} to {destination_path}",
                sink,
                e,
            )
