"""Content root resolution."""

import os
from pathlib import Path


def resolve_root(vendor_dir: str | os.PathLike, marker: str = "wp-content") -> Path | None:
    """
    Return the vendor directory's parent if it is named ``marker``.

    Resolution is lexical only: no filesystem access, no ``..`` collapsing.

    Args:
        vendor_dir: Configured dependency vendor directory
        marker: Required name of the parent directory

    Returns:
        The content root, or None when the parent has another name
    """
    vendor = os.fspath(vendor_dir)
    stripped = vendor.rstrip("/" + os.sep)
    parent = os.path.dirname(stripped or vendor)

    if parent and os.path.basename(parent) == marker:
        return Path(parent)

    return None
