"""
WP Automator Tree Operations - best-effort directory reconciliation.

This module handles:
- Content root resolution from the vendor directory
- Directory listing
- Recursive removal and copying with per-item failure reporting
"""

from wp_automator.tree.copier import copy_tree
from wp_automator.tree.listing import list_entries
from wp_automator.tree.paths import resolve_root
from wp_automator.tree.remover import remove_tree
from wp_automator.tree.result import ItemFailure, MessageSink, TreeResult

__all__ = [
    "ItemFailure",
    "MessageSink",
    "TreeResult",
    "copy_tree",
    "list_entries",
    "remove_tree",
    "resolve_root",
]
