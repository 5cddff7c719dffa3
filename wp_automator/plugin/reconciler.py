"""
Plugin Tree Reconciler.

This module keeps the public plugins directory in line with plugins-pro
across a dependency install.

Key features:
- Pre-install: remove public copies of plugins that plugins-pro supplies
- Post-install: copy every plugins-pro plugin into plugins
- Plugins only present in plugins are never touched
"""

import json
from pathlib import Path

from wp_automator.config import AutomatorConfig
from wp_automator.plugin.hooks import HookOutcome, HookType
from wp_automator.tree import copy_tree, list_entries, remove_tree, resolve_root
from wp_automator.tree.result import MessageSink


class Reconciler:
    """
    Two-phase reconciliation of plugins-pro into plugins.

    The host's install step runs between pre_install() and post_install(),
    so stale copies are gone before it and authoritative copies land after.
    """

    def __init__(self, config: AutomatorConfig, sink: MessageSink = print):
        self.config = config
        self.sink = sink

    def _trees(self) -> tuple[Path, Path] | str:
        """Return (source, destination), or the reason reconciliation is skipped."""
        root = resolve_root(self.config.vendor_dir, self.config.content_dir_name)
        if root is None:
            return f"Not inside a {self.config.content_dir_name} directory."

        source = root / self.config.plugins_pro_dir_name
        destination = root / self.config.plugins_dir_name

        for directory in (source, destination):
            if not directory.is_dir():
                return f"Directory does not exist: {directory}"

        return source, destination

    def pre_install(self) -> HookOutcome:
        """
        Remove destination plugins whose names also exist in the source tree.

        Returns:
            HookOutcome with the merged removal results
        """
        outcome = HookOutcome(HookType.PRE_INSTALL)
        trees = self._trees()
        if isinstance(trees, str):
            outcome.skipped = trees
            return outcome

        source, destination = trees
        plugins = list_entries(source)
        self.sink(json.dumps(plugins))

        for plugin in plugins:
            plugin_dir = destination / plugin
            if plugin_dir.is_dir():
                self.sink(f"Removing conflicting plugin: {plugin}")
                outcome.result.merge(remove_tree(plugin_dir, self.sink))

        return outcome

    def post_install(self) -> HookOutcome:
        """
        Copy every source plugin directory into the destination tree.

        Returns:
            HookOutcome with the merged copy results
        """
        outcome = HookOutcome(HookType.POST_INSTALL)
        trees = self._trees()
        if isinstance(trees, str):
            outcome.skipped = trees
            return outcome

        source, destination = trees

        for plugin in list_entries(source):
            plugin_dir = source / plugin
            if plugin_dir.is_dir():
                self.sink(f"Copying plugin: {plugin}")
                outcome.result.merge(
                    copy_tree(
                        plugin_dir,
                        destination / plugin,
                        self.sink,
                        self.config.dir_mode,
                    )
                )

        return outcome
