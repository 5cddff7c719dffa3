"""
Bootstrap Loader Provisioning.

This module writes the mu-plugins autoloader after the host regenerates
its autoload metadata.

Key features:
- Creates mu-plugins when missing
- Copies the base loader template over any previous loader
- Appends the mu-loader template only when mu-plugins has subdirectories
- Output depends only on the current mu-plugins contents
"""

import os
import shutil

from wp_automator.config import AutomatorConfig
from wp_automator.plugin.hooks import HookOutcome, HookType
from wp_automator.tree import list_entries, resolve_root
from wp_automator.tree.result import MessageSink


class LoaderProvisioner:
    """Writes <content root>/mu-plugins/<loader_name>."""

    def __init__(self, config: AutomatorConfig, sink: MessageSink = print):
        self.config = config
        self.sink = sink

    def provision(self) -> HookOutcome:
        """
        Copy the loader template into mu-plugins and extend it if needed.

        Returns:
            HookOutcome; failures abort the remaining steps
        """
        config = self.config
        outcome = HookOutcome(HookType.POST_AUTOLOAD_DUMP)
        result = outcome.result

        root = resolve_root(config.vendor_dir, config.content_dir_name)
        if root is None:
            outcome.skipped = f"Not inside a {config.content_dir_name} directory."
            return outcome

        mu_plugins_dir = root / config.mu_plugins_dir_name
        if not mu_plugins_dir.is_dir():
            try:
                os.makedirs(mu_plugins_dir, mode=config.dir_mode, exist_ok=True)
            except OSError as e:
                result.fail(
                    mu_plugins_dir,
                    "mkdir",
                    f"Failed to create directory: {mu_plugins_dir}",
                    self.sink,
                    e,
                )
                return outcome

        template = config.templates / config.loader_name
        loader_file = mu_plugins_dir / config.loader_name

        if not template.is_file():
            result.fail(
                template,
                "missing",
                f"Source {config.loader_name} does not exist.",
                self.sink,
            )
            return outcome

        try:
            shutil.copyfile(template, loader_file)
            result.processed += 1
        except OSError as e:
            result.fail(
                loader_file,
                "copy",
                f"Failed to copy {config.loader_name} to {config.mu_plugins_dir_name}.",
                self.sink,
                e,
            )
            return outcome

        groups = [
            name for name in list_entries(mu_plugins_dir)
            if (mu_plugins_dir / name).is_dir()
        ]
        if not groups:
            return outcome

        mu_template = config.templates / config.mu_loader_name
        try:
            content = mu_template.read_bytes()
        except OSError as e:
            result.fail(
                mu_template,
                "missing",
                f"Source {config.mu_loader_name} could not be read.",
                self.sink,
                e,
            )
            return outcome

        try:
            with open(loader_file, "ab") as f:
                f.write(os.linesep.encode() + content)
            result.processed += 1
        except OSError as e:
            result.fail(
                loader_file,
                "copy",
                f"Failed to append {config.mu_loader_name} to {config.loader_name}.",
                self.sink,
                e,
            )

        return outcome
