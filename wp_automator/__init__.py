"""
WP Automator - package-manager hooks for WordPress plugin trees.

This is the main package that exports the public API: reconcile
plugins-pro into plugins around a dependency install, and provision the
mu-plugins bootstrap loader.
"""

__version__ = "0.1.0"

from wp_automator.config import AutomatorConfig, ConfigError, load_config
from wp_automator.plugin import Automator, HookError, HookOutcome, HookType
from wp_automator.plugin.loader import LoaderProvisioner
from wp_automator.plugin.reconciler import Reconciler

__all__ = [
    "__version__",
    "Automator",
    "AutomatorConfig",
    "ConfigError",
    "HookError",
    "HookOutcome",
    "HookType",
    "LoaderProvisioner",
    "Reconciler",
    "load_config",
]
