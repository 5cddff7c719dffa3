"""
WP Automator Plugin Hooks - package-manager lifecycle integration.

This module handles:
- Lifecycle event names and dispatch
- Pre/post install reconciliation of plugins-pro into plugins
- Bootstrap loader provisioning into mu-plugins
"""

from wp_automator.plugin.hooks import Automator, HookError, HookOutcome, HookType

__all__ = ["Automator", "HookError", "HookOutcome", "HookType"]
