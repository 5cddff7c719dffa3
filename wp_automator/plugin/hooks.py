"""
Plugin Lifecycle Hooks.

This module maps package-manager lifecycle events onto the automator's
operations.

Key features:
- Hook types matching the host's event names
- Event subscription table
- Dispatch by event name
- Hooks report through the message sink and never interrupt the host
"""

from dataclasses import dataclass, field
from enum import Enum

from wp_automator.config import AutomatorConfig
from wp_automator.tree.result import MessageSink, TreeResult


class HookError(Exception):
    """Base exception for hook-related errors."""

    pass


class HookType(Enum):
    """Hook type enumeration."""

    POST_AUTOLOAD_DUMP = "post-autoload-dump"
    PRE_INSTALL = "pre-install-cmd"
    POST_INSTALL = "post-install-cmd"


@dataclass
class HookOutcome:
    """
    Result of one hook invocation.

    Attributes:
        hook: Hook that ran
        skipped: Reason the hook did not apply, None if it ran
        result: Merged tree results of the work done
    """

    hook: HookType
    skipped: str | None = None
    result: TreeResult = field(default_factory=TreeResult)

    @property
    def ran(self) -> bool:
        return self.skipped is None


class Automator:
    """
    Entry point for the host's lifecycle events.

    Each call resolves the content root afresh from the config it was
    constructed with.
    """

    def __init__(self, config: AutomatorConfig, sink: MessageSink = print):
        """
        Initialize Automator.

        Args:
            config: Settings for every hook
            sink: Receives progress and failure lines
        """
        self.config = config
        self.sink = sink

    @staticmethod
    def subscribed_events() -> dict[HookType, str]:
        """Event to handler method name."""
        return {
            HookType.POST_AUTOLOAD_DUMP: "on_post_autoload_dump",
            HookType.PRE_INSTALL: "on_pre_install",
            HookType.POST_INSTALL: "on_post_install",
        }

    def dispatch(self, event: str | HookType) -> HookOutcome:
        """
        Run the handler subscribed to an event.

        Args:
            event: Event name (e.g. "pre-install-cmd") or HookType

        Returns:
            The handler's HookOutcome

        Raises:
            HookError: If no handler is subscribed to the event
        """
        try:
            hook_type = HookType(event)
        except ValueError as e:
            raise HookError(f"Unknown hook: {event}") from e

        handler = getattr(self, self.subscribed_events()[hook_type])
        return handler()

    def on_post_autoload_dump(self) -> HookOutcome:
        from wp_automator.plugin.loader import LoaderProvisioner

        return LoaderProvisioner(self.config, self.sink).provision()

    def on_pre_install(self) -> HookOutcome:
        from wp_automator.plugin.reconciler import Reconciler

        return Reconciler(self.config, self.sink).pre_install()

    def on_post_install(self) -> HookOutcome:
        from wp_automator.plugin.reconciler import Reconciler

        return Reconciler(self.config, self.sink).post_install()
