"""
Tree Walk Results.

Every tree operation keeps going after a failed item. Failures are written
to the message sink as they happen and collected here so callers can
inspect them without parsing text.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

MessageSink = Callable[[str], None]


@dataclass
class ItemFailure:
    """
    A single item that could not be processed.

    Attributes:
        path: Path the failed action was applied to
        action: One of delete, rmdir, copy, mkdir, missing, loop
        message: Line written to the sink
        error: Underlying OS error text, if any
    """

    path: Path
    action: str
    message: str
    error: str = ""


@dataclass
class TreeResult:
    """Outcome of one tree walk."""

    processed: int = 0
    failures: list[ItemFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def fail(
        self,
        path: Path,
        action: str,
        message: str,
        sink: MessageSink,
        error: OSError | None = None,
    ) -> None:
        """Record a failure and report it to the sink."""
        self.failures.append(
            ItemFailure(
                path=path,
                action=action,
                message=message,
                error=str(error) if error is not None else "",
            )
        )
        sink(message)

    def merge(self, other: "TreeResult") -> "TreeResult":
        """Fold another result into this one."""
        self.processed += other.processed
        self.failures.extend(other.failures)
        return self
