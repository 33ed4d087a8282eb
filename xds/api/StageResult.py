"""Result of an ``xds`` command function (announce, progress, result, output)."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

# Yields (fraction complete, message) while filling in the StageResult it receives
ProgressCallback = Callable[["StageResult"], Iterator[tuple[float, str]]]


@dataclass
class StageResult:
    """What a ``cmd_*`` function hands to its caller.

    Nothing runs until ``progress_callback`` is iterated; the callback sets
    ``result``, ``output`` and ``success`` before it finishes. ``output``
    must match the schema registered for the command.
    """

    announce: str
    progress_callback: ProgressCallback
    result: str = ""
    output: dict[str, Any] = field(default_factory=dict)
    success: bool = False

    def run(self) -> "StageResult":
        """Drain the progress callback and return self (for callers without a display)."""
        for _ in self.progress_callback(self):
            pass
        return self
