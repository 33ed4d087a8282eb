"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TypeVar

import click

from ._run_single_execution import _run_single_execution
from .display.CLIDisplay import CLIDisplay

F = TypeVar("F", bound=Callable)


def _extract_display_format(ctx: click.Context | None = None) -> str:
    """Get the display format stored by the root callback.

    Walks up from ``ctx`` (or the active Click context when none is given).

    Raises:
        RuntimeError: If no context is available or the flag was never set.
        ValueError: If an invalid display format value is encountered.
    """
    current: click.Context | None = ctx if ctx is not None else click.get_current_context(silent=True)
    if current is None:
        raise RuntimeError("Display format unavailable: Typer context is missing")

    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and "display_format" in obj:
            value = obj["display_format"]
            if value in ("json", "yaml"):
                return value
            raise ValueError(f"Invalid display_format value: {value!r}")
        current = current.parent

    raise RuntimeError("Display format not set in the Typer context chain")


def handle_stage_result(func: F, ctx: click.Context | None = None) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    Commands pass their own ``ctx`` so the ``--display`` choice is read from
    the invocation that is running.

    This wrapper handles the 4-stage pattern for CLI:
    1. Announce (print to stderr)
    2. Progress (print to stderr)
    3. Result (print to stderr)
    4. Output (print to stdout as YAML or JSON)
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        display_format = _extract_display_format(ctx)
        _run_single_execution(func, args, kwargs, CLIDisplay(), display_format)

    return wrapper  # type: ignore[return-value]
