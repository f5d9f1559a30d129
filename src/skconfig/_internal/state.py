"""CLI state management."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from rich.console import Console
from rich.theme import Theme

CLI_THEME: Final[Theme] = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "success": "green",
        "text": "white",
    }
)


@dataclass(slots=True)
class CLIState:
    """State shared between CLI commands during a single invocation."""

    console: Console
    err_console: Console
    verbose: bool


def build_console(verbose: bool, *, stderr: bool = False) -> Console:
    """Return a Rich console configured with project-specific styling.

    Args:
        verbose: Whether to enable verbose logging with timestamps.
        stderr: Whether the console writes to standard error.

    Returns:
        Configured Console instance.
    """
    return Console(
        theme=CLI_THEME,
        highlight=False,
        soft_wrap=True,
        stderr=stderr,
        log_path=False,
        log_time=verbose,
    )


def build_state(verbose: bool) -> CLIState:
    """Return a fresh CLIState with output and diagnostics consoles."""
    return CLIState(
        console=build_console(verbose),
        err_console=build_console(verbose, stderr=True),
        verbose=verbose,
    )
