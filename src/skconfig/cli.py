"""Typer CLI application for skconfig."""

from __future__ import annotations

import typer
from rich.markup import escape

from skconfig import ConfigError, ConfigOptions, __version__, current_kube_context
from skconfig._internal.commands.list_cmd import execute_list_command
from skconfig._internal.state import CLIState, build_state

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    pretty_exceptions_enable=False,
    help="Interact with the global skaffold config file.",
)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose console output."),
) -> None:
    """Parse global options and configure shared state.

    Args:
        ctx: Typer context that stores shared CLI state.
        verbose: Whether to enable verbose console logging.
    """
    ctx.obj = build_state(verbose)


@app.command()
def version(ctx: typer.Context) -> None:
    """Display the installed skconfig version.

    Args:
        ctx: Typer context for the current invocation.
    """
    state = _ensure_state(ctx)
    state.console.print(f"[success]skconfig {__version__}[/success]")


@app.command("list")
def list_values(
    ctx: typer.Context,
    config_file: str | None = typer.Option(
        None,
        "--config",
        "-c",
        envvar="SKAFFOLD_CONFIG",
        help="Path to the global config file. Defaults to ~/.skaffold/config.",
    ),
    kubecontext: str | None = typer.Option(
        None,
        "--kube-context",
        "-k",
        envvar="SKAFFOLD_KUBE_CONTEXT",
        help="Kube-context whose values are listed. Defaults to the current kubectl context.",
    ),
    use_global: bool = typer.Option(
        False,
        "--global",
        "-g",
        help="List the global values instead of the values for a kube-context.",
    ),
    show_all: bool = typer.Option(
        False,
        "--all",
        "-a",
        help="Show the whole config file, including every kube-context.",
    ),
) -> None:
    """List all values set in the global skaffold config.

    Args:
        ctx: Typer context for the current invocation.
        config_file: Explicit config path override.
        kubecontext: Explicit kube-context override.
        use_global: Whether to list the global values.
        show_all: Whether to list the whole config.
    """
    state = _ensure_state(ctx)
    options = ConfigOptions(
        config_file=config_file,
        kubecontext=kubecontext,
        use_global=use_global,
        show_all=show_all,
    )

    try:
        execute_list_command(state, options, provider=current_kube_context)
    except ConfigError as exc:
        _abort(state, str(exc))


def _abort(state: CLIState, message: str, *, exit_code: int = 1) -> None:
    """Print a styled error message and exit the CLI.

    Args:
        state: CLI state.
        message: Error message to display.
        exit_code: Exit code to use.
    """
    state.err_console.print(f"[error]Error:[/error] {escape(message)}")
    raise typer.Exit(code=exit_code)


def _ensure_state(ctx: typer.Context) -> CLIState:
    """Return the CLI state, creating a default if the callback was bypassed."""
    state = ctx.obj
    if isinstance(state, CLIState):
        return state
    ctx.obj = state = build_state(verbose=False)
    return state
