"""Development entrypoint that runs the skconfig CLI from a source checkout."""

from __future__ import annotations

from skconfig.cli import app


def main() -> None:
    """Invoke the Typer application."""
    app()


if __name__ == "__main__":
    main()
