from __future__ import annotations

import logging
import sys

import typer
from rich.console import Console

from .menu import MenuLoop
from .prompts import ConsoleIO, InputClosedError
from .registry import EventRegistry

app = typer.Typer(add_completion=False, help="Confdesk - register and list conference events")
console = Console()


def setup_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
        force=True,
    )


@app.command()
def cmd_run(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
) -> None:
    """Start the interactive event menu."""
    setup_logging(verbose)
    loop = MenuLoop(EventRegistry(), ConsoleIO(console))
    try:
        loop.run()
    except InputClosedError:
        raise typer.Exit(code=1)


def main() -> None:  # entry point
    app()


if __name__ == "__main__":
    main()
