"""
Command Line Interface for OOPLab
"""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from .demo import run_demo
from .exceptions import OOPLabError
from .output import make_console

# Log records go to stderr so stdout carries only the demonstration
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)]
)
logger = logging.getLogger("ooplab")

app = typer.Typer(
    name="ooplab",
    help="Demonstrations of object-oriented and type-system idioms",
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        from . import __version__
        make_console().print(f"OOPLab version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output"
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version information"
    ),
) -> None:
    """Run every demonstration in order."""
    if verbose:
        logger.setLevel(logging.DEBUG)
        logger.debug("Verbose mode enabled")

    try:
        run_demo(make_console(), make_console(stderr=True))
    except OOPLabError as e:
        logger.error(f"OOPLab error: {e}")
        raise typer.Exit(code=1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        if verbose:
            logger.exception("Full traceback:")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
