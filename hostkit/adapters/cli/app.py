"""
Main CLI application
"""
import typer
from pathlib import Path
from typing import Optional

from ...core.logging import setup_logging
from .host import register_host_commands

app = typer.Typer(
    name="hostkit",
    add_completion=False,
    help="Parse and inspect remote host descriptors",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

register_host_commands(app)


@app.callback()
def main(
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        "-l",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Log file path",
    ),
):
    """
    hostkit - host descriptor toolkit

    - show: Show a parsed host
    - options: Print effective connection options
    - inventory: List hosts of a TOML inventory
    """
    setup_logging(level=log_level, log_file=log_file)


def run():
    """CLI entry point"""
    app()


if __name__ == "__main__":
    run()
