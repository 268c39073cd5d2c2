"""
protolite CLI Utilities.

Shared utility functions used across CLI modules.
"""

import logging
import os
import platform
from enum import Enum
from pathlib import Path

import typer
from rich.console import Console

from protolite._version import get_version
from protolite.core.errors import ParseError
from protolite.core.manifest import ProtoliteConfig, find_config, load_config

console = Console()

logger = logging.getLogger("protolite")


class OutputFormat(str, Enum):
    """Parse error report styles for `check`."""

    HUMAN = "human"
    VSCODE = "vscode"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"protolite version {get_version()}")
        typer.echo(f"Python {platform.python_implementation()} {platform.python_version()}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Debug logging with --verbose, otherwise LOG_LEVEL (default WARNING)."""
    if verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, os.getenv("LOG_LEVEL", "WARNING").upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.setLevel(level)


def resolve_config(config: Path | None) -> ProtoliteConfig:
    """Load ``config`` if given, else the nearest one above the working directory."""
    path = config if config is not None else find_config(Path.cwd())
    logger.debug("Using configuration %s", path or "<defaults>")
    return load_config(path)


def print_human_parse_error(error: ParseError) -> None:
    """Print parse error with location and snippet."""
    typer.echo(f"Parse error: {error}", err=True)


def print_vscode_parse_error(error: ParseError, root: Path) -> None:
    """Print parse error in VS Code format with location info."""
    if error.context and error.context.file:
        try:
            rel_path = Path(error.context.file).relative_to(root)
        except ValueError:
            rel_path = Path(error.context.file)
        typer.echo(
            f"{rel_path}:{error.context.line}:{error.context.column}: error: {error.message}",
            err=True,
        )
    else:
        typer.echo(f"::error: {error.message}", err=True)


def print_parse_error(error: ParseError, format: OutputFormat, root: Path) -> None:
    if format is OutputFormat.VSCODE:
        print_vscode_parse_error(error, root)
    else:
        print_human_parse_error(error)
