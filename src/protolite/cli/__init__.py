"""
protolite CLI Package.

- schema.py: check, fmt, tokens and tree commands
- utils.py: Shared utilities (version, logging, error printing)
"""

import sys

import typer

from protolite.cli.schema import check_command, fmt_command, tokens_command, tree_command
from protolite.cli.utils import configure_logging, version_callback

app = typer.Typer(
    help="""protolite - parser and formatter for protobuf-like schemas

Commands:
  • check: parse schema files and report errors
  • fmt: rewrite schema files in canonical layout
  • tokens, tree: inspect how a file is tokenized and parsed
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """protolite CLI main callback for global options."""
    configure_logging(verbose)


app.command(name="check")(check_command)
app.command(name="fmt")(fmt_command)
app.command(name="tokens")(tokens_command)
app.command(name="tree")(tree_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = ["app", "main"]


if __name__ == "__main__":
    main(sys.argv[1:])
