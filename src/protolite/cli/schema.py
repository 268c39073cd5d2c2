"""
Schema file commands: check, fmt, tokens, tree.
"""

import difflib
from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from protolite.core import ir
from protolite.core.errors import ConfigError, ParseError
from protolite.core.fileset import expand_paths
from protolite.core.formatter import format_source
from protolite.core.lexer import tokenize
from protolite.core.parser import parse_file

from .utils import OutputFormat, console, logger, print_parse_error, resolve_config


def check_command(
    paths: list[Path] = typer.Argument(  # noqa: B008
        ..., exists=True, help="Schema files or directories to check"
    ),
    config: Path = typer.Option(  # noqa: B008
        None, "--config", "-c", help="Path to protolite.toml or pyproject.toml"
    ),
    format: OutputFormat = typer.Option(  # noqa: B008
        OutputFormat.HUMAN, "--format", "-f", help="Output format"
    ),
) -> None:
    """
    Parse schema files and report the first error in each.
    """
    try:
        cfg = resolve_config(config)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    files = expand_paths(paths, cfg.files)
    if not files:
        typer.echo("No schema files found.", err=True)
        raise typer.Exit(code=1)

    failed = 0
    for f in files:
        try:
            parse_file(f)
        except ParseError as e:
            failed += 1
            print_parse_error(e, format, Path.cwd())

    if failed:
        typer.echo(f"{failed} of {len(files)} file(s) failed to parse.", err=True)
        raise typer.Exit(code=1)

    if format is not OutputFormat.VSCODE:
        typer.echo(f"OK: {len(files)} file(s) parsed.")


def fmt_command(
    paths: list[Path] = typer.Argument(  # noqa: B008
        ..., exists=True, help="Schema files or directories to format"
    ),
    config: Path = typer.Option(  # noqa: B008
        None, "--config", "-c", help="Path to protolite.toml or pyproject.toml"
    ),
    check: bool = typer.Option(
        False, "--check", help="Don't write files; exit 1 if any would change"
    ),
    diff: bool = typer.Option(False, "--diff", help="Print a unified diff instead of writing"),
) -> None:
    """
    Rewrite schema files in canonical layout.
    """
    try:
        cfg = resolve_config(config)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    files = expand_paths(paths, cfg.files)
    changed = 0
    errors = 0

    for f in files:
        try:
            original = f.read_bytes().decode("utf-8")
        except UnicodeDecodeError as e:
            errors += 1
            typer.echo(f"Not valid UTF-8, left unchanged: {f} (byte {e.start})", err=True)
            continue

        try:
            formatted = format_source(original, cfg.format)
        except ParseError as e:
            errors += 1
            typer.echo(f"Parse error in {f}: {e.message}", err=True)
            continue

        if formatted == original:
            logger.debug("%s already formatted", f)
            continue

        changed += 1
        if check:
            typer.echo(f"would reformat {f}")
        elif diff:
            typer.echo(
                "".join(
                    difflib.unified_diff(
                        original.splitlines(keepends=True),
                        formatted.splitlines(keepends=True),
                        fromfile=f"{f}",
                        tofile=f"{f} (formatted)",
                    )
                ),
                nl=False,
            )
        else:
            f.write_text(formatted, encoding="utf-8")
            typer.echo(f"reformatted {f}")

    if not check and not diff:
        typer.echo(f"{changed} file(s) reformatted, {len(files) - changed - errors} unchanged.")

    if errors or (check and changed):
        raise typer.Exit(code=1)


def tokens_command(
    file: Path = typer.Argument(  # noqa: B008
        ..., exists=True, dir_okay=False, help="Schema file"
    ),
) -> None:
    """
    Show the token stream of a schema file.
    """
    table = Table(title=str(file))
    table.add_column("Line", justify="right")
    table.add_column("Column", justify="right")
    table.add_column("Text")

    for token in tokenize(file.read_bytes()):
        table.add_row(str(token.line), str(token.column), escape(token.text))

    console.print(table)


def tree_command(
    file: Path = typer.Argument(  # noqa: B008
        ..., exists=True, dir_okay=False, help="Schema file"
    ),
    json: bool = typer.Option(False, "--json", help="Print the syntax tree as JSON"),
) -> None:
    """
    Show the syntax tree of a schema file.
    """
    try:
        module = parse_file(file)
    except ParseError as e:
        print_parse_error(e, OutputFormat.HUMAN, Path.cwd())
        raise typer.Exit(code=1)

    if json:
        depth = module.block.depth()
        if depth > ir.MAX_JSON_DEPTH:
            typer.echo(
                f"Error: {file} is nested {depth} levels deep; "
                f"JSON output supports at most {ir.MAX_JSON_DEPTH}",
                err=True,
            )
            raise typer.Exit(code=1)
        typer.echo(module.block.model_dump_json(indent=2))
        return

    console.print(_build_tree(module))


def _build_tree(module: ir.SchemaModule) -> Tree:
    root = Tree(f"[bold]{escape(module.name)}[/bold]")
    pending = [(root, module.block)]
    while pending:
        node, block = pending.pop()
        for statement in block.statements:
            if isinstance(statement, ir.Nested):
                label = f"[bold]{escape(str(statement.instruction))}[/bold]"
                pending.append((node.add(label), statement.block))
            elif isinstance(statement, ir.Comment):
                node.add(f"[dim]{escape(statement.text)}[/dim]")
            else:
                node.add(escape(str(statement)))
    return root
