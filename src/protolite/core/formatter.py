"""
Canonical text rendering for protolite syntax trees.

The output of ``format_block`` parses back to a tree with the same outline,
and formatting that output again yields identical text.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from . import ir
from .errors import ParseError
from .lexer import Source
from .parser_impl import parse


@dataclass(frozen=True)
class FormatOptions:
    """
    Layout settings for the formatter.

    Attributes:
        indent_width: Spaces per nesting level
        use_tabs: Indent with one tab per level instead of spaces
        option_spacing: Render ``1 [default = 100]`` instead of ``1[default=100]``
    """

    indent_width: int = 4
    use_tabs: bool = False
    option_spacing: bool = False

    def indent(self, level: int) -> str:
        if self.use_tabs:
            return "\t" * level
        return " " * (self.indent_width * level)


def format_value(value: ir.Value, options: FormatOptions) -> str:
    if value.option is None:
        return value.identifier.text
    key, val = value.option.key.text, value.option.value.text
    if options.option_spacing:
        return f"{value.identifier.text} [{key} = {val}]"
    return f"{value.identifier.text}[{key}={val}]"


def format_statement(statement: ir.Statement, options: FormatOptions) -> str:
    """Render a single-line statement (anything but a non-empty Nested)."""
    if isinstance(statement, ir.Comment):
        return statement.text
    if isinstance(statement, ir.Declaration):
        return f"{statement.instruction};"
    if isinstance(statement, ir.Assignment):
        return f"{statement.instruction} = {format_value(statement.value, options)};"
    if isinstance(statement, ir.Nested):
        return f"{statement.instruction} {{}}"
    raise TypeError(f"Not a statement: {statement!r}")


def format_block(block: ir.Block, options: FormatOptions | None = None) -> str:
    """
    Render a Block as schema source.

    One statement per line, nested bodies indented one level. Non-empty
    output ends with a newline; an empty block renders as "".
    """
    options = options or FormatOptions()
    lines: list[str] = []
    pending: list[tuple[Iterator[ir.Statement], int]] = [(iter(block.statements), 0)]

    while pending:
        statements, level = pending[-1]
        statement = next(statements, None)

        if statement is None:
            pending.pop()
            if pending:
                lines.append(f"{options.indent(level - 1)}}}")
            continue

        prefix = options.indent(level)
        if isinstance(statement, ir.Nested) and not statement.block.is_empty:
            lines.append(f"{prefix}{statement.instruction} {{")
            pending.append((iter(statement.block.statements), level + 1))
        else:
            lines.append(prefix + format_statement(statement, options))

    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def format_source(source: Source, options: FormatOptions | None = None) -> str:
    """
    Parse and re-render schema source.

    Raises:
        ParseError: If the source does not parse
    """
    result = parse(source)
    if isinstance(result, ParseError):
        raise result
    return format_block(result, options)
