"""
Error types for protolite lexing, parsing and configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .lexer import Token


class ProtoliteError(Exception):
    """Base exception for all protolite errors."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ParseError(ProtoliteError):
    """
    Raised when schema source cannot be parsed.

    Every parse error records the dotted path of grammar productions that
    were active when parsing stopped, e.g. ``.block.statement.instruction``.
    """

    def __init__(
        self,
        message: str,
        context_path: str,
        context: ErrorContext | None = None,
    ):
        self.context_path = context_path
        super().__init__(message, context)

    @property
    def line(self) -> int | None:
        return self.context.line if self.context else None

    @property
    def column(self) -> int | None:
        return self.context.column if self.context else None

    def with_context(self, context: ErrorContext) -> ParseError:
        """Return a copy of this error carrying ``context``."""
        return ParseError(self.message, self.context_path, context)


class UnexpectedEndOfInput(ParseError):
    """The token stream ran out while a production still needed a token."""

    def __init__(self, context_path: str, context: ErrorContext | None = None):
        super().__init__(
            f"Unexpected end of input while parsing [{context_path}]",
            context_path,
            context,
        )

    def with_context(self, context: ErrorContext) -> UnexpectedEndOfInput:
        return UnexpectedEndOfInput(self.context_path, context)


class UnexpectedToken(ParseError):
    """The current token does not satisfy the active production."""

    def __init__(
        self,
        context_path: str,
        token: Token,
        context: ErrorContext | None = None,
    ):
        self.token = token
        if context is None:
            context = ErrorContext(file=None, line=token.line, column=token.column)
        super().__init__(
            f"Unexpected token {token.text!r} while parsing [{context_path}]",
            context_path,
            context,
        )

    @property
    def text(self) -> str:
        return self.token.text

    def with_context(self, context: ErrorContext) -> UnexpectedToken:
        return UnexpectedToken(self.context_path, self.token, context)


class ConfigError(ProtoliteError):
    """
    Raised when a protolite configuration file is invalid.

    Examples:
    - Malformed TOML
    - Wrong value types (e.g. ``indent_width = "four"``)
    - Unknown keys in a known table
    """

    pass


@dataclass(frozen=True)
class ErrorContext:
    """
    Context information for an error, including source location.

    Attributes:
        file: Path to the source file, or None for in-memory source
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional source lines surrounding the error
    """

    file: Path | None
    line: int
    column: int
    snippet: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "schema.proto:10:5", followed by the
            snippet when one is attached
        """
        location = f"{self.file or '<input>'}:{self.line}:{self.column}"
        if self.snippet:
            return f"{location}\n{self._format_snippet()}"
        return location

    def with_file(self, file: Path, source: str | None = None) -> ErrorContext:
        """Attach a file path and, when source text is given, a snippet."""
        snippet = make_snippet(source, self.line) if source is not None else self.snippet
        return replace(self, file=file, snippet=snippet)

    def _format_snippet(self) -> str:
        """Format code snippet with line numbers and error marker."""
        if not self.snippet:
            return ""

        lines = self.snippet.split("\n")
        formatted = []

        # Snippets start two lines before the error line
        start_line = max(1, self.line - 2)

        for i, line in enumerate(lines):
            line_num = start_line + i
            prefix = f"{line_num:4d} | "
            formatted.append(prefix + line)

            if line_num == self.line:
                marker_pos = len(prefix) + self.column - 1
                formatted.append(" " * marker_pos + "^^^")

        return "\n".join(formatted)


def make_snippet(source: str, line: int, radius: int = 2) -> str:
    """Return the lines of ``source`` within ``radius`` of ``line``."""
    lines = source.splitlines()
    start = max(1, line - radius)
    end = min(len(lines), line + radius)
    return "\n".join(lines[start - 1 : end])


def attach_source(error: ParseError, file: Path, source: str) -> ParseError:
    """
    Helper to re-issue a ParseError with file and snippet context.

    End-of-input errors are pinned to the last line of the source.

    Args:
        error: Error raised by the parser
        file: Source file path
        source: Full source text of ``file``

    Returns:
        ParseError of the same kind with context attached
    """
    if error.context is not None:
        context = error.context.with_file(file, source)
    else:
        lines = source.splitlines() or [""]
        context = ErrorContext(
            file=file,
            line=len(lines),
            column=len(lines[-1]) + 1,
            snippet=make_snippet(source, len(lines)),
        )
    return error.with_context(context)
