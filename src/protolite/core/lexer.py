"""
Lexer/Tokenizer for protolite schema source.

Converts raw schema text into a flat list of tokens with source location
tracking. Tokens carry no type tag: what a token *is* depends on where the
parser meets it, so classification is done by the predicate functions at
the bottom of this module.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import IO

IDENTIFIER_CHARS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789.-_()"
)
WHITESPACE = frozenset(" \t\r\n")
COMMENT_MARKER = "//"

IDENTIFIER_PATTERN = re.compile(r"[a-zA-Z0-9.\-_()]+")
STRING_PATTERN = re.compile(r'"(?:[^"\\\n]|\\.)*"')

Source = str | bytes | IO[str] | IO[bytes]


@dataclass(frozen=True)
class Token:
    """
    A single token of schema source.

    Attributes:
        text: Exact source text of the token
        line: Line number of the first character (1-indexed)
        column: Column number of the first character (1-indexed)
    """

    text: str
    line: int
    column: int

    def __repr__(self) -> str:
        return f"Token({self.text!r}, {self.line}:{self.column})"


class Lexer:
    """
    Lexer for protolite schema source.

    Never fails: malformed input still yields tokens, and the parser is
    responsible for rejecting them.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: list[Token] = []

    def current_char(self) -> str | None:
        """Get current character or None if at end."""
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def peek_char(self, offset: int = 1) -> str | None:
        """Peek ahead at character."""
        pos = self.pos + offset
        if pos >= len(self.text):
            return None
        return self.text[pos]

    def advance(self) -> None:
        """Move to next character, updating line/column."""
        if self.pos < len(self.text):
            if self.text[self.pos] == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def skip_whitespace(self) -> None:
        while self.current_char() in WHITESPACE:
            self.advance()

    def read_identifier(self) -> None:
        while self.current_char() in IDENTIFIER_CHARS:
            self.advance()

    def read_string(self) -> None:
        """
        Read a double-quoted string, delimiters included.

        An unterminated string stops at end of line or input; the partial
        token is still emitted.
        """
        self.advance()  # opening quote
        while True:
            current = self.current_char()
            if current is None or current == "\n":
                return
            if current == '"':
                self.advance()
                return
            if current == "\\":
                self.advance()
                if self.current_char() in (None, "\n"):
                    return
            self.advance()

    def read_line_comment(self) -> None:
        while self.current_char() not in (None, "\n"):
            self.advance()

    def read_block_comment(self) -> None:
        self.advance()
        self.advance()
        while self.current_char() is not None:
            if self.current_char() == "*" and self.peek_char() == "/":
                self.advance()
                self.advance()
                return
            self.advance()

    def tokenize(self) -> list[Token]:
        """
        Tokenize the entire source text.

        Returns:
            List of tokens in source order (no EOF sentinel)
        """
        while True:
            self.skip_whitespace()
            ch = self.current_char()
            if ch is None:
                break

            start = self.pos
            token_line = self.line
            token_col = self.column

            if ch in IDENTIFIER_CHARS:
                self.read_identifier()
            elif ch == '"':
                self.read_string()
            elif ch == "/" and self.peek_char() == "/":
                self.read_line_comment()
            elif ch == "/" and self.peek_char() == "*":
                self.read_block_comment()
            else:
                self.advance()

            self.tokens.append(Token(self.text[start : self.pos], token_line, token_col))

        return self.tokens


def decode_source(data: bytes) -> str:
    """Decode UTF-8, replacing invalid bytes with U+FFFD."""
    return data.decode("utf-8", errors="replace")


def _read_source(source: Source) -> str:
    if isinstance(source, bytes):
        return decode_source(source)
    if isinstance(source, str):
        return source
    data = source.read()
    if isinstance(data, bytes):
        return decode_source(data)
    return data


def tokenize(source: Source) -> list[Token]:
    """
    Convenience function to tokenize schema source.

    Args:
        source: Text, UTF-8 bytes, or a readable text/binary stream. Bytes
            that are not valid UTF-8 become U+FFFD and lex as single
            character tokens.

    Returns:
        List of tokens
    """
    return Lexer(_read_source(source)).tokenize()


# =============================================================================
# Token predicates
# =============================================================================

TokenCheck = Callable[[Token], bool]


def is_identifier(token: Token) -> bool:
    """Identifier-class run: keyword, type name, number or symbol."""
    return IDENTIFIER_PATTERN.fullmatch(token.text) is not None


def is_string(token: Token) -> bool:
    """Complete double-quoted string literal."""
    return STRING_PATTERN.fullmatch(token.text) is not None


def is_value(token: Token) -> bool:
    """Anything accepted in value position."""
    return is_identifier(token) or is_string(token)


def is_comment(token: Token) -> bool:
    return token.text.startswith(COMMENT_MARKER)


def text_equals(text: str) -> TokenCheck:
    """Build a predicate matching one literal token text."""

    def check(token: Token) -> bool:
        return token.text == text

    check.__name__ = f"text_equals({text!r})"
    return check


__all__ = [
    "IDENTIFIER_PATTERN",
    "Lexer",
    "STRING_PATTERN",
    "Source",
    "Token",
    "TokenCheck",
    "decode_source",
    "is_comment",
    "is_identifier",
    "is_string",
    "is_value",
    "text_equals",
    "tokenize",
]
