"""
protolite Parser Package.

The parser is built from mixins that separate the leaf productions
(identifiers, instructions, values) from statements and blocks.

The main exports are:
- Parser: The complete parser class
- parse: Parse source text, returning a Block or the ParseError
- parse_tokens: Same, for an already tokenized source

Usage:
    from protolite.core.parser_impl import parse

    result = parse("message world { optional int32 i = 1; }")
    if isinstance(result, ParseError):
        ...
"""

from __future__ import annotations

from collections.abc import Sequence

from .. import ir
from ..errors import ParseError
from ..lexer import Source, Token, tokenize
from .base import BaseParser
from .statements import StatementParserMixin
from .values import ValueParserMixin


class Parser(
    BaseParser,
    ValueParserMixin,
    StatementParserMixin,
):
    """
    Complete protolite parser.

    Every grammar rule either returns a node or raises ``ParseError``;
    nothing is recovered locally, so the first violation ends the parse.

    - ValueParserMixin: identifiers, instructions, values and options
    - StatementParserMixin: statements, blocks and the root block
    """

    def parse(self) -> ir.Block:
        """
        Parse the whole token list as one top-level block.

        Raises:
            ParseError: On the first grammar violation
        """
        return self.parse_root()


def parse_tokens(tokens: Sequence[Token]) -> ir.Block | ParseError:
    """
    Parse a token list into a Block.

    Returns:
        The root Block, or the ParseError describing the first violation
    """
    try:
        return Parser(tokens).parse()
    except ParseError as e:
        return e


def parse(source: Source) -> ir.Block | ParseError:
    """
    Tokenize and parse schema source.

    Args:
        source: Text, UTF-8 bytes, or a readable stream

    Returns:
        The root Block, or the ParseError describing the first violation
    """
    return parse_tokens(tokenize(source))


__all__ = ["Parser", "parse", "parse_tokens"]
