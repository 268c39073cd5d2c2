"""
Identifier, instruction and value parsing for protolite schemas.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .. import ir
from ..lexer import TokenCheck, is_identifier, is_value


class ValueParserMixin:
    """
    Parser mixin for the leaf productions.

    Note: This mixin expects to be combined with BaseParser via multiple inheritance.

    Grammar:
        Instruction := Identifier+
        Value       := Identifier ( '[' Identifier '=' Identifier ']' )?
    """

    # Type stubs for methods provided by BaseParser
    if TYPE_CHECKING:
        context: Any
        check: Any
        check_text: Any
        expect: Any
        expect_text: Any
        complain: Any

    def parse_identifier(self, accept: TokenCheck = is_identifier) -> ir.Identifier:
        """
        Parse a single identifier.

        Args:
            accept: Token predicate; value positions also admit quoted strings
        """
        with self.context("identifier"):
            return ir.Identifier.from_token(self.expect(accept))

    def parse_instruction(self) -> ir.Instruction:
        """Parse one or more identifiers with nothing between them."""
        with self.context("instruction"):
            identifiers: list[ir.Identifier] = []
            while self.check(is_identifier):
                identifiers.append(self.parse_identifier())
            if not identifiers:
                self.complain()
            return ir.Instruction(identifiers=tuple(identifiers))

    def parse_value(self) -> ir.Value:
        """
        Parse an assignment value.

        Forms:
            1               bare
            1[default=100]  optioned
        """
        with self.context("value"):
            identifier = self.parse_identifier(is_value)
            if not self.check_text("["):
                return ir.Value(identifier=identifier)
            return ir.Value(identifier=identifier, option=self.parse_option())

    def parse_option(self) -> ir.Option:
        """Parse ``[key=value]``; every piece is required."""
        with self.context("option"):
            self.expect_text("[")
            key = self.parse_identifier()
            self.expect_text("=")
            value = self.parse_identifier(is_value)
            self.expect_text("]")
            return ir.Option(key=key, value=value)
