"""
Statement and block parsing for protolite schemas.

Blocks nest through ``Nested`` statements. ``parse_block`` keeps its own
stack of open blocks instead of recursing, so nesting depth is limited by
memory rather than by the interpreter's recursion limit. The context stack
still reads ``.block.statement.block.statement...`` exactly as a recursive
descent would.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .. import ir
from ..lexer import is_comment


@dataclass
class _OpenBlock:
    """A block whose closing brace has not been reached yet."""

    opener: ir.Instruction | None
    statements: list[ir.Statement] = field(default_factory=list)

    def close(self) -> ir.Block:
        return ir.Block(statements=tuple(self.statements))


class StatementParserMixin:
    """
    Mixin providing statement and block parsing.

    Note: This mixin expects to be combined with BaseParser and
    ValueParserMixin via multiple inheritance.

    Grammar:
        Block     := Statement*
        Statement := Comment
                   | Instruction ';'
                   | Instruction '=' Value ';'
                   | Instruction '{' Block '}'
    """

    # Type stubs for methods provided by BaseParser and ValueParserMixin
    if TYPE_CHECKING:
        at_end: Any
        peek: Any
        advance: Any
        context: Any
        push_context: Any
        pop_context: Any
        check_text: Any
        expect_text: Any
        complain: Any
        parse_instruction: Any
        parse_value: Any

    def parse_statement(self) -> ir.Statement:
        """Parse one statement, including the body of a nested one."""
        with self.context("statement"):
            head = self._parse_statement_head()
            if not isinstance(head, ir.Instruction):
                return head
            block = self.parse_block()
            self.expect_text("}")
            return ir.Nested(instruction=head, block=block)

    def _parse_statement_head(self) -> ir.Statement | ir.Instruction:
        """
        Parse a statement up to its terminator.

        Returns:
            The finished statement, or the instruction of a nested statement
            once its opening ``{`` has been consumed
        """
        token = self.peek()
        if token is not None and is_comment(token):
            return ir.Comment.from_token(self.advance())

        instruction = self.parse_instruction()

        if self.check_text(";"):
            self.advance()
            return ir.Declaration(instruction=instruction)

        if self.check_text("="):
            self.advance()
            value = self.parse_value()
            self.expect_text(";")
            return ir.Assignment(instruction=instruction, value=value)

        if self.check_text("{"):
            self.advance()
            return instruction

        self.complain()

    def parse_block(self) -> ir.Block:
        """
        Parse statements until end of input or a ``}``.

        The closing brace is left for the caller, so the same rule serves
        the top-level block and nested bodies.
        """
        with self.context("block"):
            stack = [_OpenBlock(opener=None)]
            while True:
                current = stack[-1]

                if self.at_end() or self.check_text("}"):
                    if current.opener is None:
                        return current.close()
                    # Leave the nested body, then finish its statement
                    stack.pop()
                    self.pop_context()
                    self.expect_text("}")
                    self.pop_context()
                    stack[-1].statements.append(
                        ir.Nested(instruction=current.opener, block=current.close())
                    )
                    continue

                self.push_context("statement")
                head = self._parse_statement_head()
                if isinstance(head, ir.Instruction):
                    self.push_context("block")
                    stack.append(_OpenBlock(opener=head))
                else:
                    current.statements.append(head)
                    self.pop_context()

    def parse_root(self) -> ir.Block:
        """Parse the top-level block, which must run to end of input."""
        block = self.parse_block()
        if not self.at_end():
            with self.context("block"):
                self.complain()
        return block
