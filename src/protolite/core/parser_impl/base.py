"""
Base parser class for protolite schemas.

Provides the token cursor, the diagnostic context stack and the token
matching helpers used by all parser mixins.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import NoReturn

from ..errors import UnexpectedEndOfInput, UnexpectedToken
from ..lexer import Token, TokenCheck, text_equals


class BaseParser:
    """
    Base parser class with token manipulation utilities.

    This class provides the foundation for recursive descent parsing:
    a cursor over an immutable token list, and a stack of active
    production names that every error carries as a dotted path.
    """

    def __init__(self, tokens: Sequence[Token]):
        """
        Initialize parser.

        Args:
            tokens: List of tokens from the lexer
        """
        self.tokens = tuple(tokens)
        self.pos = 0
        self._context: list[str] = []

    # -------------------------------------------------------------------------
    # Cursor
    # -------------------------------------------------------------------------

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def peek(self) -> Token | None:
        """Current token, or None at end of input."""
        if self.at_end():
            return None
        return self.tokens[self.pos]

    def advance(self) -> Token:
        """
        Consume and return the current token.

        Callers check ``at_end()`` (or use ``expect``) first.
        """
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    # -------------------------------------------------------------------------
    # Diagnostic context
    # -------------------------------------------------------------------------

    @property
    def context_path(self) -> str:
        """Active productions as a dotted path, e.g. ``.block.statement``."""
        return "".join(f".{name}" for name in self._context)

    def push_context(self, name: str) -> None:
        self._context.append(name)

    def pop_context(self) -> None:
        self._context.pop()

    @contextmanager
    def context(self, name: str) -> Iterator[None]:
        """
        Run a production body with ``name`` on the context stack.

        On exit, normal or failing, the stack is cut back to its depth at
        entry, which also drops anything pushed manually inside the body.
        """
        depth = len(self._context)
        self._context.append(name)
        try:
            yield
        finally:
            del self._context[depth:]

    # -------------------------------------------------------------------------
    # Matching
    # -------------------------------------------------------------------------

    def check(self, predicate: TokenCheck) -> bool:
        """True if there is a current token and it satisfies ``predicate``."""
        token = self.peek()
        return token is not None and predicate(token)

    def check_text(self, text: str) -> bool:
        return self.check(text_equals(text))

    def expect(self, predicate: TokenCheck) -> Token:
        """
        Consume the current token if it satisfies ``predicate``.

        Raises:
            UnexpectedEndOfInput: If there are no tokens left
            UnexpectedToken: If the current token doesn't match
        """
        if not self.check(predicate):
            self.complain()
        return self.advance()

    def expect_text(self, text: str) -> Token:
        return self.expect(text_equals(text))

    def complain(self) -> NoReturn:
        """Raise the error describing the current position."""
        token = self.peek()
        if token is None:
            raise UnexpectedEndOfInput(self.context_path)
        raise UnexpectedToken(self.context_path, token)
