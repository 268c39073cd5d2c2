"""Source location tracking for syntax tree nodes.

Records the line and column where a token-backed node was written,
enabling located error messages and editor navigation.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from ..lexer import Token


class SourceLocation(BaseModel):
    """Source position of a node's first token.

    Attributes:
        line: 1-indexed line number
        column: 1-indexed column number
    """

    line: int
    column: int

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(cls, token: Token) -> SourceLocation:
        return cls(line=token.line, column=token.column)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"
