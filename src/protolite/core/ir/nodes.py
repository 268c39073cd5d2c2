"""
Syntax tree types for protolite schemas.

A parse produces one root ``Block``. Statements are a closed, tagged union:
exactly one of ``Declaration``, ``Assignment``, ``Nested`` or ``Comment``.

    message hello {                     Nested
        // greeting                     Comment
        reserved;                       Declaration
        optional int32 i = 1[default=100];  Assignment (optioned value)
    }

Every node is frozen. ``outline()`` returns a plain, position-free view of a
node, used for structural comparison. It works at any nesting depth;
pydantic JSON serialisation is limited to MAX_JSON_DEPTH levels.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..lexer import COMMENT_MARKER, IDENTIFIER_PATTERN, STRING_PATTERN, Token
from .location import SourceLocation

# ---------------------------------------------------------------------------
# Leaf nodes
# ---------------------------------------------------------------------------


class Identifier(BaseModel):
    """
    A single identifier-class token.

    The grammar does not tell keywords, type names, numbers and symbols
    apart; ``int32``, ``message``, ``100`` and ``foo.Bar`` are all
    identifiers. In value position a quoted string is accepted as well.
    """

    text: str
    location: SourceLocation

    model_config = ConfigDict(frozen=True)

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        if IDENTIFIER_PATTERN.fullmatch(v) or STRING_PATTERN.fullmatch(v):
            return v
        raise ValueError(f"{v!r} is not an identifier or quoted string")

    @classmethod
    def from_token(cls, token: Token) -> Identifier:
        return cls(text=token.text, location=SourceLocation.of(token))

    @property
    def quoted(self) -> bool:
        """True for a string literal such as ``"hello"``."""
        return self.text.startswith('"')

    def outline(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


class Instruction(BaseModel):
    """A run of identifiers, e.g. ``optional int32 i``. Never empty."""

    identifiers: tuple[Identifier, ...] = Field(min_length=1)

    model_config = ConfigDict(frozen=True)

    @property
    def words(self) -> list[str]:
        return [i.text for i in self.identifiers]

    @property
    def location(self) -> SourceLocation:
        return self.identifiers[0].location

    def outline(self) -> list[str]:
        return self.words

    def __str__(self) -> str:
        return " ".join(self.words)


class Option(BaseModel):
    """The bracketed ``[key=value]`` suffix of a value."""

    key: Identifier
    value: Identifier

    model_config = ConfigDict(frozen=True)

    def outline(self) -> dict[str, str]:
        return {"key": self.key.text, "value": self.value.text}

    def __str__(self) -> str:
        return f"[{self.key}={self.value}]"


class Value(BaseModel):
    """
    Right-hand side of an assignment.

    Examples:
        - ``1``: Value(identifier=1)
        - ``1[default=100]``: Value(identifier=1, option=Option(default, 100))
    """

    identifier: Identifier
    option: Option | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_bare(self) -> bool:
        return self.option is None

    def outline(self) -> dict[str, Any]:
        return {
            "identifier": self.identifier.text,
            "option": self.option.outline() if self.option else None,
        }

    def __str__(self) -> str:
        if self.option is None:
            return str(self.identifier)
        return f"{self.identifier}{self.option}"


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------


class Declaration(BaseModel):
    """``Instruction ;``"""

    kind: Literal["declaration"] = "declaration"
    instruction: Instruction

    model_config = ConfigDict(frozen=True)

    def outline(self) -> dict[str, Any]:
        return {"kind": self.kind, "instruction": self.instruction.outline()}

    def __str__(self) -> str:
        return f"{self.instruction};"


class Assignment(BaseModel):
    """``Instruction = Value ;``"""

    kind: Literal["assignment"] = "assignment"
    instruction: Instruction
    value: Value

    model_config = ConfigDict(frozen=True)

    def outline(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "instruction": self.instruction.outline(),
            "value": self.value.outline(),
        }

    def __str__(self) -> str:
        return f"{self.instruction} = {self.value};"


class Nested(BaseModel):
    """``Instruction { Block }``"""

    kind: Literal["nested"] = "nested"
    instruction: Instruction
    block: Block

    model_config = ConfigDict(frozen=True)

    def outline(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "instruction": self.instruction.outline(),
            "block": self.block.outline(),
        }

    def __str__(self) -> str:
        return f"{self.instruction} {{ {self.block} }}"


class Comment(BaseModel):
    """A ``//`` line comment, kept verbatim for round-tripping."""

    kind: Literal["comment"] = "comment"
    text: str
    location: SourceLocation

    model_config = ConfigDict(frozen=True)

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        if not v.startswith(COMMENT_MARKER) or "\n" in v:
            raise ValueError(f"{v!r} is not a line comment")
        return v

    @classmethod
    def from_token(cls, token: Token) -> Comment:
        return cls(text=token.text, location=SourceLocation.of(token))

    def outline(self) -> dict[str, Any]:
        return {"kind": self.kind, "text": self.text}

    def __str__(self) -> str:
        return self.text


# Deepest nesting that model_dump_json and model_validate_json handle
MAX_JSON_DEPTH = 50


Statement = Annotated[
    Declaration | Assignment | Nested | Comment,
    Field(discriminator="kind"),
]


# ---------------------------------------------------------------------------
# Block
# ---------------------------------------------------------------------------


class Block(BaseModel):
    """Ordered statements; the root of a parse and the body of ``Nested``."""

    statements: tuple[Statement, ...] = ()

    model_config = ConfigDict(frozen=True)

    @property
    def is_empty(self) -> bool:
        return not self.statements

    def outline(self) -> list[Any]:
        result: list[Any] = []
        pending = [(self, result)]
        while pending:
            block, out = pending.pop()
            for s in block.statements:
                if isinstance(s, Nested):
                    body: list[Any] = []
                    out.append(
                        {"kind": s.kind, "instruction": s.instruction.outline(), "block": body}
                    )
                    pending.append((s.block, body))
                else:
                    out.append(s.outline())
        return result

    def depth(self) -> int:
        """Nesting depth: 0 for a block without ``Nested`` statements."""
        deepest = 0
        pending = [(self, 0)]
        while pending:
            block, level = pending.pop()
            deepest = max(deepest, level)
            for s in block.statements:
                if isinstance(s, Nested):
                    pending.append((s.block, level + 1))
        return deepest

    def __str__(self) -> str:
        return " ".join(str(s) for s in self.statements)


# Rebuild models for recursive forward references
Nested.model_rebuild()
Block.model_rebuild()
