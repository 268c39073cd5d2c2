"""
protolite syntax tree types.

All node types are re-exported from this package.
"""

from .location import SourceLocation
from .module import SchemaModule
from .nodes import (
    MAX_JSON_DEPTH,
    Assignment,
    Block,
    Comment,
    Declaration,
    Identifier,
    Instruction,
    Nested,
    Option,
    Statement,
    Value,
)

__all__ = [
    "MAX_JSON_DEPTH",
    "SourceLocation",
    "Identifier",
    "Instruction",
    "Option",
    "Value",
    "Declaration",
    "Assignment",
    "Nested",
    "Comment",
    "Statement",
    "Block",
    "SchemaModule",
]
