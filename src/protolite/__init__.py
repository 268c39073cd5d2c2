"""
protolite - a parser and formatter for a small protobuf-like schema language.

    message hello {
        optional int32 i = 1[default=100];
    }
"""

from __future__ import annotations

from ._version import get_version

# Re-export commonly used types for convenience
from .core import ir
from .core.errors import (
    ConfigError,
    ParseError,
    ProtoliteError,
    UnexpectedEndOfInput,
    UnexpectedToken,
)
from .core.formatter import FormatOptions, format_block, format_source
from .core.lexer import Token, tokenize
from .core.parser_impl import parse

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "Token",
    "tokenize",
    "parse",
    "FormatOptions",
    "format_block",
    "format_source",
    "ProtoliteError",
    "ParseError",
    "UnexpectedEndOfInput",
    "UnexpectedToken",
    "ConfigError",
]
