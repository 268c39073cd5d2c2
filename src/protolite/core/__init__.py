"""Core protolite functionality: lexer, parser, syntax tree, formatter, configuration."""

from . import ir
from .errors import (
    ConfigError,
    ErrorContext,
    ParseError,
    ProtoliteError,
    UnexpectedEndOfInput,
    UnexpectedToken,
)
from .formatter import FormatOptions, format_block, format_source
from .lexer import Token, tokenize
from .manifest import ProtoliteConfig, find_config, load_config
from .parser import parse_file, parse_files
from .parser_impl import Parser, parse, parse_tokens

__all__ = [
    "ir",
    "ProtoliteError",
    "ParseError",
    "UnexpectedEndOfInput",
    "UnexpectedToken",
    "ConfigError",
    "ErrorContext",
    "Token",
    "tokenize",
    "Parser",
    "parse",
    "parse_tokens",
    "parse_file",
    "parse_files",
    "FormatOptions",
    "format_block",
    "format_source",
    "ProtoliteConfig",
    "find_config",
    "load_config",
]
