"""Shared pytest fixtures for protolite tests."""

from pathlib import Path

import pytest

from protolite.core import ir
from protolite.core.errors import ParseError
from protolite.core.parser_impl import parse

HELLO_SCHEMA = """\
message hello {
    message world {
        optional int32 i = 1[default=100];
    }

    repeated world w = 1;
    optional int32 i = 2;
}
"""


@pytest.fixture
def hello_source() -> str:
    """Return the nested message schema used across tests."""
    return HELLO_SCHEMA


@pytest.fixture
def parse_ok():
    """Return a helper that parses source and fails the test on a ParseError."""

    def _parse(source: str) -> ir.Block:
        result = parse(source)
        assert not isinstance(result, ParseError), f"unexpected parse error: {result}"
        return result

    return _parse


@pytest.fixture
def parse_err():
    """Return a helper that parses source and expects a ParseError."""

    def _parse(source: str) -> ParseError:
        result = parse(source)
        assert isinstance(result, ParseError), f"expected a parse error, got {result!r}"
        return result

    return _parse


@pytest.fixture
def schema_dir(tmp_path: Path) -> Path:
    """Create a directory with one valid and one nested schema file."""
    (tmp_path / "hello.proto").write_text(HELLO_SCHEMA)
    sub = tmp_path / "more"
    sub.mkdir()
    (sub / "point.proto").write_text("message point { required int32 x = 1; }\n")
    (sub / "notes.txt").write_text("not a schema")
    return tmp_path
