"""Tests for the schema lexer."""

import dataclasses
import io

import pytest

from protolite.core.lexer import (
    Token,
    is_comment,
    is_identifier,
    is_string,
    is_value,
    text_equals,
    tokenize,
)


def texts(source) -> list[str]:
    return [t.text for t in tokenize(source)]


class TestTokenization:
    """Token boundaries."""

    def test_empty_input(self) -> None:
        assert tokenize("") == []

    def test_whitespace_only(self) -> None:
        assert tokenize(" \t\r\n  \n") == []

    def test_identifier_runs_are_maximal(self) -> None:
        assert texts("optional int32 i") == ["optional", "int32", "i"]

    def test_identifier_character_class(self) -> None:
        assert texts("foo.Bar-baz_1 (x) -12.5") == ["foo.Bar-baz_1", "(x)", "-12.5"]

    def test_punctuation_is_single_character(self) -> None:
        assert texts("a=1[k=v];{}") == ["a", "=", "1", "[", "k", "=", "v", "]", ";", "{", "}"]

    def test_unknown_characters_are_their_own_tokens(self) -> None:
        assert texts("a ; ; @#") == ["a", ";", ";", "@", "#"]

    def test_nested_braces(self) -> None:
        assert texts("message world {a{}}") == ["message", "world", "{", "a", "{", "}", "}"]


class TestStringsAndComments:
    """Quoted strings and comments are single tokens."""

    def test_string_includes_delimiters(self) -> None:
        assert texts('name = "hello world";') == ["name", "=", '"hello world"', ";"]

    def test_string_escapes(self) -> None:
        assert texts(r'"say \"hi\""') == [r'"say \"hi\""']

    def test_unterminated_string_stops_at_end_of_line(self) -> None:
        assert texts('a = "abc;\nb;') == ["a", "=", '"abc;', "b", ";"]

    def test_line_comment_runs_to_end_of_line(self) -> None:
        assert texts("// a comment; {}\nfoo;") == ["// a comment; {}", "foo", ";"]

    def test_comment_after_code(self) -> None:
        assert texts("foo; // trailing") == ["foo", ";", "// trailing"]

    def test_single_slash_is_punctuation(self) -> None:
        assert texts("a / b") == ["a", "/", "b"]

    def test_block_comment_is_one_token(self) -> None:
        assert texts("/* one\ntwo */ a;") == ["/* one\ntwo */", "a", ";"]


class TestPositions:
    """Tokens record the line and column of their first character."""

    def test_first_line_columns(self) -> None:
        tokens = tokenize("message world {a{}}")
        assert [(t.line, t.column) for t in tokens] == [
            (1, 1),
            (1, 9),
            (1, 15),
            (1, 16),
            (1, 17),
            (1, 18),
            (1, 19),
        ]

    def test_lines_are_counted(self) -> None:
        tokens = tokenize("a;\n\n  b = 2;")
        assert tokens[2] == Token("b", 3, 3)
        assert tokens[4] == Token("2", 3, 7)

    def test_tokens_are_immutable(self) -> None:
        token = Token("a", 1, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.text = "b"  # type: ignore[misc]


class TestSources:
    """tokenize accepts text, bytes and streams."""

    def test_bytes(self) -> None:
        assert texts(b"a = 1;") == ["a", "=", "1", ";"]

    def test_text_stream(self) -> None:
        assert texts(io.StringIO("a;")) == ["a", ";"]

    def test_binary_stream(self) -> None:
        assert texts(io.BytesIO(b"a;")) == ["a", ";"]

    def test_invalid_utf8_bytes(self) -> None:
        assert texts(b"a = \xff;") == ["a", "=", "\ufffd", ";"]

    def test_invalid_utf8_stream(self) -> None:
        tokens = tokenize(io.BytesIO(b"a\xfe;"))
        assert [t.text for t in tokens] == ["a", "\ufffd", ";"]
        assert tokens[1].column == 2

    def test_non_ascii_character_is_its_own_token(self) -> None:
        assert texts("a = é;") == ["a", "=", "é", ";"]

    def test_non_ascii_inside_comment_and_string(self) -> None:
        assert texts('// héllo\nb = "ünï";') == ["// héllo", "b", "=", '"ünï"', ";"]


class TestPredicates:
    """Classification is done on demand."""

    def test_identifier(self) -> None:
        assert is_identifier(Token("int32", 1, 1))
        assert is_identifier(Token("(x)", 1, 1))
        assert not is_identifier(Token("=", 1, 1))
        assert not is_identifier(Token('"s"', 1, 1))

    def test_string(self) -> None:
        assert is_string(Token('"s"', 1, 1))
        assert is_string(Token('""', 1, 1))
        assert not is_string(Token('"open', 1, 1))
        assert not is_string(Token("s", 1, 1))

    def test_value_accepts_both(self) -> None:
        assert is_value(Token("100", 1, 1))
        assert is_value(Token('"100"', 1, 1))
        assert not is_value(Token("[", 1, 1))

    def test_comment(self) -> None:
        assert is_comment(Token("// x", 1, 1))
        assert not is_comment(Token("/* x */", 1, 1))

    def test_text_equals(self) -> None:
        check = text_equals("{")
        assert check(Token("{", 1, 1))
        assert not check(Token("}", 1, 1))
