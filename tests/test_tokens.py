import pytest

from flang.span import Span
from flang.tokens import Token, TokenKind


@pytest.mark.parametrize(
    "kind, text",
    [
        (TokenKind.FUN, "fun"),
        (TokenKind.UNIT, "unit"),
        (TokenKind.DOUBLE_EQUAL, "=="),
        (TokenKind.NOT_EQUAL, "!="),
        (TokenKind.GREATER_THAN_OR_EQUAL, ">="),
        (TokenKind.SEMICOLON, ";"),
        (TokenKind.EOF, "EOF"),
    ],
)
def test_token_displays_as_written(kind, text):
    lexeme = Token.at(kind, "source", 0, 1)
    assert str(lexeme) == text
    assert str(kind) == text


def test_identifier_displays_its_name():
    lexeme = Token.at(TokenKind.IDENTIFIER, "calc", 0, 4, "calc")
    assert str(lexeme) == "calc"


def test_int_literal_displays_its_number():
    lexeme = Token.at(TokenKind.INT_LITERAL, "33", 0, 3, 33)
    assert str(lexeme) == "33"


def test_at_builds_span_from_start_and_size():
    source = "hi there\nI am Tom"
    lexeme = Token.at(TokenKind.IDENTIFIER, source, 12, 3, "am")
    assert lexeme.position == Span.from_text(source, 12, 14)
    assert lexeme.value == "am"
    assert lexeme.kind is TokenKind.IDENTIFIER


def test_tokens_compare_by_value():
    first = Token.at(TokenKind.COLON, "a : b", 2, 1)
    second = Token.at(TokenKind.COLON, "a : b", 2, 1)
    assert first == second
    assert first != Token.at(TokenKind.SEMICOLON, "a : b", 2, 1)