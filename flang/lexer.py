"""Turning source text into tokens."""

from __future__ import annotations

import string
from collections.abc import Iterator

from flang.tokens import Token, TokenKind

_INT_MAX = 2**63 - 1

_WHITESPACE = frozenset(" \t\r\n")
_IDENT_START = frozenset(string.ascii_letters + "_")
_IDENT_CHARS = _IDENT_START | frozenset(string.digits)
_DIGITS = frozenset(string.digits)

_SINGLE = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "/": TokenKind.SLASH,
    "*": TokenKind.ASTERISK,
    "^": TokenKind.EXPONENT,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "~": TokenKind.TILDE,
    ":": TokenKind.COLON,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
}

# characters that form a different token when followed by '='
_WITH_EQUAL = {
    "!": (TokenKind.NOT, TokenKind.NOT_EQUAL),
    "=": (TokenKind.EQUAL, TokenKind.DOUBLE_EQUAL),
    "<": (TokenKind.LESS_THAN, TokenKind.LESS_THAN_OR_EQUAL),
    ">": (TokenKind.GREATER_THAN, TokenKind.GREATER_THAN_OR_EQUAL),
}

_KEYWORDS = {
    "fun": TokenKind.FUN,
    "unit": TokenKind.UNIT,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
}


class LexError(ValueError):
    """Raised on text that is not a token."""


class Lexer:
    """Reads tokens one at a time from a source text."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0

    def next_token(self) -> Token:
        """Return the next token, or an EOF token once the text is used up."""
        while True:
            self._skip_whitespace()
            char = self._peek()
            if char is None:
                return Token.at(TokenKind.EOF, self._source, self._position, 1)
            if char != "#":
                break
            self._skip_comment()

        if char in _WITH_EQUAL:
            plain, with_equal = _WITH_EQUAL[char]
            if self._peek(1) == "=":
                return self._make_token(with_equal, 2)
            return self._make_token(plain, 1)
        if char in _SINGLE:
            return self._make_token(_SINGLE[char], 1)
        if char in _IDENT_START:
            start = self._position
            word = self._read_while(_IDENT_CHARS)
            keyword = _KEYWORDS.get(word)
            if keyword is not None:
                return Token.at(keyword, self._source, start, len(word))
            return Token.at(TokenKind.IDENTIFIER, self._source, start, len(word), word)
        if char in _DIGITS:
            start = self._position
            digits = self._read_while(_DIGITS)
            number = int(digits)
            if number > _INT_MAX:
                raise LexError(f"integer literal out of range: {digits}")
            return Token.at(
                TokenKind.INT_LITERAL,
                self._source,
                start,
                self._position - start + 1,
                number,
            )
        raise LexError(f"illegal token: {char}")

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token.kind is TokenKind.EOF:
                return
            yield token

    def _peek(self, distance: int = 0) -> str | None:
        index = self._position + distance
        if index < len(self._source):
            return self._source[index]
        return None

    def _make_token(self, kind: TokenKind, size: int) -> Token:
        token = Token.at(kind, self._source, self._position, size)
        self._position += size
        return token

    def _read_while(self, allowed: frozenset[str]) -> str:
        start = self._position
        self._position += 1
        while (char := self._peek()) is not None and char in allowed:
            self._position += 1
        return self._source[start : self._position]

    def _skip_comment(self) -> None:
        self._position += 1
        while (char := self._peek()) is not None and char != "\n":
            self._position += 1

    def _skip_whitespace(self) -> None:
        while (char := self._peek()) is not None and char in _WHITESPACE:
            self._position += 1


def tokenize(source: str) -> list[Token]:
    """Return every token of ``source``, without the closing EOF."""
    return list(Lexer(source))