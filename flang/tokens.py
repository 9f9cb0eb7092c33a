"""Token kinds and tokens produced by the lexer."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from flang.span import Span


class TokenKind(enum.Enum):
    """Every kind of token; the value is how the kind is written."""

    # keywords
    FUN = "fun"
    UNIT = "unit"
    TRUE = "true"
    FALSE = "false"

    # syntax
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"
    COLON = ":"
    SEMICOLON = ";"
    COMMA = ","
    TILDE = "~"
    EQUAL = "="

    # operators
    NOT = "!"
    PLUS = "+"
    MINUS = "-"
    SLASH = "/"
    ASTERISK = "*"
    EXPONENT = "^"
    DOUBLE_EQUAL = "=="
    NOT_EQUAL = "!="
    LESS_THAN = "<"
    GREATER_THAN = ">"
    LESS_THAN_OR_EQUAL = "<="
    GREATER_THAN_OR_EQUAL = ">="

    # carrying a value
    IDENTIFIER = "identifier"
    INT_LITERAL = "int literal"

    EOF = "EOF"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    """A token: its kind, its span in the source and, for names and numbers, its value."""

    kind: TokenKind
    position: Span
    value: str | int | None = None

    @classmethod
    def at(
        cls,
        kind: TokenKind,
        source: str,
        start: int,
        size: int,
        value: str | int | None = None,
    ) -> Token:
        """Build a token covering ``size`` characters of ``source`` from ``start``."""
        return cls(kind, Span.from_text(source, start, start + size - 1), value)

    def __str__(self) -> str:
        if self.kind in (TokenKind.IDENTIFIER, TokenKind.INT_LITERAL):
            return str(self.value)
        return self.kind.value