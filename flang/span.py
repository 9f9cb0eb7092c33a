"""Source positions and spans measured in characters."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A one-based line and column within a source text."""

    line: int
    column: int

    @classmethod
    def from_char_index(cls, text: str, index: int) -> Position:
        """Locate the character index ``index`` of ``text`` as a line and column."""
        line = 1
        column = 1
        position = 1
        for char in text:
            if char == "\n":
                line += 1
                column = 1
            else:
                column += 1
            position += 1
            if position >= index:
                break
        return cls(line, column)


@dataclass(frozen=True)
class Span:
    """The region of a source text between two positions."""

    start: Position
    end: Position

    @classmethod
    def from_text(cls, text: str, start: int, end: int) -> Span:
        """Build a span from two character indices into ``text``."""
        return cls(
            Position.from_char_index(text, start),
            Position.from_char_index(text, end),
        )