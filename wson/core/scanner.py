"""
Cursor over JSON source text.

The scanner owns the read position and line/column bookkeeping. Grammar
productions in the engine drive it through peek/advance and never index the
text directly.
"""

from dataclasses import dataclass

from .constants import JSON_WHITESPACE


@dataclass(frozen=True)
class Position:
    """Position in source text (1-based line and column, 0-based offset)."""

    line: int
    column: int
    offset: int = 0


class Scanner:
    """Character cursor with line and column tracking."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1

    def current_position(self) -> Position:
        """Get current position in the text."""
        return Position(self.line, self.column, self.pos)

    def at_end(self) -> bool:
        """Whether every character has been consumed."""
        return self.pos >= len(self.text)

    def peek(self, offset: int = 0) -> str:
        """Peek at character at given offset without consuming it."""
        pos = self.pos + offset
        if pos >= len(self.text):
            return ""
        return self.text[pos]

    def advance(self) -> str:
        """Advance position and return the consumed character."""
        if self.pos >= len(self.text):
            return ""

        char = self.text[self.pos]
        self.pos += 1

        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        return char

    def skip_whitespace(self) -> None:
        """Skip JSON whitespace (space, tab, newline, carriage return)."""
        while self.pos < len(self.text) and self.text[self.pos] in JSON_WHITESPACE:
            self.advance()

    def match(self, literal: str) -> bool:
        """Consume ``literal`` if the input continues with it exactly."""
        if not self.text.startswith(literal, self.pos):
            return False
        for _ in literal:
            self.advance()
        return True

    def take_while(self, allowed: frozenset[str]) -> str:
        """Consume and return the longest run of characters in ``allowed``."""
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] in allowed:
            self.advance()
        return self.text[start : self.pos]
