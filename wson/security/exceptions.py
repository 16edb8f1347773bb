"""
Exception hierarchy and error reporting for wson.

Every failure the engine reports is a subclass of ``wsonError``. Grammar
violations are ``ParseError`` and carry an ``ErrorKind`` naming what the
parser expected; resource limit violations are ``SecurityError``; input that
is not valid UTF-8 is ``EncodingError``.
"""

from dataclasses import dataclass
from functools import cached_property
from enum import Enum
from typing import Optional

from ..core.scanner import Position


class ErrorKind(Enum):
    """Grammar expectation that failed."""

    EXPECTED_VALUE = "expected value"
    UNEXPECTED_END = "unexpected end of input"
    INVALID_LITERAL = "invalid literal"
    EXPECTED_KEY = "expected string key"
    EXPECTED_COLON = "expected ':'"
    EXPECTED_COMMA_OR_CLOSE = "expected ',' or closing bracket"
    UNTERMINATED_STRING = "unterminated string"
    INVALID_ESCAPE = "invalid escape sequence"
    INVALID_UNICODE_ESCAPE = "invalid unicode escape"
    CONTROL_CHARACTER = "unescaped control character in string"
    INVALID_NUMBER = "invalid number"
    NUMBER_OUT_OF_RANGE = "number out of range"
    TRAILING_CONTENT = "unexpected content after value"


@dataclass
class ErrorContext:
    """Source excerpt surrounding an error."""

    text: str
    position: Position
    context_before: str
    context_after: str
    error_char: str
    line_text: str
    column_indicator: str


class wsonError(Exception):  # pylint: disable=invalid-name
    """Base exception for all wson errors."""

    def __init__(
        self,
        message: str,
        position: Optional[Position] = None,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.message = message
        self.position = position
        self.context = context
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]

        if self.position:
            parts[0] += f" at line {self.position.line}, column {self.position.column}"

        if self.context:
            parts.append("")
            parts.append("Context:")
            parts.append(f"  {self.context.line_text}")
            parts.append(f"  {self.context.column_indicator}")

        if self.suggestions:
            parts.append("")
            parts.append("Suggestions:")
            for suggestion in self.suggestions:
                parts.append(f"  - {suggestion}")

        return "\n".join(parts)


class ParseError(wsonError, ValueError):
    """Input does not match the JSON grammar."""

    def __init__(
        self,
        message: str,
        position: Optional[Position] = None,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
        kind: Optional[ErrorKind] = None,
    ):
        self.kind = kind
        super().__init__(message, position, context, suggestions)

    @property
    def offset(self) -> Optional[int]:
        """Character offset of the error, if known."""
        return self.position.offset if self.position else None


class EncodingError(wsonError, ValueError):
    """Input bytes are not valid UTF-8 text."""

    def __init__(self, message: str, byte_offset: Optional[int] = None):
        self.byte_offset = byte_offset
        super().__init__(message)


class SecurityError(wsonError):
    """A configured resource limit was exceeded."""


class ErrorReporter:
    """Builds errors with source context for a single input text."""

    def __init__(self, text: str, max_context: int = 50):
        self.text = text
        self.max_context = max_context

    @cached_property
    def lines(self) -> list[str]:
        """Input split into lines the same way the scanner counts them."""
        return self.text.split("\n")

    def get_context(self, position: Position) -> ErrorContext:
        """Extract the excerpt of the offending line around ``position``."""
        if 1 <= position.line <= len(self.lines):
            line = self.lines[position.line - 1]
        else:
            line = ""

        index = min(max(position.column - 1, 0), len(line))
        context_before = line[max(0, index - self.max_context) : index]
        context_after = line[index : index + self.max_context]
        error_char = line[index] if index < len(line) else ""

        return ErrorContext(
            text=self.text,
            position=position,
            context_before=context_before,
            context_after=context_after,
            error_char=error_char,
            line_text=context_before + context_after,
            column_indicator=" " * len(context_before) + "^",
        )

    def create_parse_error(
        self,
        message: str,
        position: Position,
        suggestions: Optional[list[str]] = None,
        kind: Optional[ErrorKind] = None,
    ) -> ParseError:
        """Create a ParseError with source context."""
        return ParseError(
            message,
            position,
            self.get_context(position),
            suggestions,
            kind=kind,
        )

    def create_security_error(
        self, message: str, position: Optional[Position] = None
    ) -> SecurityError:
        """Create a SecurityError, with context when a position is known."""
        context = self.get_context(position) if position else None
        return SecurityError(message, position, context)


class ErrorSuggestionEngine:
    """Canned hints for the mistakes people make most often in JSON."""

    PYTHON_LITERALS = {
        "True": "Use lowercase 'true' instead of 'True'",
        "False": "Use lowercase 'false' instead of 'False'",
        "None": "Use 'null' instead of 'None'",
        "NaN": "NaN is not valid JSON; use null or a string",
        "Infinity": "Infinity is not valid JSON; use null or a string",
        "undefined": "Use 'null' instead of 'undefined'",
    }

    @staticmethod
    def suggest_for_unexpected_token(char: str) -> list[str]:
        """Suggestions for a character that cannot start a value."""
        if char == "'":
            return [
                "Use double quotes for strings",
                "JSON does not allow single-quoted strings",
            ]
        if char in "}]":
            return [
                "Remove the trailing comma before the closing bracket",
                "Check for a missing value",
            ]
        if char == ",":
            return ["Check for a missing value before the comma"]
        if char in "+.":
            return ["Numbers must start with a digit or '-'"]
        if char == '"':
            return ["Check for an unclosed quote earlier in the input"]
        if char == "/":
            return ["JSON does not support comments"]
        if char.isalpha() or char == "_":
            return [
                "Strings must be wrapped in double quotes",
                "Only 'true', 'false' and 'null' are valid bare words",
            ]
        return ["Check for a missing or malformed value"]

    @staticmethod
    def suggest_for_unclosed_structure(structure_type: str) -> list[str]:
        """Suggestions for an object or array that is never closed."""
        closer = "}" if structure_type == "object" else "]"
        return [
            f"Add the missing '{closer}' to close the {structure_type}",
            "Check for a missing ',' between elements",
        ]

    @staticmethod
    def suggest_for_invalid_value(value: str) -> list[str]:
        """Suggestions for a bare word that is not a JSON literal."""
        for literal, hint in ErrorSuggestionEngine.PYTHON_LITERALS.items():
            if value.startswith(literal):
                return [hint]
        return []

    @staticmethod
    def suggest_for_invalid_number(lexeme: str) -> list[str]:
        """Suggestions for a malformed numeric literal."""
        digits = lexeme.lstrip("-")
        if not digits[:1].isdigit():
            return ["A '-' sign must be followed by at least one digit"]
        if len(digits) > 1 and digits[0] == "0" and digits[1].isdigit():
            return ["Remove leading zeros from the number"]
        if lexeme.endswith("."):
            return ["Add at least one digit after the decimal point"]
        if lexeme.endswith(("e", "E", "+", "-")):
            return ["Add at least one digit to the exponent"]
        return ["Numbers follow the form -?int(.frac)?(e[+-]?exp)?"]
