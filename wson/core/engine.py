"""
Parser for wson - recursive descent over the JSON grammar.

Each grammar production is one ``Parser`` method that reads from the shared
``Scanner`` and returns a ``Value``. The first violation raises and aborts the
whole parse; no partially built tree is ever returned.
"""

import logging
import math
from typing import Any, Callable, NoReturn, Optional, TextIO, Union

from ..security.exceptions import (
    EncodingError,
    ErrorKind,
    ErrorReporter,
    ErrorSuggestionEngine,
    ParseError,
    SecurityError,
)
from ..security.limits import LimitValidator
from ..utils.config import ParseConfig
from .constants import (
    DIGITS,
    HEX_DIGITS,
    HIGH_SURROGATE_RANGE,
    JSON_ESCAPE_MAP,
    LITERAL_STARTS,
    LOW_SURROGATE_RANGE,
    MIN_STRING_CHAR,
    NONZERO_DIGITS,
)
from .scanner import Position, Scanner
from .values import FALSE, NULL, TRUE, Array, Number, Object, String, Value

JSONInput = Union[str, bytes, bytearray]

_LITERAL_VALUES = {"null": NULL, "true": TRUE, "false": FALSE}

logger = logging.getLogger(__name__)


class Parser:
    """Single-use JSON parser over one input text."""

    def __init__(self, text: str, config: Optional[ParseConfig] = None):
        self.text = text
        self.config = config or ParseConfig()
        self.scanner = Scanner(text)
        self.logger = self.config.logger or logger
        self.error_reporter = (
            ErrorReporter(text, self.config.max_error_context)
            if self.config.include_context
            else None
        )
        self.validator = LimitValidator(self.config.limits, self.error_reporter)

    def parse(self) -> Value:
        """Parse the whole text as exactly one JSON value."""
        self.logger.debug("Parsing %d characters", len(self.text))
        self.validator.validate_input_size(self.text)

        try:
            value = self.parse_value()
        except RecursionError:
            raise SecurityError(
                "Nesting depth exceeds the interpreter recursion limit",
                self.scanner.current_position(),
            ) from None

        self.scanner.skip_whitespace()
        if not self.scanner.at_end():
            self._raise_parse_error(
                ErrorKind.TRAILING_CONTENT,
                "Unexpected content after JSON value",
                self.scanner.current_position(),
                ["Remove any text after the top-level value"],
            )
        return value

    def parse_value(self) -> Value:
        """Parse any value, dispatching on the next significant character."""
        self.scanner.skip_whitespace()
        char = self.scanner.peek()
        position = self.scanner.current_position()

        if not char:
            self._raise_parse_error(
                ErrorKind.UNEXPECTED_END,
                "Expected value, found end of input",
                position,
            )

        self.validator.count_item(position)

        if char in LITERAL_STARTS:
            return self.parse_literal()
        if char == '"':
            return String(self.parse_string())
        if char == "[":
            return self.parse_array()
        if char == "{":
            return self.parse_object()
        if char == "-" or char in DIGITS:
            return self.parse_number()

        suggestions = ErrorSuggestionEngine.suggest_for_invalid_value(
            self._bare_word()
        ) or ErrorSuggestionEngine.suggest_for_unexpected_token(char)
        self._raise_parse_error(
            ErrorKind.EXPECTED_VALUE,
            f"Expected value, found {char!r}",
            position,
            suggestions,
        )

    def parse_literal(self) -> Value:
        """Parse ``null``, ``true`` or ``false``."""
        literal = LITERAL_STARTS[self.scanner.peek()]
        if self.scanner.match(literal):
            return _LITERAL_VALUES[literal]

        # Step over the matching prefix so the error points at the mismatch
        for expected in literal:
            if self.scanner.peek() != expected:
                break
            self.scanner.advance()

        self._raise_parse_error(
            ErrorKind.INVALID_LITERAL,
            f"Invalid literal, expected '{literal}'",
            self.scanner.current_position(),
            ErrorSuggestionEngine.suggest_for_invalid_value(self._bare_word()),
        )

    def parse_string(self) -> str:
        """Parse a double-quoted string and return its decoded text."""
        start = self.scanner.current_position()
        self.scanner.advance()
        chunks: list[str] = []

        while True:
            char = self.scanner.peek()
            if not char:
                self._raise_unterminated_string(start)
            if char == '"':
                self.scanner.advance()
                break
            if char == "\\":
                chunks.append(self._parse_escape(start))
            elif ord(char) < MIN_STRING_CHAR:
                self._raise_parse_error(
                    ErrorKind.CONTROL_CHARACTER,
                    f"Unescaped control character {char!r} in string",
                    self.scanner.current_position(),
                    ["Escape control characters, e.g. '\\n' for a newline"],
                )
            else:
                chunks.append(self.scanner.advance())

        value = "".join(chunks)
        self.validator.validate_string_length(value, start)
        return value

    def _parse_escape(self, string_start: Position) -> str:
        escape_start = self.scanner.current_position()
        self.scanner.advance()
        char = self.scanner.peek()

        if not char:
            self._raise_unterminated_string(string_start)
        if char in JSON_ESCAPE_MAP:
            self.scanner.advance()
            return JSON_ESCAPE_MAP[char]
        if char == "u":
            return self._parse_unicode_escape(escape_start)

        self._raise_parse_error(
            ErrorKind.INVALID_ESCAPE,
            f"Invalid escape sequence '\\{char}'",
            escape_start,
            ["Valid escapes are \\\" \\\\ \\/ \\b \\f \\n \\r \\t and \\uXXXX"],
        )

    def _parse_unicode_escape(self, escape_start: Position) -> str:
        self.scanner.advance()
        code_unit = self._read_code_unit(escape_start)

        if code_unit in LOW_SURROGATE_RANGE:
            self._raise_parse_error(
                ErrorKind.INVALID_UNICODE_ESCAPE,
                "Unpaired low surrogate in \\u escape",
                escape_start,
            )
        if code_unit not in HIGH_SURROGATE_RANGE:
            return chr(code_unit)

        if self.scanner.peek() == "\\" and self.scanner.peek(1) == "u":
            low_start = self.scanner.current_position()
            self.scanner.advance()
            self.scanner.advance()
            low = self._read_code_unit(low_start)
            if low in LOW_SURROGATE_RANGE:
                return chr(0x10000 + ((code_unit - 0xD800) << 10) + (low - 0xDC00))

        self._raise_parse_error(
            ErrorKind.INVALID_UNICODE_ESCAPE,
            "High surrogate must be followed by a low surrogate \\u escape",
            escape_start,
            ["Encode characters above U+FFFF as a \\uD8xx\\uDCxx surrogate pair"],
        )

    def _read_code_unit(self, escape_start: Position) -> int:
        digits = []
        for _ in range(4):
            char = self.scanner.peek()
            if char not in HEX_DIGITS:
                self._raise_parse_error(
                    ErrorKind.INVALID_UNICODE_ESCAPE,
                    "Invalid \\u escape, expected four hexadecimal digits",
                    escape_start,
                )
            digits.append(self.scanner.advance())
        return int("".join(digits), 16)

    def parse_number(self) -> Number:
        """Parse a numeric literal into a finite double."""
        start = self.scanner.current_position()
        begin = self.scanner.pos

        if self.scanner.peek() == "-":
            self.scanner.advance()

        first = self.scanner.peek()
        if first == "0":
            self.scanner.advance()
            if self.scanner.peek() in DIGITS:
                self._raise_invalid_number(begin, "leading zeros are not allowed")
        elif first in NONZERO_DIGITS:
            self.scanner.take_while(DIGITS)
        else:
            self._raise_invalid_number(begin, "expected digit")

        if self.scanner.peek() == ".":
            self.scanner.advance()
            if not self.scanner.take_while(DIGITS):
                self._raise_invalid_number(begin, "expected digit after '.'")

        if self.scanner.peek() in ("e", "E"):
            self.scanner.advance()
            if self.scanner.peek() in ("+", "-"):
                self.scanner.advance()
            if not self.scanner.take_while(DIGITS):
                self._raise_invalid_number(begin, "expected digit in exponent")

        lexeme = self.text[begin : self.scanner.pos]
        self.validator.validate_number_length(lexeme, start)

        value = float(lexeme)
        if not math.isfinite(value):
            self._raise_parse_error(
                ErrorKind.NUMBER_OUT_OF_RANGE,
                f"Number {lexeme} is out of range for a double",
                start,
            )
        return Number(value, lexeme)

    def parse_array(self) -> Array:
        """Parse ``[ value, ... ]``."""
        start = self.scanner.current_position()
        self.validator.enter_structure(start)
        self.scanner.advance()
        self.scanner.skip_whitespace()

        items: list[Value] = []
        if self.scanner.peek() == "]":
            self.scanner.advance()
            self.validator.exit_structure()
            return Array(())

        while True:
            items.append(self.parse_value())
            self.validator.validate_array_items(len(items), start)
            self.scanner.skip_whitespace()

            char = self.scanner.peek()
            if char == ",":
                self.scanner.advance()
                continue
            if char == "]":
                self.scanner.advance()
                break
            self._raise_unclosed(char, "array", "]")

        self.validator.exit_structure()
        return Array(tuple(items))

    def parse_object(self) -> Object:
        """Parse ``{ "key": value, ... }``; a repeated key keeps its last value."""
        start = self.scanner.current_position()
        self.validator.enter_structure(start)
        self.scanner.advance()
        self.scanner.skip_whitespace()

        members: dict[str, Value] = {}
        if self.scanner.peek() == "}":
            self.scanner.advance()
            self.validator.exit_structure()
            return Object(members)

        while True:
            key = self._parse_object_key()
            self.scanner.skip_whitespace()
            self._expect_colon()
            members[key] = self.parse_value()
            self.validator.validate_object_keys(len(members), start)
            self.scanner.skip_whitespace()

            char = self.scanner.peek()
            if char == ",":
                self.scanner.advance()
                continue
            if char == "}":
                self.scanner.advance()
                break
            self._raise_unclosed(char, "object", "}")

        self.validator.exit_structure()
        return Object(members)

    def _parse_object_key(self) -> str:
        self.scanner.skip_whitespace()
        char = self.scanner.peek()
        if char == '"':
            return self.parse_string()

        position = self.scanner.current_position()
        if not char:
            self._raise_parse_error(
                ErrorKind.UNEXPECTED_END,
                "Unexpected end of input, expected object key",
                position,
                ErrorSuggestionEngine.suggest_for_unclosed_structure("object"),
            )

        if char == "'":
            suggestions = ["Use double quotes around object keys"]
        elif char == "}":
            suggestions = ["Remove the trailing comma before '}'"]
        else:
            suggestions = ["Object keys must be double-quoted strings"]
        self._raise_parse_error(
            ErrorKind.EXPECTED_KEY,
            f"Expected string key, found {char!r}",
            position,
            suggestions,
        )

    def _expect_colon(self) -> None:
        char = self.scanner.peek()
        if char == ":":
            self.scanner.advance()
            return

        position = self.scanner.current_position()
        if not char:
            self._raise_parse_error(
                ErrorKind.UNEXPECTED_END,
                "Unexpected end of input, expected ':' after key",
                position,
            )
        self._raise_parse_error(
            ErrorKind.EXPECTED_COLON,
            f"Expected ':' after key, found {char!r}",
            position,
            ["Object keys must be followed by a colon"],
        )

    def _bare_word(self) -> str:
        end = self.scanner.pos
        while end < len(self.text) and (
            self.text[end].isalnum() or self.text[end] == "_"
        ):
            end += 1
        return self.text[self.scanner.pos : end]

    def _raise_unclosed(self, char: str, structure: str, closer: str) -> NoReturn:
        position = self.scanner.current_position()
        suggestions = ErrorSuggestionEngine.suggest_for_unclosed_structure(structure)
        if not char:
            self._raise_parse_error(
                ErrorKind.UNEXPECTED_END,
                f"Unexpected end of input, expected '{closer}' to close {structure}",
                position,
                suggestions,
            )
        self._raise_parse_error(
            ErrorKind.EXPECTED_COMMA_OR_CLOSE,
            f"Expected ',' or '{closer}' in {structure}, found {char!r}",
            position,
            suggestions,
        )

    def _raise_unterminated_string(self, start: Position) -> NoReturn:
        self._raise_parse_error(
            ErrorKind.UNTERMINATED_STRING,
            f"Unterminated string starting at line {start.line}, column {start.column}",
            self.scanner.current_position(),
            ["Add the closing double quote"],
        )

    def _raise_invalid_number(self, begin: int, detail: str) -> NoReturn:
        lexeme = self.text[begin : self.scanner.pos + 1]
        self._raise_parse_error(
            ErrorKind.INVALID_NUMBER,
            f"Invalid number: {detail}",
            self.scanner.current_position(),
            ErrorSuggestionEngine.suggest_for_invalid_number(lexeme),
        )

    def _raise_parse_error(
        self,
        kind: ErrorKind,
        message: str,
        position: Position,
        suggestions: Optional[list[str]] = None,
    ) -> NoReturn:
        if self.error_reporter:
            raise self.error_reporter.create_parse_error(
                message, position, suggestions, kind=kind
            )
        raise ParseError(message, position, kind=kind)


def decode_input(data: JSONInput) -> str:
    """Turn caller input into text, rejecting bytes that are not UTF-8.

    A UTF-8 byte order mark on ``bytes`` input is dropped.
    """
    if isinstance(data, str):
        return data
    if isinstance(data, (bytes, bytearray)):
        try:
            return bytes(data).decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise EncodingError(
                f"Input is not valid UTF-8: {exc.reason} at byte {exc.start}",
                byte_offset=exc.start,
            ) from exc
    raise TypeError(
        f"JSON input must be str, bytes or bytearray, not {type(data).__name__}"
    )


def parse(text: JSONInput, config: Optional[ParseConfig] = None) -> Value:
    """
    Parse a JSON document into a ``Value`` tree.

    Args:
        text: The JSON text, or UTF-8 encoded bytes
        config: Optional ParseConfig for limits, error context and logging

    Returns:
        The root ``Value`` of the document

    Raises:
        ParseError: If the text violates the JSON grammar
        EncodingError: If ``text`` is bytes that are not valid UTF-8
        SecurityError: If a configured limit is exceeded
    """
    config = config or ParseConfig()
    parser = Parser(decode_input(text), config)
    try:
        return parser.parse()
    except ParseError as e:
        parser.logger.debug(
            "Parse failed: %s at offset %s", e.kind.name if e.kind else None, e.offset
        )
        raise


def loads(
    s: JSONInput,
    *,
    object_hook: Optional[Callable[[dict[str, Any]], Any]] = None,
    object_pairs_hook: Optional[Callable[[list[tuple[str, Any]]], Any]] = None,
    parse_float: Optional[Callable[[str], Any]] = None,
    config: Optional[ParseConfig] = None,
) -> Any:
    """
    Deserialize a JSON document to plain Python data.

    Hooks behave as in ``json.loads``: ``object_pairs_hook`` takes precedence
    over ``object_hook``, and ``parse_float`` receives the literal text of
    every number. Without ``parse_float`` all numbers are ``float``.
    """
    value = parse(s, config)
    return _to_python(value, object_hook, object_pairs_hook, parse_float)


def load(fp: TextIO, **kwargs: Any) -> Any:
    """Deserialize a JSON document read from a file-like object."""
    return loads(fp.read(), **kwargs)


def _to_python(
    value: Value,
    object_hook: Optional[Callable[[dict[str, Any]], Any]],
    object_pairs_hook: Optional[Callable[[list[tuple[str, Any]]], Any]],
    parse_float: Optional[Callable[[str], Any]],
) -> Any:
    if not (object_hook or object_pairs_hook or parse_float):
        return value.to_python()

    if isinstance(value, Object):
        pairs = [
            (key, _to_python(item, object_hook, object_pairs_hook, parse_float))
            for key, item in value.members.items()
        ]
        if object_pairs_hook:
            return object_pairs_hook(pairs)
        obj = dict(pairs)
        return object_hook(obj) if object_hook else obj

    if isinstance(value, Array):
        return [
            _to_python(item, object_hook, object_pairs_hook, parse_float)
            for item in value.items
        ]

    if isinstance(value, Number) and parse_float:
        return parse_float(value.lexeme or repr(value.value))

    return value.to_python()
