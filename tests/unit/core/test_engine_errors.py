"""
Test cases for core engine error handling.

Tests focus on rejection of non-JSON input, the reported error kind and the
reported position.
"""

import unittest

import wson
from wson.core.engine import Parser
from wson.security.exceptions import (
    EncodingError,
    ErrorKind,
    ParseError,
    SecurityError,
)
from wson.utils.config import ParseConfig, ParseLimits


class TestRejectionCases(unittest.TestCase):
    """Inputs that must raise ParseError."""

    def assertParseError(self, text, kind, offset=None):
        with self.assertRaises(ParseError) as cm:
            wson.parse(text)
        self.assertEqual(cm.exception.kind, kind, msg=str(cm.exception))
        if offset is not None:
            self.assertEqual(cm.exception.offset, offset, msg=str(cm.exception))
        return cm.exception

    def test_trailing_comma_in_object(self):
        self.assertParseError('{"a":1,}', ErrorKind.EXPECTED_KEY, 7)

    def test_trailing_comma_in_array(self):
        self.assertParseError("[1,]", ErrorKind.EXPECTED_VALUE, 3)

    def test_unterminated_array(self):
        self.assertParseError("[1, 2", ErrorKind.UNEXPECTED_END, 5)

    def test_unterminated_object(self):
        self.assertParseError('{"a": 1', ErrorKind.UNEXPECTED_END, 7)

    def test_leading_zero(self):
        self.assertParseError("01", ErrorKind.INVALID_NUMBER, 1)
        self.assertParseError("-01", ErrorKind.INVALID_NUMBER, 2)

    def test_single_quoted_key(self):
        self.assertParseError("{'a':1}", ErrorKind.EXPECTED_KEY, 1)

    def test_single_quoted_string(self):
        self.assertParseError("'a'", ErrorKind.EXPECTED_VALUE, 0)

    def test_unquoted_key(self):
        self.assertParseError("{a: 1}", ErrorKind.EXPECTED_KEY, 1)

    def test_truncated_literal(self):
        self.assertParseError("tru", ErrorKind.INVALID_LITERAL, 3)
        self.assertParseError("nul", ErrorKind.INVALID_LITERAL, 3)
        self.assertParseError("fals", ErrorKind.INVALID_LITERAL, 4)

    def test_misspelled_literal(self):
        self.assertParseError("tRue", ErrorKind.INVALID_LITERAL, 1)
        self.assertParseError("True", ErrorKind.EXPECTED_VALUE, 0)
        self.assertParseError("None", ErrorKind.EXPECTED_VALUE, 0)

    def test_malformed_numbers(self):
        cases = [
            ("+1", ErrorKind.EXPECTED_VALUE, 0),
            (".5", ErrorKind.EXPECTED_VALUE, 0),
            ("1.", ErrorKind.INVALID_NUMBER, 2),
            ("1.e5", ErrorKind.INVALID_NUMBER, 2),
            ("1e", ErrorKind.INVALID_NUMBER, 2),
            ("1e+", ErrorKind.INVALID_NUMBER, 3),
            ("-", ErrorKind.INVALID_NUMBER, 1),
            ("-a", ErrorKind.INVALID_NUMBER, 1),
        ]
        for text, kind, offset in cases:
            with self.subTest(text=text):
                self.assertParseError(text, kind, offset)

    def test_number_out_of_range(self):
        self.assertParseError("1e400", ErrorKind.NUMBER_OUT_OF_RANGE, 0)
        self.assertParseError("[-1e400]", ErrorKind.NUMBER_OUT_OF_RANGE, 1)

    def test_unterminated_string(self):
        error = self.assertParseError('"abc', ErrorKind.UNTERMINATED_STRING, 4)
        self.assertIn("line 1, column 1", error.message)
        self.assertParseError('"abc\\', ErrorKind.UNTERMINATED_STRING, 5)

    def test_invalid_escapes(self):
        cases = [
            ('"\\x41"', ErrorKind.INVALID_ESCAPE, 1),
            ('"\\a"', ErrorKind.INVALID_ESCAPE, 1),
            ('"ab\\\'"', ErrorKind.INVALID_ESCAPE, 3),
            ('"\\u12"', ErrorKind.INVALID_UNICODE_ESCAPE, 1),
            ('"\\u12G4"', ErrorKind.INVALID_UNICODE_ESCAPE, 1),
            ('"\\uDE00"', ErrorKind.INVALID_UNICODE_ESCAPE, 1),
            ('"\\uD83D"', ErrorKind.INVALID_UNICODE_ESCAPE, 1),
            ('"\\uD83Dx"', ErrorKind.INVALID_UNICODE_ESCAPE, 1),
            ('"\\uD83D\\u0041"', ErrorKind.INVALID_UNICODE_ESCAPE, 1),
        ]
        for text, kind, offset in cases:
            with self.subTest(text=text):
                self.assertParseError(text, kind, offset)

    def test_raw_control_character_in_string(self):
        self.assertParseError('"a\nb"', ErrorKind.CONTROL_CHARACTER, 2)
        self.assertParseError('"a\tb"', ErrorKind.CONTROL_CHARACTER, 2)

    def test_missing_colon(self):
        self.assertParseError('{"key" "value"}', ErrorKind.EXPECTED_COLON, 7)
        self.assertParseError('{"key"', ErrorKind.UNEXPECTED_END, 6)

    def test_missing_comma(self):
        self.assertParseError("[1 2]", ErrorKind.EXPECTED_COMMA_OR_CLOSE, 3)
        self.assertParseError('{"a": 1 "b": 2}', ErrorKind.EXPECTED_COMMA_OR_CLOSE, 8)

    def test_empty_element(self):
        self.assertParseError("[1, , 3]", ErrorKind.EXPECTED_VALUE, 4)

    def test_empty_and_whitespace_input(self):
        self.assertParseError("", ErrorKind.UNEXPECTED_END, 0)
        self.assertParseError("  \n ", ErrorKind.UNEXPECTED_END, 4)

    def test_trailing_content(self):
        self.assertParseError("{} i like garbage", ErrorKind.TRAILING_CONTENT, 3)
        self.assertParseError("1 2", ErrorKind.TRAILING_CONTENT, 2)
        self.assertParseError("nullx", ErrorKind.TRAILING_CONTENT, 4)

    def test_comments_rejected(self):
        self.assertParseError("// c\n1", ErrorKind.EXPECTED_VALUE, 0)
        self.assertParseError("[1 /* c */]", ErrorKind.EXPECTED_COMMA_OR_CLOSE, 3)

    def test_non_json_whitespace_rejected(self):
        self.assertParseError("\f1", ErrorKind.EXPECTED_VALUE, 0)
        self.assertParseError("\u00a01", ErrorKind.EXPECTED_VALUE, 0)

    def test_bom_in_str_rejected(self):
        self.assertParseError("\ufeff1", ErrorKind.EXPECTED_VALUE, 0)


class TestErrorPositions(unittest.TestCase):
    """Test line/column reporting and determinism."""

    def test_multiline_position(self):
        text = '{\n  "name": "x",\n  "bad": ,\n}'
        with self.assertRaises(ParseError) as cm:
            wson.parse(text)
        position = cm.exception.position
        self.assertEqual((position.line, position.column), (3, 10))
        self.assertIn("at line 3, column 10", str(cm.exception))

    def test_error_is_deterministic(self):
        for text in ['{"a":1,}', "[1, 2", "01", "{'a':1}", "tru", '"\\q"']:
            with self.subTest(text=text):
                errors = []
                for _ in range(3):
                    with self.assertRaises(ParseError) as cm:
                        wson.parse(text)
                    errors.append((cm.exception.kind, cm.exception.position))
                self.assertEqual(len(set(errors)), 1)

    def test_parse_error_is_value_error(self):
        """Callers catching ValueError, as with json.loads, still work."""
        with self.assertRaises(ValueError):
            wson.parse("[1,]")

    def test_context_can_be_disabled(self):
        config = ParseConfig()
        config.include_context = False
        with self.assertRaises(ParseError) as cm:
            wson.parse("[1,]", config=config)
        self.assertIsNone(cm.exception.context)
        self.assertEqual(cm.exception.suggestions, [])
        self.assertEqual(cm.exception.kind, ErrorKind.EXPECTED_VALUE)

    def test_context_attached_by_default(self):
        with self.assertRaises(ParseError) as cm:
            wson.parse('{"a": True}')
        error = cm.exception
        self.assertIsNotNone(error.context)
        self.assertEqual(error.context.error_char, "T")
        self.assertIn("Use lowercase 'true' instead of 'True'", error.suggestions)


class TestEncodingAndLimitErrors(unittest.TestCase):
    """Errors other than grammar violations."""

    def test_invalid_utf8(self):
        with self.assertRaises(EncodingError) as cm:
            wson.parse(b'"\xff"')
        self.assertEqual(cm.exception.byte_offset, 1)
        self.assertNotIsInstance(cm.exception, ParseError)

    def test_nesting_depth_limit(self):
        config = ParseConfig(limits=ParseLimits(max_nesting_depth=5))
        wson.parse("[" * 5 + "]" * 5, config=config)
        with self.assertRaises(SecurityError) as cm:
            wson.parse("[" * 6 + "]" * 6, config=config)
        self.assertIn("Nesting depth 6 exceeds limit 5", str(cm.exception))

    def test_oversized_input_rejected_before_line_split(self):
        config = ParseConfig(limits=ParseLimits(max_input_size=16))
        parser = Parser("[" + "1,\n" * 100 + "1]", config)
        with self.assertRaises(SecurityError):
            parser.parse()
        self.assertNotIn("lines", vars(parser.error_reporter))

    def test_default_depth_limit_on_adversarial_input(self):
        with self.assertRaises(SecurityError):
            wson.parse("[" * 100000)

    def test_recursion_limit_reported_as_security_error(self):
        config = ParseConfig(limits=ParseLimits(max_nesting_depth=10**6))
        with self.assertRaises(SecurityError):
            wson.parse('{"a":' * 100000, config=config)


if __name__ == "__main__":
    unittest.main()
