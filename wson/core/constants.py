"""
Common constants and mappings used across the wson library.
"""

# Characters that may appear between tokens
JSON_WHITESPACE = frozenset(" \t\n\r")

# Single-character escapes permitted after a backslash
JSON_ESCAPE_MAP = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
DIGITS = frozenset("0123456789")
NONZERO_DIGITS = frozenset("123456789")

# Literal keywords keyed by their first character
LITERAL_STARTS = {
    "n": "null",
    "t": "true",
    "f": "false",
}

HIGH_SURROGATE_RANGE = range(0xD800, 0xDC00)
LOW_SURROGATE_RANGE = range(0xDC00, 0xE000)

# Lowest code point allowed raw inside a string
MIN_STRING_CHAR = 0x20
