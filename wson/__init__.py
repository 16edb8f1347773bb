"""
wson - a strict JSON parser producing an immutable value tree.

wson reads JSON text (RFC 8259, no extensions) with a recursive descent parser
and returns a tree of ``Value`` objects, or raises an error that names what
the parser expected and where.

Key Features:
- Strict grammar: no comments, trailing commas, single quotes or bare words
- Immutable, typed value tree (Null, Boolean, Number, String, Array, Object)
- Errors carry a kind, a line/column/offset position, context and suggestions
- Configurable limits on nesting depth, string length and item counts
- json-style loads()/load() returning plain Python data

Quick Start:
    import wson
    value = wson.parse('{"menu": {"id": "file"}}')
    value["menu"]["id"]  # String(value='file')

    data = wson.loads('[1, 2.5, "x"]')  # [1.0, 2.5, 'x']

    # Tighter limits
    from wson import ParseConfig, ParseLimits
    wson.parse(text, config=ParseConfig(limits=ParseLimits(max_nesting_depth=16)))
"""

from .core.engine import Parser, load, loads, parse
from .core.scanner import Position
from .core.values import (
    Array,
    Boolean,
    Null,
    Number,
    Object,
    String,
    Value,
    ValueKind,
)
from .security.exceptions import (
    EncodingError,
    ErrorKind,
    ParseError,
    SecurityError,
    wsonError,
)
from .utils.config import ErrorReporting, ParseConfig, ParseLimits

__version__ = "0.1.0"
__author__ = "wson contributors"

__all__ = [
    # Parsing entry points
    "parse", "loads", "load", "Parser",
    # Value tree
    "Value", "ValueKind", "Null", "Boolean", "Number", "String", "Array", "Object",
    # Configuration classes
    "ParseConfig", "ParseLimits", "ErrorReporting",
    # Exception classes
    "wsonError", "ParseError", "EncodingError", "SecurityError", "ErrorKind",
    "Position",
]
