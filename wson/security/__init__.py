"""
wson error taxonomy and resource limits.
"""

from .exceptions import (
    EncodingError,
    ErrorContext,
    ErrorKind,
    ErrorReporter,
    ErrorSuggestionEngine,
    ParseError,
    SecurityError,
    wsonError,
)
from .limits import LimitValidator

__all__ = [
    "EncodingError",
    "ErrorContext",
    "ErrorKind",
    "ErrorReporter",
    "ErrorSuggestionEngine",
    "ParseError",
    "SecurityError",
    "wsonError",
    "LimitValidator",
]
