"""
wson Core Parsing Engine.

This module provides the recursive descent parser and the value tree it builds.
"""

from .engine import Parser, load, loads, parse
from .scanner import Position, Scanner
from .values import (
    Array,
    Boolean,
    Null,
    Number,
    Object,
    String,
    Value,
    ValueKind,
)

__all__ = [
    "parse", "loads", "load", "Parser",
    "Scanner", "Position",
    "Value", "ValueKind", "Null", "Boolean", "Number", "String", "Array", "Object",
]
