"""
Configuration and limits for wson parsing.

This module defines resource limits and error reporting options.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ParseLimits:
    """Resource limits that bound the work a single parse may do."""

    max_input_size: int = 10 * 1024 * 1024
    max_string_length: int = 1024 * 1024
    max_number_length: int = 100
    max_nesting_depth: int = 100
    max_object_keys: int = 10000
    max_array_items: int = 100000
    max_total_items: int = 1000000

    def __post_init__(self) -> None:
        if self.max_input_size <= 0:
            raise ValueError("max_input_size must be positive")
        if self.max_nesting_depth <= 0:
            raise ValueError("max_nesting_depth must be positive")
        if self.max_string_length < 0 or self.max_number_length <= 0:
            raise ValueError("string and number length limits must be positive")


@dataclass
class ErrorReporting:
    """Error reporting and context settings."""

    include_context: bool = True
    max_error_context: int = 50


@dataclass
class ParseConfig:
    """Configuration options for wson parsing."""

    limits: ParseLimits = field(default_factory=ParseLimits)
    error_reporting: ErrorReporting = field(default_factory=ErrorReporting)
    logger: Optional[logging.Logger] = None

    @property
    def include_context(self) -> bool:
        """Whether errors carry a source excerpt and suggestions."""
        return self.error_reporting.include_context

    @include_context.setter
    def include_context(self, value: bool) -> None:
        self.error_reporting.include_context = value

    @property
    def max_error_context(self) -> int:
        """Maximum characters of context either side of an error."""
        return self.error_reporting.max_error_context

    @max_error_context.setter
    def max_error_context(self, value: int) -> None:
        self.error_reporting.max_error_context = value

