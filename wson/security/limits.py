"""
Resource limits for wson.
This module bounds input size, value sizes and nesting depth of a single parse.
"""

import logging
from typing import Optional

from ..core.scanner import Position
from ..utils.config import ParseLimits
from .exceptions import ErrorReporter, SecurityError

logger = logging.getLogger(__name__)


class LimitValidator:
    """Tracks one parse against its ParseLimits."""

    def __init__(
        self,
        limits: ParseLimits,
        error_reporter: Optional[ErrorReporter] = None,
    ):
        self.limits = limits
        self.error_reporter = error_reporter
        self.nesting_depth = 0
        self.total_items = 0

    def _fail(self, message: str, position: Optional[Position]) -> SecurityError:
        logger.warning("Parse limit exceeded: %s", message)
        if self.error_reporter:
            return self.error_reporter.create_security_error(message, position)
        return SecurityError(message, position)

    def validate_input_size(self, text: str) -> None:
        """Validate that input text size is within limits."""
        if len(text) > self.limits.max_input_size:
            raise self._fail(
                f"Input size {len(text)} exceeds limit {self.limits.max_input_size}",
                None,
            )

    def validate_string_length(
        self, string: str, position: Optional[Position] = None
    ) -> None:
        """Validate that a decoded string is within limits."""
        if len(string) > self.limits.max_string_length:
            raise self._fail(
                f"String length {len(string)} exceeds limit "
                f"{self.limits.max_string_length}",
                position,
            )

    def validate_number_length(
        self, lexeme: str, position: Optional[Position] = None
    ) -> None:
        """Validate that a numeric literal is within limits."""
        if len(lexeme) > self.limits.max_number_length:
            raise self._fail(
                f"Number length {len(lexeme)} exceeds limit "
                f"{self.limits.max_number_length}",
                position,
            )

    def enter_structure(self, position: Optional[Position] = None) -> None:
        """Track entering an array or object and validate depth."""
        self.nesting_depth += 1
        if self.nesting_depth > self.limits.max_nesting_depth:
            raise self._fail(
                f"Nesting depth {self.nesting_depth} exceeds limit "
                f"{self.limits.max_nesting_depth}",
                position,
            )

    def exit_structure(self) -> None:
        """Track leaving an array or object."""
        if self.nesting_depth > 0:
            self.nesting_depth -= 1

    def validate_object_keys(
        self, key_count: int, position: Optional[Position] = None
    ) -> None:
        """Validate that object key count is within limits."""
        if key_count > self.limits.max_object_keys:
            raise self._fail(
                f"Object key count {key_count} exceeds limit "
                f"{self.limits.max_object_keys}",
                position,
            )

    def validate_array_items(
        self, item_count: int, position: Optional[Position] = None
    ) -> None:
        """Validate that array item count is within limits."""
        if item_count > self.limits.max_array_items:
            raise self._fail(
                f"Array item count {item_count} exceeds limit "
                f"{self.limits.max_array_items}",
                position,
            )

    def count_item(self, position: Optional[Position] = None) -> None:
        """Track total values parsed and validate count."""
        self.total_items += 1
        if self.total_items > self.limits.max_total_items:
            raise self._fail(
                f"Total item count {self.total_items} exceeds limit "
                f"{self.limits.max_total_items}",
                position,
            )
