"""
wson utilities: configuration objects.
"""

from .config import ErrorReporting, ParseConfig, ParseLimits

__all__ = ["ErrorReporting", "ParseConfig", "ParseLimits"]
