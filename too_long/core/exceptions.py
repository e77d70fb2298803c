"""Custom exceptions for the checker."""

import re


class CheckError(Exception):
    """Base exception for all check-related errors."""

    pass


class InvalidPattern(CheckError):
    """Exception raised when an include or exclude pattern does not compile."""

    def __init__(self, kind: str, pattern: str, error: re.error):
        self.kind = kind
        self.pattern = pattern
        self.error = error
        super().__init__(f"Invalid {kind} pattern '{pattern}': {error}")
