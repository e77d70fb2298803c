"""Core functionality for too-long."""

from .exceptions import CheckError, InvalidPattern

__all__ = [
    'CheckError',
    'InvalidPattern',
]
