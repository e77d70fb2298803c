"""Utilities for too-long."""

from .file_walker import FileWalker
from .line_counter import count_lines

__all__ = [
    'FileWalker',
    'count_lines'
]
