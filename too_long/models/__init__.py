"""Models for too-long."""

from .check import CheckRequest, FileRecord, CheckResult

__all__ = [
    'CheckRequest',
    'FileRecord',
    'CheckResult'
]
