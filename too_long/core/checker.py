"""Line limit checker: discover, filter, measure and evaluate files."""

import logging
import re
from typing import Iterable, List, Optional, Union

from ..models.check import CheckRequest, CheckResult, FileRecord
from ..utils.file_walker import FileWalker
from ..utils.line_counter import count_lines
from .constants import EXCLUDE, INCLUDE
from .exceptions import InvalidPattern

logger = logging.getLogger(__name__)

PatternLike = Union[str, re.Pattern, None]


def compile_pattern(kind: str, pattern: PatternLike) -> Optional[re.Pattern]:
    """Compile an include or exclude pattern.

    Empty patterns mean no filtering and compile to None.

    Raises:
        InvalidPattern: If the pattern is not a valid regular expression
    """
    if not pattern:
        return None
    if isinstance(pattern, re.Pattern):
        return pattern
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPattern(kind, pattern, e) from e


def filter_files(
    files: Iterable[str],
    include_pattern: PatternLike = None,
    exclude_pattern: PatternLike = None,
) -> List[str]:
    """Keep files matching the include pattern, then drop those matching the exclude pattern.

    Both patterns are compiled before any file is looked at.
    """
    include = compile_pattern(INCLUDE, include_pattern)
    exclude = compile_pattern(EXCLUDE, exclude_pattern)

    selected = list(files)
    if include is not None:
        selected = [f for f in selected if include.search(f)]
    if exclude is not None:
        selected = [f for f in selected if not exclude.search(f)]
    return selected


def evaluate(records: Iterable[FileRecord], max_lines: int) -> CheckResult:
    """Collect the records whose line count is strictly above ``max_lines``."""
    records = list(records)
    return CheckResult(
        max_lines=max_lines,
        files_checked=len(records),
        failures=[r for r in records if r.line_count > max_lines],
    )


class LineLimitChecker:
    """Runs a line limit check for a request."""

    def __init__(self, request: CheckRequest):
        """Initialize the checker and validate the request's patterns.

        Raises:
            InvalidPattern: If either pattern does not compile
        """
        self.request = request
        self.include = compile_pattern(INCLUDE, request.include_pattern)
        self.exclude = compile_pattern(EXCLUDE, request.exclude_pattern)

    def discover(self) -> List[str]:
        return FileWalker.discover(self.request.paths)

    def filter(self, files: Iterable[str]) -> List[str]:
        return filter_files(files, self.include, self.exclude)

    def measure(self, path: str) -> FileRecord:
        return FileRecord(path=path, line_count=count_lines(path))

    def run(self) -> CheckResult:
        """Check every selected file against the request's limit."""
        files = self.filter(self.discover())
        logger.debug(f"Checking {len(files)} file(s) against a limit of {self.request.max_lines} lines")

        result = evaluate((self.measure(f) for f in files), self.request.max_lines)
        logger.info(
            f"Checked {result.files_checked} file(s), "
            f"{len(result.failures)} over {result.max_lines} lines"
        )
        return result
