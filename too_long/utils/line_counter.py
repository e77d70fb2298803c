"""Line counting for checked files."""

import logging

from ..core.constants import FILE_ENCODING

logger = logging.getLogger(__name__)


def count_lines(path: str) -> int:
    """Count the lines of a text file.

    A file that cannot be opened or decoded counts as 0 lines, so it can
    never fail the check.
    """
    try:
        with open(path, 'r', encoding=FILE_ENCODING) as f:
            return sum(1 for _ in f)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Could not read {path}, counting 0 lines: {e}")
        return 0
