"""Utilities for discovering the files to check."""

import logging
import os
from typing import Iterable, Iterator, List

logger = logging.getLogger(__name__)


class FileWalker:
    """Depth-first enumeration of the files reachable from a set of paths."""

    @staticmethod
    def walk(path: str) -> Iterator[str]:
        """Yield every file under ``path``, or ``path`` itself if it is a file.

        Directory contents are visited in sorted order. Symlinked directories
        inside the tree are not descended into. Directories that cannot be
        listed and entries that are not regular files (pipes, sockets, broken
        links) are skipped.
        """
        if os.path.isfile(path):
            yield path
            return

        if not os.path.isdir(path):
            logger.debug(f"Skipping {path}: not a file or directory")
            return

        def on_error(error: OSError):
            logger.debug(f"Skipping {error.filename}: {error.strerror}")

        for dirpath, dirnames, filenames in os.walk(path, onerror=on_error):
            dirnames.sort()
            for name in sorted(filenames):
                file_path = os.path.join(dirpath, name)
                if not os.path.isfile(file_path):
                    logger.debug(f"Skipping {file_path}: not a regular file")
                    continue
                yield file_path

    @classmethod
    def discover(cls, paths: Iterable[str]) -> List[str]:
        """Return the files under all ``paths``, concatenated in input order."""
        files = []
        for path in paths:
            files.extend(cls.walk(path))
        return files
