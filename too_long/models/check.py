"""Models describing a line limit check and its outcome."""

from typing import List, Optional

from pydantic import BaseModel, Field

from ..core.constants import DEFAULT_MAX_LINES


class CheckRequest(BaseModel):
    """Input of a single check run."""
    paths: List[str] = Field(default_factory=list)
    max_lines: int = Field(default=DEFAULT_MAX_LINES, ge=0)
    include_pattern: Optional[str] = None
    exclude_pattern: Optional[str] = None


class FileRecord(BaseModel):
    """Line count measured for one file."""
    path: str
    line_count: int = Field(ge=0)

    def __str__(self) -> str:
        return f"{self.path}:{self.line_count}"


class CheckResult(BaseModel):
    """Files that exceed the limit, in discovery order."""
    max_lines: int
    files_checked: int = 0
    failures: List[FileRecord] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        """True when no file exceeds the limit."""
        return not self.failures
