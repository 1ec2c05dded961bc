"""Shared data models for the EmailListVerify API."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class SingleVerificationResult(str, Enum):
    """Outcome of a single address verification."""

    OK = "ok"  # passed all verification tests
    FAIL = "fail"  # failed one or more tests
    UNKNOWN = "unknown"  # could not be accurately tested
    INCORRECT = "incorrect"  # empty address or syntax error


class FileStatus(str, Enum):
    """Processing state of an uploaded file, as reported by the service."""

    NEW = "new"
    PARSING = "parsing"
    INCORRECT = "incorrect"
    WAITING = "waiting"
    PROGRESS = "progress"
    SUSPENDED = "suspended"
    CANCELED = "canceled"
    FINISHED = "finished"


@dataclass(frozen=True)
class VerificationStatus:
    file_id: int
    filename: str
    unique: bool  # duplicates removed on upload
    total_lines: int
    lines_processed: int
    status: FileStatus
    timestamp: datetime  # upload time, UTC
    link_all: str  # empty until finished
    link_ok: str  # empty until finished

    @property
    def percentage_completed(self) -> Optional[float]:
        """Processed share in 0..1, or None while the total is unknown (0)."""
        if self.total_lines == 0:
            return None
        return self.lines_processed / self.total_lines

    @property
    def is_finished(self) -> bool:
        return self.status is FileStatus.FINISHED
