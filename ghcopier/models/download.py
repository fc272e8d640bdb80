"""
Download domain models for ghcopier.

This module contains the result record produced by a completed
materialization.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from .github import GitHubReference


@dataclass
class MaterializeResult:
    """Summary of one top-level copy operation."""

    reference: GitHubReference
    destination: Path

    # Results, in the order they were written
    files_written: List[Path] = field(default_factory=list)
    directories_created: List[Path] = field(default_factory=list)
    skipped_entries: List[str] = field(default_factory=list)

    # Statistics
    bytes_written: int = 0
    requests_made: int = 0
    started_at: datetime = field(default_factory=datetime.now)
    completed_at: Optional[datetime] = None

    @property
    def file_count(self) -> int:
        return len(self.files_written)

    @property
    def duration_seconds(self) -> float:
        """Get total duration in seconds."""

        if self.completed_at:
            return (self.completed_at - self.started_at).total_seconds()
        return 0.0

    def record_file(self, path: Path, size: int) -> None:
        self.files_written.append(path)
        self.bytes_written += size

    def mark_completed(self) -> None:
        self.completed_at = datetime.now()


__all__ = [
    "MaterializeResult",
]
