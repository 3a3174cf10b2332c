"""
Models for download service.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


class DownloadResult(BaseModel):
    """Result of a completed backup download."""

    local_path: Path
    size: int = 0
    elapsed: float = 0.0

    @property
    def speed_mbps(self) -> float:
        """Download speed in MB/s."""
        if self.elapsed <= 0:
            return 0.0
        return (self.size / 1024 / 1024) / self.elapsed

    def __str__(self) -> str:
        size_mb = self.size / 1024 / 1024
        return (
            f"{self.local_path}: {size_mb:.1f} MB ({self.size:,} bytes) "
            f"in {self.elapsed:.1f}s @ {self.speed_mbps:.1f} MB/s"
        )
