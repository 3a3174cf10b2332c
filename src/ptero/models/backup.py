"""
Backup models.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class BackupAttributes(BaseModel):
    """Attributes the panel reports for a backup.

    ``completed_at`` stays ``None`` until the panel finishes the backup.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    uuid: str
    name: str = ""
    ignored_files: list[str] = Field(default_factory=list)
    checksum: str | None = None
    size: int = Field(default=0, alias="bytes")
    is_successful: bool = False
    is_locked: bool = False
    created_at: datetime | None = None
    completed_at: datetime | None = None


class Backup(BaseModel):
    """Single backup record."""

    object: str = "backup"
    attributes: BackupAttributes

    @property
    def uuid(self) -> str:
        return self.attributes.uuid

    @property
    def is_completed(self) -> bool:
        """True once the panel has set ``completed_at``."""
        return self.attributes.completed_at is not None


class BackupList(BaseModel):
    """Collection returned by ``client/servers/{uuid}/backups``."""

    object: str = "list"
    data: list[Backup] | None = None
    meta: dict[str, Any] = Field(default_factory=dict)


class SignedUrlAttributes(BaseModel):
    url: str


class SignedUrl(BaseModel):
    """Time-limited download URL for a backup archive."""

    object: str = "signed_url"
    attributes: SignedUrlAttributes

    @property
    def url(self) -> str:
        return self.attributes.url
