"""
Backups service for the panel API.

Provides listing, lookup, deletion and creation of backups, plus waiting for
completion and downloading archives.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Callable, Sequence

import httpx

from ptero.api.config import ENDPOINT_SERVER, SEGMENT_BACKUPS
from ptero.api.transport import call_api
from ptero.config import DEFAULT_CHUNK_SIZE, DEFAULT_POLL_INTERVAL, validate_poll_interval
from ptero.exceptions import NoResultsError
from ptero.models.backup import Backup, BackupList
from ptero.models.server import Server, server_uuid
from ptero.models.target import PanelTarget
from ptero.services.download import DownloadResult, download_backup
from ptero.services.waiter import wait_for_backup


class BackupsService:
    """
    High-level backups service.

    ``server`` arguments accept a ``Server`` or a bare server UUID.

    Example:
        >>> with PanelAPI(base_url="https://panel.example.com", api_key="ptlc_xxx") as api:
        ...     backup = api.backups.create_and_wait(server)
        ...     api.backups.download(server, backup.uuid, "backup.tar.gz")
    """

    def __init__(
        self,
        client: httpx.Client,
        target: PanelTarget,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """
        Initialize backups service.

        Args:
            client: Shared HTTP client
            target: Panel descriptor
            poll_interval: Seconds between reads while waiting for a backup
            chunk_size: Read size while streaming downloads
            sleep: Sleep function used while waiting
        """
        self._client = client
        self._target = target
        self._poll_interval = validate_poll_interval(poll_interval)
        self._chunk_size = chunk_size
        self._sleep = sleep

    def _segments(self, server: Server | str, *rest: str) -> list[str]:
        return [server_uuid(server), SEGMENT_BACKUPS, *rest]

    def list(self, server: Server | str) -> list[Backup]:
        """
        List backups of a server.

        Raises:
            NoResultsError: Panel omitted the backup collection
        """
        backups = call_api(
            self._client,
            self._target,
            "GET",
            ENDPOINT_SERVER,
            BackupList,
            segments=self._segments(server),
        )
        if backups.data is None:
            raise NoResultsError("backups")
        return backups.data

    def get(self, server: Server | str, backup_id: str) -> Backup:
        """Get one backup."""
        return call_api(
            self._client,
            self._target,
            "GET",
            ENDPOINT_SERVER,
            Backup,
            segments=self._segments(server, backup_id),
        )

    def delete(self, server: Server | str, backup_id: str) -> Backup:
        """
        Delete a backup.

        Returns:
            The backup record as decoded from the panel's response
        """
        return call_api(
            self._client,
            self._target,
            "DELETE",
            ENDPOINT_SERVER,
            Backup,
            segments=self._segments(server, backup_id),
        )

    def create(
        self,
        server: Server | str,
        name: str | None = None,
        ignored: Sequence[str] | None = None,
        is_locked: bool | None = None,
    ) -> Backup:
        """
        Request a new backup.

        Args:
            server: Server to back up
            name: Backup name (panel picks one when omitted)
            ignored: Paths to exclude, one per entry
            is_locked: Protect the backup from deletion

        Returns:
            The new backup record; it is still pending
        """
        data: dict[str, str] = {}
        if name:
            data["name"] = name
        if ignored:
            data["ignored"] = "\n".join(ignored)
        if is_locked is not None:
            data["is_locked"] = "1" if is_locked else "0"

        return call_api(
            self._client,
            self._target,
            "POST",
            ENDPOINT_SERVER,
            Backup,
            segments=self._segments(server),
            data=data or None,
        )

    def wait(
        self,
        server: Server | str,
        backup_id: str,
        poll_interval: float | None = None,
    ) -> Backup:
        """
        Block until the panel reports the backup completed.

        Args:
            server: Server owning the backup
            backup_id: Backup UUID
            poll_interval: Override the service's poll interval

        Returns:
            The completed backup record

        Raises:
            ConfigurationError: If poll_interval is outside 0..3600 seconds
        """
        interval = self._poll_interval if poll_interval is None else validate_poll_interval(poll_interval)
        return wait_for_backup(
            lambda: self.get(server, backup_id),
            poll_interval=interval,
            sleep=self._sleep,
        )

    def create_and_wait(
        self,
        server: Server | str,
        name: str | None = None,
        ignored: Sequence[str] | None = None,
        is_locked: bool | None = None,
        poll_interval: float | None = None,
    ) -> Backup:
        """Request a backup and block until it completes."""
        backup = self.create(server, name=name, ignored=ignored, is_locked=is_locked)
        return self.wait(server, backup.uuid, poll_interval=poll_interval)

    def download(
        self,
        server: Server | str,
        backup_id: str,
        destination: str | Path,
    ) -> DownloadResult:
        """Download a backup archive to ``destination`` (overwritten if present)."""
        return download_backup(
            self._client,
            self._target,
            server,
            backup_id,
            destination,
            chunk_size=self._chunk_size,
        )
