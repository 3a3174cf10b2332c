"""
Backup archive download.

Two steps: the panel issues a signed, time-limited URL (authenticated call),
then the archive is streamed from that URL without the bearer credential.
"""

from __future__ import annotations

import time
from pathlib import Path

import httpx

from ptero.api.config import ENDPOINT_SERVER, SEGMENT_BACKUPS, SEGMENT_DOWNLOAD
from ptero.api.transport import call_api
from ptero.exceptions import DownloadError
from ptero.logging import get_logger
from ptero.models.backup import SignedUrl
from ptero.models.server import Server, server_uuid
from ptero.models.target import PanelTarget
from ptero.services.download._config import DEFAULT_CHUNK_SIZE, DOWNLOAD_HEADERS
from ptero.services.download._models import DownloadResult

logger = get_logger(__name__)


def get_download_url(
    client: httpx.Client,
    target: PanelTarget,
    server: Server | str,
    backup_id: str,
) -> SignedUrl:
    """Ask the panel for a signed download URL for one backup."""
    return call_api(
        client,
        target,
        "GET",
        ENDPOINT_SERVER,
        SignedUrl,
        segments=[server_uuid(server), SEGMENT_BACKUPS, backup_id, SEGMENT_DOWNLOAD],
    )


def fetch_to_file(
    client: httpx.Client,
    url: str,
    destination: Path,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> int:
    """
    Stream ``url`` into ``destination``.

    The file is created (or truncated) only after a 200 response. A failure
    while copying propagates and may leave a truncated file behind.

    Returns:
        Number of bytes written

    Raises:
        DownloadError: Response status is not 200
    """
    with client.stream("GET", url, headers=DOWNLOAD_HEADERS) as response:
        logger.debug(f"Download status code: {response.status_code}")
        if response.status_code != httpx.codes.OK:
            raise DownloadError(response.status_code)

        logger.debug(f"Writing response body to '{destination}'")
        written = 0
        with open(destination, "wb") as f:
            for chunk in response.iter_bytes(chunk_size):
                f.write(chunk)
                written += len(chunk)
    return written


def download_backup(
    client: httpx.Client,
    target: PanelTarget,
    server: Server | str,
    backup_id: str,
    destination: str | Path,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> DownloadResult:
    """
    Download a backup archive to a local file.

    Args:
        client: HTTP client for both requests
        target: Panel descriptor
        server: Server or server UUID owning the backup
        backup_id: Backup UUID
        destination: Local file path, overwritten if it exists
        chunk_size: Read size while streaming

    Returns:
        DownloadResult with path, size and timing
    """
    destination = Path(destination)
    start = time.monotonic()

    signed = get_download_url(client, target, server, backup_id)
    # Query string carries the signature
    logger.debug(f"Downloading backup {backup_id} from {signed.url.split('?', 1)[0]}")

    size = fetch_to_file(client, signed.url, destination, chunk_size=chunk_size)
    return DownloadResult(
        local_path=destination,
        size=size,
        elapsed=time.monotonic() - start,
    )
