"""
Panel API endpoint configuration.

Endpoint templates are relative to ``<base_url>/api/``.
"""

from __future__ import annotations

from typing import Iterable

from ptero.models.target import PanelTarget

API_PREFIX = "api"

ENDPOINT_SERVERS = "client"
ENDPOINT_SERVER = "client/servers"
SEGMENT_BACKUPS = "backups"
SEGMENT_DOWNLOAD = "download"


def build_api_url(
    target: PanelTarget,
    endpoint: str,
    segments: Iterable[str] = (),
) -> str:
    """
    Build a full API URL.

    Args:
        target: Panel descriptor providing the base URL
        endpoint: Endpoint template (e.g. ``client/servers``)
        segments: Extra path segments appended in order

    Returns:
        ``<base_url>/api/<endpoint>`` followed by ``/<segment>`` for each segment

    Example:
        >>> build_api_url(target, "client/servers", ["abc", "backups"])
        'https://panel.example.com/api/client/servers/abc/backups'
    """
    url = f"{target.base_url}/{API_PREFIX}/{endpoint}"
    for segment in segments:
        url = f"{url}/{segment}"
    return url


__all__ = [
    "API_PREFIX",
    "ENDPOINT_SERVERS",
    "ENDPOINT_SERVER",
    "SEGMENT_BACKUPS",
    "SEGMENT_DOWNLOAD",
    "build_api_url",
]
