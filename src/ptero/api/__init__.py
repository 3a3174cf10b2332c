"""
Panel API client.

Usage:
    >>> from ptero.api import PanelAPI
    >>>
    >>> with PanelAPI(base_url="https://panel.example.com", api_key="ptlc_xxx") as api:
    ...     servers = api.servers.list()
    ...     backup = api.backups.create_and_wait(servers[0])

For the raw transport:
    >>> from ptero.api import call_api, build_api_url
"""

from __future__ import annotations

# Main client
from ptero.api.client import PanelAPI

# Endpoints
from ptero.api.config import build_api_url

# Services
from ptero.api.services import BackupsService, ServersService

# Transport
from ptero.api.transport import call_api

__all__ = [
    # Main client
    "PanelAPI",
    # Endpoints
    "build_api_url",
    # Services
    "BackupsService",
    "ServersService",
    # Transport
    "call_api",
]
