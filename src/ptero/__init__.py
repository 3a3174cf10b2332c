"""
ptero: Python client for the Pterodactyl panel API.

Lists servers, manages their backups, waits for backups to complete and
downloads backup archives.

Example:
    >>> from ptero import PanelAPI
    >>> with PanelAPI(base_url="https://panel.example.com", api_key="ptlc_xxx") as api:
    ...     server = api.servers.list()[0]
    ...     backup = api.backups.create_and_wait(server)
    ...     api.backups.download(server, backup.uuid, "backup.tar.gz")
"""

from ptero.api import BackupsService, PanelAPI, ServersService, build_api_url, call_api
from ptero.config import PanelSettings, configure_settings, get_settings, reset_settings
from ptero.exceptions import (
    APIError,
    ConfigurationError,
    DecodeError,
    DownloadError,
    NoResultsError,
    PteroError,
)
from ptero.models import Backup, BackupList, PanelTarget, Server, ServerList, SignedUrl
from ptero.services import DownloadResult, download_backup, wait_for_backup

__version__ = "0.1.0"

__all__ = [
    # Client
    "PanelAPI",
    "ServersService",
    "BackupsService",
    "call_api",
    "build_api_url",
    "download_backup",
    "wait_for_backup",
    # Config
    "PanelSettings",
    "get_settings",
    "configure_settings",
    "reset_settings",
    # Models
    "PanelTarget",
    "Server",
    "ServerList",
    "Backup",
    "BackupList",
    "SignedUrl",
    "DownloadResult",
    # Exceptions
    "PteroError",
    "ConfigurationError",
    "APIError",
    "DecodeError",
    "NoResultsError",
    "DownloadError",
]
