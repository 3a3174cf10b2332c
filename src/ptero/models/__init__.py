"""
Pydantic models for ptero SDK.
"""

from ptero.models.backup import Backup, BackupAttributes, BackupList, SignedUrl, SignedUrlAttributes
from ptero.models.errors import ApiErrorDetail, ApiErrorPayload
from ptero.models.server import Server, ServerAttributes, ServerList, server_uuid
from ptero.models.target import PanelTarget

__all__ = [
    "PanelTarget",
    "Server",
    "ServerAttributes",
    "ServerList",
    "server_uuid",
    "Backup",
    "BackupAttributes",
    "BackupList",
    "SignedUrl",
    "SignedUrlAttributes",
    "ApiErrorDetail",
    "ApiErrorPayload",
]
