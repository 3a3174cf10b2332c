"""
Panel API services.

High-level wrappers over the panel transport.
"""

from __future__ import annotations

from ptero.api.services.backups import BackupsService
from ptero.api.services.servers import ServersService

__all__ = [
    "BackupsService",
    "ServersService",
]
