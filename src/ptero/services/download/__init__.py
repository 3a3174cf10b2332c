"""
Download service for ptero SDK.

Fetches backup archives through panel-issued signed URLs.
"""

from ptero.services.download._models import DownloadResult
from ptero.services.download._sync import download_backup, fetch_to_file, get_download_url

__all__ = [
    "DownloadResult",
    "download_backup",
    "fetch_to_file",
    "get_download_url",
]
