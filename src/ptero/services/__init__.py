"""
Backup download and completion waiting.
"""

from ptero.services.download import DownloadResult, download_backup
from ptero.services.waiter import wait_for_backup

__all__ = ["DownloadResult", "download_backup", "wait_for_backup"]
