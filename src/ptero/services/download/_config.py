"""
Configuration constants for download service.
"""

from ptero.config import DEFAULT_CHUNK_SIZE

# Headers for the signed URL fetch; the URL itself carries authorization
DOWNLOAD_HEADERS = {"Accept": "application/json"}

__all__ = ["DEFAULT_CHUNK_SIZE", "DOWNLOAD_HEADERS"]
