"""
Exceptions raised by the ptero SDK.

Transport failures (connection errors, timeouts) are not wrapped: they surface
as the underlying ``httpx.HTTPError`` subclasses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from ptero.models.errors import ApiErrorDetail


class PteroError(Exception):
    """Base class for all ptero errors."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self._original_cause = cause

    def __str__(self) -> str:
        return self.message


class ConfigurationError(PteroError):
    """Panel URL or API key is missing or invalid."""


class APIError(PteroError):
    """Panel answered with a non-200 status and a structured error list."""

    def __init__(self, status_code: int, errors: Sequence[ApiErrorDetail]) -> None:
        self.status_code = status_code
        self.errors = list(errors)
        pairs = ", ".join(f"{e.code}: {e.detail}" for e in self.errors)
        super().__init__(f"api call failed with status {status_code}: [{pairs}]")


class DecodeError(PteroError):
    """Response body could not be decoded into the expected shape."""


class NoResultsError(PteroError):
    """Panel returned success but omitted the requested collection."""

    def __init__(self, resource: str) -> None:
        self.resource = resource
        super().__init__(f"no {resource} returned")


class DownloadError(PteroError):
    """Signed download URL answered with a non-200 status."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"download failed with status code {status_code}")


__all__ = [
    "PteroError",
    "ConfigurationError",
    "APIError",
    "DecodeError",
    "NoResultsError",
    "DownloadError",
]
