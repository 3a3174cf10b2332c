"""
Panel API client.

Unified entry point for the panel's client API (servers and backups).
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any, Callable

import httpx

from ptero.config import PanelSettings, get_settings, validate_poll_interval
from ptero.models.target import PanelTarget

if TYPE_CHECKING:
    from ptero.api.services.backups import BackupsService
    from ptero.api.services.servers import ServersService


class PanelAPI:
    """
    Unified panel API client.

    Holds the target descriptor and one ``httpx.Client``; services are
    created on first access.

    Example:
        >>> with PanelAPI(base_url="https://panel.example.com", api_key="ptlc_xxx") as api:
        ...     servers = api.servers.list()
        ...     backups = api.backups.list(servers[0])

        >>> # From PTERO_PANEL_URL / PTERO_API_KEY
        >>> api = PanelAPI.from_settings()
    """

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        *,
        target: PanelTarget | None = None,
        poll_interval: float | None = None,
        timeout: float | None = None,
        chunk_size: int | None = None,
        http_client: httpx.Client | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """
        Initialize panel API client.

        Args:
            base_url: Panel base URL, e.g. ``https://panel.example.com``
            api_key: Client API key
            target: Prebuilt target (instead of base_url/api_key)
            poll_interval: Seconds between polls while waiting for backups
            timeout: Request timeout in seconds (None waits indefinitely)
            chunk_size: Read size for backup downloads
            http_client: Client to use instead of creating one
            sleep: Sleep function used while waiting for backups

        Raises:
            ValueError: If neither target nor base_url/api_key is provided
            ConfigurationError: If poll_interval is outside 0..3600 seconds
        """
        if target is None:
            if not base_url or not api_key:
                raise ValueError("base_url and api_key required (or pass target)")
            target = PanelTarget(base_url=base_url, api_key=api_key)

        settings = get_settings()
        self._target = target
        self._poll_interval = (
            settings.poll_interval if poll_interval is None else validate_poll_interval(poll_interval)
        )
        self._chunk_size = chunk_size or settings.download_chunk_size
        self._sleep = sleep

        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            timeout=timeout if timeout is not None else settings.request_timeout,
        )

        # Lazy-initialized services
        self._servers_service: ServersService | None = None
        self._backups_service: BackupsService | None = None

    @classmethod
    def from_settings(
        cls,
        settings: PanelSettings | None = None,
        **kwargs: Any,
    ) -> PanelAPI:
        """
        Build a client from settings (defaults to the process-wide settings).

        Raises:
            ConfigurationError: If panel URL or API key is missing
        """
        settings = settings or get_settings()
        kwargs.setdefault("poll_interval", settings.poll_interval)
        kwargs.setdefault("timeout", settings.request_timeout)
        kwargs.setdefault("chunk_size", settings.download_chunk_size)
        return cls(target=settings.target(), **kwargs)

    @property
    def servers(self) -> ServersService:
        """Access servers API."""
        if self._servers_service is None:
            from ptero.api.services.servers import ServersService

            self._servers_service = ServersService(self._client, self._target)

        return self._servers_service

    @property
    def backups(self) -> BackupsService:
        """Access backups API."""
        if self._backups_service is None:
            from ptero.api.services.backups import BackupsService

            self._backups_service = BackupsService(
                self._client,
                self._target,
                poll_interval=self._poll_interval,
                chunk_size=self._chunk_size,
                sleep=self._sleep,
            )

        return self._backups_service

    @property
    def target(self) -> PanelTarget:
        """Get target panel descriptor."""
        return self._target

    @property
    def base_url(self) -> str:
        """Get panel base URL."""
        return self._target.base_url

    @property
    def poll_interval(self) -> float:
        """Get poll interval used while waiting for backups."""
        return self._poll_interval

    def __enter__(self) -> PanelAPI:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            self._client.close()

    def __repr__(self) -> str:
        return f"<PanelAPI base_url={self.base_url!r}>"


__all__ = ["PanelAPI"]
