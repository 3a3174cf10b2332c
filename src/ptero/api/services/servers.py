"""
Servers service for the panel API.
"""

from __future__ import annotations

import httpx

from ptero.api.config import ENDPOINT_SERVER, ENDPOINT_SERVERS
from ptero.api.transport import call_api
from ptero.exceptions import NoResultsError
from ptero.models.server import Server, ServerList
from ptero.models.target import PanelTarget


class ServersService:
    """
    Server listing and lookup.

    Example:
        >>> with PanelAPI(base_url="https://panel.example.com", api_key="ptlc_xxx") as api:
        ...     for server in api.servers.list():
        ...         print(server.uuid, server.name)
    """

    def __init__(self, client: httpx.Client, target: PanelTarget) -> None:
        self._client = client
        self._target = target

    def list(self) -> list[Server]:
        """
        List servers visible to the API key.

        Raises:
            NoResultsError: Panel omitted the server collection
        """
        servers = call_api(self._client, self._target, "GET", ENDPOINT_SERVERS, ServerList)
        if servers.data is None:
            raise NoResultsError("servers")
        return servers.data

    def get(self, server_id: str) -> Server:
        """Get one server by identifier or UUID."""
        return call_api(
            self._client,
            self._target,
            "GET",
            ENDPOINT_SERVER,
            Server,
            segments=[server_id],
        )
