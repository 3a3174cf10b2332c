"""
Server models.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ServerAttributes(BaseModel):
    """Attributes the panel reports for a server.

    Unknown attributes are kept as extra fields.
    """

    model_config = ConfigDict(extra="allow")

    uuid: str
    identifier: str | None = None
    internal_id: int | None = None
    name: str = ""
    node: str | None = None
    description: str | None = None
    status: str | None = None
    server_owner: bool | None = None
    is_suspended: bool = False
    is_installing: bool = False
    is_transferring: bool = False
    limits: dict[str, Any] = Field(default_factory=dict)
    feature_limits: dict[str, Any] = Field(default_factory=dict)


class Server(BaseModel):
    """Single server as returned by ``client/servers/{id}``."""

    object: str = "server"
    attributes: ServerAttributes

    @property
    def uuid(self) -> str:
        return self.attributes.uuid

    @property
    def name(self) -> str:
        return self.attributes.name


class ServerList(BaseModel):
    """Collection returned by ``client``.

    ``data`` is ``None`` when the panel omits the collection.
    """

    object: str = "list"
    data: list[Server] | None = None
    meta: dict[str, Any] = Field(default_factory=dict)


def server_uuid(server: Server | str) -> str:
    """Accept a ``Server`` or a bare UUID and return the UUID."""
    if isinstance(server, Server):
        return server.uuid
    return server
