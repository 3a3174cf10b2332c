"""Tests for the servers service."""

import pytest

from ptero.exceptions import APIError, NoResultsError
from ptero.models import Server

from tests.conftest import SERVER_UUID


class TestServersList:
    """Tests for ServersService.list."""

    def test_list(self, api, panel, server_data):
        panel.add(
            "GET",
            "/api/client",
            json={
                "object": "list",
                "data": [server_data(), server_data(uuid="other-uuid", name="Creative")],
                "meta": {"pagination": {"total": 2, "count": 2, "per_page": 50, "current_page": 1}},
            },
        )

        servers = api.servers.list()

        assert [s.uuid for s in servers] == [SERVER_UUID, "other-uuid"]
        assert all(isinstance(s, Server) for s in servers)
        assert panel.requests[0].method == "GET"

    def test_empty_list_is_success(self, api, panel):
        panel.add("GET", "/api/client", json={"object": "list", "data": []})

        assert api.servers.list() == []

    def test_absent_collection_fails(self, api, panel):
        panel.add("GET", "/api/client", json={"object": "list"})

        with pytest.raises(NoResultsError) as exc_info:
            api.servers.list()

        assert str(exc_info.value) == "no servers returned"

    def test_null_collection_fails(self, api, panel):
        panel.add("GET", "/api/client", json={"object": "list", "data": None})

        with pytest.raises(NoResultsError):
            api.servers.list()

    def test_api_error(self, api, panel):
        panel.add(
            "GET",
            "/api/client",
            status_code=401,
            json={"errors": [{"code": "AuthenticationException", "status": "401", "detail": "Unauthenticated."}]},
        )

        with pytest.raises(APIError) as exc_info:
            api.servers.list()

        assert "AuthenticationException: Unauthenticated." in str(exc_info.value)


class TestServersGet:
    """Tests for ServersService.get."""

    def test_get(self, api, panel, server_data):
        panel.add("GET", "/api/client/servers/1a7ce997", json=server_data())

        server = api.servers.get("1a7ce997")

        assert server.uuid == SERVER_UUID
        assert server.attributes.identifier == "1a7ce997"
        assert server.attributes.node == "node-1"

    def test_extra_attributes_kept(self, api, panel, server_data):
        panel.add("GET", f"/api/client/servers/{SERVER_UUID}", json=server_data())

        server = api.servers.get(SERVER_UUID)

        assert server.attributes.model_extra["docker_image"] == "ghcr.io/pterodactyl/yolks:java_17"

    def test_not_found(self, api):
        with pytest.raises(APIError) as exc_info:
            api.servers.get("missing")

        assert exc_info.value.status_code == 404
