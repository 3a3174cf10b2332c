"""
Pytest configuration and fixtures for ptero SDK tests.
"""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from ptero.api import PanelAPI
from ptero.models import PanelTarget

PANEL_URL = "https://panel.example.com"
API_KEY = "ptlc_testkey123456789"
SERVER_UUID = "1a7ce997-259b-452e-8b4e-cecc464142ca"
BACKUP_UUID = "904df120-a66c-4cbe-a8b2-6b19d2cf1f1b"
SIGNED_URL = "https://node.example.com/download/backup?token=signed-abc"


class FakePanel:
    """In-memory panel behind ``httpx.MockTransport``.

    Routes are keyed by method and URL path. Each route holds a queue of
    responses; the last one repeats once the queue is drained.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], list[dict[str, Any]]] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        status_code: int = 200,
        json: Any = None,
        content: bytes | None = None,
        error: Exception | None = None,
    ) -> None:
        self.routes.setdefault((method, path), []).append(
            {"status_code": status_code, "json": json, "content": content, "error": error}
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        entries = self.routes.get((request.method, request.url.path))
        if not entries:
            return httpx.Response(
                404,
                json={"errors": [{"code": "NotFoundHttpException", "status": "404", "detail": "not found"}]},
            )

        entry = entries.pop(0) if len(entries) > 1 else entries[0]
        if entry["error"] is not None:
            raise entry["error"]
        if entry["json"] is not None:
            return httpx.Response(entry["status_code"], json=entry["json"])
        return httpx.Response(entry["status_code"], content=entry["content"] or b"")

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Clear PTERO_* environment and reset settings around each test."""
    from ptero.config import reset_settings

    for name in (
        "PTERO_PANEL_URL",
        "PTERO_API_KEY",
        "PTERO_POLL_INTERVAL",
        "PTERO_REQUEST_TIMEOUT",
        "PTERO_DOWNLOAD_CHUNK_SIZE",
        "PTERO_LOG_LEVEL",
        "PTERO_LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def target() -> PanelTarget:
    return PanelTarget(base_url=PANEL_URL, api_key=API_KEY)


@pytest.fixture
def panel() -> FakePanel:
    return FakePanel()


@pytest.fixture
def http_client(panel):
    client = httpx.Client(transport=httpx.MockTransport(panel.handler))
    yield client
    client.close()


@pytest.fixture
def sleeps() -> list[float]:
    """Records sleep calls instead of sleeping."""
    return []


@pytest.fixture
def api(target, http_client, sleeps) -> PanelAPI:
    return PanelAPI(
        target=target,
        http_client=http_client,
        poll_interval=5.0,
        sleep=sleeps.append,
    )


# ============================================================================
# Test Data Fixtures
# ============================================================================


@pytest.fixture
def server_data():
    """Factory for panel server objects."""

    def _create(uuid: str = SERVER_UUID, name: str = "Survival", **extra: Any) -> dict:
        attributes = {
            "server_owner": True,
            "identifier": uuid[:8],
            "internal_id": 3,
            "uuid": uuid,
            "name": name,
            "node": "node-1",
            "description": "",
            "status": None,
            "is_suspended": False,
            "is_installing": False,
            "is_transferring": False,
            "limits": {"memory": 1024, "disk": 5120},
            "feature_limits": {"databases": 1, "allocations": 1, "backups": 3},
            "docker_image": "ghcr.io/pterodactyl/yolks:java_17",
        }
        attributes.update(extra)
        return {"object": "server", "attributes": attributes}

    return _create


@pytest.fixture
def backup_data():
    """Factory for panel backup objects."""

    def _create(
        uuid: str = BACKUP_UUID,
        completed_at: str | None = None,
        is_successful: bool = False,
        **extra: Any,
    ) -> dict:
        attributes = {
            "uuid": uuid,
            "is_successful": is_successful,
            "is_locked": False,
            "name": "Backup at 2024-05-01 10:00:00",
            "ignored_files": [],
            "checksum": None,
            "bytes": 0,
            "created_at": "2024-05-01T10:00:00+00:00",
            "completed_at": completed_at,
        }
        attributes.update(extra)
        return {"object": "backup", "attributes": attributes}

    return _create


@pytest.fixture
def completed_backup_data(backup_data):
    return backup_data(
        completed_at="2024-05-01T10:02:30+00:00",
        is_successful=True,
        checksum="sha1:0a4d55a8d778e5022fab701977c5d840bbc486d0",
        bytes=5 * 1024 * 1024,
    )
