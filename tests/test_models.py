"""
Tests for ptero Pydantic models.
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from ptero.models import (
    ApiErrorPayload,
    Backup,
    BackupList,
    PanelTarget,
    Server,
    ServerList,
    SignedUrl,
    server_uuid,
)


class TestPanelTarget:
    """Tests for PanelTarget model."""

    def test_strips_trailing_slash(self):
        target = PanelTarget(base_url="https://panel.example.com///", api_key="k")
        assert target.base_url == "https://panel.example.com"

    def test_frozen(self):
        target = PanelTarget(base_url="https://panel.example.com", api_key="k")
        with pytest.raises(ValidationError):
            target.api_key = "other"

    def test_api_key_not_in_repr(self):
        target = PanelTarget(base_url="https://panel.example.com", api_key="ptlc_secret")
        assert "ptlc_secret" not in repr(target)

    def test_empty_values_rejected(self):
        with pytest.raises(ValidationError):
            PanelTarget(base_url="", api_key="k")
        with pytest.raises(ValidationError):
            PanelTarget(base_url="https://panel.example.com", api_key="")


class TestServer:
    """Tests for Server models."""

    def test_uuid_shortcut(self, server_data):
        server = Server.model_validate(server_data(uuid="abc", name="Lobby"))
        assert server.uuid == "abc"
        assert server.name == "Lobby"

    def test_uuid_required(self):
        with pytest.raises(ValidationError):
            Server.model_validate({"object": "server", "attributes": {"name": "x"}})

    def test_server_list_absent_data(self):
        assert ServerList.model_validate({"object": "list"}).data is None

    def test_server_uuid_helper(self, server_data):
        server = Server.model_validate(server_data(uuid="abc"))
        assert server_uuid(server) == "abc"
        assert server_uuid("def") == "def"


class TestBackup:
    """Tests for Backup models."""

    def test_pending(self, backup_data):
        backup = Backup.model_validate(backup_data())
        assert backup.attributes.completed_at is None
        assert backup.is_completed is False

    def test_completed(self, completed_backup_data):
        backup = Backup.model_validate(completed_backup_data)
        assert backup.is_completed is True
        assert backup.attributes.completed_at == datetime(2024, 5, 1, 10, 2, 30, tzinfo=timezone.utc)

    def test_bytes_alias(self, backup_data):
        backup = Backup.model_validate(backup_data(bytes=2048))
        assert backup.attributes.size == 2048

    def test_backup_list(self, backup_data):
        backups = BackupList.model_validate({"object": "list", "data": [backup_data()]})
        assert len(backups.data) == 1


class TestSignedUrl:
    def test_url(self):
        signed = SignedUrl.model_validate(
            {"object": "signed_url", "attributes": {"url": "https://node/download?token=x"}}
        )
        assert signed.url == "https://node/download?token=x"


class TestApiErrorPayload:
    def test_order_preserved(self):
        payload = ApiErrorPayload.model_validate(
            {
                "errors": [
                    {"code": "B", "status": "400", "detail": "second"},
                    {"code": "A", "status": "400", "detail": "first"},
                ]
            }
        )
        assert [e.code for e in payload.errors] == ["B", "A"]

    def test_missing_errors_key(self):
        assert ApiErrorPayload.model_validate({}).errors == []
