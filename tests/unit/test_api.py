"""Tests for the settings API endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from fieldgraph.api.app import create_app
from fieldgraph.config import FieldgraphConfig
from fieldgraph.runtime.context import Principal, RequestContext
from fieldgraph.service.channel import ChannelService
from fieldgraph.service.database import get_session_maker


ADMIN = {"X-User-Id": "1", "X-Permissions": "UpdateSettings"}
READER = {"X-User-Id": "2"}


async def _create_channel(code: str, default_language_code: str):
    async with get_session_maker()() as session:
        async with session.begin():
            ctx = RequestContext(principal=Principal(id="seed"), session=session)
            await ChannelService().create(ctx, code=code, default_language_code=default_language_code)


@pytest.fixture
def client(tmp_path, custom_fields, schema):
    config = FieldgraphConfig(
        custom_fields=custom_fields,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'api.db'}",
    )
    app = create_app(config, schema)
    with TestClient(app) as client:
        client.portal.call(_create_channel, "default-channel", "en")
        client.portal.call(_create_channel, "eu-store", "fr")
        yield client


class TestGetSettings:

    def test_requires_authentication(self, client):
        response = client.get("/settings")

        assert response.status_code == 403

    def test_super_admin_without_identity_is_rejected(self, client):
        response = client.get("/settings", headers={"X-Permissions": "SuperAdmin"})

        assert response.status_code == 403

    def test_returns_settings_with_server_config(self, client):
        response = client.get("/settings", headers=READER)

        assert response.status_code == 200
        settings = response.json()["globalSettings"]
        assert settings["__typename"] == "GlobalSettings"
        assert settings["availableLanguages"] == ["en"]

        server_config = settings["serverConfig"]
        assert [e["entityName"] for e in server_config["entityCustomFields"]] == ["Product", "Order"]
        assert server_config["customFieldConfig"]["Customer"] == []
        supplier = server_config["entityCustomFields"][0]["customFields"][1]
        assert supplier["entity"] == "Supplier"
        assert supplier["scalarFields"] == ["id", "name"]
        assert server_config["moneyStrategyPrecision"] == 2


class TestUpdateSettings:

    def test_requires_update_permission(self, client):
        response = client.post("/settings", json={"trackInventory": False}, headers=READER)

        assert response.status_code == 403

    def test_rejects_removing_channel_default_language(self, client):
        response = client.post(
            "/settings",
            json={"availableLanguages": ["en"], "trackInventory": False},
            headers=ADMIN,
        )

        assert response.status_code == 200
        result = response.json()["updateGlobalSettings"]
        assert result["__typename"] == "ChannelDefaultLanguageError"
        assert result["errorCode"] == "CHANNEL_DEFAULT_LANGUAGE_ERROR"
        assert result["language"] == "fr"
        assert result["channelCode"] == "eu-store"

        # Nothing was written
        settings = client.get("/settings", headers=READER).json()["globalSettings"]
        assert settings["trackInventory"] is True

    def test_updates_settings(self, client):
        response = client.post(
            "/settings",
            json={"availableLanguages": ["en", "fr", "de"], "outOfStockThreshold": 3},
            headers=ADMIN,
        )

        assert response.status_code == 200
        result = response.json()["updateGlobalSettings"]
        assert result["__typename"] == "GlobalSettings"
        assert result["availableLanguages"] == ["en", "fr", "de"]
        assert result["outOfStockThreshold"] == 3
        assert "serverConfig" in result

        settings = client.get("/settings", headers=READER).json()["globalSettings"]
        assert settings["availableLanguages"] == ["en", "fr", "de"]

    def test_super_admin_may_update(self, client):
        response = client.post(
            "/settings",
            json={"trackInventory": False},
            headers={"X-User-Id": "1", "X-Permissions": "SuperAdmin"},
        )

        assert response.json()["updateGlobalSettings"]["trackInventory"] is False


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
