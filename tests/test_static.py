from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from webhooks_dashboard.app import create_app
from webhooks_dashboard.config import DEFAULT_STATIC_DIR, Settings
from webhooks_dashboard.errors import ConfigError


def test_dashboard_served_alongside_api(upstream):
    settings = Settings(store="shop.myshopify.com", access_token="t", static_dir=DEFAULT_STATIC_DIR)
    with TestClient(create_app(settings, client=upstream)) as client:
        index = client.get("/")
        assert index.status_code == 200
        assert "text/html" in index.headers["content-type"]

        # API routes win over the static mount
        assert client.get("/api/webhooks").status_code == 200
        assert client.patch("/api/webhooks").status_code == 405
        assert client.delete("/api/webhooks/").status_code == 400
        assert len(upstream.calls) == 1


def test_missing_assets_fail_at_startup(tmp_path: Path, upstream):
    settings = Settings(store="shop.myshopify.com", access_token="t", static_dir=tmp_path / "missing")
    with pytest.raises(ConfigError):
        create_app(settings, client=upstream)
