"""Shared pytest fixtures for the parcel gateway test suite."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from backend.api.app import create_app
from backend.utils.paths import DEFAULT_ALLOWED_HOSTS, GatewayConfig

LAYER_URL = "https://gisn.tel-aviv.gov.il/arcgis/rest/services/X/MapServer/0"

POLYGON = {
    "type": "Polygon",
    "coordinates": [[[34.78, 32.08], [34.79, 32.08], [34.79, 32.09], [34.78, 32.08]]],
}


def make_conf(tmp_path: Path, **overrides) -> GatewayConfig:
    values = dict(
        project_root=tmp_path,
        port=3000,
        mapi_base_url="https://mapi.example.gov.il",
        mapi_token=None,
        mapi_paths={},
        arcgis_allowed_hosts=DEFAULT_ALLOWED_HOSTS,
        arcgis_layers_url="https://gisn.tel-aviv.gov.il/arcgis/rest/services/IView2/MapServer/layers?f=json",
        static_dir=tmp_path / "public",
        max_body_bytes=2 * 1024 * 1024,
        upstream_timeout=30.0,
    )
    values.update(overrides)
    return GatewayConfig(**values)


def upstream_reply(text: str, status_code: int = 200) -> MagicMock:
    """Stand-in for a requests.Response carrying *text*."""
    resp = MagicMock()
    resp.text = text
    resp.status_code = status_code
    return resp


# ---------------------------------------------------------------------------
# Config / app fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def conf(tmp_path: Path) -> GatewayConfig:
    """Default config with an empty static directory."""
    (tmp_path / "public").mkdir()
    (tmp_path / "public" / "index.html").write_text("<h1>map</h1>")
    return make_conf(tmp_path)


@pytest.fixture()
def client(conf: GatewayConfig) -> TestClient:
    return TestClient(create_app(conf))


@pytest.fixture()
def polygon() -> dict:
    return {"type": POLYGON["type"], "coordinates": [list(r) for r in POLYGON["coordinates"]]}
