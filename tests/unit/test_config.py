"""Tests for gateway configuration loading.

Covers:
- Defaults from the shipped config.yaml
- Environment overrides (PORT, MAPI_BASE_URL, MAPI_TOKEN, ARCGIS_ALLOWED_HOSTS)
- ${VAR} expansion inside the YAML
- Fail-fast validation
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from backend.utils.paths import PROJECT_ROOT, ConfigError, load_config


def _write(tmp_path: Path, text: str) -> Path:
    fp = tmp_path / "config.yaml"
    fp.write_text(text)
    return fp


class TestShippedDefaults:
    def test_repo_config_loads(self) -> None:
        cfg = load_config(PROJECT_ROOT / "config.yaml", env={})
        assert cfg.port == 3000
        assert cfg.arcgis_allowed_hosts == frozenset({"gisn.tel-aviv.gov.il"})
        assert cfg.max_body_bytes == 2 * 1024 * 1024
        assert cfg.mapi_token is None
        assert cfg.static_dir == PROJECT_ROOT / "public"

    def test_empty_file_uses_builtin_defaults(self, tmp_path: Path) -> None:
        cfg = load_config(_write(tmp_path, ""), env={})
        assert cfg.port == 3000
        assert cfg.arcgis_allowed_hosts == frozenset({"gisn.tel-aviv.gov.il"})
        assert cfg.upstream_timeout == 30.0
        assert "layers" in cfg.arcgis_layers_url

    def test_config_is_immutable(self, tmp_path: Path) -> None:
        cfg = load_config(_write(tmp_path, ""), env={})
        with pytest.raises(FrozenInstanceError):
            cfg.port = 1  # type: ignore[misc]


class TestEnvironmentOverrides:
    def test_overrides_applied(self, tmp_path: Path) -> None:
        env = {
            "PORT": "8080",
            "MAPI_BASE_URL": "https://mapi.example/",
            "MAPI_TOKEN": "s3cret",
            "ARCGIS_ALLOWED_HOSTS": " a.example.com, ,b.example.com ",
        }
        cfg = load_config(_write(tmp_path, "mapi:\n  base_url: https://ignored\n"), env=env)
        assert cfg.port == 8080
        assert cfg.mapi_base_url == "https://mapi.example"
        assert cfg.mapi_token == "s3cret"
        assert cfg.arcgis_allowed_hosts == frozenset({"a.example.com", "b.example.com"})

    def test_empty_token_is_none(self, tmp_path: Path) -> None:
        cfg = load_config(_write(tmp_path, "mapi:\n  token: abc\n"), env={"MAPI_TOKEN": ""})
        assert cfg.mapi_token is None

    def test_config_path_from_env(self, tmp_path: Path) -> None:
        fp = _write(tmp_path, "server:\n  port: 4100\n")
        cfg = load_config(env={"GATEWAY_CONFIG": str(fp)})
        assert cfg.port == 4100

    def test_variable_expansion(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GW_TEST_BASE", "https://expanded.example")
        cfg = load_config(_write(tmp_path, "mapi:\n  base_url: ${GW_TEST_BASE}\n"), env={})
        assert cfg.mapi_base_url == "https://expanded.example"


class TestValidation:
    def test_bad_port(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="PORT"):
            load_config(_write(tmp_path, ""), env={"PORT": "eighty"})

    def test_non_positive_body_cap(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            load_config(_write(tmp_path, "server:\n  max_body_bytes: 0\n"), env={})

    def test_null_timeout_disables_it(self, tmp_path: Path) -> None:
        cfg = load_config(_write(tmp_path, "server:\n  upstream_timeout: null\n"), env={})
        assert cfg.upstream_timeout is None

    def test_relative_static_dir_resolved(self, tmp_path: Path) -> None:
        cfg = load_config(_write(tmp_path, "server:\n  static_dir: web/dist\n"), env={})
        assert cfg.static_dir == PROJECT_ROOT / "web" / "dist"
