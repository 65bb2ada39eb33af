"""
Utility that

1. Loads `config.yaml` (or the file named by $GATEWAY_CONFIG)
2. Expands environment variables like  ${HOME}  before parsing
3. Applies the deployment overrides PORT, MAPI_BASE_URL, MAPI_TOKEN and
   ARCGIS_ALLOWED_HOSTS
4. Returns a frozen `GatewayConfig` dataclass.

The config is built once at startup and handed to `create_app()`; nothing
else in the package reads the environment.
"""
from __future__ import annotations
import os, yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_ALLOWED_HOSTS = frozenset({"gisn.tel-aviv.gov.il"})
DEFAULT_LAYERS_URL = (
    "https://gisn.tel-aviv.gov.il/arcgis/rest/services/IView2/MapServer/layers?f=json"
)


class ConfigError(ValueError):
    """Raised at startup when config.yaml or the environment is unusable."""


@dataclass(slots=True, frozen=True)
class GatewayConfig:
    project_root:         Path
    port:                 int
    mapi_base_url:        str
    mapi_token:           str | None
    mapi_paths:           Mapping[str, str]
    arcgis_allowed_hosts: frozenset[str]
    arcgis_layers_url:    str
    static_dir:           Path
    max_body_bytes:       int
    upstream_timeout:     float | None


def _split_hosts(val: str) -> frozenset[str]:
    "Comma-separated host list -> set, blanks dropped."
    return frozenset(h.strip() for h in val.split(",") if h.strip())


def _as_int(name: str, val) -> int:
    try:
        return int(val)
    except (TypeError, ValueError):
        raise ConfigError(f"{name} must be an integer, got {val!r}") from None


def load_config(cfg_path: str | Path | None = None,
                env: Mapping[str, str] | None = None) -> GatewayConfig:
    """
    Parameters
    ----------
    cfg_path : str | Path | None
        YAML file; defaults to $GATEWAY_CONFIG, then <repo>/config.yaml.
    env : mapping | None
        Environment to read overrides from (os.environ when omitted).

    Raises
    ------
    ConfigError on a non-integer port or a non-positive body cap.
    """
    env = os.environ if env is None else env
    cfg_path = Path(cfg_path or env.get("GATEWAY_CONFIG") or PROJECT_ROOT / "config.yaml")
    text = os.path.expandvars(cfg_path.read_text())
    cfg  = yaml.safe_load(text) or {}

    server = cfg.get("server", {})
    mapi   = cfg.get("mapi", {})
    arcgis = cfg.get("arcgis", {})

    port = _as_int("PORT", env.get("PORT") or server.get("port", 3000))

    max_body = _as_int("server.max_body_bytes",
                       server.get("max_body_bytes", 2 * 1024 * 1024))
    if max_body <= 0:
        raise ConfigError("server.max_body_bytes must be positive")

    timeout = server.get("upstream_timeout", 30)
    if timeout is not None:
        timeout = float(timeout)

    token = env.get("MAPI_TOKEN", mapi.get("token")) or None

    hosts_raw = env.get("ARCGIS_ALLOWED_HOSTS")
    if hosts_raw is None:
        hosts_cfg = arcgis.get("allowed_hosts")
        hosts = frozenset(hosts_cfg) if hosts_cfg else DEFAULT_ALLOWED_HOSTS
    else:
        hosts = _split_hosts(hosts_raw)

    static_dir = Path(server.get("static_dir", "public"))
    if not static_dir.is_absolute():
        static_dir = PROJECT_ROOT / static_dir

    return GatewayConfig(
        project_root=PROJECT_ROOT,
        port=port,
        mapi_base_url=(env.get("MAPI_BASE_URL") or mapi.get("base_url", "")).rstrip("/"),
        mapi_token=token,
        mapi_paths=dict(mapi.get("paths", {})),
        arcgis_allowed_hosts=hosts,
        arcgis_layers_url=arcgis.get("layers_url", DEFAULT_LAYERS_URL),
        static_dir=static_dir,
        max_body_bytes=max_body,
        upstream_timeout=timeout,
    )
