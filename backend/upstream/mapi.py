"""
backend/upstream/mapi.py
========================

Government mapping-provider helper
----------------------------------

• Address text  ➜ parcel candidates      (GET  <base><search>?q=...)
• Gush + helka  ➜ parcel geometry        (GET  <base><parcel>?gush=&helka=)
• WKT + layer   ➜ intersecting features  (POST <base><intersect>, JSON body)

The bearer credential, when configured, goes out as
``Authorization: Bearer <token>``; it never reaches the browser.
Upstream status codes are not inspected: whatever body comes back is
relayed.
"""
from __future__ import annotations
import logging
import requests

from backend.utils.relay import RelayBody, parse_body
from backend.utils.paths import GatewayConfig

#: Fallback paths when config.yaml leaves mapi.paths empty ------------------
DEFAULT_PATHS = {
    "search":    "/search/address-to-parcel",
    "parcel":    "/parcels/geometry",
    "intersect": "/spatial/intersect",
}

_log = logging.getLogger(__name__)
logging.getLogger("urllib3").setLevel(logging.WARNING)


# ────────────────────────────────────────────────────────────────────────────
def _url(conf: GatewayConfig, key: str) -> str:
    return conf.mapi_base_url + conf.mapi_paths.get(key, DEFAULT_PATHS[key])


def _headers(conf: GatewayConfig) -> dict:
    headers = {"Accept": "application/json"}
    if conf.mapi_token:
        headers["Authorization"] = f"Bearer {conf.mapi_token}"
    return headers


# ────────────────────────────────────────────────────────────────────────────
def search_address(conf: GatewayConfig, text: str) -> RelayBody:
    """Free-text address lookup; *text* is URL-encoded into ``q``."""
    url = _url(conf, "search")
    _log.debug("mapi address search → %s", url)
    resp = requests.get(url, params={"q": text}, headers=_headers(conf),
                        timeout=conf.upstream_timeout)
    return parse_body(resp.text)


def parcel_geometry(conf: GatewayConfig, gush: str, helka: str) -> RelayBody:
    """Geometry for one land-registry block (gush) / parcel (helka) pair."""
    url = _url(conf, "parcel")
    _log.debug("mapi parcel %s/%s → %s", gush, helka, url)
    resp = requests.get(url, params={"gush": gush, "helka": helka},
                        headers=_headers(conf), timeout=conf.upstream_timeout)
    return parse_body(resp.text)


def intersect(conf: GatewayConfig, wkt: str, layer: str) -> RelayBody:
    """Features of *layer* intersecting the WKT geometry."""
    url = _url(conf, "intersect")
    _log.debug("mapi intersect layer=%s → %s", layer, url)
    resp = requests.post(url, json={"wkt": wkt, "layer": layer},
                         headers=_headers(conf), timeout=conf.upstream_timeout)
    return parse_body(resp.text)
