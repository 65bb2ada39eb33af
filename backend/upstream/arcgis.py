"""
backend/upstream/arcgis.py
==========================

ArcGIS REST helper
------------------

• `list_layers`  – GET the fixed municipal MapServer layer catalogue
• `query_layer`  – POST an Esri polygon to ``<layerUrl>/query``

The query always speaks the same dialect::

    f=json  returnGeometry=true  spatialRel=esriSpatialRelIntersects
    geometryType=esriGeometryPolygon  inSR=4326  outSR=4326

and is sent form-encoded, with the geometry JSON-stringified.
"""
from __future__ import annotations
import json
import logging
import requests

from backend.utils.relay import RelayBody, parse_body
from backend.utils.paths import GatewayConfig

#: Fixed query parameters --------------------------------------------------
QUERY_PARAMS = {
    "f": "json",
    "returnGeometry": "true",
    "spatialRel": "esriSpatialRelIntersects",
    "geometryType": "esriGeometryPolygon",
    "inSR": "4326",
    "outSR": "4326",
}

_log = logging.getLogger(__name__)


def list_layers(conf: GatewayConfig) -> RelayBody:
    resp = requests.get(conf.arcgis_layers_url, timeout=conf.upstream_timeout)
    return parse_body(resp.text)


def query_layer(conf: GatewayConfig, layer_url: str,
                esri_geometry: dict, out_fields: str = "*") -> RelayBody:
    """
    Parameters
    ----------
    layer_url : str
        Allow-listed layer endpoint, e.g. ``.../MapServer/0``.
    esri_geometry : dict
        Output of `to_esri_polygon()`.
    out_fields : str
        Comma list of attribute names, ``*`` for all.
    """
    arc_url = f"{layer_url}/query"
    form = {
        **QUERY_PARAMS,
        "outFields": out_fields,
        "geometry": json.dumps(esri_geometry, separators=(",", ":")),
    }
    _log.debug("ArcGIS query → %s (outFields=%s)", arc_url, out_fields)
    # a dict passed as data= goes out as application/x-www-form-urlencoded
    resp = requests.post(arc_url, data=form, timeout=conf.upstream_timeout)
    return parse_body(resp.text)
