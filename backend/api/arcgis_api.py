"""
ArcGIS Layer API
================

Lets the browser map query municipal ArcGIS layers without hitting their
CORS rules.

    GET  /api/arcgis/layers   – fixed MapServer layer catalogue
    POST /api/arcgis/query    – spatial intersect against one layer

Query body
----------
layerUrl  : str   – layer endpoint, host must be allow-listed   (required)
geometry  : dict  – GeoJSON Polygon or Feature wrapping one
outFields : str   – attribute list, default "*"

Errors
------
400 {"error": "layerUrl required"}
403 {"error": "ArcGIS host not allowed"}
500 {"error": "<message>"}  – bad geometry, upstream failure, anything else
"""
from __future__ import annotations
import json
import logging
from urllib.parse import urlsplit
from fastapi import APIRouter, Request
from fastapi.responses import Response
from fastapi.concurrency import run_in_threadpool

from backend.api.allowlist import is_allowed
from backend.api.middleware import read_json_body
from backend.api.transform_to_esrijson import to_esri_polygon
from backend.upstream import arcgis
from backend.utils.relay import error_response, to_response

router = APIRouter(prefix="/api/arcgis", tags=["arcgis"])
_log = logging.getLogger(__name__)


@router.get("/layers")
def layers(request: Request) -> Response:
    try:
        return to_response(arcgis.list_layers(request.app.state.conf))
    except Exception as exc:                # noqa: BLE001
        _log.exception("ArcGIS layers error")
        return error_response(500, str(exc))


@router.post("/query")
async def query(request: Request) -> Response:
    conf = request.app.state.conf
    try:
        body = await read_json_body(request)
        layer_url = body.get("layerUrl")
        if not layer_url:
            return error_response(400, "layerUrl required")
        if not is_allowed(layer_url, conf.arcgis_allowed_hosts):
            _log.warning("Rejected ArcGIS host: %s", _host_of(layer_url))
            return error_response(403, "ArcGIS host not allowed")

        esri_geom  = to_esri_polygon(body.get("geometry"))
        out_fields = _form_value(body.get("outFields", "*"))
        result = await run_in_threadpool(
            arcgis.query_layer, conf, layer_url, esri_geom, out_fields
        )
        return to_response(result)
    except Exception as exc:                # noqa: BLE001
        _log.exception("ArcGIS query error")
        return error_response(500, str(exc))


def _form_value(val) -> str:
    """JSON value → form string: lists comma-joined, null/true/false as in JSON."""
    if isinstance(val, (list, tuple)):
        return ",".join(_form_value(v) for v in val)
    if val is None or isinstance(val, bool):
        return json.dumps(val)
    return str(val)


def _host_of(url) -> str:
    try:
        return urlsplit(str(url)).hostname or repr(url)
    except ValueError:
        return repr(url)
