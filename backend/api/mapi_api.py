"""
Mapping-provider routes
=======================

    GET  /api/mapi/address-to-parcel?q=<free text>
    GET  /api/mapi/parcel?gush=<block>&helka=<parcel>
    POST /api/mapi/intersect          {"wkt": "...", "layer": "..."}

Each route makes exactly one upstream call and relays the body. Any
failure (network, malformed JSON body) becomes 500 {"error": "..."}.
"""
from __future__ import annotations
import logging
from fastapi import APIRouter, Query, Request
from fastapi.responses import Response
from fastapi.concurrency import run_in_threadpool

from backend.api.middleware import read_json_body
from backend.upstream import mapi
from backend.utils.relay import error_response, to_response

router = APIRouter(prefix="/api/mapi", tags=["mapi"])
_log = logging.getLogger(__name__)


@router.get("/address-to-parcel")
def address_to_parcel(request: Request, q: str = Query("")) -> Response:
    try:
        return to_response(mapi.search_address(request.app.state.conf, q))
    except Exception as exc:                # noqa: BLE001
        _log.exception("mapi address search failed")
        return error_response(500, str(exc))


@router.get("/parcel")
def parcel(request: Request,
           gush:  str = Query(""),
           helka: str = Query("")) -> Response:
    try:
        return to_response(mapi.parcel_geometry(request.app.state.conf, gush, helka))
    except Exception as exc:                # noqa: BLE001
        _log.exception("mapi parcel lookup failed")
        return error_response(500, str(exc))


@router.post("/intersect")
async def intersect(request: Request) -> Response:
    try:
        body = await read_json_body(request)
        wkt, layer = body.get("wkt"), body.get("layer")
        result = await run_in_threadpool(
            mapi.intersect, request.app.state.conf, wkt, layer
        )
        return to_response(result)
    except Exception as exc:                # noqa: BLE001
        _log.exception("mapi intersect failed")
        return error_response(500, str(exc))
