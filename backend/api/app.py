"""
Gateway application factory.

    uvicorn backend.api.app:app          # config from config.yaml + env
    create_app(conf)                     # explicit config (tests, embedding)

API routers are registered before the static front-end mount so the
catch-all at "/" never shadows them.
"""
from __future__ import annotations
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from backend.api.arcgis_api import router as arcgis_router
from backend.api.mapi_api import router as mapi_router
from backend.api.middleware import BodyLimitMiddleware
from backend.utils.paths import GatewayConfig, load_config

_log = logging.getLogger(__name__)


def create_app(conf: GatewayConfig) -> FastAPI:
    app = FastAPI(title="Parcel Gateway")
    app.state.conf = conf

    app.add_middleware(BodyLimitMiddleware, max_bytes=conf.max_body_bytes)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/healthz", include_in_schema=False)
    def healthz():
        return {"status": "ok"}

    app.include_router(mapi_router)
    app.include_router(arcgis_router)

    if conf.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=conf.static_dir, html=True), name="static")
    else:
        _log.warning("Static directory not found: %s", conf.static_dir)

    _log.info("ArcGIS allow-list: %s", ", ".join(sorted(conf.arcgis_allowed_hosts)))
    return app


def __getattr__(name: str):
    # `app` is built on first access so importing create_app needs no config
    if name == "app":
        global app
        app = create_app(load_config())
        return app
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
