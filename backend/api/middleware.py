"""Inbound request body handling: size cap and JSON decoding."""
from __future__ import annotations
import json
from typing import Any

from fastapi import Request
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from backend.utils.relay import error_response

TOO_LARGE = "request entity too large"


class BodyLimitMiddleware:
    """
    Reject request bodies larger than *max_bytes* with 413.

    A declared Content-Length is checked up front. Bodies without one
    (chunked uploads) are read message by message and refused as soon as
    the running total passes the cap, so at most *max_bytes* is held.
    """

    def __init__(self, app: ASGIApp, max_bytes: int):
        self.app = app
        self.max_bytes = max_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        length = Headers(scope=scope).get("content-length")
        if length is not None:
            if not length.isdigit():
                await error_response(400, "invalid content-length")(scope, receive, send)
            elif int(length) > self.max_bytes:
                await error_response(413, TOO_LARGE)(scope, receive, send)
            else:
                await self.app(scope, receive, send)
            return

        if scope["method"] not in ("POST", "PUT", "PATCH"):
            await self.app(scope, receive, send)
            return

        chunks: list[bytes] = []
        size = 0
        while True:
            message = await receive()
            if message["type"] != "http.request":
                break                       # client went away
            chunk = message.get("body", b"")
            size += len(chunk)
            if size > self.max_bytes:
                await error_response(413, TOO_LARGE)(scope, receive, send)
                return
            chunks.append(chunk)
            if not message.get("more_body", False):
                break

        body = b"".join(chunks)
        replayed = False

        async def replay() -> Message:
            nonlocal replayed
            if not replayed:
                replayed = True
                return {"type": "http.request", "body": body, "more_body": False}
            return await receive()

        await self.app(scope, replay, send)


def _is_json(request: Request) -> bool:
    media_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    return media_type == "application/json"


async def read_json_body(request: Request) -> Any:
    """Decoded JSON body; empty or non-JSON content types read as {}."""
    if not _is_json(request):
        return {}
    raw = await request.body()
    if not raw.strip():
        return {}
    return json.loads(raw)
