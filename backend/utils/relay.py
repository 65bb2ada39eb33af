"""
Upstream body relay
===================

Every upstream answer is read as text and tagged:

    JsonBody(value)   – the text parsed as JSON
    TextBody(text)    – anything else, passed on verbatim

`to_response()` turns either tag into the FastAPI response sent back to
the browser. No schema is enforced; payloads travel through unchanged.
"""
from __future__ import annotations
import json
from dataclasses import dataclass
from typing import Any, Union

from fastapi.responses import JSONResponse, PlainTextResponse, Response


@dataclass(slots=True, frozen=True)
class JsonBody:
    value: Any


@dataclass(slots=True, frozen=True)
class TextBody:
    text: str


RelayBody = Union[JsonBody, TextBody]


def _reject_constant(name: str):
    # NaN / Infinity are accepted by the json module but are not JSON
    raise ValueError(f"invalid JSON constant {name}")


def parse_body(text: str) -> RelayBody:
    try:
        return JsonBody(json.loads(text, parse_constant=_reject_constant))
    except ValueError:
        return TextBody(text)


def to_response(body: RelayBody) -> Response:
    if isinstance(body, JsonBody):
        return JSONResponse(body.value)
    return PlainTextResponse(body.text)


def error_response(status: int, message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status)
