"""OpenAPI document with a ``servers`` entry that follows the reverse proxy."""
from typing import Any, Dict, Mapping

from fastapi import FastAPI


def external_base_url(headers: Mapping[str, str], scheme: str) -> str:
    """
    Base URL as seen by the client, honoring X-Forwarded-* headers.

    Args:
        headers: Request headers (case-insensitive mapping)
        scheme: Scheme the request reached this process with
    """
    proto = headers.get("x-forwarded-proto") or scheme
    host = headers.get("x-forwarded-host") or headers.get("host", "")
    prefix = headers.get("x-forwarded-prefix") or ""
    return f"{proto}://{host}{prefix}"


def build_openapi_document(application: FastAPI, server_url: str) -> Dict[str, Any]:
    # app.openapi() caches the generated schema; never mutate it in place
    schema = application.openapi()
    return {**schema, "servers": [{"url": server_url}]}
