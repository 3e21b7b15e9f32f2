# Standard library imports
from typing import Any, Dict

# External package imports
from fastapi import APIRouter, Request
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse

# Local application imports
from ...core.config import Settings
from ...di.container import get_container
from ..openapi import build_openapi_document, external_base_url


router = APIRouter()


@router.get("/healthz", include_in_schema=False)
async def healthz() -> Dict[str, bool]:
    """Liveness probe; does not touch upstream services or their configuration."""
    return {"ok": True}


@router.get("/openapi.json", include_in_schema=False)
async def openapi_document(request: Request) -> Dict[str, Any]:
    """
    OpenAPI document whose server URL is the externally visible base URL,
    so "Try it out" works behind a reverse proxy mounted under a prefix.
    """
    server_url = external_base_url(request.headers, request.url.scheme)
    return build_openapi_document(request.app, server_url)


@router.get("/docs", include_in_schema=False)
@router.get("/docs/", include_in_schema=False)
async def swagger_ui(request: Request) -> HTMLResponse:
    # The proxy maps <prefix>/docs/ to /docs/, so the UI must fetch the OpenAPI document via the prefixed URL
    settings = get_container().get(Settings)
    return get_swagger_ui_html(
        openapi_url=settings.docs_openapi_url,
        title=f"{request.app.title} - Swagger UI",
    )
