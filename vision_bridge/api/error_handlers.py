"""Mapping of bridge and validation errors onto structured JSON responses."""
# Standard library imports
import logging

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Local application imports
from ..core.exceptions import BridgeError, ExternalServiceError

logger = logging.getLogger(__name__)


async def bridge_error_handler(request: Request, exc: BridgeError) -> JSONResponse:
    if isinstance(exc, ExternalServiceError):
        logger.error(f"{request.method} {request.url.path} failed: {exc.message} ({exc.details})")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(exc.to_payload()))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": jsonable_encoder(exc.errors())},
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} crashed: {exc!r}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Server error"},
    )


def register_exception_handlers(application: FastAPI) -> None:
    application.add_exception_handler(BridgeError, bridge_error_handler)
    application.add_exception_handler(RequestValidationError, request_validation_handler)
    application.add_exception_handler(Exception, unexpected_error_handler)
