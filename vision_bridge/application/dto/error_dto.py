from typing import Any, List, Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """DTO for configuration and transport errors"""
    error: str
    detail: Optional[str] = None


class ValidationErrorResponse(BaseModel):
    """DTO for rejected request bodies"""
    errors: List[Any]


class UnsupportedAttributesResponse(BaseModel):
    """DTO for unsupported face attributes"""
    error: str
    requested: List[str]
    allowedOptions: List[str]


class UpstreamErrorResponse(BaseModel):
    """DTO for upstream API errors"""
    error: str
    status: Optional[int] = None
    data: Any = None
