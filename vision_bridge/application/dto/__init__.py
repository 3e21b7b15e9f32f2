from .error_dto import (
    ErrorResponse,
    UnsupportedAttributesResponse,
    UpstreamErrorResponse,
    ValidationErrorResponse,
)
from .face_dto import FaceDetectRequest
from .image_url_dto import ImageUrlRequest
from .vision_dto import (
    AnalyzeRequest,
    AnalyzeResponse,
    CaptionResponse,
    TagResponse,
    TagsResponse,
)

__all__ = [
    "ErrorResponse",
    "UnsupportedAttributesResponse",
    "UpstreamErrorResponse",
    "ValidationErrorResponse",
    "FaceDetectRequest",
    "AnalyzeRequest",
    "AnalyzeResponse",
    "CaptionResponse",
    "ImageUrlRequest",
    "TagResponse",
    "TagsResponse",
]
