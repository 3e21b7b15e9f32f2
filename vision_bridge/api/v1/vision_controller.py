# External package imports
from fastapi import APIRouter

# Local application imports
from ...application.dto.error_dto import (
    ErrorResponse,
    UpstreamErrorResponse,
    ValidationErrorResponse,
)
from ...application.dto.image_url_dto import ImageUrlRequest
from ...application.dto.vision_dto import (
    AnalyzeRequest,
    AnalyzeResponse,
    CaptionResponse,
    TagsResponse,
)
from ...application.use_cases.vision.analyze_image import AnalyzeImageUseCase
from ...application.use_cases.vision.caption_image import CaptionImageUseCase
from ...application.use_cases.vision.tag_image import TagImageUseCase
from ...di.container import get_container
from ...domain.models.analysis import AnalysisRequest


router = APIRouter(tags=["Vision"])

ERROR_RESPONSES = {
    400: {"model": ValidationErrorResponse, "description": "Bad request"},
    500: {"model": ErrorResponse, "description": "Server/config error"},
    502: {"model": UpstreamErrorResponse, "description": "Upstream Vision API error"},
}


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    summary="Analyze image (v4 preferred, v3.2 fallback)",
    responses=ERROR_RESPONSES,
)
async def analyze_image(request: AnalyzeRequest) -> AnalyzeResponse:
    """
    Analyze an image, returning the raw upstream body

    Args:
        request: Image URL and optional v4 feature list

    Returns:
        AnalyzeResponse with the API version that answered
    """
    container = get_container()
    analyze_image_use_case = container.get(AnalyzeImageUseCase)

    features = tuple(request.features) if request.features is not None else None
    return await analyze_image_use_case.execute(
        AnalysisRequest(image_url=request.image_url, features=features)
    )


@router.post(
    "/caption",
    response_model=CaptionResponse,
    summary="Return a caption for the image",
    responses=ERROR_RESPONSES,
)
async def caption_image(request: ImageUrlRequest) -> CaptionResponse:
    container = get_container()
    caption_image_use_case = container.get(CaptionImageUseCase)
    return await caption_image_use_case.execute(request.image_url)


@router.post(
    "/tags",
    response_model=TagsResponse,
    summary="Return tags/labels for the image",
    responses=ERROR_RESPONSES,
)
async def tag_image(request: ImageUrlRequest) -> TagsResponse:
    container = get_container()
    tag_image_use_case = container.get(TagImageUseCase)
    return await tag_image_use_case.execute(request.image_url)
