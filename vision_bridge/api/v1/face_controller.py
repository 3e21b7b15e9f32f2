# External package imports
from fastapi import APIRouter
from fastapi.responses import JSONResponse

# Local application imports
from ...application.dto.error_dto import (
    ErrorResponse,
    UnsupportedAttributesResponse,
    UpstreamErrorResponse,
)
from ...application.dto.face_dto import FaceDetectRequest
from ...application.use_cases.face.detect_faces import DetectFacesUseCase
from ...di.container import get_container
from ...domain.models.face import FaceDetectionRequest


router = APIRouter(tags=["Face"])


@router.post(
    "/detect",
    summary="Detect faces (optionally qualityForRecognition)",
    response_class=JSONResponse,
    responses={
        200: {"description": "OK - Azure Face API response array"},
        400: {"model": UnsupportedAttributesResponse, "description": "Bad request"},
        500: {"model": ErrorResponse, "description": "Server/config error"},
        502: {"model": UpstreamErrorResponse, "description": "Upstream Face API error"},
    },
)
async def detect_faces(request: FaceDetectRequest) -> JSONResponse:
    """
    Detect faces in a remote image

    Args:
        request: Face detection request

    Returns:
        Azure Face API response, unchanged
    """
    container = get_container()
    detect_faces_use_case = container.get(DetectFacesUseCase)

    body = await detect_faces_use_case.execute(
        FaceDetectionRequest(
            image_url=request.image_url,
            return_face_attributes=request.return_face_attributes,
        )
    )
    return JSONResponse(content=body)
