# Standard library imports
import logging
from typing import Any

# Local application imports
from ....domain.gateways.face_gateway import FaceGateway
from ....domain.models.attempt import Success
from ....domain.models.face import FaceDetectionRequest
from ....domain.services.face_attributes import sanitize_face_attributes

logger = logging.getLogger(__name__)


class DetectFacesUseCase:
    """Use case for detecting faces in a remote image"""

    def __init__(self, face_gateway: FaceGateway) -> None:
        self.face_gateway = face_gateway

    async def execute(self, request: FaceDetectionRequest) -> Any:
        """
        Detect faces, optionally with qualityForRecognition

        Args:
            request: Face detection request

        Returns:
            The upstream response body, unchanged

        Raises:
            UnsupportedFaceAttributesError: If only unsupported attributes were requested
            ConfigurationError: If the Face service is not configured
            UpstreamError: If the Face API answered with an error status
            TransportError: If the Face API could not be reached
        """
        attributes = sanitize_face_attributes(request.return_face_attributes)
        if attributes:
            logger.info(f"Face detection with attributes {attributes}")

        attempt = await self.face_gateway.detect(request.image_url, attributes)
        if isinstance(attempt, Success):
            return attempt.body
        raise attempt.to_error("Face")
