# Standard library imports
import logging
from typing import Sequence

# Local application imports
from .base_azure_client import BaseAzureClient
from ...domain.constants import FaceApi
from ...domain.gateways.face_gateway import FaceGateway
from ...domain.models.attempt import AttemptResult
from ...domain.services.face_attributes import build_detect_params

logger = logging.getLogger(__name__)


class FaceClient(BaseAzureClient, FaceGateway):
    """
    HTTP client for the Azure Face detection endpoint.
    """

    async def detect(self, image_url: str, attributes: Sequence[str]) -> AttemptResult:
        """
        Detect faces in a remote image.

        Args:
            image_url: Publicly reachable image URL
            attributes: Sanitized face attributes (may be empty)

        Returns:
            Success with the upstream face list, or FatalFailure
        """
        return await self._post_image_url(
            FaceApi.DETECT_PATH,
            params=build_detect_params(attributes),
            image_url=image_url,
        )
