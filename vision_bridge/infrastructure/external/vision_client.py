# Standard library imports
import logging
from typing import Sequence

# Local application imports
from .base_azure_client import BaseAzureClient
from ...domain.constants import VisionApi
from ...domain.gateways.vision_gateway import VisionGateway
from ...domain.models.attempt import AttemptResult

logger = logging.getLogger(__name__)


class VisionClient(BaseAzureClient, VisionGateway):
    """
    HTTP client for Azure Computer Vision.

    Exposes the current (Image Analysis 4.0) and the legacy (v3.2) analyze
    endpoints. Choosing between them is up to the caller.
    """

    async def analyze_current(self, image_url: str, features: Sequence[str]) -> AttemptResult:
        params = {
            VisionApi.API_VERSION_PARAM: VisionApi.CURRENT_API_VERSION,
            VisionApi.FEATURES_PARAM: ",".join(features),
        }
        return await self._post_image_url(VisionApi.CURRENT_PATH, params=params, image_url=image_url)

    async def analyze_legacy(self, image_url: str) -> AttemptResult:
        # v3.2 has no per-feature selection; the visual feature list is fixed
        params = {
            VisionApi.VISUAL_FEATURES_PARAM: ",".join(VisionApi.LEGACY_VISUAL_FEATURES),
            VisionApi.LANGUAGE_PARAM: VisionApi.LEGACY_LANGUAGE,
        }
        return await self._post_image_url(VisionApi.LEGACY_PATH, params=params, image_url=image_url)
