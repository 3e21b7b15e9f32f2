# Local application imports
from ....domain.constants import VisionApi
from ....domain.models.analysis import AnalysisRequest
from ....domain.services.response_normalizer import project_caption
from ....domain.services.version_negotiator import VersionNegotiator
from ...dto.vision_dto import CaptionResponse


class CaptionImageUseCase:
    """Use case for captioning an image"""

    def __init__(self, negotiator: VersionNegotiator) -> None:
        self.negotiator = negotiator

    async def execute(self, image_url: str) -> CaptionResponse:
        """
        Caption an image

        Args:
            image_url: Publicly reachable image URL

        Returns:
            CaptionResponse with caption text and confidence (None when absent)
        """
        outcome = await self.negotiator.resolve(
            AnalysisRequest(image_url=image_url, features=VisionApi.CAPTION_FEATURES)
        )
        caption = project_caption(outcome)
        return CaptionResponse(
            version=caption.version_used.value,
            caption=caption.caption,
            confidence=caption.confidence,
            raw=caption.raw,
        )
