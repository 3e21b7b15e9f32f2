# Local application imports
from ....domain.constants import VisionApi
from ....domain.models.analysis import AnalysisRequest
from ....domain.services.response_normalizer import project_tags
from ....domain.services.version_negotiator import VersionNegotiator
from ...dto.vision_dto import TagResponse, TagsResponse


class TagImageUseCase:
    """Use case for tagging an image"""

    def __init__(self, negotiator: VersionNegotiator) -> None:
        self.negotiator = negotiator

    async def execute(self, image_url: str) -> TagsResponse:
        outcome = await self.negotiator.resolve(
            AnalysisRequest(image_url=image_url, features=VisionApi.TAGS_FEATURES)
        )
        tag_set = project_tags(outcome)
        return TagsResponse(
            version=tag_set.version_used.value,
            count=tag_set.count,
            tags=[TagResponse(name=tag.name, confidence=tag.confidence) for tag in tag_set.tags],
            raw=tag_set.raw,
        )
