# Local application imports
from ....domain.models.analysis import AnalysisRequest
from ....domain.services.response_normalizer import project_analysis
from ....domain.services.version_negotiator import VersionNegotiator
from ...dto.vision_dto import AnalyzeResponse


class AnalyzeImageUseCase:
    """Use case for full image analysis (raw upstream body)"""

    def __init__(self, negotiator: VersionNegotiator) -> None:
        self.negotiator = negotiator

    async def execute(self, request: AnalysisRequest) -> AnalyzeResponse:
        """
        Analyze an image with the caller's features

        Args:
            request: Analysis request

        Returns:
            AnalyzeResponse with the answering API version and its raw body
        """
        outcome = await self.negotiator.resolve(request)
        return AnalyzeResponse(**project_analysis(outcome))
