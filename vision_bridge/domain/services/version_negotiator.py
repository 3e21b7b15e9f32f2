# Standard library imports
import logging
from typing import Optional, Sequence, Tuple

# Local application imports
from ..constants import VisionApi
from ..gateways.vision_gateway import VisionGateway
from ..models.analysis import AnalysisRequest, ApiVersion, UpstreamOutcome
from ..models.attempt import AttemptResult, FatalFailure, RetryableFailure, Success

logger = logging.getLogger(__name__)

SERVICE_NAME = "Vision"


def classify_current_attempt(attempt: AttemptResult) -> AttemptResult:
    """
    Decide what a current-version attempt means for the negotiation.

    Only the statuses a deployment without the current API version answers
    with become retryable; transport failures and every other status stay fatal.
    """
    if isinstance(attempt, FatalFailure) and attempt.status in VisionApi.VERSION_UNSUPPORTED_STATUSES:
        return RetryableFailure(status=attempt.status, body=attempt.body)
    return attempt


def resolve_features(features: Optional[Sequence[str]]) -> Tuple[str, ...]:
    if features:
        return tuple(features)
    return VisionApi.DEFAULT_FEATURES


class VersionNegotiator:
    """
    Resolves one analysis request into one upstream outcome.

    Tries the current API version first and falls back to the legacy version
    once, and only when the current version reports itself unavailable.
    """

    def __init__(self, vision_gateway: VisionGateway) -> None:
        self.vision_gateway = vision_gateway

    async def resolve(self, request: AnalysisRequest) -> UpstreamOutcome:
        """
        Call the upstream service, falling back to the legacy version if needed

        Args:
            request: Analysis request (image URL and optional features)

        Returns:
            UpstreamOutcome tagged with the API version that answered

        Raises:
            ConfigurationError: If the vision service is not configured
            UpstreamError: If the chosen version answered with an error status
            TransportError: If no response was received
        """
        features = resolve_features(request.features)
        attempt = classify_current_attempt(
            await self.vision_gateway.analyze_current(request.image_url, features)
        )

        if isinstance(attempt, Success):
            return UpstreamOutcome(version_used=ApiVersion.CURRENT, raw_body=attempt.body)

        if isinstance(attempt, RetryableFailure):
            logger.warning(
                f"Vision {ApiVersion.CURRENT.value} unavailable (status {attempt.status}), "
                f"falling back to {ApiVersion.LEGACY.value}"
            )
            legacy_attempt = await self.vision_gateway.analyze_legacy(request.image_url)
            if isinstance(legacy_attempt, Success):
                return UpstreamOutcome(version_used=ApiVersion.LEGACY, raw_body=legacy_attempt.body)
            raise legacy_attempt.to_error(SERVICE_NAME)

        raise attempt.to_error(SERVICE_NAME)
