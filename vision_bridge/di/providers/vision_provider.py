from typing import TYPE_CHECKING

import httpx

from ...core.config import Settings
from ...application.use_cases.vision.analyze_image import AnalyzeImageUseCase
from ...application.use_cases.vision.caption_image import CaptionImageUseCase
from ...application.use_cases.vision.tag_image import TagImageUseCase
from ...domain.services.version_negotiator import VersionNegotiator
from ...infrastructure.external.vision_client import VisionClient

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class VisionProvider:
    """Vision use case provider - registers the Vision client, negotiator and use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the Vision client (singleton), the version negotiator and
        vision use cases.
        """
        settings = container.get(Settings)
        vision_client = VisionClient(
            credentials=settings.vision_service,
            timeout=settings.upstream_timeout_seconds,
            http_client=container.get_optional(httpx.AsyncClient),
        )
        container.register_singleton(VisionClient, vision_client)

        container.register_factory(
            VersionNegotiator,
            lambda: VersionNegotiator(vision_gateway=container.get(VisionClient)),
        )

        # Register AnalyzeImageUseCase
        container.register_factory(
            AnalyzeImageUseCase,
            lambda: AnalyzeImageUseCase(negotiator=container.get(VersionNegotiator)),
        )

        # Register CaptionImageUseCase
        container.register_factory(
            CaptionImageUseCase,
            lambda: CaptionImageUseCase(negotiator=container.get(VersionNegotiator)),
        )

        # Register TagImageUseCase
        container.register_factory(
            TagImageUseCase,
            lambda: TagImageUseCase(negotiator=container.get(VersionNegotiator)),
        )
