from typing import TYPE_CHECKING

import httpx

from ...core.config import Settings
from ...application.use_cases.face.detect_faces import DetectFacesUseCase
from ...infrastructure.external.face_client import FaceClient

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class FaceProvider:
    """Face use case provider - registers the Face client and use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the Face client (singleton) and face use cases.
        Use cases are created on-demand via factories.
        """
        settings = container.get(Settings)
        face_client = FaceClient(
            credentials=settings.face_service,
            timeout=settings.upstream_timeout_seconds,
            http_client=container.get_optional(httpx.AsyncClient),
        )
        container.register_singleton(FaceClient, face_client)

        container.register_factory(
            DetectFacesUseCase,
            lambda: DetectFacesUseCase(face_gateway=container.get(FaceClient)),
        )
