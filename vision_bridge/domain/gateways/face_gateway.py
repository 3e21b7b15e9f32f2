from abc import ABC, abstractmethod
from typing import Sequence

from ..models.attempt import AttemptResult


class FaceGateway(ABC):
    """Gateway interface - defines contract for the face detection service"""

    @abstractmethod
    async def detect(self, image_url: str, attributes: Sequence[str]) -> AttemptResult:
        """Detect faces in the image at image_url, requesting the given attributes"""
        pass
