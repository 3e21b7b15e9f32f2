from abc import ABC, abstractmethod
from typing import Sequence

from ..models.attempt import AttemptResult


class VisionGateway(ABC):
    """Gateway interface - defines contract for both Computer Vision API versions"""

    @abstractmethod
    async def analyze_current(self, image_url: str, features: Sequence[str]) -> AttemptResult:
        """Analyze with the current API version, requesting the given features"""
        pass

    @abstractmethod
    async def analyze_legacy(self, image_url: str) -> AttemptResult:
        """Analyze with the legacy API version (fixed feature list)"""
        pass
