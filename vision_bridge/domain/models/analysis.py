# Standard library imports
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Tuple


class ApiVersion(str, Enum):
    """Computer Vision API revision that produced a response."""
    CURRENT = "v4"
    LEGACY = "v3.2"


@dataclass(frozen=True)
class AnalysisRequest:
    """
    Pure domain model for an image analysis request.

    ``features`` is passed to the current API version as-is; values outside
    the advertised set are not rejected locally.
    """
    image_url: str
    features: Optional[Tuple[str, ...]] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.image_url or not self.image_url.strip():
            raise ValueError("Image URL is required")


@dataclass(frozen=True)
class UpstreamOutcome:
    """The single response chosen by the version negotiator."""
    version_used: ApiVersion
    raw_body: Any


@dataclass(frozen=True)
class Tag:
    name: Optional[str]
    confidence: Optional[float]


@dataclass(frozen=True)
class NormalizedCaption:
    version_used: ApiVersion
    caption: Optional[str]
    confidence: Optional[float]
    raw: Any


@dataclass(frozen=True)
class NormalizedTagSet:
    version_used: ApiVersion
    tags: List[Tag] = field(default_factory=list)
    raw: Any = None

    @property
    def count(self) -> int:
        return len(self.tags)
