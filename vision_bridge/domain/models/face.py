# Standard library imports
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FaceDetectionRequest:
    """
    Pure domain model for a face detection request.

    ``return_face_attributes`` is the raw comma-separated string supplied by
    the caller; it is sanitized before any upstream call.
    """
    image_url: str
    return_face_attributes: Optional[str] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.image_url or not self.image_url.strip():
            raise ValueError("Image URL is required")
