from typing import Optional

from pydantic import Field, StrictStr

from .image_url_dto import ImageUrlRequest


class FaceDetectRequest(ImageUrlRequest):
    """DTO for face detection request"""
    return_face_attributes: Optional[StrictStr] = Field(
        default=None,
        alias="returnFaceAttributes",
        description='Optional. Only "qualityForRecognition" is supported by Azure.',
        examples=["qualityForRecognition"],
    )
