from typing import Any, List, Optional

from pydantic import BaseModel, Field, StrictStr

from .image_url_dto import ImageUrlRequest


class AnalyzeRequest(ImageUrlRequest):
    """DTO for image analysis request"""
    features: Optional[List[StrictStr]] = Field(
        default=None,
        description="Azure Vision v4 features (Caption, Tags, Objects); omit to use defaults.",
        examples=[["Caption", "Tags", "Objects"]],
    )


class AnalyzeResponse(BaseModel):
    """DTO for image analysis response"""
    version: str
    data: Any = None


class CaptionResponse(BaseModel):
    """DTO for caption response"""
    version: str
    caption: Optional[str] = None
    confidence: Optional[float] = None
    raw: Any = None


class TagResponse(BaseModel):
    """DTO for a single tag"""
    name: Optional[str] = None
    confidence: Optional[float] = None


class TagsResponse(BaseModel):
    """DTO for tags response"""
    version: str
    count: int
    tags: List[TagResponse]
    raw: Any = None
