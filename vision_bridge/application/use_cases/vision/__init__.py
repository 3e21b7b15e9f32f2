from .analyze_image import AnalyzeImageUseCase
from .caption_image import CaptionImageUseCase
from .tag_image import TagImageUseCase

__all__ = [
    "AnalyzeImageUseCase",
    "CaptionImageUseCase",
    "TagImageUseCase",
]
