from .face import DetectFacesUseCase
from .vision import (
    AnalyzeImageUseCase,
    CaptionImageUseCase,
    TagImageUseCase,
)

__all__ = [
    "DetectFacesUseCase",
    "AnalyzeImageUseCase",
    "CaptionImageUseCase",
    "TagImageUseCase",
]
