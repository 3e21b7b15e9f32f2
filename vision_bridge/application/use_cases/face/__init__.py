from .detect_faces import DetectFacesUseCase

__all__ = [
    "DetectFacesUseCase",
]
