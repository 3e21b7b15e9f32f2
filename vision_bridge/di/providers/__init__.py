from .core_provider import CoreProvider
from .face_provider import FaceProvider
from .vision_provider import VisionProvider


__all__ = [
    "CoreProvider",
    "FaceProvider",
    "VisionProvider",
]
