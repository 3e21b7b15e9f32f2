from .face_gateway import FaceGateway
from .vision_gateway import VisionGateway

__all__ = ["FaceGateway", "VisionGateway"]
