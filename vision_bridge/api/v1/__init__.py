from .face_controller import router as face_router
from .meta_controller import router as meta_router
from .vision_controller import router as vision_router


__all__ = ["face_router", "meta_router", "vision_router"]
