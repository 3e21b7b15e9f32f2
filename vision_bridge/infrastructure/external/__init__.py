"""External service clients for communicating with Azure Cognitive Services"""

from .base_azure_client import BaseAzureClient
from .face_client import FaceClient
from .vision_client import VisionClient

__all__ = [
    "BaseAzureClient",
    "FaceClient",
    "VisionClient",
]
