"""Constants for upstream APIs and response field names"""

from .analysis_fields import CurrentVersionFields, LegacyVersionFields, TagFields
from .azure_constants import AzureHeaders, FaceApi, VisionApi

__all__ = [
    "CurrentVersionFields",
    "LegacyVersionFields",
    "TagFields",
    "AzureHeaders",
    "FaceApi",
    "VisionApi",
]
