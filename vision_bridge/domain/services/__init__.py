from .face_attributes import build_detect_params, sanitize_face_attributes
from .response_normalizer import (
    CurrentVersionBody,
    LegacyVersionBody,
    project_analysis,
    project_caption,
    project_tags,
    read_body,
)
from .version_negotiator import VersionNegotiator, classify_current_attempt, resolve_features

__all__ = [
    "build_detect_params",
    "sanitize_face_attributes",
    "CurrentVersionBody",
    "LegacyVersionBody",
    "project_analysis",
    "project_caption",
    "project_tags",
    "read_body",
    "VersionNegotiator",
    "classify_current_attempt",
    "resolve_features",
]
