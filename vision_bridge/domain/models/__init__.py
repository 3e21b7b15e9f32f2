from .analysis import (
    AnalysisRequest,
    ApiVersion,
    NormalizedCaption,
    NormalizedTagSet,
    Tag,
    UpstreamOutcome,
)
from .attempt import AttemptResult, FatalFailure, RetryableFailure, Success
from .face import FaceDetectionRequest

__all__ = [
    "AnalysisRequest",
    "ApiVersion",
    "NormalizedCaption",
    "NormalizedTagSet",
    "Tag",
    "UpstreamOutcome",
    "AttemptResult",
    "FatalFailure",
    "RetryableFailure",
    "Success",
    "FaceDetectionRequest",
]
