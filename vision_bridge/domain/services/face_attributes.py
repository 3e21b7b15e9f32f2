"""Sanitizing of the ``returnFaceAttributes`` request field."""
from typing import Dict, List, Optional, Sequence

from ...core.exceptions import UnsupportedFaceAttributesError
from ..constants import FaceApi


def sanitize_face_attributes(
    raw: Optional[str],
    allowed: Sequence[str] = FaceApi.ALLOWED_ATTRIBUTES,
) -> List[str]:
    """
    Reduce a comma-separated attribute string to the supported attributes.

    Args:
        raw: Attribute list as sent by the caller, or None
        allowed: Attribute names the upstream accepts

    Returns:
        Supported attributes in request order; empty means detection only

    Raises:
        UnsupportedFaceAttributesError: If tokens were supplied but none is supported
    """
    if not raw:
        return []

    requested = [token.strip() for token in raw.split(",") if token.strip()]
    accepted = [token for token in requested if token in allowed]
    if requested and not accepted:
        raise UnsupportedFaceAttributesError(requested=requested, allowed=list(allowed))
    return accepted


def build_detect_params(attributes: Sequence[str]) -> Dict[str, str]:
    """
    Query parameters for a detection call.

    Requesting any attribute requires a recognition model, so the two
    parameters are always added together.
    """
    params = {
        FaceApi.RETURN_FACE_ID: "false",
        FaceApi.DETECTION_MODEL: FaceApi.DETECTION_MODEL_ID,
        FaceApi.RETURN_FACE_LANDMARKS: "false",
    }
    if attributes:
        params[FaceApi.RETURN_FACE_ATTRIBUTES] = ",".join(attributes)
        params[FaceApi.RECOGNITION_MODEL] = FaceApi.RECOGNITION_MODEL_ID
    return params
