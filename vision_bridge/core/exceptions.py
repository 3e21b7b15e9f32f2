"""
Exception hierarchy for the bridge.

Every error carries the HTTP status it maps to and renders its own
machine-parseable payload, so the API layer can translate any of them into a
JSON response without inspecting the type.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, List, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class BridgeError(Exception):
    """Base exception for all bridge errors."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.message}


# -----------------------------------------------------------------------------
# Client-caused
# -----------------------------------------------------------------------------


class ValidationError(BridgeError):
    """Raised when a request is rejected before any upstream call."""

    status_code = 400


class UnsupportedFaceAttributesError(ValidationError):
    """Raised when none of the requested face attributes is supported."""

    def __init__(self, requested: List[str], allowed: List[str]):
        super().__init__(
            "Unsupported returnFaceAttributes",
            details={"requested": requested, "allowed": allowed},
        )
        self.requested = requested
        self.allowed = allowed

    def to_payload(self) -> Dict[str, Any]:
        return {
            "error": self.message,
            "requested": self.requested,
            "allowedOptions": self.allowed,
        }


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------


class ConfigurationError(BridgeError):
    """Raised when an upstream endpoint or key is not configured."""

    status_code = 500


# -----------------------------------------------------------------------------
# Upstream services
# -----------------------------------------------------------------------------


class ExternalServiceError(BridgeError):
    """Base exception for upstream service failures."""

    def __init__(self, message: str, service_name: str, **kwargs):
        super().__init__(message, **kwargs)
        self.service_name = service_name


class UpstreamError(ExternalServiceError):
    """Raised when the upstream answered with a non-success HTTP status."""

    DEFAULT_STATUS = 502

    def __init__(self, service_name: str, upstream_status: Optional[int], body: Any = None):
        super().__init__(
            f"Upstream {service_name} API error",
            service_name=service_name,
            details={"status": upstream_status},
        )
        self.upstream_status = upstream_status
        self.body = body

    @property
    def status_code(self) -> int:  # type: ignore[override]
        return self.upstream_status or self.DEFAULT_STATUS

    def to_payload(self) -> Dict[str, Any]:
        return {
            "error": self.message,
            "status": self.upstream_status,
            "data": self.body,
        }


class TransportError(ExternalServiceError):
    """Raised when no upstream response was received (network failure, timeout)."""

    status_code = 500

    def __init__(self, service_name: str, reason: str):
        super().__init__(
            f"{service_name} API unreachable",
            service_name=service_name,
            details={"reason": reason},
        )
        self.reason = reason

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.message, "detail": self.reason}
