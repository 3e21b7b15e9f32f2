from .config import ServiceCredentials, Settings, get_settings
from .exceptions import (
    BridgeError,
    ConfigurationError,
    TransportError,
    UnsupportedFaceAttributesError,
    UpstreamError,
    ValidationError,
)
from .logging_config import configure_logging

__all__ = [
    "ServiceCredentials",
    "Settings",
    "get_settings",
    "BridgeError",
    "ConfigurationError",
    "TransportError",
    "UnsupportedFaceAttributesError",
    "UpstreamError",
    "ValidationError",
    "configure_logging",
]
