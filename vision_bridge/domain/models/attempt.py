# Standard library imports
from dataclasses import dataclass
from typing import Any, Optional, Union

# Local application imports
from ...core.exceptions import ExternalServiceError, TransportError, UpstreamError


@dataclass(frozen=True)
class Success:
    """Upstream answered with a 2xx status."""
    body: Any


@dataclass(frozen=True)
class RetryableFailure:
    """Upstream failure that justifies one retry against the legacy API version."""
    status: int
    body: Any = None

    def to_error(self, service_name: str) -> ExternalServiceError:
        return UpstreamError(service_name, self.status, self.body)


@dataclass(frozen=True)
class FatalFailure:
    """
    Upstream failure that must be surfaced to the caller.

    ``status`` is None when no HTTP response was received at all
    (network failure, timeout); ``reason`` then describes what happened.
    """
    status: Optional[int]
    body: Any = None
    reason: str = ""

    @property
    def is_transport_failure(self) -> bool:
        return self.status is None

    def to_error(self, service_name: str) -> ExternalServiceError:
        if self.is_transport_failure:
            return TransportError(service_name, self.reason or "no response from upstream")
        return UpstreamError(service_name, self.status, self.body)


AttemptResult = Union[Success, RetryableFailure, FatalFailure]
