# Standard library imports
import logging
from typing import Any, Dict, Optional

# External package imports
import httpx

# Local application imports
from ...core.config import ServiceCredentials
from ...domain.constants import AzureHeaders
from ...domain.models.attempt import AttemptResult, FatalFailure, Success
from ..http_client_factory import get_shared_http_client

logger = logging.getLogger(__name__)


def _response_body(response: httpx.Response) -> Any:
    """Decoded JSON body, or the raw text when the body is not JSON."""
    try:
        return response.json()
    except ValueError:
        return response.text


class BaseAzureClient:
    """
    Base class for Azure Cognitive Services clients.

    Holds the service credentials and timeout, and performs the single
    authenticated POST every call boils down to. Calls never raise for
    upstream failures; they return a tagged AttemptResult instead.
    """

    def __init__(
        self,
        credentials: ServiceCredentials,
        timeout: float = 15.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize base Azure client.

        Args:
            credentials: Endpoint/key pair of the service
            timeout: Request timeout in seconds
            http_client: Client to send requests with. If None, the shared
                pooled client is used.
        """
        self.credentials = credentials
        self.timeout = timeout
        self._http_client = http_client

    @property
    def service_name(self) -> str:
        return self.credentials.service_name

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http_client or get_shared_http_client()

    async def _post_image_url(
        self,
        path: str,
        params: Dict[str, str],
        image_url: str,
    ) -> AttemptResult:
        """
        POST ``{"url": image_url}`` to ``path`` on the configured endpoint.

        Raises:
            ConfigurationError: If endpoint or key is missing (no request is sent)
        """
        credentials = self.credentials.require()
        url = f"{credentials.base_url}{path}"

        logger.info(f"Calling {self.service_name} API at {url}")
        try:
            response = await self.http_client.post(
                url,
                params=params,
                json={"url": image_url},
                headers={AzureHeaders.SUBSCRIPTION_KEY: credentials.key},
                timeout=self.timeout,
                follow_redirects=True,
            )
            response.raise_for_status()
            return Success(body=_response_body(response))

        except httpx.HTTPStatusError as e:
            logger.error(
                f"HTTP error from {self.service_name} API: "
                f"{e.response.status_code} - {e.response.text}"
            )
            return FatalFailure(status=e.response.status_code, body=_response_body(e.response))
        except httpx.TimeoutException:
            logger.error(f"Timeout after {self.timeout}s calling {self.service_name} API at {url}")
            return FatalFailure(status=None, reason=f"timed out after {self.timeout}s")
        except httpx.RequestError as e:
            logger.error(f"Could not reach {self.service_name} API at {url}: {e}")
            return FatalFailure(status=None, reason=str(e) or type(e).__name__)
