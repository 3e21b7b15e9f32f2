# Standard library imports
from typing import Optional

# External package imports
import httpx

# Local application imports
from ..core.config import Settings, get_settings
from .base_container import BaseContainer
from .providers import CoreProvider, FaceProvider, VisionProvider


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Settings and HTTP client (CoreProvider)
    2. Azure clients and use cases (FaceProvider, VisionProvider) - depend on settings
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        super().__init__()
        self.setup(settings or get_settings(), http_client)

    def setup(self, settings: Settings, http_client: Optional[httpx.AsyncClient]) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: core → clients and use cases
        """
        CoreProvider.register(self, settings, http_client)
        FaceProvider.register(self)
        VisionProvider.register(self)


# Global container instance (singleton pattern)
_container: DIContainer | None = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    """Drop the global container so the next lookup rebuilds it from current settings."""
    global _container
    _container = None
