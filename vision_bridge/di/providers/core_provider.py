from typing import TYPE_CHECKING, Optional

import httpx

from ...core.config import Settings

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CoreProvider:
    """Core provider - registers settings and the optional injected HTTP client"""

    @staticmethod
    def register(
        container: "BaseContainer",
        settings: Settings,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        container.register_singleton(Settings, settings)

        # Without an explicit client the Azure clients use the shared pooled one
        if http_client is not None:
            container.register_singleton(httpx.AsyncClient, http_client)
