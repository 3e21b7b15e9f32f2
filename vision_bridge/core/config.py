# Standard library imports
import os
from dataclasses import dataclass
from typing import Final, Optional

# Local application imports
from .exceptions import ConfigurationError


@dataclass(frozen=True)
class ServiceCredentials:
    """
    Endpoint/key pair for one upstream Azure service.

    Values are captured once when settings are loaded. Missing values are not
    an error until a call actually needs them (see ``require``).
    """
    service_name: str
    endpoint: str
    key: str
    endpoint_env: str
    key_env: str

    @property
    def is_configured(self) -> bool:
        return bool(self.endpoint) and bool(self.key)

    @property
    def base_url(self) -> str:
        return self.endpoint.rstrip("/")

    def require(self) -> "ServiceCredentials":
        """
        Ensure both endpoint and key are present.

        Raises:
            ConfigurationError: If either value is missing
        """
        if not self.is_configured:
            raise ConfigurationError(
                f"Missing {self.endpoint_env} or {self.key_env}",
                details={"service": self.service_name},
            )
        return self


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Azure Face API
        self.azure_face_endpoint: Final[str] = os.getenv("AZURE_FACE_ENDPOINT", "")
        self.azure_face_key: Final[str] = os.getenv("AZURE_FACE_KEY", "")

        # Azure Computer Vision
        self.azure_vision_endpoint: Final[str] = os.getenv("AZURE_VISION_ENDPOINT", "")
        self.azure_vision_key: Final[str] = os.getenv("AZURE_VISION_KEY", "")

        # Upstream call behaviour
        self.upstream_timeout_seconds: Final[float] = float(
            os.getenv("UPSTREAM_TIMEOUT_SECONDS", "15")
        )

        # Server
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "6000"))
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")

        # Docs UI loads the OpenAPI document through the reverse proxy prefix
        self.docs_openapi_url: Final[str] = os.getenv("DOCS_OPENAPI_URL", "/face/openapi.json")

    @property
    def face_service(self) -> ServiceCredentials:
        return ServiceCredentials(
            service_name="Face",
            endpoint=self.azure_face_endpoint,
            key=self.azure_face_key,
            endpoint_env="AZURE_FACE_ENDPOINT",
            key_env="AZURE_FACE_KEY",
        )

    @property
    def vision_service(self) -> ServiceCredentials:
        return ServiceCredentials(
            service_name="Vision",
            endpoint=self.azure_vision_endpoint,
            key=self.azure_vision_key,
            endpoint_env="AZURE_VISION_ENDPOINT",
            key_env="AZURE_VISION_KEY",
        )


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
