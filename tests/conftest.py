"""
Shared pytest fixtures for bridge tests.
"""
import os
from typing import Callable, Dict, List, Union
from unittest.mock import patch

import httpx
import pytest

from vision_bridge.core.config import Settings

FACE_ENDPOINT = "https://face.example.cognitiveservices.azure.com/"
VISION_ENDPOINT = "https://vision.example.cognitiveservices.azure.com"

CURRENT_PATH = "/computervision/imageanalysis:analyze"
LEGACY_PATH = "/vision/v3.2/analyze"
FACE_PATH = "/face/v1.0/detect"

Route = Union[httpx.Response, Callable[[httpx.Request], httpx.Response]]


class RecordingUpstream:
    """
    Stand-in for the Azure endpoints.

    Answers each request from ``routes`` (keyed by URL path) and records every
    request it receives, so tests can assert on call counts and query strings.
    """

    def __init__(self) -> None:
        self.routes: Dict[str, Route] = {}
        self.requests: List[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            raise AssertionError(f"Unexpected upstream call to {request.url}")
        if callable(route):
            return route(request)
        return route

    def calls_to(self, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport)


@pytest.fixture
def azure_env():
    """Fixture to set Azure endpoints and keys for both services."""
    env_vars = {
        "AZURE_FACE_ENDPOINT": FACE_ENDPOINT,
        "AZURE_FACE_KEY": "test-face-key",
        "AZURE_VISION_ENDPOINT": VISION_ENDPOINT,
        "AZURE_VISION_KEY": "test-vision-key",
        "UPSTREAM_TIMEOUT_SECONDS": "15",
        "DOCS_OPENAPI_URL": "/face/openapi.json",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def unconfigured_env():
    """Fixture that blanks out every Azure endpoint and key."""
    env_vars = {
        "AZURE_FACE_ENDPOINT": "",
        "AZURE_FACE_KEY": "",
        "AZURE_VISION_ENDPOINT": "",
        "AZURE_VISION_KEY": "",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def settings(azure_env) -> Settings:
    return Settings()


@pytest.fixture
def unconfigured_settings(unconfigured_env) -> Settings:
    return Settings()


@pytest.fixture
def upstream() -> RecordingUpstream:
    return RecordingUpstream()
