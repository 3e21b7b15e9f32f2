"""
Fixtures for API tests: the real application wired to a recording upstream.
"""
from contextlib import contextmanager
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from vision_bridge.di.container import DIContainer

CONTROLLER_MODULES = (
    "vision_bridge.api.v1.face_controller",
    "vision_bridge.api.v1.vision_controller",
    "vision_bridge.api.v1.meta_controller",
)


@contextmanager
def _serve(settings, upstream):
    from vision_bridge.main import app

    container = DIContainer(settings=settings, http_client=upstream.client())
    patches = [patch(f"{module}.get_container", return_value=container) for module in CONTROLLER_MODULES]
    for p in patches:
        p.start()
    try:
        with TestClient(app) as c:
            yield c
    finally:
        for p in patches:
            p.stop()


@pytest.fixture
def client(settings, upstream):
    """Test client whose Azure calls go to the recording upstream."""
    with _serve(settings, upstream) as c:
        yield c


@pytest.fixture
def unconfigured_client(unconfigured_settings, upstream):
    """Test client with no Azure endpoints or keys configured."""
    with _serve(unconfigured_settings, upstream) as c:
        yield c
