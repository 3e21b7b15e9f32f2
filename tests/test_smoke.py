"""
Smoke test - the application object builds and exposes the bridge routes.
Run: pytest tests/test_smoke.py -v
"""


def test_application_registers_bridge_routes():
    from vision_bridge.main import app

    routes = {(route.path, method) for route in app.routes for method in getattr(route, "methods", None) or ()}

    for path in ("/face/detect", "/vision/analyze", "/vision/caption", "/vision/tags"):
        assert (path, "POST") in routes
    for path in ("/healthz", "/openapi.json", "/docs", "/docs/"):
        assert (path, "GET") in routes


def test_default_openapi_routes_are_disabled():
    """Only the proxy-aware document and docs UI are served."""
    from vision_bridge.main import app

    assert app.openapi_url is None
    assert app.docs_url is None
    assert app.redoc_url is None
