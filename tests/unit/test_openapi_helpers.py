"""
Unit tests for the proxy-aware OpenAPI helpers.
"""
from vision_bridge.api.openapi import external_base_url


class TestExternalBaseUrl:
    """Tests for external_base_url"""

    def test_direct_request(self):
        assert external_base_url({"host": "localhost:6000"}, "http") == "http://localhost:6000"

    def test_forwarded_headers(self):
        headers = {
            "host": "127.0.0.1:6000",
            "x-forwarded-proto": "https",
            "x-forwarded-host": "api.example.com",
            "x-forwarded-prefix": "/face",
        }
        assert external_base_url(headers, "http") == "https://api.example.com/face"

    def test_prefix_only(self):
        headers = {"host": "api.example.com", "x-forwarded-prefix": "/face"}
        assert external_base_url(headers, "http") == "http://api.example.com/face"
