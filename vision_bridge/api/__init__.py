"""
API layer for the bridge.

Exposes the Face and Vision endpoints, the health check, the OpenAPI
document and the Swagger UI.
"""
