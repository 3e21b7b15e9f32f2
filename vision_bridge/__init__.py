"""
Face & Vision Bridge root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain logic (attribute sanitizing, API version negotiation, response
normalization) and the Azure HTTP clients.
"""
