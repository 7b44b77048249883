"""
DeviceHub backend: root package.

This package contains the FastAPI app entry point (main.py), API routes,
the device domain and its lifecycle rules, use cases, and infrastructure
(MongoDB and in-memory repositories, dependency injection).
"""
