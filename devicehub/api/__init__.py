"""
API layer for the DeviceHub backend.

Exposes the device CRUD endpoints under /api/v1/devices and a /health probe.
"""
