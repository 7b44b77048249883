from .device_dto import (
    DeviceCreateRequest,
    DevicePatchRequest,
    DeviceResponse,
    DeviceUpdateRequest,
)

__all__ = [
    "DeviceCreateRequest",
    "DevicePatchRequest",
    "DeviceResponse",
    "DeviceUpdateRequest",
]
