from .device import (
    CreateDeviceUseCase,
    GetDeviceUseCase,
    ListDevicesUseCase,
    ListDevicesByBrandUseCase,
    ListDevicesByStateUseCase,
    UpdateDeviceUseCase,
    PartialUpdateDeviceUseCase,
    DeleteDeviceUseCase,
)

__all__ = [
    "CreateDeviceUseCase",
    "GetDeviceUseCase",
    "ListDevicesUseCase",
    "ListDevicesByBrandUseCase",
    "ListDevicesByStateUseCase",
    "UpdateDeviceUseCase",
    "PartialUpdateDeviceUseCase",
    "DeleteDeviceUseCase",
]
