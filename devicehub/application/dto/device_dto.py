from datetime import datetime
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, Field, StringConstraints

from ...domain.models.device import Device, DeviceState


def _reject_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


DeviceText = Annotated[
    str,
    StringConstraints(min_length=1, max_length=255),
    AfterValidator(_reject_blank),
]


class DeviceCreateRequest(BaseModel):
    """DTO for device creation request"""
    name: DeviceText = Field(examples=["MacBook Pro"])
    brand: DeviceText = Field(examples=["Apple"])
    state: DeviceState = Field(examples=["AVAILABLE"])


class DeviceUpdateRequest(BaseModel):
    """DTO for full device update (PUT); every mutable field is required"""
    name: DeviceText = Field(examples=["MacBook Pro 16"])
    brand: DeviceText = Field(examples=["Apple"])
    state: DeviceState = Field(examples=["IN_USE"])
    # Accepted so clients can send back a full snapshot; never applied
    creation_time: Optional[datetime] = None


class DevicePatchRequest(BaseModel):
    """DTO for partial device update (PATCH); absent fields are left untouched"""
    name: Optional[DeviceText] = None
    brand: Optional[DeviceText] = None
    state: Optional[DeviceState] = None
    # Accepted so clients can send back a full snapshot; never applied
    creation_time: Optional[datetime] = None


class DeviceResponse(BaseModel):
    """DTO for device response"""
    id: str
    name: str
    brand: str
    state: DeviceState
    creation_time: datetime

    @classmethod
    def from_device(cls, device: Device) -> "DeviceResponse":
        if device.id is None:
            raise ValueError("Cannot build a response for a device that has not been saved")
        return cls(
            id=device.id,
            name=device.name,
            brand=device.brand,
            state=device.state,
            creation_time=device.creation_time,
        )
