# Standard library imports
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Optional

# Local application imports
from ..exceptions import DeviceValidationError
from ...utils.datetime_utils import utc_now


class DeviceState(str, Enum):
    """Lifecycle states a device can be in"""
    AVAILABLE = "AVAILABLE"
    IN_USE = "IN_USE"
    INACTIVE = "INACTIVE"


@dataclass(frozen=True)
class Device:
    """
    Pure domain model for Device entity.

    Instances are immutable snapshots. ``id`` is assigned by the repository on
    first save and ``creation_time`` is stamped by ``register``; neither has a
    mutator. Name, brand and state change only through ``with_changes``, which
    returns a new validated snapshot.
    """
    id: Optional[str]
    name: str
    brand: str
    state: DeviceState
    creation_time: datetime

    def __post_init__(self) -> None:
        """Business validations"""
        if not isinstance(self.name, str) or len(self.name.strip()) < 1:
            raise DeviceValidationError("name", "Name is required")
        if not isinstance(self.brand, str) or len(self.brand.strip()) < 1:
            raise DeviceValidationError("brand", "Brand is required")
        try:
            object.__setattr__(self, "state", DeviceState(self.state))
        except ValueError:
            raise DeviceValidationError("state", f"Unknown device state: {self.state}")
        if self.creation_time is None:
            raise DeviceValidationError("creation_time", "Creation time is required")

    @classmethod
    def register(cls, name: str, brand: str, state: DeviceState) -> "Device":
        """Build a not-yet-persisted device stamped with the current UTC time"""
        return cls(
            id=None,
            name=name,
            brand=brand,
            state=state,
            creation_time=utc_now(),
        )

    def with_changes(
        self,
        name: Optional[str] = None,
        brand: Optional[str] = None,
        state: Optional[DeviceState] = None,
    ) -> "Device":
        """Return a copy with the given fields overwritten; ``None`` keeps the current value"""
        return replace(
            self,
            name=self.name if name is None else name,
            brand=self.brand if brand is None else brand,
            state=self.state if state is None else state,
        )

    def with_id(self, device_id: str) -> "Device":
        """Attach the storage-assigned identifier to a new device"""
        if self.id is not None and self.id != device_id:
            raise DeviceValidationError("id", f"Device {self.id} cannot be re-identified")
        return replace(self, id=device_id)
