# Standard library imports
import itertools
import logging
from typing import AsyncContextManager, Dict, List, Optional

# Local application imports
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.models.device import Device, DeviceState
from ...domain.exceptions import DeviceNotFoundError
from ...utils.keyed_lock import KeyedLock

logger = logging.getLogger(__name__)


class InMemoryDeviceRepository(DeviceRepository):
    """
    Process-local implementation of DeviceRepository.

    Devices are kept in insertion order; IDs come from a counter and are
    rendered as strings so they stay opaque to callers. Stored values are
    immutable Device snapshots, so nothing handed out can alter the store.
    """

    def __init__(self) -> None:
        self._devices: Dict[str, Device] = {}
        self._ids = itertools.count(1)
        self._locks = KeyedLock()

    def lock(self, device_id: str) -> AsyncContextManager[None]:
        return self._locks.acquire(device_id)

    async def find_by_id(self, device_id: str) -> Optional[Device]:
        if not device_id:
            return None
        return self._devices.get(device_id)

    async def find_all(self) -> List[Device]:
        return list(self._devices.values())

    async def find_by_brand(self, brand: str) -> List[Device]:
        if not brand:
            return []
        wanted = brand.casefold()
        return [device for device in self._devices.values() if device.brand.casefold() == wanted]

    async def find_by_state(self, state: DeviceState) -> List[Device]:
        state = DeviceState(state)
        return [device for device in self._devices.values() if device.state == state]

    async def save(self, device: Device) -> Device:
        if not device:
            raise ValueError("Device cannot be None")

        if device.id is None:
            stored = device.with_id(str(next(self._ids)))
            logger.debug(f"Inserted device {stored.id} into memory store")
        else:
            current = self._devices.get(device.id)
            if current is None:
                raise DeviceNotFoundError(device.id)
            # Keep the stored creation time whatever the caller carried
            stored = current.with_changes(name=device.name, brand=device.brand, state=device.state)

        self._devices[stored.id] = stored
        return stored

    async def delete(self, device: Device) -> None:
        if device.id is None or self._devices.pop(device.id, None) is None:
            raise DeviceNotFoundError(str(device.id))

    def __len__(self) -> int:
        return len(self._devices)
