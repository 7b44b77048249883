from abc import ABC, abstractmethod
from typing import AsyncContextManager, List, Optional
from ..models.device import Device, DeviceState


class DeviceRepository(ABC):
    """Repository interface - defines contract for device data access"""

    @abstractmethod
    async def find_by_id(self, device_id: str) -> Optional[Device]:
        """Find device by ID"""
        pass

    @abstractmethod
    async def find_all(self) -> List[Device]:
        """Find every device"""
        pass

    @abstractmethod
    async def find_by_brand(self, brand: str) -> List[Device]:
        """Find devices whose brand matches, ignoring case"""
        pass

    @abstractmethod
    async def find_by_state(self, state: DeviceState) -> List[Device]:
        """Find devices in the given lifecycle state"""
        pass

    @abstractmethod
    async def save(self, device: Device) -> Device:
        """Save device (create when it has no id, update otherwise)"""
        pass

    @abstractmethod
    async def delete(self, device: Device) -> None:
        """Remove a persisted device"""
        pass

    @abstractmethod
    def lock(self, device_id: str) -> AsyncContextManager[None]:
        """
        Serialize writers of one device.

        A load-validate-save sequence run inside this context is not
        interleaved with another writer of the same device id.
        """
        pass
