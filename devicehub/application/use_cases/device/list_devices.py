# Standard library imports
import logging
from typing import List

# Local application imports
from ....domain.models.device import DeviceState
from ....domain.repositories.device_repository import DeviceRepository
from ...dto.device_dto import DeviceResponse

logger = logging.getLogger(__name__)


class ListDevicesUseCase:
    """Use case for listing every device"""

    def __init__(
        self,
        device_repository: DeviceRepository,
    ) -> None:
        self.device_repository = device_repository

    async def execute(self) -> List[DeviceResponse]:
        logger.debug("Finding all devices")
        devices = await self.device_repository.find_all()
        return [DeviceResponse.from_device(device) for device in devices]


class ListDevicesByBrandUseCase:
    """Use case for listing devices of one brand, ignoring case"""

    def __init__(
        self,
        device_repository: DeviceRepository,
    ) -> None:
        self.device_repository = device_repository

    async def execute(self, brand: str) -> List[DeviceResponse]:
        """
        List devices whose brand equals ``brand`` case-insensitively

        Args:
            brand: Brand to match

        Returns:
            List of DeviceResponse objects, empty when nothing matches
        """
        logger.debug(f"Finding devices by brand={brand}")
        devices = await self.device_repository.find_by_brand(brand)
        return [DeviceResponse.from_device(device) for device in devices]


class ListDevicesByStateUseCase:
    """Use case for listing devices in one lifecycle state"""

    def __init__(
        self,
        device_repository: DeviceRepository,
    ) -> None:
        self.device_repository = device_repository

    async def execute(self, state: DeviceState) -> List[DeviceResponse]:
        logger.debug(f"Finding devices by state={state.value}")
        devices = await self.device_repository.find_by_state(state)
        return [DeviceResponse.from_device(device) for device in devices]
