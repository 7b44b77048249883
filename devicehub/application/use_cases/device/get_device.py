# Standard library imports
import logging

# Local application imports
from ....domain.exceptions import DeviceNotFoundError
from ....domain.models.device import Device
from ....domain.repositories.device_repository import DeviceRepository
from ...dto.device_dto import DeviceResponse

logger = logging.getLogger(__name__)


async def load_device_or_raise(device_repository: DeviceRepository, device_id: str) -> Device:
    """Load a device, raising DeviceNotFoundError when it does not exist"""
    device = await device_repository.find_by_id(device_id)
    if device is None:
        logger.warning(f"Device not found: id={device_id}")
        raise DeviceNotFoundError(device_id)
    return device


class GetDeviceUseCase:
    """Use case for getting a device by ID"""

    def __init__(
        self,
        device_repository: DeviceRepository,
    ) -> None:
        self.device_repository = device_repository

    async def execute(self, device_id: str) -> DeviceResponse:
        """
        Get a device by ID

        Args:
            device_id: ID of the device

        Returns:
            DeviceResponse with device information

        Raises:
            DeviceNotFoundError: If no device has this ID
        """
        logger.debug(f"Finding device by id={device_id}")
        device = await load_device_or_raise(self.device_repository, device_id)
        return DeviceResponse.from_device(device)
