# Standard library imports
import logging

# Local application imports
from ....domain.repositories.device_repository import DeviceRepository
from ....domain.models.device import Device
from ...dto.device_dto import DeviceCreateRequest, DeviceResponse

logger = logging.getLogger(__name__)


class CreateDeviceUseCase:
    """Use case for creating a new device"""

    def __init__(
        self,
        device_repository: DeviceRepository,
    ) -> None:
        self.device_repository = device_repository

    async def execute(self, request: DeviceCreateRequest) -> DeviceResponse:
        """
        Create a new device

        Args:
            request: Device creation request

        Returns:
            DeviceResponse with the persisted device, including its assigned ID

        Raises:
            DeviceValidationError: If name or brand is blank
        """
        logger.info(
            f"Creating device: name={request.name}, brand={request.brand}, state={request.state.value}"
        )

        # Create domain device entity; creation time is stamped here once
        new_device = Device.register(
            name=request.name,
            brand=request.brand,
            state=request.state,
        )

        saved_device = await self.device_repository.save(new_device)

        logger.info(f"Device created successfully: id={saved_device.id}")
        return DeviceResponse.from_device(saved_device)
