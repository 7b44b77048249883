# Standard library imports
import logging

# Local application imports
from ....domain.exceptions import BusinessRuleViolationError
from ....domain.repositories.device_repository import DeviceRepository
from ....domain.services.lifecycle_validator import check_delete
from .get_device import load_device_or_raise

logger = logging.getLogger(__name__)


class DeleteDeviceUseCase:
    """Use case for deleting a device"""

    def __init__(
        self,
        device_repository: DeviceRepository,
    ) -> None:
        self.device_repository = device_repository

    async def execute(self, device_id: str) -> None:
        """
        Delete a device

        Args:
            device_id: ID of the device

        Raises:
            DeviceNotFoundError: If no device has this ID
            BusinessRuleViolationError: If the device is IN_USE
        """
        logger.info(f"Deleting device: id={device_id}")

        async with self.device_repository.lock(device_id):
            device = await load_device_or_raise(self.device_repository, device_id)

            decision = check_delete(device.state)
            if not decision.allowed:
                logger.warning(
                    f"Delete blocked: id={device_id}, state={device.state.value}, reason={decision.reason}"
                )
                raise BusinessRuleViolationError(decision.reason)

            await self.device_repository.delete(device)

        logger.info(f"Device deleted successfully: id={device_id}")
