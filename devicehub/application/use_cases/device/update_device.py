# Standard library imports
import logging

# Local application imports
from ....domain.exceptions import BusinessRuleViolationError
from ....domain.repositories.device_repository import DeviceRepository
from ....domain.services.lifecycle_validator import check_update
from ...dto.device_dto import DeviceResponse, DeviceUpdateRequest
from .get_device import load_device_or_raise

logger = logging.getLogger(__name__)


class UpdateDeviceUseCase:
    """Use case for a full device update: name, brand and state are all overwritten"""

    def __init__(
        self,
        device_repository: DeviceRepository,
    ) -> None:
        self.device_repository = device_repository

    async def execute(self, device_id: str, request: DeviceUpdateRequest) -> DeviceResponse:
        """
        Replace the mutable fields of a device

        Any creation_time in the request is ignored.

        Args:
            device_id: ID of the device
            request: Full update request

        Returns:
            DeviceResponse with the updated device

        Raises:
            DeviceNotFoundError: If no device has this ID
            BusinessRuleViolationError: If the device's state forbids the change
        """
        logger.info(f"Updating device: id={device_id}")

        async with self.device_repository.lock(device_id):
            existing_device = await load_device_or_raise(self.device_repository, device_id)

            decision = check_update(
                existing_device.state,
                name_changed=request.name != existing_device.name,
                brand_changed=request.brand != existing_device.brand,
            )
            if not decision.allowed:
                logger.warning(
                    f"Update blocked: id={device_id}, state={existing_device.state.value}, "
                    f"reason={decision.reason}"
                )
                raise BusinessRuleViolationError(decision.reason)

            updated_device = existing_device.with_changes(
                name=request.name,
                brand=request.brand,
                state=request.state,
            )
            saved_device = await self.device_repository.save(updated_device)

        logger.info(f"Device updated successfully: id={device_id}")
        return DeviceResponse.from_device(saved_device)
