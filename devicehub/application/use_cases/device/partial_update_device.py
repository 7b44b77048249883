# Standard library imports
import logging

# Local application imports
from ....domain.exceptions import BusinessRuleViolationError
from ....domain.repositories.device_repository import DeviceRepository
from ....domain.services.lifecycle_validator import check_update
from ...dto.device_dto import DevicePatchRequest, DeviceResponse
from .get_device import load_device_or_raise

logger = logging.getLogger(__name__)


class PartialUpdateDeviceUseCase:
    """Use case for a partial device update: only supplied fields are applied"""

    def __init__(
        self,
        device_repository: DeviceRepository,
    ) -> None:
        self.device_repository = device_repository

    async def execute(self, device_id: str, request: DevicePatchRequest) -> DeviceResponse:
        """
        Apply the supplied fields of a patch to a device

        Args:
            device_id: ID of the device
            request: Patch request; None fields are left as they are

        Returns:
            DeviceResponse with the updated device (unchanged for an empty patch)

        Raises:
            DeviceNotFoundError: If no device has this ID
            BusinessRuleViolationError: If the device's state forbids the change
        """
        logger.info(f"Partially updating device: id={device_id}")

        async with self.device_repository.lock(device_id):
            existing_device = await load_device_or_raise(self.device_repository, device_id)

            decision = check_update(
                existing_device.state,
                name_changed=request.name is not None and request.name != existing_device.name,
                brand_changed=request.brand is not None and request.brand != existing_device.brand,
            )
            if not decision.allowed:
                logger.warning(
                    f"Partial update blocked: id={device_id}, state={existing_device.state.value}, "
                    f"reason={decision.reason}"
                )
                raise BusinessRuleViolationError(decision.reason)

            if request.name is None and request.brand is None and request.state is None:
                logger.info(f"Empty patch for device {device_id}, nothing to save")
                return DeviceResponse.from_device(existing_device)

            updated_device = existing_device.with_changes(
                name=request.name,
                brand=request.brand,
                state=request.state,
            )
            saved_device = await self.device_repository.save(updated_device)

        logger.info(f"Device partially updated successfully: id={device_id}")
        return DeviceResponse.from_device(saved_device)
