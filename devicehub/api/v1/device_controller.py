# Standard library imports
import logging
from typing import List, Optional

# External package imports
from fastapi import APIRouter, HTTPException, Request, Response, status

# Local application imports
from ...application.dto.device_dto import (
    DeviceCreateRequest,
    DevicePatchRequest,
    DeviceResponse,
    DeviceUpdateRequest,
)
from ...application.use_cases.device.create_device import CreateDeviceUseCase
from ...application.use_cases.device.get_device import GetDeviceUseCase
from ...application.use_cases.device.list_devices import (
    ListDevicesUseCase,
    ListDevicesByBrandUseCase,
    ListDevicesByStateUseCase,
)
from ...application.use_cases.device.update_device import UpdateDeviceUseCase
from ...application.use_cases.device.partial_update_device import PartialUpdateDeviceUseCase
from ...application.use_cases.device.delete_device import DeleteDeviceUseCase
from ...domain.exceptions import (
    BusinessRuleViolationError,
    DeviceError,
    DeviceNotFoundError,
    DeviceValidationError,
)
from ...domain.models.device import DeviceState
from ...di.container import get_container

logger = logging.getLogger(__name__)

router = APIRouter(tags=["devices"])


def _to_http_exception(exception: DeviceError) -> HTTPException:
    """Map a domain error onto the HTTP status the API documents for it"""
    if isinstance(exception, DeviceNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exception))
    if isinstance(exception, BusinessRuleViolationError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=exception.reason)
    if isinstance(exception, DeviceValidationError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "message": "Validation failed for one or more fields",
                "errors": {exception.field: exception.message},
            },
        )
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exception))


@router.post("", response_model=DeviceResponse, status_code=status.HTTP_201_CREATED)
async def create_device(
    request: DeviceCreateRequest,
    http_request: Request,
    response: Response,
) -> DeviceResponse:
    """
    Create a new device

    Args:
        request: Device creation request

    Returns:
        DeviceResponse with the created device; Location header points at it
    """
    logger.info(f"POST /devices - Creating device: name={request.name}, brand={request.brand}")
    create_device_use_case = get_container().get(CreateDeviceUseCase)

    try:
        device = await create_device_use_case.execute(request)
    except DeviceError as exception:
        raise _to_http_exception(exception)

    response.headers["Location"] = f"{http_request.url.path.rstrip('/')}/{device.id}"
    return device


@router.get("", response_model=List[DeviceResponse])
async def list_devices(
    brand: Optional[str] = None,
    state: Optional[DeviceState] = None,
) -> List[DeviceResponse]:
    """
    List devices, optionally filtered

    Args:
        brand: Case-insensitive brand filter; takes precedence over ``state``
        state: Lifecycle state filter

    Returns:
        List of DeviceResponse objects (possibly empty)
    """
    logger.info(f"GET /devices - Listing devices: brand={brand}, state={state}")
    container = get_container()

    if brand is not None:
        return await container.get(ListDevicesByBrandUseCase).execute(brand)
    if state is not None:
        return await container.get(ListDevicesByStateUseCase).execute(state)
    return await container.get(ListDevicesUseCase).execute()


@router.get("/{device_id}", response_model=DeviceResponse)
async def get_device(device_id: str) -> DeviceResponse:
    """
    Get a device by ID

    Args:
        device_id: ID of the device

    Returns:
        DeviceResponse with device information
    """
    get_device_use_case = get_container().get(GetDeviceUseCase)

    try:
        return await get_device_use_case.execute(device_id)
    except DeviceError as exception:
        raise _to_http_exception(exception)


@router.put("/{device_id}", response_model=DeviceResponse)
async def update_device(device_id: str, request: DeviceUpdateRequest) -> DeviceResponse:
    """
    Full update of a device. Name and brand cannot change while the device is IN_USE.
    """
    logger.info(f"PUT /devices/{device_id} - Updating device")
    update_device_use_case = get_container().get(UpdateDeviceUseCase)

    try:
        return await update_device_use_case.execute(device_id, request)
    except DeviceError as exception:
        raise _to_http_exception(exception)


@router.patch("/{device_id}", response_model=DeviceResponse)
async def partial_update_device(device_id: str, request: DevicePatchRequest) -> DeviceResponse:
    """
    Partial update of a device; only supplied fields change.
    Name and brand cannot change while the device is IN_USE.
    """
    logger.info(f"PATCH /devices/{device_id} - Partially updating device")
    partial_update_use_case = get_container().get(PartialUpdateDeviceUseCase)

    try:
        return await partial_update_use_case.execute(device_id, request)
    except DeviceError as exception:
        raise _to_http_exception(exception)


@router.delete("/{device_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_device(device_id: str) -> Response:
    """
    Delete a device. Devices that are IN_USE cannot be deleted.
    """
    logger.info(f"DELETE /devices/{device_id} - Deleting device")
    delete_device_use_case = get_container().get(DeleteDeviceUseCase)

    try:
        await delete_device_use_case.execute(device_id)
    except DeviceError as exception:
        raise _to_http_exception(exception)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
