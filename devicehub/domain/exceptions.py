"""Device domain specific exceptions."""


class DeviceError(Exception):
    """Base class for device related domain errors."""


class DeviceNotFoundError(DeviceError):
    """Raised when the requested device could not be found."""

    def __init__(self, device_id: str) -> None:
        super().__init__(f"Device not found with id: {device_id}")
        self.device_id = device_id


class BusinessRuleViolationError(DeviceError):
    """Raised when a mutation conflicts with the device's lifecycle state."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class DeviceValidationError(DeviceError, ValueError):
    """Raised when a device would be built with a missing or blank field."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message
