from .device_controller import router as device_router
from .health_controller import router as health_router
from .error_handlers import register_exception_handlers


__all__ = ["device_router", "health_router", "register_exception_handlers"]
