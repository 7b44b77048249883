from typing import TYPE_CHECKING
from ...core.config import DEVICE_STORE_MEMORY, Settings
from ...domain.repositories.device_repository import DeviceRepository
from ...infrastructure.db.memory_device_repository import InMemoryDeviceRepository
from ...infrastructure.db.mongo_device_repository import MongoDeviceRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the DeviceRepository implementation chosen by DEVICE_STORE.
        """
        settings: Settings = container.get(Settings)

        if settings.device_store == DEVICE_STORE_MEMORY:
            container.register_singleton(DeviceRepository, InMemoryDeviceRepository())
            return

        container.register_singleton(
            DeviceRepository,
            MongoDeviceRepository(device_collection=container.get("device_collection")),
        )
