from typing import TYPE_CHECKING
from ...core.config import DEVICE_STORE_MONGO, Settings
from ...infrastructure.db.mongo_connection import (
    get_database,
    get_device_collection,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register database collections in the container.
        Nothing is registered when devices are kept in memory.
        """
        settings: Settings = container.get(Settings)
        if settings.device_store != DEVICE_STORE_MONGO:
            return

        container.register_singleton("database", get_database())
        container.register_singleton("device_collection", get_device_collection())
