# Standard library imports
import os
from typing import Final, List, Optional


DEVICE_STORE_MONGO: Final[str] = "mongo"
DEVICE_STORE_MEMORY: Final[str] = "memory"


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Persistence backend: "mongo" or "memory"
        self.device_store: Final[str] = os.getenv("DEVICE_STORE", DEVICE_STORE_MONGO).strip().lower()
        if self.device_store not in (DEVICE_STORE_MONGO, DEVICE_STORE_MEMORY):
            raise ValueError(
                f"DEVICE_STORE must be '{DEVICE_STORE_MONGO}' or '{DEVICE_STORE_MEMORY}', "
                f"got '{self.device_store}'"
            )

        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "devicehub")

        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

        # HTTP server
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "8000"))
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv(
                "CORS_ORIGINS", "http://localhost:3000,http://localhost:5173"
            ).split(",")
            if origin.strip()
        ]


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
