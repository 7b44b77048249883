"""
Shared pytest fixtures for DeviceHub tests.
"""
import os
from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from devicehub.domain.models.device import Device, DeviceState
from devicehub.infrastructure.db.memory_device_repository import InMemoryDeviceRepository


CREATED_AT = datetime(2026, 1, 18, 16, 30, 0, tzinfo=timezone.utc)


def make_device(
    device_id: str | None = "1",
    name: str = "MacBook Pro 16",
    brand: str = "Apple",
    state: DeviceState = DeviceState.AVAILABLE,
    creation_time: datetime = CREATED_AT,
) -> Device:
    return Device(
        id=device_id,
        name=name,
        brand=brand,
        state=state,
        creation_time=creation_time,
    )


@pytest.fixture
def memory_env():
    """Fixture to select the in-memory device store."""
    env_vars = {
        "DEVICE_STORE": "memory",
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_devicehub",
        "LOG_LEVEL": "DEBUG",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def memory_repository():
    return InMemoryDeviceRepository()


@pytest.fixture
def device_factory():
    """Build persisted-looking Device snapshots with sensible defaults."""
    return make_device
