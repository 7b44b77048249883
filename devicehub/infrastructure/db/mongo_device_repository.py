# Standard library imports
from typing import Any, AsyncContextManager, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.collation import Collation, CollationStrength

# Local application imports
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.models.device import Device, DeviceState
from ...domain.constants import DeviceFields
from ...domain.exceptions import DeviceNotFoundError, DeviceValidationError
from ...utils.datetime_utils import ensure_utc
from ...utils.keyed_lock import KeyedLock
from .mongo_connection import get_device_collection


# Case-insensitive equality for brand lookups
BRAND_COLLATION = Collation(locale="en", strength=CollationStrength.SECONDARY)


def _to_object_id(device_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(device_id)
    except (InvalidId, TypeError):
        return None


class MongoDeviceRepository(DeviceRepository):
    """MongoDB implementation of DeviceRepository"""

    def __init__(self, device_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.device_collection = device_collection if device_collection is not None else get_device_collection()
        self._locks = KeyedLock()

    def lock(self, device_id: str) -> AsyncContextManager[None]:
        # Any hex spelling of the same ObjectId must share one lock
        object_id = _to_object_id(device_id) if device_id else None
        return self._locks.acquire(str(object_id) if object_id is not None else device_id)

    async def find_by_id(self, device_id: str) -> Optional[Device]:
        """Find device by ID; malformed IDs simply do not match"""
        object_id = _to_object_id(device_id) if device_id else None
        if object_id is None:
            return None

        try:
            document = await self.device_collection.find_one({DeviceFields.MONGO_ID: object_id})
            if document is None:
                return None
            return self._document_to_device(document)
        except Exception as e:
            raise RuntimeError(f"Error finding device by ID: {str(e)}") from e

    async def find_all(self) -> List[Device]:
        return await self._find_many({}, "Error listing devices")

    async def find_by_brand(self, brand: str) -> List[Device]:
        """Find devices by brand using a case-insensitive collation"""
        if not brand:
            return []
        return await self._find_many(
            {DeviceFields.BRAND: brand},
            "Error listing devices by brand",
            collation=BRAND_COLLATION,
        )

    async def find_by_state(self, state: DeviceState) -> List[Device]:
        return await self._find_many(
            {DeviceFields.STATE: DeviceState(state).value},
            "Error listing devices by state",
        )

    async def save(self, device: Device) -> Device:
        """Save device (insert when it has no ID, update otherwise)"""
        if not device:
            raise ValueError("Device cannot be None")

        if device.id is None:
            return await self._insert(device)
        return await self._update(device)

    async def delete(self, device: Device) -> None:
        object_id = _to_object_id(device.id) if device.id else None
        if object_id is None:
            raise DeviceNotFoundError(str(device.id))

        try:
            delete_result = await self.device_collection.delete_one({DeviceFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error deleting device: {str(e)}") from e

        if delete_result.deleted_count == 0:
            raise DeviceNotFoundError(device.id)

    async def _insert(self, device: Device) -> Device:
        device_dict = self._device_to_dict(device)
        try:
            result = await self.device_collection.insert_one(device_dict)
        except Exception as e:
            raise RuntimeError(f"Error saving device: {str(e)}") from e
        return device.with_id(str(result.inserted_id))

    async def _update(self, device: Device) -> Device:
        object_id = _to_object_id(device.id)
        if object_id is None:
            raise DeviceNotFoundError(device.id)

        # creation_time is written once on insert and never included in $set
        changes = {
            DeviceFields.NAME: device.name,
            DeviceFields.BRAND: device.brand,
            DeviceFields.STATE: device.state.value,
        }
        try:
            update_result = await self.device_collection.update_one(
                {DeviceFields.MONGO_ID: object_id},
                {"$set": changes},
            )
            if update_result.matched_count == 0:
                raise DeviceNotFoundError(device.id)
            updated_document = await self.device_collection.find_one({DeviceFields.MONGO_ID: object_id})
            if updated_document is None:
                raise DeviceNotFoundError(device.id)
            return self._document_to_device(updated_document)
        except DeviceNotFoundError:
            raise
        except Exception as e:
            raise RuntimeError(f"Error saving device: {str(e)}") from e

    async def _find_many(self, query: Dict[str, Any], error_message: str, **find_kwargs: Any) -> List[Device]:
        try:
            cursor = self.device_collection.find(query, **find_kwargs)
            devices = []
            async for document in cursor:
                devices.append(self._document_to_device(document))
            return devices
        except Exception as e:
            raise RuntimeError(f"{error_message}: {str(e)}") from e

    def _document_to_device(self, document: Dict[str, Any]) -> Device:
        """Convert MongoDB document to Device domain model; a corrupt document is a storage fault"""
        if not document:
            raise RuntimeError("Invalid document: document is None or empty")

        try:
            return Device(
                id=str(document[DeviceFields.MONGO_ID]),
                name=document.get(DeviceFields.NAME, ""),
                brand=document.get(DeviceFields.BRAND, ""),
                state=DeviceState(document.get(DeviceFields.STATE)),
                creation_time=ensure_utc(document.get(DeviceFields.CREATION_TIME)),
            )
        except (DeviceValidationError, KeyError, ValueError) as e:
            raise RuntimeError(
                f"Invalid device document {document.get(DeviceFields.MONGO_ID)}: {str(e)}"
            ) from e

    def _device_to_dict(self, device: Device) -> Dict[str, Any]:
        """Convert a new Device domain model to a MongoDB document"""
        return {
            DeviceFields.NAME: device.name,
            DeviceFields.BRAND: device.brand,
            DeviceFields.STATE: device.state.value,
            DeviceFields.CREATION_TIME: device.creation_time,
        }
