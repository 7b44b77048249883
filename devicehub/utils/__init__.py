"""Utility modules for the DeviceHub backend."""

from .datetime_utils import ensure_utc, utc_now
from .keyed_lock import KeyedLock

__all__ = [
    "ensure_utc",
    "utc_now",
    "KeyedLock",
]
