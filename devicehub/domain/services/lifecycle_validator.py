"""
Lifecycle rules for device mutations.

Each lifecycle state maps to an explicit rule for updates and for deletion.
Both tables must cover every DeviceState; the module refuses to import
otherwise, so adding a state forces a decision here.
"""

# Standard library imports
from dataclasses import dataclass
from typing import Callable, Dict, Optional

# Local application imports
from ..models.device import DeviceState


IN_USE_IDENTITY_FROZEN_REASON = "cannot modify name or brand while device is IN_USE"
IN_USE_DELETE_REASON = "cannot delete device with state IN_USE"


@dataclass(frozen=True)
class LifecycleDecision:
    """Outcome of a lifecycle check; ``reason`` is set only on denial"""
    allowed: bool
    reason: Optional[str] = None

    @classmethod
    def allow(cls) -> "LifecycleDecision":
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str) -> "LifecycleDecision":
        return cls(allowed=False, reason=reason)


UpdateRule = Callable[[bool, bool], LifecycleDecision]


def _allow_any_update(name_changed: bool, brand_changed: bool) -> LifecycleDecision:
    return LifecycleDecision.allow()


def _freeze_identity(name_changed: bool, brand_changed: bool) -> LifecycleDecision:
    if name_changed or brand_changed:
        return LifecycleDecision.deny(IN_USE_IDENTITY_FROZEN_REASON)
    return LifecycleDecision.allow()


UPDATE_RULES: Dict[DeviceState, UpdateRule] = {
    DeviceState.AVAILABLE: _allow_any_update,
    DeviceState.IN_USE: _freeze_identity,
    DeviceState.INACTIVE: _allow_any_update,
}

DELETE_RULES: Dict[DeviceState, LifecycleDecision] = {
    DeviceState.AVAILABLE: LifecycleDecision.allow(),
    DeviceState.IN_USE: LifecycleDecision.deny(IN_USE_DELETE_REASON),
    DeviceState.INACTIVE: LifecycleDecision.allow(),
}


def _ensure_exhaustive(table_name: str, table: Dict[DeviceState, object]) -> None:
    missing = set(DeviceState) - set(table)
    if missing:
        names = ", ".join(sorted(state.value for state in missing))
        raise RuntimeError(f"{table_name} has no rule for device state(s): {names}")


_ensure_exhaustive("UPDATE_RULES", UPDATE_RULES)
_ensure_exhaustive("DELETE_RULES", DELETE_RULES)


def check_update(
    current_state: DeviceState,
    name_changed: bool,
    brand_changed: bool,
) -> LifecycleDecision:
    """
    Decide whether an update may proceed.

    Args:
        current_state: State of the persisted device
        name_changed: Whether the update sets name to a different value
        brand_changed: Whether the update sets brand to a different value

    Returns:
        LifecycleDecision; denied decisions carry a caller-facing reason
    """
    return UPDATE_RULES[current_state](name_changed, brand_changed)


def check_delete(current_state: DeviceState) -> LifecycleDecision:
    """Decide whether a device in ``current_state`` may be deleted"""
    return DELETE_RULES[current_state]
