from .lifecycle_validator import LifecycleDecision, check_delete, check_update

__all__ = ["LifecycleDecision", "check_delete", "check_update"]
