"""
Unit tests for the lifecycle rules that gate updates and deletes.
"""
import pytest

from devicehub.domain.models.device import DeviceState
from devicehub.domain.services.lifecycle_validator import (
    DELETE_RULES,
    IN_USE_DELETE_REASON,
    IN_USE_IDENTITY_FROZEN_REASON,
    UPDATE_RULES,
    check_delete,
    check_update,
)


class TestRuleTables:
    """Every state must have an explicit rule"""

    def test_update_rules_cover_every_state(self):
        assert set(UPDATE_RULES) == set(DeviceState)

    def test_delete_rules_cover_every_state(self):
        assert set(DELETE_RULES) == set(DeviceState)


class TestCheckUpdate:
    """Tests for check_update"""

    @pytest.mark.parametrize("state", [DeviceState.AVAILABLE, DeviceState.INACTIVE])
    @pytest.mark.parametrize("name_changed", [True, False])
    @pytest.mark.parametrize("brand_changed", [True, False])
    def test_unrestricted_states_always_allow(self, state, name_changed, brand_changed):
        decision = check_update(state, name_changed, brand_changed)
        assert decision.allowed
        assert decision.reason is None

    @pytest.mark.parametrize(
        "name_changed,brand_changed",
        [(True, False), (False, True), (True, True)],
    )
    def test_in_use_denies_identity_change(self, name_changed, brand_changed):
        decision = check_update(DeviceState.IN_USE, name_changed, brand_changed)
        assert not decision.allowed
        assert decision.reason == IN_USE_IDENTITY_FROZEN_REASON

    def test_in_use_allows_state_only_change(self):
        decision = check_update(DeviceState.IN_USE, name_changed=False, brand_changed=False)
        assert decision.allowed


class TestCheckDelete:
    """Tests for check_delete"""

    def test_in_use_cannot_be_deleted(self):
        decision = check_delete(DeviceState.IN_USE)
        assert not decision.allowed
        assert decision.reason == IN_USE_DELETE_REASON

    @pytest.mark.parametrize("state", [DeviceState.AVAILABLE, DeviceState.INACTIVE])
    def test_other_states_can_be_deleted(self, state):
        assert check_delete(state).allowed
