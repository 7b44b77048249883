"""
Integration tests for the /api/v1/devices endpoints.
Uses TestClient with a real container backed by the in-memory store (no DB).
"""
from unittest.mock import AsyncMock, patch

import pytest

pytestmark = pytest.mark.integration
from fastapi.testclient import TestClient

from devicehub.application.use_cases.device.list_devices import ListDevicesUseCase
from devicehub.core.config import Settings
from devicehub.di.container import DIContainer


BASE_URL = "/api/v1/devices"


@pytest.fixture
def container(memory_env):
    return DIContainer(Settings())


@pytest.fixture
def client(container):
    """Create test client wired to an in-memory container."""
    from devicehub.main import app

    with patch("devicehub.api.v1.device_controller.get_container", return_value=container):
        with TestClient(app, raise_server_exceptions=False) as c:
            yield c


def _create(client, name="MacBook Pro 16", brand="Apple", state="AVAILABLE"):
    response = client.post(BASE_URL, json={"name": name, "brand": brand, "state": state})
    assert response.status_code == 201
    return response.json()


class TestCreateDevice:
    """Tests for POST /api/v1/devices"""

    def test_create_returns_201_with_location(self, client):
        response = client.post(BASE_URL, json={"name": "MacBook Pro 16", "brand": "Apple", "state": "AVAILABLE"})
        assert response.status_code == 201
        data = response.json()
        assert data["id"]
        assert data["name"] == "MacBook Pro 16"
        assert data["brand"] == "Apple"
        assert data["state"] == "AVAILABLE"
        assert data["creation_time"]
        assert response.headers["location"] == f"{BASE_URL}/{data['id']}"

    @pytest.mark.parametrize(
        "payload,field",
        [
            ({"name": "", "brand": "Apple", "state": "AVAILABLE"}, "name"),
            ({"name": "   ", "brand": "Apple", "state": "AVAILABLE"}, "name"),
            ({"name": "MacBook", "brand": " ", "state": "AVAILABLE"}, "brand"),
            ({"name": "MacBook", "brand": "Apple"}, "state"),
            ({"name": "MacBook", "brand": "Apple", "state": "BROKEN"}, "state"),
        ],
    )
    def test_invalid_payload_returns_400_per_field(self, client, payload, field):
        response = client.post(BASE_URL, json=payload)
        assert response.status_code == 400
        data = response.json()
        assert data["detail"] == "Validation failed for one or more fields"
        assert field in data["errors"]


class TestReadDevices:
    """Tests for GET endpoints"""

    def test_get_by_id(self, client):
        created = _create(client)
        response = client.get(f"{BASE_URL}/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_get_missing_returns_404(self, client):
        response = client.get(f"{BASE_URL}/12345")
        assert response.status_code == 404
        assert "12345" in response.json()["detail"]

    def test_list_all(self, client):
        _create(client)
        _create(client, name="Pixel 8", brand="Google")
        response = client.get(BASE_URL)
        assert response.status_code == 200
        assert len(response.json()) == 2

    def test_list_empty(self, client):
        response = client.get(BASE_URL)
        assert response.status_code == 200
        assert response.json() == []

    def test_filter_by_brand_ignores_case(self, client):
        apple = _create(client)
        _create(client, name="Pixel 8", brand="Google")
        for brand in ("apple", "APPLE", "Apple"):
            response = client.get(BASE_URL, params={"brand": brand})
            assert response.status_code == 200
            assert [device["id"] for device in response.json()] == [apple["id"]]

    def test_filter_by_brand_no_match_is_empty(self, client):
        _create(client)
        response = client.get(BASE_URL, params={"brand": "Nokia"})
        assert response.status_code == 200
        assert response.json() == []

    def test_filter_by_state(self, client):
        _create(client)
        in_use = _create(client, name="Pixel 8", brand="Google", state="IN_USE")
        response = client.get(BASE_URL, params={"state": "IN_USE"})
        assert [device["id"] for device in response.json()] == [in_use["id"]]

    def test_brand_filter_takes_precedence(self, client):
        apple = _create(client, state="AVAILABLE")
        response = client.get(BASE_URL, params={"brand": "apple", "state": "INACTIVE"})
        assert [device["id"] for device in response.json()] == [apple["id"]]

    def test_invalid_state_filter_returns_400(self, client):
        response = client.get(BASE_URL, params={"state": "LOST"})
        assert response.status_code == 400


class TestUpdateDevice:
    """Tests for PUT and PATCH"""

    def test_put_replaces_fields_and_keeps_creation_time(self, client):
        created = _create(client)
        response = client.put(
            f"{BASE_URL}/{created['id']}",
            json={
                "name": "Galaxy S24",
                "brand": "Samsung",
                "state": "INACTIVE",
                "creation_time": "1999-01-01T00:00:00Z",
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Galaxy S24"
        assert data["brand"] == "Samsung"
        assert data["state"] == "INACTIVE"
        assert data["creation_time"] == created["creation_time"]

    def test_put_requires_every_field(self, client):
        created = _create(client)
        response = client.put(f"{BASE_URL}/{created['id']}", json={"state": "IN_USE"})
        assert response.status_code == 400
        assert {"name", "brand"} <= set(response.json()["errors"])

    def test_put_missing_device_returns_404(self, client):
        response = client.put(
            f"{BASE_URL}/999", json={"name": "X", "brand": "Y", "state": "AVAILABLE"}
        )
        assert response.status_code == 404

    def test_put_in_use_rename_returns_409(self, client):
        created = _create(client, state="IN_USE")
        response = client.put(
            f"{BASE_URL}/{created['id']}",
            json={"name": "MacBook Pro 14", "brand": "Apple", "state": "IN_USE"},
        )
        assert response.status_code == 409
        assert response.json()["detail"] == "cannot modify name or brand while device is IN_USE"

    def test_patch_in_use_brand_returns_409(self, client):
        created = _create(client, state="IN_USE")
        response = client.patch(f"{BASE_URL}/{created['id']}", json={"brand": "Samsung"})
        assert response.status_code == 409

    def test_patch_empty_body_is_noop(self, client):
        created = _create(client)
        response = client.patch(f"{BASE_URL}/{created['id']}", json={})
        assert response.status_code == 200
        assert response.json() == created

    def test_patch_blank_name_returns_400(self, client):
        created = _create(client)
        response = client.patch(f"{BASE_URL}/{created['id']}", json={"name": "  "})
        assert response.status_code == 400
        assert "name" in response.json()["errors"]


class TestDeleteDevice:
    """Tests for DELETE"""

    def test_delete_returns_204(self, client):
        created = _create(client)
        response = client.delete(f"{BASE_URL}/{created['id']}")
        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"{BASE_URL}/{created['id']}").status_code == 404

    def test_delete_in_use_returns_409(self, client):
        created = _create(client, state="IN_USE")
        response = client.delete(f"{BASE_URL}/{created['id']}")
        assert response.status_code == 409
        assert response.json()["detail"] == "cannot delete device with state IN_USE"
        assert client.get(f"{BASE_URL}/{created['id']}").json() == created

    def test_delete_missing_returns_404(self, client):
        assert client.delete(f"{BASE_URL}/404").status_code == 404


class TestUnexpectedErrors:
    """Unclassified failures surface as an opaque 500"""

    def test_repository_failure_returns_opaque_500(self, container, client):
        failing = AsyncMock(spec=ListDevicesUseCase)
        failing.execute.side_effect = RuntimeError("Error listing devices: connection refused")
        container.register_factory(ListDevicesUseCase, lambda: failing)

        response = client.get(BASE_URL)

        assert response.status_code == 500
        assert response.json() == {"detail": "An unexpected error occurred"}


class TestHealth:
    def test_health_up(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "UP"}
