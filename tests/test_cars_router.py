# tests/test_cars_router.py
"""HTTP tests for the cars router, against an in-memory SQLite session."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from fastapi.testclient import TestClient
from app.config import settings
from app.database import get_db
from app.main import app


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def create(client, plate="B-MT-3001", **extra):
    return client.post("/api/v1/cars", json={"license_plate": plate, **extra})


class TestCarsRouter:
    def test_create_car(self, client):
        resp = create(client, engine_type="ELECTRIC", manufacturer="Tesla")
        assert resp.status_code == 201
        body = resp.json()
        assert body["license_plate"] == "B-MT-3001"
        assert body["seat_count"] == settings.DEFAULT_SEAT_COUNT
        assert body["is_available"] is True
        assert body["deleted"] is False

    def test_duplicate_plate_returns_400(self, client):
        create(client)
        resp = create(client)
        assert resp.status_code == 400
        assert resp.json()["detail"]

    def test_invalid_engine_type_rejected(self, client):
        assert create(client, engine_type="STEAM").status_code == 422

    def test_get_missing_car_returns_404(self, client):
        resp = client.get("/api/v1/cars/404")
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Could not find entity with id: 404"

    def test_select_twice_returns_409(self, client):
        car_id = create(client).json()["id"]

        assert client.put(f"/api/v1/cars/{car_id}/select").status_code == 200
        resp = client.put(f"/api/v1/cars/{car_id}/select")

        assert resp.status_code == 409
        assert client.get(f"/api/v1/cars/{car_id}").json()["is_available"] is False

    def test_deselect_releases_car(self, client):
        car_id = create(client).json()["id"]
        client.put(f"/api/v1/cars/{car_id}/select")

        resp = client.put(f"/api/v1/cars/{car_id}/deselect")

        assert resp.status_code == 200
        assert resp.json() == {"status": "deselected", "car_id": car_id}
        assert client.get(f"/api/v1/cars/{car_id}").json()["is_available"] is True

    def test_delete_is_soft(self, client):
        car_id = create(client).json()["id"]

        assert client.delete(f"/api/v1/cars/{car_id}").status_code == 200

        resp = client.get(f"/api/v1/cars/{car_id}")
        assert resp.status_code == 200
        assert resp.json()["deleted"] is True

    def test_list_by_availability(self, client):
        first = create(client, "B-MT-1").json()["id"]
        second = create(client, "B-MT-2").json()["id"]
        client.put(f"/api/v1/cars/{second}/select")

        available = [c["id"] for c in client.get("/api/v1/cars").json()]
        in_use = [c["id"] for c in client.get("/api/v1/cars", params={"is_available": False}).json()]

        assert available == [first]
        assert in_use == [second]

    def test_health(self, client):
        body = client.get("/api/v1/health").json()
        assert body["status"] == "ok"
        assert body["database"] == "ok"
