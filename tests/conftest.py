from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from vehicle_catalog_api.app.core.config import settings
from vehicle_catalog_api.app.core.db import init_db
from vehicle_catalog_api.app.main import app
from vehicle_catalog_api.app.schemas.vehicle import Vehicle
from vehicle_catalog_api.app.services.vehicle_service import VehicleService
from vehicle_catalog_api.app.services.vehicle_store import VehicleStore


@pytest.fixture
def db_path(tmp_path, monkeypatch) -> str:
    path = str(tmp_path / "vehicles.db")
    monkeypatch.setattr(settings, "database_url", path)
    init_db(path)
    return path


@pytest.fixture
def store(db_path) -> VehicleStore:
    return VehicleStore(db_path)


@pytest.fixture
def service(store) -> VehicleService:
    return VehicleService(store)


@pytest.fixture
def seed(store):
    def _seed(*rows: tuple[int, int, str, str]) -> list[Vehicle]:
        vehicles = [Vehicle(*row) for row in rows]
        for vehicle in vehicles:
            store.insert(vehicle)
        return vehicles

    return _seed


@pytest.fixture
def client(db_path):
    with TestClient(app) as test_client:
        yield test_client
