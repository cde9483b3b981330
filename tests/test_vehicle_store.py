from __future__ import annotations

import pytest

from vehicle_catalog_api.app.core.db import init_db
from vehicle_catalog_api.app.schemas.vehicle import Vehicle
from vehicle_catalog_api.app.services.vehicle_store import StoreAccessError, VehicleStore


def test_list_all_is_ordered_by_id(store, seed) -> None:
    seed((3, 2015, "Tesla", "X"), (1, 2012, "Tesla", "S"), (2, 2001, "Ford", "Focus"))

    assert [v.id for v in store.list_all()] == [1, 2, 3]


def test_find_by_field(store, seed) -> None:
    seed((1, 2012, "Tesla", "S"), (2, 2012, "Toyota", "Camry"), (3, 2015, "Tesla", "X"))

    assert [v.id for v in store.find_by_year(2012)] == [1, 2]
    assert [v.id for v in store.find_by_make("Tesla")] == [1, 3]
    assert [v.id for v in store.find_by_model("Camry")] == [2]
    assert store.find_by_model("Model T") == []


def test_find_by_id(store, seed) -> None:
    seed((7, 1999, "Honda", "Civic"))

    assert store.find_by_id(7) == Vehicle(7, 1999, "Honda", "Civic")
    assert store.find_by_id(8) is None


def test_id_exists(store, seed) -> None:
    seed((1, 2012, "Tesla", "S"))

    assert store.id_exists(1) is True
    assert store.id_exists(2) is False


def test_insert_duplicate_id_raises(store, seed) -> None:
    seed((1, 2012, "Tesla", "S"))

    with pytest.raises(StoreAccessError):
        store.insert(Vehicle(1, 2015, "Tesla", "X"))
    assert store.find_by_id(1) == Vehicle(1, 2012, "Tesla", "S")


def test_year_constraint_enforced_by_table(store) -> None:
    with pytest.raises(StoreAccessError):
        store.insert(Vehicle(1, 1900, "Ford", "T"))


def test_updates_return_affected_rows(store, seed) -> None:
    seed((1, 2012, "Tesla", "S"))

    assert store.update_year(1, 2013) == 1
    assert store.update_make(1, "Tesla Motors") == 1
    assert store.update_model(1, "S Plaid") == 1
    assert store.update_make(99, "Nobody") == 0
    assert store.find_by_id(1) == Vehicle(1, 2013, "Tesla Motors", "S Plaid")


def test_delete_returns_affected_rows(store, seed) -> None:
    seed((1, 2012, "Tesla", "S"))

    assert store.delete(1) == 1
    assert store.delete(1) == 0
    assert store.list_all() == []


def test_unusable_database_raises_store_error(tmp_path) -> None:
    store = VehicleStore(str(tmp_path / "missing" / "vehicles.db"))

    with pytest.raises(StoreAccessError):
        store.list_all()


def test_init_db_is_idempotent(db_path) -> None:
    assert init_db(db_path) == 2
    assert init_db(db_path) == 2


def test_integer_outside_column_range_raises_store_error(store) -> None:
    with pytest.raises(StoreAccessError):
        store.find_by_id(10**20)
    with pytest.raises(StoreAccessError):
        store.insert(Vehicle(10**20, 2012, "Tesla", "S"))
