from __future__ import annotations

import pytest

from vehicle_catalog_api.app.core.exceptions import (
    ErrorKind,
    IdConflictError,
    IdNotFoundError,
    InvalidYearError,
    MissingFieldsError,
    MissingIdError,
    VehicleError,
    VehicleNotFoundError,
)
from vehicle_catalog_api.app.schemas.vehicle import VehicleCreate, VehicleUpdate
from vehicle_catalog_api.app.services.vehicle_rules import (
    MAX_YEAR,
    MIN_YEAR,
    validate_create,
    validate_deletion,
    validate_fetch,
    validate_update,
    validate_year,
)

FULL = {"id": 1, "year": 2012, "make": "Tesla", "model": "S"}


@pytest.mark.parametrize("year", range(1900, 2101))
def test_validate_year_matches_closed_interval(year: int) -> None:
    assert validate_year(year) == (1950 <= year <= 2050)


def test_year_bounds_are_inclusive() -> None:
    assert validate_year(MIN_YEAR)
    assert validate_year(MAX_YEAR)
    assert not validate_year(MIN_YEAR - 1)
    assert not validate_year(MAX_YEAR + 1)


@pytest.mark.parametrize(
    "absent",
    [("id",), ("year",), ("make",), ("model",), ("year", "make"), ("id", "year", "make", "model")],
)
def test_create_with_absent_fields_is_missing_fields(absent: tuple[str, ...]) -> None:
    data = VehicleCreate(**{k: v for k, v in FULL.items() if k not in absent})

    with pytest.raises(MissingFieldsError) as exc_info:
        validate_create(data, id_exists=False)

    assert exc_info.value.kind is ErrorKind.MISSING_FIELDS


def test_create_missing_fields_wins_over_conflict_and_year() -> None:
    data = VehicleCreate(id=1, year=1900, make="Tesla")

    with pytest.raises(MissingFieldsError):
        validate_create(data, id_exists=True)


def test_create_conflict_wins_over_invalid_year() -> None:
    data = VehicleCreate(**{**FULL, "year": 1900})

    with pytest.raises(IdConflictError):
        validate_create(data, id_exists=True)


@pytest.mark.parametrize("year", [1900, 1949, 2051, 2100])
def test_create_rejects_out_of_range_year(year: int) -> None:
    with pytest.raises(InvalidYearError):
        validate_create(VehicleCreate(**{**FULL, "year": year}), id_exists=False)


def test_create_accepts_complete_vehicle() -> None:
    assert validate_create(VehicleCreate(**FULL), id_exists=False) is None


def test_blank_text_counts_as_missing() -> None:
    data = VehicleCreate(**{**FULL, "make": "   "})

    assert data.make is None
    with pytest.raises(MissingFieldsError):
        validate_create(data, id_exists=False)


def test_text_fields_are_stripped() -> None:
    data = VehicleCreate(**{**FULL, "make": "  Tesla ", "model": "S\n"})

    assert (data.make, data.model) == ("Tesla", "S")


def test_update_without_id() -> None:
    with pytest.raises(MissingIdError):
        validate_update(VehicleUpdate(make="Tesla"), id_exists=False)


def test_update_unknown_id() -> None:
    with pytest.raises(IdNotFoundError):
        validate_update(VehicleUpdate(id=5, year=1900), id_exists=False)


def test_update_unknown_id_wins_over_invalid_year() -> None:
    with pytest.raises(IdNotFoundError):
        validate_update(VehicleUpdate(id=5, year=2100), id_exists=False)


def test_update_invalid_year() -> None:
    with pytest.raises(InvalidYearError):
        validate_update(VehicleUpdate(id=5, year=2051, make="Tesla"), id_exists=True)


def test_update_with_only_text_fields_passes() -> None:
    assert validate_update(VehicleUpdate(id=5, model="X"), id_exists=True) is None


def test_deletion_requires_a_removed_row() -> None:
    assert validate_deletion(1) is None
    with pytest.raises(VehicleNotFoundError) as exc_info:
        validate_deletion(0)
    assert exc_info.value.message == "Cannot delete non-existent vehicle"


def test_fetch_not_found() -> None:
    assert validate_fetch(True) is None
    with pytest.raises(VehicleNotFoundError) as exc_info:
        validate_fetch(False)
    assert exc_info.value.message == "Cannot get non-existent vehicle"


@pytest.mark.parametrize(
    ("error", "status_code"),
    [
        (MissingFieldsError, 400),
        (IdConflictError, 409),
        (InvalidYearError, 400),
        (MissingIdError, 400),
        (IdNotFoundError, 404),
        (VehicleNotFoundError, 404),
    ],
)
def test_error_status_codes(error: type[VehicleError], status_code: int) -> None:
    assert error().status_code == status_code
