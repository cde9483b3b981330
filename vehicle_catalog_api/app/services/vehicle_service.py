"""
Service layer for the vehicle catalog.

``VehicleService`` sits between the API routers and ``VehicleStore``.
For mutations it asks the store the one question a rule needs
answered, runs the rule from ``vehicle_rules`` and only then writes.
For reads it composes filtered listings.

Listing semantics: with no filter the whole catalog is returned in
store order.  With filters, matches for ``year``, then ``make``, then
``model`` are concatenated and duplicates dropped, keeping the first
occurrence.  Filters are OR-combined, so a vehicle matching any of
them is listed once.

Updates are applied field by field.  When the requested year is out
of range the present ``make``/``model`` values are still written and
the year is left untouched before ``InvalidYearError`` is raised.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from vehicle_catalog_api.app.core.exceptions import (
    IdConflictError,
    IdNotFoundError,
    InvalidYearError,
    VehicleError,
)
from vehicle_catalog_api.app.schemas.vehicle import Vehicle, VehicleCreate, VehicleUpdate
from vehicle_catalog_api.app.services.vehicle_rules import (
    validate_create,
    validate_deletion,
    validate_fetch,
    validate_update,
    validate_year,
)
from vehicle_catalog_api.app.services.vehicle_store import StoreAccessError, VehicleStore

logger = logging.getLogger(__name__)


class VehicleService:
    """Validation, query composition and persistence orchestration for vehicles."""

    def __init__(self, store: Optional[VehicleStore] = None) -> None:
        self.store = store or VehicleStore()

    async def list_vehicles(
        self,
        year: Optional[int] = None,
        make: Optional[str] = None,
        model: Optional[str] = None,
    ) -> List[Vehicle]:
        """Return the catalog, optionally filtered by year, make or model."""
        if year is None and make is None and model is None:
            return self.store.list_all()

        lookups = []
        # Stored years always satisfy validate_year, so any other year matches nothing.
        if year is not None and validate_year(year):
            lookups.append((self.store.find_by_year, year))
        if make is not None:
            lookups.append((self.store.find_by_make, make))
        if model is not None:
            lookups.append((self.store.find_by_model, model))

        result: List[Vehicle] = []
        seen: set[Vehicle] = set()
        for lookup, value in lookups:
            for vehicle in lookup(value):
                if vehicle not in seen:
                    seen.add(vehicle)
                    result.append(vehicle)
        return result

    async def get_vehicle(self, vehicle_id: int) -> Vehicle:
        try:
            vehicle = self.store.find_by_id(vehicle_id)
        except StoreAccessError:
            vehicle = None
        validate_fetch(vehicle is not None)
        return vehicle

    async def create_vehicle(self, data: VehicleCreate) -> Vehicle:
        """Validate and insert a new vehicle.

        The existence lookup is skipped when fields are missing so the
        rule reports ``MissingFields`` without touching the store.  A
        primary-key violation on insert (a concurrent create with the
        same id) is reported as ``IdConflict``.
        """
        id_exists = False
        if not data.missing_fields():
            id_exists = self._id_exists(data.id)
        try:
            validate_create(data, id_exists)
        except VehicleError as exc:
            logger.info("Rejected create of vehicle %s: %s", data.id, exc.kind.value)
            raise

        vehicle = Vehicle(id=data.id, year=data.year, make=data.make, model=data.model)
        try:
            self.store.insert(vehicle)
        except StoreAccessError as exc:
            logger.warning("Insert of vehicle %s failed: %s", vehicle.id, exc)
            raise IdConflictError() from exc
        logger.info("Created vehicle %s", vehicle.id)
        return vehicle

    async def update_vehicle(self, data: VehicleUpdate) -> Vehicle:
        """Apply the fields present in ``data`` to an existing vehicle."""
        id_exists = data.id is not None and self._id_exists(data.id)
        try:
            validate_update(data, id_exists)
        except InvalidYearError:
            self._apply_text_fields(data)
            logger.info("Rejected year %s for vehicle %s", data.year, data.id)
            raise
        except VehicleError as exc:
            logger.info("Rejected update of vehicle %s: %s", data.id, exc.kind.value)
            raise

        if data.year is not None:
            self._write(self.store.update_year, data.id, data.year)
        self._apply_text_fields(data)
        logger.info("Updated vehicle %s", data.id)
        return await self.get_vehicle(data.id)

    async def delete_vehicle(self, vehicle_id: int) -> None:
        try:
            deleted = self.store.delete(vehicle_id)
        except StoreAccessError:
            deleted = 0
        validate_deletion(deleted)
        logger.info("Deleted vehicle %s", vehicle_id)

    def _id_exists(self, vehicle_id: int) -> bool:
        # An unreadable store reads as "absent": create then fails on insert
        # (IdConflict), update fails with IdNotFound.
        try:
            return self.store.id_exists(vehicle_id)
        except StoreAccessError:
            return False

    def _apply_text_fields(self, data: VehicleUpdate) -> None:
        if data.make is not None:
            self._write(self.store.update_make, data.id, data.make)
        if data.model is not None:
            self._write(self.store.update_model, data.id, data.model)

    def _write(self, update, vehicle_id: int, value) -> None:
        """Run one field update; a failed store access reads as an unknown id."""
        try:
            update(vehicle_id, value)
        except StoreAccessError as exc:
            logger.warning("Update of vehicle %s failed: %s", vehicle_id, exc)
            raise IdNotFoundError() from exc
