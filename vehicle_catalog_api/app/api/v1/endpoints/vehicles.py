"""
Vehicle endpoints for API v1.

These routes expose the catalog: a filtered listing, lookup by id,
creation, partial update and deletion.  Rule violations raised by
``VehicleService`` are turned into JSON error responses by the
exception handler registered in ``main.create_app``.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from vehicle_catalog_api.app.schemas.vehicle import (
    ErrorRead,
    VehicleCreate,
    VehicleRead,
    VehicleUpdate,
)
from vehicle_catalog_api.app.services.vehicle_service import VehicleService

router = APIRouter()

_ERRORS = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorRead},
    status.HTTP_404_NOT_FOUND: {"model": ErrorRead},
    status.HTTP_409_CONFLICT: {"model": ErrorRead},
}


def get_vehicle_service() -> VehicleService:
    return VehicleService()


@router.get("/", response_model=List[VehicleRead])
async def list_vehicles(
    year: Optional[int] = Query(None),
    make: Optional[str] = Query(None),
    model: Optional[str] = Query(None),
    service: VehicleService = Depends(get_vehicle_service),
) -> List[VehicleRead]:
    """List vehicles.

    Without query parameters every vehicle is returned.  Each supplied
    parameter adds its matches to the result (OR semantics); a vehicle
    matching several parameters appears once.
    """
    vehicles = await service.list_vehicles(year=year, make=make, model=model)
    return [VehicleRead.model_validate(v) for v in vehicles]


@router.get("/{vehicle_id}", response_model=VehicleRead, responses=_ERRORS)
async def get_vehicle(
    vehicle_id: int,
    service: VehicleService = Depends(get_vehicle_service),
) -> VehicleRead:
    """Retrieve a single vehicle by its ID.  Returns 404 if absent."""
    return VehicleRead.model_validate(await service.get_vehicle(vehicle_id))


@router.post("/", response_model=VehicleRead, status_code=status.HTTP_201_CREATED, responses=_ERRORS)
async def create_vehicle(
    vehicle_in: VehicleCreate,
    service: VehicleService = Depends(get_vehicle_service),
) -> VehicleRead:
    """Create a vehicle.

    All of ``id``, ``year``, ``make`` and ``model`` are required (400),
    the id must be free (409) and the year within 1950–2050 (400).
    """
    return VehicleRead.model_validate(await service.create_vehicle(vehicle_in))


@router.put("/", response_model=VehicleRead, responses=_ERRORS)
async def update_vehicle(
    vehicle_in: VehicleUpdate,
    service: VehicleService = Depends(get_vehicle_service),
) -> VehicleRead:
    """Update the vehicle whose ``id`` is given in the body.

    Only the fields present in the body are changed.
    """
    return VehicleRead.model_validate(await service.update_vehicle(vehicle_in))


@router.delete("/{vehicle_id}", status_code=status.HTTP_204_NO_CONTENT, responses=_ERRORS)
async def delete_vehicle(
    vehicle_id: int,
    service: VehicleService = Depends(get_vehicle_service),
) -> None:
    await service.delete_vehicle(vehicle_id)
    return None
