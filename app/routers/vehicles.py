"""Fleet vehicles — CRUD over the Vehicles collection"""

from fastapi import APIRouter, Depends
from app.database import get_vehicle_repository
from app.schemas.vehicle import Vehicle
from app.services.exceptions import NotFoundError
from app.services.vehicle_service import VehicleRepository

router = APIRouter()


@router.get("/vehicles", response_model=dict[str, Vehicle],
            summary="List fleet vehicles keyed by plate number")
def list_vehicles(repo: VehicleRepository = Depends(get_vehicle_repository)):
    return repo.get()


@router.post("/vehicles", response_model=Vehicle, summary="Add a vehicle to the fleet")
def add_vehicle(body: Vehicle, repo: VehicleRepository = Depends(get_vehicle_repository)):
    return repo.add(body)


@router.put("/vehicles", response_model=Vehicle, summary="Replace a vehicle's details")
def edit_vehicle(body: Vehicle, repo: VehicleRepository = Depends(get_vehicle_repository)):
    """All fields are required; a payload identical to the stored record is rejected."""
    return repo.edit(body)


@router.delete("/vehicles/{plate}", summary="Remove a vehicle from the fleet")
def remove_vehicle(plate: str, repo: VehicleRepository = Depends(get_vehicle_repository)):
    repo.delete(plate)
    return {"status": "removed", "plate": plate}


@router.get("/vehicles/lookup/{plate}", summary="Look up a plate number")
def lookup_vehicle(plate: str, repo: VehicleRepository = Depends(get_vehicle_repository)):
    try:
        vehicle = repo.get_vehicle(plate)
    except NotFoundError:
        return {"plate": plate, "status": "unknown", "registered": False}
    return {"plate": plate, "status": "known", "registered": True,
            "vehicle": vehicle.model_dump(mode="json", by_alias=True)}
