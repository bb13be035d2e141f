# app/services/vehicle_service.py
"""
Vehicle repository: owns the Vehicles collection (mapping keyed by plate number).
Used by the vehicles router and by CustomerRepository to confirm a vehicle
exists before it is attached to a customer.
"""

from app.schemas.vehicle import Vehicle, Vehicles
from app.services.exceptions import DuplicateError, NoChangeError, NotFoundError
from app.services.validation import VEHICLE_RULES, check
from app.storage import DocumentStore
from app.utils.logger import get_logger

logger = get_logger(__name__)


class VehicleRepository:
    def __init__(self, path: str, indent: int = 4):
        self.store: DocumentStore[Vehicles] = DocumentStore(path, Vehicles, indent=indent)

    def get(self) -> Vehicles:
        with self.store.locked():
            return self.store.load()

    def get_vehicle(self, plate_number: str) -> Vehicle:
        """Find a vehicle by plate number. Raises NotFoundError if absent."""
        vehicles = self.get()
        if plate_number not in vehicles:
            raise NotFoundError(f"vehicle with plate number {plate_number} not found in the storage")
        return vehicles[plate_number]

    def add(self, vehicle: Vehicle) -> Vehicle:
        with self.store.locked():
            vehicles = self.store.load()
            check(vehicle, VEHICLE_RULES)

            if vehicle.plate_number in vehicles:
                logger.warning(f"[VEHICLES] Duplicate plate {vehicle.plate_number} rejected")
                raise DuplicateError(f"vehicle with plate number {vehicle.plate_number} is already in the storage")

            vehicles[vehicle.plate_number] = vehicle.model_copy(deep=True)
            self.store.save(vehicles)

        logger.info(f"[VEHICLES] Added {vehicle.plate_number} ({vehicle.make} {vehicle.model}, {vehicle.year})")
        return vehicle

    def delete(self, plate_number: str) -> None:
        with self.store.locked():
            vehicles = self.store.load()
            if plate_number not in vehicles:
                raise NotFoundError(f"vehicle with plate number {plate_number} not found in the storage")

            del vehicles[plate_number]
            self.store.save(vehicles)

        logger.info(f"[VEHICLES] Deleted {plate_number}")

    def edit(self, vehicle: Vehicle) -> Vehicle:
        """Replace the stored record for vehicle.plate_number with `vehicle`."""
        with self.store.locked():
            vehicles = self.store.load()
            stored = vehicles.get(vehicle.plate_number)
            if stored is None:
                raise NotFoundError(f"vehicle with plate number {vehicle.plate_number} not found in the storage")

            check(vehicle, VEHICLE_RULES)

            if stored == vehicle:
                raise NoChangeError("new data not detected")

            vehicles[vehicle.plate_number] = vehicle.model_copy(deep=True)
            self.store.save(vehicles)

        logger.info(f"[VEHICLES] Edited {vehicle.plate_number}")
        return vehicle
