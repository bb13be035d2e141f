# app/services/customer_service.py
"""
Customer repository: owns the Customers collection (list, keyed by PersonalID).

Besides CRUD it owns the rental relationship: attach_vehicle() embeds a copy
of a vehicle into the customer's RentedVehicles list, detach_vehicle() removes
the first entry with a matching plate number. The vehicle repository is only
consulted to confirm a vehicle exists, never mutated.
"""

from datetime import datetime, timezone
from typing import Optional

from app.schemas.customer import Customer, CustomerCreate, CustomerEdit, Customers
from app.schemas.vehicle import Vehicle
from app.services.exceptions import DuplicateError, NotFoundError
from app.services.validation import (
    CUSTOMER_RULES,
    EMAIL_FORMAT_RULE,
    EMAIL_LENGTH_RULE,
    FIRST_NAME_RULE,
    LAST_NAME_RULE,
    PHONE_DIGITS_RULE,
    PHONE_LENGTH_RULE,
    check,
)
from app.services.vehicle_service import VehicleRepository
from app.storage import DocumentStore
from app.utils.logger import get_logger

logger = get_logger(__name__)

# Rules applied to each non-empty field of a partial edit
EDIT_RULES = {
    "first_name": (FIRST_NAME_RULE,),
    "last_name": (LAST_NAME_RULE,),
    "email": (EMAIL_LENGTH_RULE, EMAIL_FORMAT_RULE),
    "phone_number": (PHONE_LENGTH_RULE, PHONE_DIGITS_RULE),
}


def _find(customers: Customers, personal_id: int) -> int:
    """Linear scan for a PersonalID. Returns the index or -1."""
    for idx, customer in enumerate(customers):
        if customer.personal_id == personal_id:
            return idx
    return -1


class CustomerRepository:
    def __init__(self, path: str, vehicles: Optional[VehicleRepository] = None, indent: int = 4):
        self.store: DocumentStore[Customers] = DocumentStore(path, Customers, indent=indent)
        self.vehicles = vehicles

    def get(self) -> Customers:
        with self.store.locked():
            return self.store.load()

    def _locate(self, customers: Customers, personal_id: int) -> int:
        idx = _find(customers, personal_id)
        if idx == -1:
            logger.warning(f"[CUSTOMERS] PersonalID {personal_id} not found")
            raise NotFoundError(f"customer with personalID {personal_id} not found")
        return idx

    def add(self, data: CustomerCreate) -> Customer:
        with self.store.locked():
            customers = self.store.load()
            check(data, CUSTOMER_RULES)

            if _find(customers, data.personal_id) != -1:
                logger.warning(f"[CUSTOMERS] Duplicate PersonalID {data.personal_id} rejected")
                raise DuplicateError(
                    f"customer with personalID {data.personal_id} is found in the storage, "
                    "duplicated customers not allowed"
                )

            customer = Customer(
                first_name=data.first_name,
                last_name=data.last_name,
                personal_id=data.personal_id,
                phone_number=data.phone_number,
                email=data.email,
                rented_vehicles=[],
                created_at=datetime.now(timezone.utc),
            )
            customers.append(customer)
            self.store.save(customers)

        logger.info(f"[CUSTOMERS] Added {customer.personal_id} ({customer.first_name} {customer.last_name})")
        return customer

    def delete(self, personal_id: int) -> None:
        with self.store.locked():
            customers = self.store.load()
            del customers[self._locate(customers, personal_id)]
            self.store.save(customers)

        logger.info(f"[CUSTOMERS] Deleted {personal_id}")

    def edit(self, data: CustomerEdit) -> Customer:
        """
        Partial update: only non-empty fields are applied (and validated).
        LastEditedAt is refreshed on every successful call, even when nothing differed.
        """
        with self.store.locked():
            customers = self.store.load()
            customer = customers[self._locate(customers, data.personal_id)]

            for field, rules in EDIT_RULES.items():
                value = getattr(data, field)
                if value:
                    check(data, rules)
                    setattr(customer, field, value)

            customer.last_edited_at = datetime.now(timezone.utc)
            self.store.save(customers)

        logger.info(f"[CUSTOMERS] Edited {data.personal_id}")
        return customer

    def attach_vehicle(self, vehicle: Vehicle, personal_id: int) -> Customer:
        """Append a snapshot of `vehicle` to the customer's RentedVehicles."""
        with self.store.locked():
            customers = self.store.load()
            customer = customers[self._locate(customers, personal_id)]

            if self.vehicles is not None:
                self.vehicles.get_vehicle(vehicle.plate_number)

            customer.rented_vehicles.append(vehicle.model_copy(deep=True))
            self.store.save(customers)

        logger.info(f"[CUSTOMERS] {personal_id} rented {vehicle.plate_number}")
        return customer

    def detach_vehicle(self, plate_number: str, personal_id: int) -> None:
        """
        Remove the first rented vehicle with `plate_number`. The plate must be in
        the fleet. A customer who does not rent it is left as is without error;
        the collection is saved either way.
        """
        with self.store.locked():
            customers = self.store.load()
            customer = customers[self._locate(customers, personal_id)]

            if self.vehicles is not None:
                self.vehicles.get_vehicle(plate_number)

            for idx, rented in enumerate(customer.rented_vehicles):
                if rented.plate_number == plate_number:
                    del customer.rented_vehicles[idx]
                    logger.info(f"[CUSTOMERS] {personal_id} returned {plate_number}")
                    break
            else:
                logger.warning(f"[CUSTOMERS] {personal_id} has no rented vehicle {plate_number}")

            self.store.save(customers)
