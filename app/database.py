# app/database.py
"""
Repository wiring for the running process.
One repository per collection file, built from settings on first use.
FastAPI routes receive them through the get_*_repository dependencies,
which tests replace via app.dependency_overrides.
"""

from functools import lru_cache

from app.config import settings
from app.services.customer_service import CustomerRepository
from app.services.employee_service import EmployeeRepository
from app.services.vehicle_service import VehicleRepository
from app.storage import ensure_storage_file

@lru_cache
def get_vehicle_repository() -> VehicleRepository:
    return VehicleRepository(settings.VEHICLES_PATH, indent=settings.JSON_INDENT)


@lru_cache
def get_customer_repository() -> CustomerRepository:
    return CustomerRepository(
        settings.CUSTOMERS_PATH,
        vehicles=get_vehicle_repository(),
        indent=settings.JSON_INDENT,
    )


@lru_cache
def get_employee_repository() -> EmployeeRepository:
    return EmployeeRepository(settings.EMPLOYEES_PATH, indent=settings.JSON_INDENT)


def create_collections():
    """
    Creates every missing collection file with an empty collection.
    Safe to call multiple times; existing files are left as they are.
    """
    return [
        repo.store.path
        for repo, empty in (
            (get_customer_repository(), []),
            (get_vehicle_repository(), {}),
            (get_employee_repository(), []),
        )
        if ensure_storage_file(repo.store, empty)
    ]
