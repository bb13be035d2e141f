"""
System health check endpoint.
Returns status of the backend and of each collection file.
"""

from datetime import datetime, timezone
from fastapi import APIRouter, Depends
from app.database import get_customer_repository, get_employee_repository, get_vehicle_repository
from app.services.customer_service import CustomerRepository
from app.services.employee_service import EmployeeRepository
from app.services.exceptions import StoreError
from app.services.vehicle_service import VehicleRepository

router = APIRouter()


@router.get("/health", summary="System health check")
def health_check(
    customers: CustomerRepository = Depends(get_customer_repository),
    vehicles: VehicleRepository = Depends(get_vehicle_repository),
    employees: EmployeeRepository = Depends(get_employee_repository),
):
    """
    Returns:
    - Backend status
    - Readability of every collection file, with its record count
    """
    result = {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "backend": "ok",
        "collections": {},
    }

    for name, repo in (("customers", customers), ("vehicles", vehicles), ("employees", employees)):
        try:
            result["collections"][name] = {"status": "ok", "records": len(repo.get())}
        except StoreError as e:
            result["collections"][name] = {"status": f"error: {e.message}"}
            result["status"] = "degraded"

    return result
