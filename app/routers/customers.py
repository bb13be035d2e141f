"""Customers — CRUD plus the rented-vehicles relationship"""

from fastapi import APIRouter, Depends
from app.database import get_customer_repository
from app.schemas.customer import Customer, CustomerCreate, CustomerEdit
from app.schemas.vehicle import Vehicle
from app.services.customer_service import CustomerRepository

router = APIRouter()


@router.get("/customers", response_model=list[Customer], summary="List customers")
def list_customers(repo: CustomerRepository = Depends(get_customer_repository)):
    return repo.get()


@router.post("/customers", response_model=Customer, summary="Register a customer")
def add_customer(body: CustomerCreate, repo: CustomerRepository = Depends(get_customer_repository)):
    return repo.add(body)


@router.put("/customers", response_model=Customer, summary="Edit a customer (partial)")
def edit_customer(body: CustomerEdit, repo: CustomerRepository = Depends(get_customer_repository)):
    """Empty fields are left unchanged."""
    return repo.edit(body)


@router.delete("/customers/{personal_id}", summary="Remove a customer")
def remove_customer(personal_id: int, repo: CustomerRepository = Depends(get_customer_repository)):
    repo.delete(personal_id)
    return {"status": "removed", "personal_id": personal_id}


@router.post("/customers/{personal_id}/vehicles", response_model=Customer,
             summary="Rent a fleet vehicle to a customer")
def attach_vehicle(personal_id: int, body: Vehicle,
                   repo: CustomerRepository = Depends(get_customer_repository)):
    return repo.attach_vehicle(body, personal_id)


@router.delete("/customers/{personal_id}/vehicles/{plate}", summary="Return a rented vehicle")
def detach_vehicle(personal_id: int, plate: str,
                   repo: CustomerRepository = Depends(get_customer_repository)):
    repo.detach_vehicle(plate, personal_id)
    return {"status": "returned", "personal_id": personal_id, "plate": plate}
