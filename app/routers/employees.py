"""Employees — CRUD over the Employees collection"""

from fastapi import APIRouter, Depends
from app.database import get_employee_repository
from app.schemas.employee import Employee, EmployeeContactsEdit
from app.services.employee_service import EmployeeRepository

router = APIRouter()


@router.get("/employees", response_model=list[Employee], summary="List employees")
def list_employees(repo: EmployeeRepository = Depends(get_employee_repository)):
    return repo.get()


@router.post("/employees", response_model=Employee, summary="Register an employee")
def add_employee(body: Employee, repo: EmployeeRepository = Depends(get_employee_repository)):
    return repo.add(body)


@router.put("/employees", response_model=Employee, summary="Update an employee's contacts")
def edit_employee_contacts(body: EmployeeContactsEdit,
                           repo: EmployeeRepository = Depends(get_employee_repository)):
    return repo.edit_contacts(body)


@router.delete("/employees/{personal_id}", summary="Remove an employee")
def remove_employee(personal_id: int, repo: EmployeeRepository = Depends(get_employee_repository)):
    repo.delete(personal_id)
    return {"status": "removed", "personal_id": personal_id}
