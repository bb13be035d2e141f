# app/services/employee_service.py
"""Employee repository: owns the Employees collection (list, keyed by PersonalID)."""

from app.schemas.employee import Employee, EmployeeContactsEdit, Employees
from app.services.exceptions import DuplicateError, NotFoundError
from app.services.validation import EMPLOYEE_CONTACT_RULES, EMPLOYEE_RULES, check
from app.storage import DocumentStore
from app.utils.logger import get_logger

logger = get_logger(__name__)


class EmployeeRepository:
    def __init__(self, path: str, indent: int = 4):
        self.store: DocumentStore[Employees] = DocumentStore(path, Employees, indent=indent)

    def get(self) -> Employees:
        with self.store.locked():
            return self.store.load()

    def _index_of(self, employees: Employees, personal_id: int) -> int:
        for idx, employee in enumerate(employees):
            if employee.personal_id == personal_id:
                return idx
        logger.warning(f"[EMPLOYEES] PersonalID {personal_id} not found")
        raise NotFoundError(f"employee with personal ID {personal_id} not found")

    def add(self, employee: Employee) -> Employee:
        with self.store.locked():
            employees = self.store.load()
            check(employee, EMPLOYEE_RULES)

            if any(e.personal_id == employee.personal_id for e in employees):
                logger.warning(f"[EMPLOYEES] Duplicate PersonalID {employee.personal_id} rejected")
                raise DuplicateError(f"employee with personal ID {employee.personal_id} already exists")

            employees.append(employee.model_copy(deep=True))
            self.store.save(employees)

        logger.info(f"[EMPLOYEES] Added {employee.personal_id} ({employee.first_name} {employee.last_name})")
        return employee

    def delete(self, personal_id: int) -> None:
        with self.store.locked():
            employees = self.store.load()
            del employees[self._index_of(employees, personal_id)]
            self.store.save(employees)

        logger.info(f"[EMPLOYEES] Deleted {personal_id}")

    def edit_contacts(self, data: EmployeeContactsEdit) -> Employee:
        """Overwrite email, phone number and address. Identity and name are left untouched."""
        with self.store.locked():
            employees = self.store.load()
            employee = employees[self._index_of(employees, data.personal_id)]
            check(data, EMPLOYEE_CONTACT_RULES)

            employee.email = data.email
            employee.phone_number = data.phone_number
            employee.address = data.address
            self.store.save(employees)

        logger.info(f"[EMPLOYEES] Updated contacts of {data.personal_id}")
        return employee
