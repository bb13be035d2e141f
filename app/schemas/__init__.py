# Fleet rental — record shapes
# JSON documents use the PascalCase keys declared as field aliases.

from app.schemas.vehicle import Vehicle, Vehicles                          # noqa
from app.schemas.customer import Customer, Customers, CustomerCreate, CustomerEdit  # noqa
from app.schemas.employee import Employee, Employees, EmployeeContactsEdit  # noqa
