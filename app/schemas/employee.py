# app/schemas/employee.py
from pydantic import BaseModel, Field


class Employee(BaseModel):
    first_name: str = Field("", alias="FirstName")
    last_name: str = Field("", alias="LastName")
    personal_id: int = Field(0, alias="PersonalID")
    date_of_birth: str = Field("", alias="DateOfBirth")   # DD.MM.YYYY
    email: str = Field("", alias="Email")
    phone_number: str = Field("", alias="PhoneNumber")
    address: str = Field("", alias="Address")

    class Config:
        populate_by_name = True


class EmployeeContactsEdit(BaseModel):
    personal_id: int = Field(..., alias="PersonalID")
    email: str = Field("", alias="Email")
    phone_number: str = Field("", alias="PhoneNumber")
    address: str = Field("", alias="Address")

    class Config:
        populate_by_name = True


Employees = list[Employee]
