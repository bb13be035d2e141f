# app/schemas/customer.py
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional

from app.schemas.vehicle import Vehicle


class CustomerCreate(BaseModel):
    first_name: str = Field("", alias="FirstName")
    last_name: str = Field("", alias="LastName")
    personal_id: int = Field(0, alias="PersonalID")
    phone_number: str = Field("", alias="PhoneNumber")
    email: str = Field("", alias="Email")

    class Config:
        populate_by_name = True


class CustomerEdit(BaseModel):
    """Partial update: empty fields are left unchanged."""
    personal_id: int = Field(..., alias="PersonalID")
    first_name: str = Field("", alias="FirstName")
    last_name: str = Field("", alias="LastName")
    email: str = Field("", alias="Email")
    phone_number: str = Field("", alias="PhoneNumber")

    class Config:
        populate_by_name = True


class Customer(CustomerCreate):
    rented_vehicles: list[Vehicle] = Field(default_factory=list, alias="RentedVehicles")
    created_at: Optional[datetime] = Field(None, alias="CreatedAt")
    last_edited_at: Optional[datetime] = Field(None, alias="LastEditedAt")


Customers = list[Customer]
