# app/schemas/vehicle.py
from pydantic import BaseModel, Field


class Vehicle(BaseModel):
    plate_number: str = Field("", alias="PlateNumber")
    make: str = Field("", alias="Make")
    model: str = Field("", alias="Model")
    year: int = Field(0, alias="Year")
    fuel_type: str = Field("", alias="FuelType")     # Petrol | Diesel | Hybrid | Electric | Lpg | Cng
    gearbox: str = Field("", alias="Gearbox")        # Automatic | Manual
    color: str = Field("", alias="Color")
    body: str = Field("", alias="Body")

    class Config:
        populate_by_name = True


# Collection shape on disk: {"<PlateNumber>": {...}, ...}
Vehicles = dict[str, Vehicle]
