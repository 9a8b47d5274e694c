from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from enum import Enum

class Condition(str, Enum):
    USED = "USED"
    NEW = "NEW"

class Manufacturer(BaseModel):
    code: int = Field(..., description="Manufacturer code")
    name: str = Field(..., description="Manufacturer name")

class Details(BaseModel):
    body: str = Field(..., description="Body type, e.g. sedan")
    model: str = Field(..., description="Model name")
    manufacturer: Manufacturer
    number_of_doors: Optional[int] = None
    fuel_type: Optional[str] = None
    engine: Optional[str] = None
    mileage: Optional[int] = None
    model_year: Optional[int] = None
    production_year: Optional[int] = None
    external_color: Optional[str] = None

    class Config:
        # model_year would otherwise clash with pydantic's "model_" prefix
        protected_namespaces = ()

class Location(BaseModel):
    """Coordinates, plus the address fields filled in by geocoding"""
    lat: float = Field(..., description="Latitude")
    lon: float = Field(..., description="Longitude")
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None

class VehicleBase(BaseModel):
    condition: Condition
    details: Details
    location: Location

class VehicleCreate(VehicleBase):
    """Schema for adding or updating a vehicle (request body)"""
    pass

class Vehicle(VehicleBase):
    """Schema for reading a vehicle (output)"""
    id: Optional[int] = None
    price: Optional[str] = Field(None, description="Price quote, filled in on read only")
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None

    class Config:
        from_attributes = True
