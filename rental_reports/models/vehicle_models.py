"""
Pydantic models for vehicles
"""
from enum import Enum
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, field_validator


class VehicleStatus(str, Enum):
    """Operational status of a fleet vehicle"""
    AVAILABLE = 'available'
    RESERVED = 'reserved'
    RENTED = 'rented'
    OUT_OF_SERVICE = 'out_of_service'

    @classmethod
    def parse(cls, value: Any) -> "VehicleStatus":
        """
        Lenient status parsing

        Unknown, empty and None values fall back to AVAILABLE. The legacy
        value 'archived' also maps to AVAILABLE, archiving is tracked by
        Vehicle.archived.
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.AVAILABLE
        normalized = str(value).strip().lower()
        for status in cls:
            if status.value == normalized:
                return status
        return cls.AVAILABLE


class Vehicle(BaseModel):
    """Fleet vehicle"""
    model_config = ConfigDict(frozen=True)

    vehicle_id: str = Field(..., min_length=1, description="Fleet identifier")
    plate_no: str = Field(..., min_length=1, description="Registration plate")
    brand: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    vehicle_type: str = Field(default="")
    fuel_type: str = Field(default="")
    color: str = Field(default="")
    purchase_year: int = Field(default=0, ge=0)
    capacity: float = Field(default=0.0, ge=0)
    condition: str = Field(default="")
    insurance_rate: float = Field(default=0.0, ge=0)
    base_price: float = Field(default=50.0, ge=0, description="Daily price")
    status: VehicleStatus = Field(default=VehicleStatus.AVAILABLE)
    archived: bool = Field(default=False, description="Archived vehicles are kept for history only")

    @field_validator('status', mode='before')
    @classmethod
    def parse_status(cls, v: Any) -> VehicleStatus:
        return VehicleStatus.parse(v)

    @field_validator('brand', 'model')
    @classmethod
    def strip_names(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Brand and model must not be empty")
        return v

    @property
    def display_name(self) -> str:
        """Brand and model, e.g. 'Toyota Vios'"""
        return f"{self.brand} {self.model}"
