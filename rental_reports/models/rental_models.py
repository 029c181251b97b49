"""
Pydantic models for rentals
"""
from datetime import date, timedelta
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, model_validator

from .customer_models import Customer
from .vehicle_models import Vehicle


class RentalStatus(str, Enum):
    """Lifecycle of a rental"""
    PENDING = 'PENDING'
    ACTIVE = 'ACTIVE'
    RETURNED = 'RETURNED'
    CANCELLED = 'CANCELLED'


class Rental(BaseModel):
    """One rental transaction"""
    id: int = Field(..., gt=0, description="Rental ID")
    customer: Customer
    vehicle: Vehicle
    start_date: date
    end_date: date
    status: RentalStatus = Field(default=RentalStatus.PENDING)
    total_fee: float = Field(default=0.0, ge=0, description="Quoted price")
    actual_fee: float = Field(default=0.0, ge=0, description="Price charged on return")
    insurance_selected: bool = Field(default=False)
    username: str = Field(default="", description="Login that made the booking")

    @model_validator(mode='after')
    def validate_period(self) -> "Rental":
        """End date may not precede start date"""
        if self.end_date < self.start_date:
            raise ValueError("Rental end date must not be before start date")
        return self

    @property
    def rental_days(self) -> int:
        """Inclusive number of days, a same-day rental counts as 1"""
        return (self.end_date - self.start_date).days + 1

    def is_overdue(self, today: Optional[date] = None) -> bool:
        today = today or date.today()
        return self.status == RentalStatus.ACTIVE and today > self.end_date

    def is_due_soon(self, today: Optional[date] = None) -> bool:
        """True when an active rental ends tomorrow"""
        today = today or date.today()
        return self.status == RentalStatus.ACTIVE and self.end_date == today + timedelta(days=1)
