"""
Pydantic models for rental report data
"""
from .customer_models import Customer
from .vehicle_models import Vehicle, VehicleStatus
from .rental_models import Rental, RentalStatus

__all__ = [
    'Customer',
    'Vehicle',
    'VehicleStatus',
    'Rental',
    'RentalStatus',
]
