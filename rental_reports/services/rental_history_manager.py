"""
In-memory rental history

The store reports read from. Keeps rentals in insertion order and hands out
immutable snapshots.
"""
from datetime import date
from typing import List, Tuple
from rental_reports.models import Customer, Rental, Vehicle
from rental_reports.utils.errors import NotFoundError, ValidationError
import logging

logger = logging.getLogger(__name__)


class RentalHistoryManager:
    """Stores and looks up rentals"""

    def __init__(self) -> None:
        self._rental_history: List[Rental] = []

    def __len__(self) -> int:
        return len(self._rental_history)

    def get_rental_history(self) -> Tuple[Rental, ...]:
        """
        Returns the current history

        Returns:
            Tuple of rentals in the order they were added. The tuple is a
            snapshot, rentals added later do not appear in it.
        """
        return tuple(self._rental_history)

    def add_rental(self, rental: Rental) -> None:
        """
        Appends a rental to the history

        Raises:
            ValidationError: If rental is None
        """
        if rental is None:
            raise ValidationError("Cannot add an empty rental to the history")
        self._rental_history.append(rental)
        logger.debug(f"Rental {getattr(rental, 'id', rental)} added, history size {len(self._rental_history)}")

    def clear_history(self) -> None:
        """Removes all rentals"""
        removed = len(self._rental_history)
        self._rental_history.clear()
        logger.info(f"Rental history cleared, {removed} rentals removed")

    def get_rental(self, rental_id: int) -> Rental:
        """
        Finds a rental by ID

        Raises:
            NotFoundError: If there is no rental with this ID
        """
        for rental in self._rental_history:
            if rental.id == rental_id:
                return rental
        raise NotFoundError(f"Rental with ID {rental_id} not found")

    def find_by_customer(self, customer: Customer) -> List[Rental]:
        return [rental for rental in self._rental_history if rental.customer == customer]

    def find_by_vehicle(self, vehicle: Vehicle) -> List[Rental]:
        return [rental for rental in self._rental_history if rental.vehicle == vehicle]

    def find_by_date_range(self, start_date: date, end_date: date) -> List[Rental]:
        """
        Rentals whose period overlaps [start_date, end_date]

        Both ends are inclusive, a rental ending on start_date is included.
        """
        return [
            rental for rental in self._rental_history
            if rental.end_date >= start_date and rental.start_date <= end_date
        ]
