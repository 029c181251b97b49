"""
Central access point for rental data and reports

ReportManager combines RentalHistoryManager with ReportService so callers do
not have to know about both. Every call re-reads the history, nothing is
cached here, and collaborator errors are not caught.
"""
from typing import Optional, Sequence
from rental_reports.models import Customer, Rental, Vehicle
from rental_reports.services.rental_history_manager import RentalHistoryManager
from rental_reports.services.report_service import ReportService
import logging

logger = logging.getLogger(__name__)


class ReportManager:
    """Facade over the rental history and the reporting service"""

    def __init__(
        self,
        rental_history_manager: RentalHistoryManager,
        report_service: Optional[ReportService] = None
    ) -> None:
        """
        Args:
            rental_history_manager: History store, shared with the rest of the tool
            report_service: Reporting service, a default ReportService when None
        """
        self._rental_history_manager = rental_history_manager
        self._report_service = report_service or ReportService()

    @property
    def rental_history_manager(self) -> RentalHistoryManager:
        return self._rental_history_manager

    @property
    def report_service(self) -> ReportService:
        return self._report_service

    def get_all_rentals(self) -> Sequence[Rental]:
        return self._rental_history_manager.get_rental_history()

    def add_rental(self, rental: Rental) -> None:
        self._rental_history_manager.add_rental(rental)

    def run_monthly_report(self, input_source) -> None:
        """Quick run of the monthly report"""
        logger.debug("Running monthly report")
        self._report_service.generate_monthly_report(
            self._rental_history_manager.get_rental_history(), input_source
        )

    def run_popular_vehicle_report(self, input_source) -> None:
        """Quick run of the popular vehicle report"""
        logger.debug("Running popular vehicle report")
        self._report_service.generate_popular_vehicle_report(
            self._rental_history_manager.get_rental_history(), input_source
        )

    def run_customer_report(self) -> None:
        """Quick run of the customer report"""
        logger.debug("Running customer report")
        self._report_service.generate_customer_report(
            self._rental_history_manager.get_rental_history()
        )

    def run_system_report(self, vehicles: Sequence[Vehicle], customers: Sequence[Customer]) -> None:
        """Quick run of the system report, vehicles and customers are passed through as given"""
        logger.debug("Running system report")
        self._report_service.generate_system_report(
            self._rental_history_manager.get_rental_history(),
            vehicles,
            customers
        )

    def run_rental_history_export(self, input_source) -> None:
        """Quick run of the rental history export"""
        logger.debug("Running rental history export")
        self._report_service.export_rental_history(
            self._rental_history_manager.get_rental_history(), input_source
        )
