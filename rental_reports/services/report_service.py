"""
Service for generating rental reports

Business logic of the four report kinds (monthly, popular vehicle, customer,
system) plus the rental history export. Reports are printed to the output
stream given at construction; tabular reports can then be exported through
ReportExportService.
"""
import sys
import logging
from collections import Counter
from datetime import date
from typing import Any, Dict, List, Optional, Sequence, TextIO

from rental_reports.config import CURRENCY
from rental_reports.models import Customer, Rental, RentalStatus, Vehicle, VehicleStatus
from rental_reports.services.report_export_service import ReportExportService
from rental_reports.utils.formatters import format_box, format_percentage, format_price
from rental_reports.utils.input_helper import InputHelper

logger = logging.getLogger(__name__)

MONTH_FORMAT = "%Y-%m"

RENTAL_HISTORY_HEADERS = [
    "Rental ID", "Customer", "Vehicle", "Start Date",
    "End Date", "Status", "Total Fee", "Insurance",
]


class ReportService:
    """Builds and prints reports from rental, vehicle and customer data"""

    def __init__(
        self,
        output: Optional[TextIO] = None,
        export_service: Optional[ReportExportService] = None,
        currency: str = CURRENCY
    ) -> None:
        """
        Args:
            output: Stream reports are written to, sys.stdout when None
            export_service: Exporter used by the export prompt
            currency: Label printed in front of money amounts
        """
        self._output = output
        self.export_service = export_service or ReportExportService()
        self.currency = currency

    @property
    def output(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    def _write(self, text: str = "") -> None:
        self.output.write(text + "\n")

    def _price(self, amount: float) -> str:
        return format_price(amount, self.currency)

    def generate_monthly_report(self, rentals: Sequence[Rental], input_source) -> List[List[str]]:
        """
        Number of rentals per start month, oldest month first

        Args:
            rentals: Rental history
            input_source: Stream or InputHelper answering the export prompt

        Returns:
            Report rows [month, count]
        """
        monthly_rentals = Counter(rental.start_date.strftime(MONTH_FORMAT) for rental in rentals)

        self._write("\n--- Monthly Rental Report ---")
        data = []
        for month in sorted(monthly_rentals):
            count = monthly_rentals[month]
            self._write(f"{month}: {count} rentals")
            data.append([month, str(count)])

        logger.info(f"Monthly report generated: {len(data)} months, {len(rentals)} rentals")

        input_helper = InputHelper.wrap(input_source, output=self.output)
        self.export_service.prompt_for_export(
            input_helper, "Monthly Rental Report", ["Month", "Total Rentals"], data, "monthly_report"
        )
        return data

    def generate_popular_vehicle_report(self, rentals: Sequence[Rental], input_source) -> List[List[str]]:
        """
        Rentals per vehicle model, most rented first

        Vehicles with the same count are listed alphabetically.
        """
        vehicle_rentals = Counter(rental.vehicle.display_name for rental in rentals)
        ranking = sorted(vehicle_rentals.items(), key=lambda item: (-item[1], item[0]))

        self._write("\n--- Popular Vehicle Report ---")
        data = []
        for vehicle_name, count in ranking:
            self._write(f"{vehicle_name}: {count} rentals")
            data.append([vehicle_name, str(count)])

        logger.info(f"Popular vehicle report generated: {len(data)} vehicle models")

        input_helper = InputHelper.wrap(input_source, output=self.output)
        self.export_service.prompt_for_export(
            input_helper, "Popular Vehicle Report", ["Vehicle", "Total Rentals"], data,
            "popular_vehicles_report"
        )
        return data

    def generate_customer_report(self, rentals: Sequence[Rental]) -> List[List[str]]:
        """
        Completed rentals and spending per customer

        Only RETURNED rentals count. Customers appear in the order of their
        first completed rental.
        """
        customer_stats: Dict[str, int] = {}
        customer_revenue: Dict[str, float] = {}

        for rental in rentals:
            if rental.status != RentalStatus.RETURNED:
                continue
            name = rental.customer.name
            customer_stats[name] = customer_stats.get(name, 0) + 1
            customer_revenue[name] = customer_revenue.get(name, 0.0) + rental.total_fee

        self._write("\n=== Customer Report ===")
        data = []
        for name, count in customer_stats.items():
            spent = self._price(customer_revenue[name])
            self._write(f"Customer: {name}, Rentals: {count}, Total Spent: {spent}")
            data.append([name, str(count), spent])

        logger.info(f"Customer report generated: {len(data)} customers")
        return data

    def generate_system_report(
        self,
        rentals: Sequence[Rental],
        vehicles: Sequence[Vehicle],
        customers: Sequence[Customer],
        today: Optional[date] = None
    ) -> Dict[str, Any]:
        """
        Overall rental, fleet and customer statistics

        Returns:
            The dictionary produced by get_system_statistics
        """
        today = today or date.today()
        stats = self.get_system_statistics(rentals, vehicles)

        cancelled_rentals = sum(1 for r in rentals if r.status == RentalStatus.CANCELLED)
        insurance_purchases = sum(1 for r in rentals if r.insurance_selected)

        # reserved vehicles are shown as rented here, unlike get_system_statistics
        active_fleet = [v for v in vehicles if not v.archived]
        rented_or_reserved = sum(
            1 for v in active_fleet if v.status in (VehicleStatus.RENTED, VehicleStatus.RESERVED)
        )

        self._write("\n=== SYSTEM REPORT ===")
        self._write(f"Generated on: {today.isoformat()}")
        self._write()

        self._write("RENTAL STATISTICS:")
        self._write(f"Total Rentals: {stats['total_rentals']}")
        self._write(f"Active Rentals: {stats['active_rentals']}")
        self._write(f"Completed Rentals: {stats['completed_rentals']}")
        self._write(f"Pending Rentals: {stats['pending_rentals']}")
        self._write(f"Cancelled Rentals: {cancelled_rentals}")
        self._write(f"Total Revenue: {self._price(stats['total_revenue'])}")
        self._write(
            f"Insurance Purchases: {insurance_purchases} "
            f"({format_percentage(insurance_purchases, stats['total_rentals'])})"
        )
        self._write()

        self._write("VEHICLE STATISTICS:")
        self._write(f"Total Vehicles: {stats['total_vehicles']}")
        self._write(f"Active Vehicles: {stats['active_vehicles']}")
        self._write(f"Available: {stats['available_vehicles']}")
        self._write(f"Rented: {rented_or_reserved}")
        self._write(f"Out of Service: {stats['out_of_service_vehicles']}")
        self._write(f"Archived: {stats['archived_vehicles']}")
        self._write()

        self._write("CUSTOMER STATISTICS:")
        self._write(f"Total Customers: {len(customers)}")
        self._write()

        completed = [r for r in rentals if r.status == RentalStatus.RETURNED]
        if completed:
            average_duration = sum(r.rental_days for r in completed) / len(completed)
            self._write(f"Average Rental Duration: {average_duration:.1f} days")
            self._write(f"Average Revenue per Rental: {self._price(stats['average_revenue'])}")

        logger.info(
            f"System report generated: {stats['total_rentals']} rentals, "
            f"{stats['total_vehicles']} vehicles, {len(customers)} customers"
        )
        return stats

    def get_system_statistics(self, rentals: Sequence[Rental], vehicles: Sequence[Vehicle]) -> Dict[str, Any]:
        """
        Collects system statistics as a dictionary

        Args:
            rentals: All rentals
            vehicles: All vehicles, archived ones included

        Returns:
            Counters and revenue figures plus export_headers / export_data
            ready for ReportExportService
        """
        total_rentals = len(rentals)
        active_rentals = sum(1 for r in rentals if r.status == RentalStatus.ACTIVE)
        completed = [r for r in rentals if r.status == RentalStatus.RETURNED]
        pending_rentals = sum(1 for r in rentals if r.status == RentalStatus.PENDING)
        total_revenue = sum(r.total_fee for r in completed)
        average_revenue = total_revenue / len(completed) if completed else 0.0

        total_vehicles = len(vehicles)
        archived_vehicles = sum(1 for v in vehicles if v.archived)
        active_fleet = [v for v in vehicles if not v.archived]
        available_vehicles = sum(1 for v in active_fleet if v.status == VehicleStatus.AVAILABLE)
        rented_vehicles = sum(1 for v in active_fleet if v.status == VehicleStatus.RENTED)
        out_of_service_vehicles = sum(1 for v in active_fleet if v.status == VehicleStatus.OUT_OF_SERVICE)

        export_data = [
            ["Total Vehicles", str(total_vehicles)],
            ["Active Vehicles", str(len(active_fleet))],
            ["Archived Vehicles", str(archived_vehicles)],
            ["Available Vehicles", str(available_vehicles)],
            ["Rented Vehicles", str(rented_vehicles)],
            ["Out of Service Vehicles", str(out_of_service_vehicles)],
            ["Total Rentals", str(total_rentals)],
            ["Active Rentals", str(active_rentals)],
            ["Completed Rentals", str(len(completed))],
            ["Pending Rentals", str(pending_rentals)],
            ["Total Revenue", self._price(total_revenue)],
            ["Average Revenue/Rental", self._price(average_revenue)],
        ]

        return {
            'total_vehicles': total_vehicles,
            'active_vehicles': len(active_fleet),
            'archived_vehicles': archived_vehicles,
            'available_vehicles': available_vehicles,
            'rented_vehicles': rented_vehicles,
            'out_of_service_vehicles': out_of_service_vehicles,
            'total_rentals': total_rentals,
            'active_rentals': active_rentals,
            'completed_rentals': len(completed),
            'pending_rentals': pending_rentals,
            'total_revenue': total_revenue,
            'average_revenue': average_revenue,
            'export_headers': ["Metric", "Value"],
            'export_data': export_data,
        }

    def export_rental_history(self, rentals: Sequence[Rental], input_source) -> List[List[str]]:
        """Prints a summary of the history and offers to export it"""
        data = [
            [
                str(rental.id),
                rental.customer.name,
                rental.vehicle.display_name,
                rental.start_date.isoformat(),
                rental.end_date.isoformat(),
                rental.status.value,
                f"{rental.total_fee:.2f}",
                "Yes" if rental.insurance_selected else "No",
            ]
            for rental in rentals
        ]

        self._write()
        self._write(format_box("RENTAL HISTORY EXPORT", [
            f"Total Rentals: {len(rentals)}",
            f"Data prepared for export with {len(data)} records",
        ]))

        input_helper = InputHelper.wrap(input_source, output=self.output)
        self.export_service.prompt_for_export(
            input_helper, "Rental History", RENTAL_HISTORY_HEADERS, data, "rental_history"
        )
        return data
