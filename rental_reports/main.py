"""
Interactive reports console

Run with `rental-reports` or `python -m rental_reports.main`.
"""
import sys
import logging
from datetime import date, timedelta
from typing import List, Optional, TextIO, Tuple

from rental_reports.config import LOAD_SAMPLE_DATA, LOG_LEVEL
from rental_reports.models import Customer, Rental, RentalStatus, Vehicle
from rental_reports.services import RentalHistoryManager, ReportManager, ReportService
from rental_reports.utils.errors import error_handler
from rental_reports.utils.formatters import format_box
from rental_reports.utils.input_helper import InputHelper

logger = logging.getLogger(__name__)

REPORTS_MENU = [
    "1. Monthly Rental Statistics",
    "2. Popular Vehicle Report",
    "3. Customer Report",
    "4. System Report",
    "5. Rental History Export",
    "0. Exit",
]


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Configures root logging for the console"""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def build_sample_data(today: Optional[date] = None) -> Tuple[List[Vehicle], List[Customer], List[Rental]]:
    """Demo fleet, customers and rentals for a first run"""
    today = today or date.today()

    vehicles = [
        Vehicle(vehicle_id="V001", plate_no="WXY1234", brand="Perodua", model="Myvi",
                vehicle_type="Hatchback", fuel_type="Petrol", color="White",
                purchase_year=2021, capacity=1.5, condition="Good", base_price=120.0),
        Vehicle(vehicle_id="V002", plate_no="VBN5678", brand="Honda", model="City",
                vehicle_type="Sedan", fuel_type="Petrol", color="Grey",
                purchase_year=2022, capacity=1.5, condition="Excellent", base_price=160.0,
                status="rented"),
        Vehicle(vehicle_id="V003", plate_no="JHK9012", brand="Toyota", model="Hilux",
                vehicle_type="Pickup", fuel_type="Diesel", color="Black",
                purchase_year=2019, capacity=2.4, condition="Fair", base_price=220.0,
                status="out_of_service"),
    ]
    customers = [
        Customer(username="aisyah", full_name="Aisyah Rahman", contact_number="012-3456789"),
        Customer(username="daniel", full_name="Daniel Tan", contact_number="017-2345678"),
    ]
    rentals = [
        Rental(id=1, customer=customers[0], vehicle=vehicles[0],
               start_date=today - timedelta(days=40), end_date=today - timedelta(days=37),
               status=RentalStatus.RETURNED, total_fee=480.0, insurance_selected=True,
               username="aisyah"),
        Rental(id=2, customer=customers[1], vehicle=vehicles[1],
               start_date=today - timedelta(days=2), end_date=today + timedelta(days=3),
               status=RentalStatus.ACTIVE, total_fee=960.0, username="daniel"),
        Rental(id=3, customer=customers[0], vehicle=vehicles[0],
               start_date=today + timedelta(days=5), end_date=today + timedelta(days=6),
               status=RentalStatus.PENDING, total_fee=240.0, username="aisyah"),
    ]
    return vehicles, customers, rentals


@error_handler
def run_menu_choice(
    choice: str,
    report_manager: ReportManager,
    input_helper: InputHelper,
    vehicles: List[Vehicle],
    customers: List[Customer]
) -> bool:
    """
    Executes one menu choice

    Returns:
        False when the user asked to exit, True otherwise
    """
    if choice == "1":
        report_manager.run_monthly_report(input_helper)
    elif choice == "2":
        report_manager.run_popular_vehicle_report(input_helper)
    elif choice == "3":
        report_manager.run_customer_report()
    elif choice == "4":
        report_manager.run_system_report(vehicles, customers)
    elif choice == "5":
        report_manager.run_rental_history_export(input_helper)
    elif choice == "0":
        return False
    else:
        input_helper.output.write("Invalid option. Please try again.\n")
    return True


def main(input_stream: Optional[TextIO] = None, output: Optional[TextIO] = None) -> int:
    """Starts the reports console"""
    setup_logging()
    output = output if output is not None else sys.stdout
    input_helper = InputHelper(input_stream, output=output)

    history = RentalHistoryManager()
    vehicles: List[Vehicle] = []
    customers: List[Customer] = []
    if LOAD_SAMPLE_DATA:
        vehicles, customers, rentals = build_sample_data()
        for rental in rentals:
            history.add_rental(rental)
        logger.info(f"Sample data loaded: {len(vehicles)} vehicles, {len(customers)} customers, {len(rentals)} rentals")

    report_manager = ReportManager(history, ReportService(output=output))

    while True:
        output.write("\n" + format_box("REPORTS MENU", REPORTS_MENU) + "\n")
        try:
            choice = input_helper.get_string("Select report type: ").strip()
            # error_handler returns None after reporting a handled error
            if run_menu_choice(choice, report_manager, input_helper, vehicles, customers) is False:
                break
        except EOFError:
            logger.debug("Input closed, leaving reports console")
            break

    output.write("Goodbye!\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
