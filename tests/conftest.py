"""
pytest configuration and shared fixtures
"""
import io
import pytest
from datetime import date
from pathlib import Path
from unittest.mock import Mock

from rental_reports.models import Customer, Rental, RentalStatus, Vehicle
from rental_reports.services import RentalHistoryManager, ReportExportService, ReportService
from rental_reports.utils.input_helper import InputHelper


@pytest.fixture
def reports_dir(tmp_path: Path) -> Path:
    """Temporary directory for exported reports"""
    return tmp_path / "reports"


@pytest.fixture
def output() -> io.StringIO:
    """Captures everything a report prints"""
    return io.StringIO()


@pytest.fixture
def make_input(output):
    """Builds an InputHelper that answers with the given lines"""
    def _make(*lines: str) -> InputHelper:
        return InputHelper(io.StringIO("".join(f"{line}\n" for line in lines)), output=output)
    return _make


@pytest.fixture
def export_service(reports_dir) -> ReportExportService:
    return ReportExportService(reports_dir=reports_dir)


@pytest.fixture
def report_service(output, export_service) -> ReportService:
    """ReportService writing to a StringIO and exporting to a temp directory"""
    return ReportService(output=output, export_service=export_service, currency="RM")


@pytest.fixture
def mock_report_service():
    """Test double for the reporting service"""
    return Mock(spec=ReportService)


@pytest.fixture
def history() -> RentalHistoryManager:
    return RentalHistoryManager()


@pytest.fixture
def sample_customers():
    """Test customers"""
    return [
        Customer(username="alice", full_name="Alice Wong", contact_number="012-1111111"),
        Customer(username="bob", full_name="Bob Lim", contact_number="013-2222222"),
    ]


@pytest.fixture
def sample_vehicles():
    """Test vehicles: one per status plus an archived one"""
    return [
        Vehicle(vehicle_id="V1", plate_no="AAA1111", brand="Perodua", model="Myvi"),
        Vehicle(vehicle_id="V2", plate_no="BBB2222", brand="Honda", model="City", status="rented"),
        Vehicle(vehicle_id="V3", plate_no="CCC3333", brand="Toyota", model="Vios", status="reserved"),
        Vehicle(vehicle_id="V4", plate_no="DDD4444", brand="Proton", model="Saga", status="out_of_service"),
        Vehicle(vehicle_id="V5", plate_no="EEE5555", brand="Nissan", model="Almera", status="rented",
                archived=True),
    ]


@pytest.fixture
def sample_rentals(sample_customers, sample_vehicles):
    """Test rentals over two months"""
    alice, bob = sample_customers
    myvi, city, vios = sample_vehicles[:3]
    return [
        Rental(id=1, customer=alice, vehicle=myvi,
               start_date=date(2024, 1, 5), end_date=date(2024, 1, 7),
               status=RentalStatus.RETURNED, total_fee=300.0, insurance_selected=True),
        Rental(id=2, customer=bob, vehicle=city,
               start_date=date(2024, 1, 20), end_date=date(2024, 1, 20),
               status=RentalStatus.RETURNED, total_fee=150.0),
        Rental(id=3, customer=alice, vehicle=myvi,
               start_date=date(2024, 2, 1), end_date=date(2024, 2, 4),
               status=RentalStatus.ACTIVE, total_fee=400.0),
        Rental(id=4, customer=bob, vehicle=vios,
               start_date=date(2024, 2, 10), end_date=date(2024, 2, 12),
               status=RentalStatus.PENDING, total_fee=330.0, insurance_selected=True),
        Rental(id=5, customer=alice, vehicle=city,
               start_date=date(2024, 2, 15), end_date=date(2024, 2, 16),
               status=RentalStatus.CANCELLED, total_fee=200.0),
    ]


@pytest.fixture(autouse=True)
def reset_env_vars(monkeypatch):
    """Removes configuration variables before each test"""
    for key in ['REPORTS_DIR', 'LOG_LEVEL', 'CURRENCY', 'EXPORT_TIMESTAMP_FORMAT', 'LOAD_SAMPLE_DATA']:
        monkeypatch.delenv(key, raising=False)
    yield
