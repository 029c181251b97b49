"""
Integration tests for the reports console
"""
import io
import pytest
from datetime import date
from rental_reports import main as console
from rental_reports.models import RentalStatus
from rental_reports.services import RentalHistoryManager, ReportManager
from rental_reports.utils.errors import ExportError
from rental_reports.utils.input_helper import InputHelper


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    """Keeps basicConfig from touching pytest's log handlers"""
    monkeypatch.setattr(console, "setup_logging", lambda *args, **kwargs: None)


def run_console(*lines: str) -> str:
    output = io.StringIO()
    exit_code = console.main(io.StringIO("".join(f"{line}\n" for line in lines)), output)
    assert exit_code == 0
    return output.getvalue()


def test_build_sample_data():
    vehicles, customers, rentals = console.build_sample_data(today=date(2024, 6, 15))

    assert len(vehicles) == 3
    assert len(customers) == 2
    assert [r.status for r in rentals] == [RentalStatus.RETURNED, RentalStatus.ACTIVE, RentalStatus.PENDING]
    assert all(r.customer in customers for r in rentals)


def test_exit_immediately():
    text = run_console("0")
    assert "REPORTS MENU" in text
    assert text.rstrip().endswith("Goodbye!")


def test_end_of_input_exits():
    text = run_console()
    assert "Goodbye!" in text


def test_customer_then_system_report():
    text = run_console("3", "4", "0")
    assert "=== Customer Report ===" in text
    assert "Customer: Aisyah Rahman, Rentals: 1, Total Spent: RM480.00" in text
    assert "=== SYSTEM REPORT ===" in text
    assert "Total Vehicles: 3" in text


def test_monthly_report_without_export():
    text = run_console("1", "n", "0")
    assert "--- Monthly Rental Report ---" in text
    assert "Do you want to export this report? (y/n): " in text


def test_invalid_option():
    text = run_console("7", "0")
    assert "Invalid option. Please try again." in text


def test_without_sample_data(monkeypatch):
    monkeypatch.setattr(console, "LOAD_SAMPLE_DATA", False)
    text = run_console("4", "0")
    assert "Total Rentals: 0" in text
    assert "Total Vehicles: 0" in text


def test_handled_error_keeps_console_running(mock_report_service):
    """A reporting error is shown and the menu continues"""
    mock_report_service.generate_customer_report.side_effect = ExportError("disk", user_message="Export failed")
    manager = ReportManager(RentalHistoryManager(), mock_report_service)
    output = io.StringIO()
    helper = InputHelper(io.StringIO(), output=output)

    result = console.run_menu_choice("3", manager, helper, [], [])

    assert result is None
    assert output.getvalue() == "❌ Export failed\n"


def test_exit_choice_returns_false(mock_report_service):
    manager = ReportManager(RentalHistoryManager(), mock_report_service)
    helper = InputHelper(io.StringIO(), output=io.StringIO())
    assert console.run_menu_choice("0", manager, helper, [], []) is False


def test_handled_error_shown_in_console_output(monkeypatch):
    """Messages from handled errors go to the console's own output stream"""
    def failing_report(self, rentals):
        raise ExportError("disk", user_message="Export failed")

    monkeypatch.setattr(console.ReportService, "generate_customer_report", failing_report)

    text = run_console("3", "4", "0")

    assert "❌ Export failed" in text
    assert "=== SYSTEM REPORT ===" in text
