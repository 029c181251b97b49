"""
Integration tests: ReportManager with the real history, reporting and export services
"""
import io
import json
import pytest
from openpyxl import load_workbook
from rental_reports.services import RentalHistoryManager, ReportManager


class TestReportFlow:
    """End-to-end report runs through the facade"""

    @pytest.fixture
    def report_manager(self, report_service, sample_rentals):
        manager = ReportManager(RentalHistoryManager(), report_service)
        for rental in sample_rentals:
            manager.add_rental(rental)
        return manager

    def test_monthly_report_exported_to_excel(self, report_manager, output, reports_dir):
        report_manager.run_monthly_report(io.StringIO("y\n1\n"))

        text = output.getvalue()
        assert "2024-01: 2 rentals" in text
        assert "2024-02: 3 rentals" in text

        files = list(reports_dir.glob("monthly_report_*.xlsx"))
        assert len(files) == 1
        ws = load_workbook(files[0]).active
        assert ws["A1"].value == "Monthly Rental Report"
        assert [c.value for c in ws[4]] == ["Month", "Total Rentals"]
        assert [c.value for c in ws[6]] == ["2024-02", "3"]

    def test_monthly_report_exported_to_csv(self, report_manager, reports_dir):
        report_manager.run_monthly_report(io.StringIO("y\n4\n"))

        files = list(reports_dir.glob("monthly_report_*.csv"))
        assert len(files) == 1
        content = files[0].read_text(encoding='utf-8')
        assert "Month,Total Rentals" in content
        assert "2024-02,3" in content

    def test_popular_vehicle_report_exported_to_json(self, report_manager, reports_dir):
        report_manager.run_popular_vehicle_report(io.StringIO("y\n5\n"))

        files = list(reports_dir.glob("popular_vehicles_report_*.json"))
        assert len(files) == 1
        document = json.loads(files[0].read_text(encoding='utf-8'))
        assert document['rows'][0] == {"Vehicle": "Honda City", "Total Rentals": "2"}

    def test_customer_report(self, report_manager, output):
        report_manager.run_customer_report()
        assert "Customer: Bob Lim, Rentals: 1, Total Spent: RM150.00" in output.getvalue()

    def test_system_report(self, report_manager, output, sample_vehicles, sample_customers):
        report_manager.run_system_report(sample_vehicles, sample_customers)

        text = output.getvalue()
        assert "Total Rentals: 5" in text
        assert "Total Vehicles: 5" in text
        assert "Total Customers: 2" in text

    def test_rental_history_export_excel_and_pdf(self, report_manager, reports_dir):
        report_manager.run_rental_history_export(io.StringIO("y\n3\n"))

        assert len(list(reports_dir.glob("rental_history_*.xlsx"))) == 1
        pdf_files = list(reports_dir.glob("rental_history_*.pdf"))
        assert len(pdf_files) == 1
        assert pdf_files[0].read_bytes().startswith(b"%PDF")

    def test_report_reflects_rentals_added_later(self, report_manager, output, sample_rentals):
        extra = sample_rentals[1].model_copy(update={'id': 99})
        report_manager.add_rental(extra)

        report_manager.run_customer_report()

        assert "Customer: Bob Lim, Rentals: 2, Total Spent: RM300.00" in output.getvalue()

    def test_missing_answer_propagates(self, report_manager):
        """Running out of input during the export prompt is not swallowed"""
        with pytest.raises(EOFError):
            report_manager.run_monthly_report(io.StringIO(""))
