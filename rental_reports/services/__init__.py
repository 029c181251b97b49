"""
Services for rental history and reporting
"""
from .rental_history_manager import RentalHistoryManager
from .report_export_service import ReportExportService
from .report_service import ReportService
from .report_manager import ReportManager

__all__ = [
    'RentalHistoryManager',
    'ReportExportService',
    'ReportService',
    'ReportManager',
]
