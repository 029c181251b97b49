"""
Report export to files

Writes tabular reports (title, headers, rows) to Excel, PDF, CSV and JSON files
inside the reports directory and drives the interactive "export this report?"
dialog.
"""
import csv
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence, Union
from xml.sax.saxutils import escape

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter
from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from rental_reports.config import (
    DEFAULT_DISPLAY_DATE_FORMAT,
    EXPORT_TIMESTAMP_FORMAT,
    REPORTS_DIR,
)
from rental_reports.utils.errors import ExportError
from rental_reports.utils.input_helper import InputHelper

logger = logging.getLogger(__name__)

Rows = Sequence[Sequence[str]]

HEADER_COLOR = "2980B9"
ALTERNATE_ROW_COLOR = "F8F9FA"
PDF_FOOTER_TEXT = "Generated by Vehicle Rental Management System"


class ReportExportService:
    """Exports report tables to Excel, PDF, CSV and JSON"""

    def __init__(
        self,
        reports_dir: Union[str, Path] = REPORTS_DIR,
        timestamp_format: str = EXPORT_TIMESTAMP_FORMAT,
        date_format: str = DEFAULT_DISPLAY_DATE_FORMAT
    ) -> None:
        """
        Args:
            reports_dir: Directory the files are written to, created on demand
            timestamp_format: strftime pattern appended to file names
            date_format: strftime pattern of the "Generated on" line
        """
        self.reports_dir = Path(reports_dir)
        self.timestamp_format = timestamp_format
        self.date_format = date_format

    def _generate_path(self, base_filename: str, extension: str, now: datetime) -> Path:
        timestamp = now.strftime(self.timestamp_format)
        return self.reports_dir / f"{base_filename}_{timestamp}{extension}"

    def _ensure_reports_directory(self) -> None:
        try:
            self.reports_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Cannot create reports directory {self.reports_dir}: {e}")
            raise ExportError(
                f"Cannot create reports directory {self.reports_dir}: {e}",
                user_message=f"Cannot create reports directory {self.reports_dir}"
            ) from e

    def export_to_excel(
        self,
        report_title: str,
        headers: Sequence[str],
        data: Rows,
        base_filename: str,
        now: Optional[datetime] = None
    ) -> Path:
        """
        Writes the report as an Excel workbook

        Layout: merged title row, "Generated on" row, empty row, styled header
        row, data rows with alternating fill. Columns are sized to their content.

        Returns:
            Path of the written file

        Raises:
            ExportError: If the file cannot be written
        """
        now = now or datetime.now()
        self._ensure_reports_directory()
        path = self._generate_path(base_filename, ".xlsx", now)

        wb = Workbook()
        ws = wb.active
        ws.title = "Report"

        header_fill = PatternFill("solid", fgColor=HEADER_COLOR)
        alternate_fill = PatternFill("solid", fgColor=ALTERNATE_ROW_COLOR)

        ws.cell(row=1, column=1, value=report_title).font = Font(bold=True, size=14)
        if len(headers) > 1:
            ws.merge_cells(start_row=1, start_column=1, end_row=1, end_column=len(headers))
        ws.cell(row=2, column=1, value=f"Generated on: {now.strftime(self.date_format)}")

        header_row = 4
        for col_idx, header in enumerate(headers, start=1):
            cell = ws.cell(row=header_row, column=col_idx, value=header)
            cell.fill = header_fill
            cell.font = Font(bold=True, color="FFFFFF")
            cell.alignment = Alignment(horizontal="center")

        for offset, row in enumerate(data):
            row_idx = header_row + 1 + offset
            for col_idx, value in enumerate(row, start=1):
                cell = ws.cell(row=row_idx, column=col_idx, value="" if value is None else value)
                if offset % 2:
                    cell.fill = alternate_fill

        # title and timestamp rows are left out of the width calculation
        for col_idx in range(1, len(headers) + 1):
            max_len = 0
            for row_idx in range(header_row, ws.max_row + 1):
                val = ws.cell(row=row_idx, column=col_idx).value
                if val is not None:
                    max_len = max(max_len, len(str(val)))
            ws.column_dimensions[get_column_letter(col_idx)].width = max(10, min(40, max_len + 2))

        try:
            wb.save(path)
        except OSError as e:
            logger.error(f"Excel export failed for {path}: {e}")
            raise ExportError(f"Excel export failed: {e}", user_message="Excel export failed") from e

        logger.info(f"Excel report exported: {path} ({len(data)} rows)")
        return path

    def export_to_pdf(
        self,
        report_title: str,
        headers: Sequence[str],
        data: Rows,
        base_filename: str,
        now: Optional[datetime] = None
    ) -> Path:
        """
        Writes the report as a landscape A4 PDF

        The document has a centered title, the generation time, the record
        count and a table with a repeated header row. Every page carries a
        "Page N | Generated on: ..." footer.

        Raises:
            ExportError: If the file cannot be written
        """
        now = now or datetime.now()
        self._ensure_reports_directory()
        path = self._generate_path(base_filename, ".pdf", now)
        generated_on = now.strftime(self.date_format)

        doc = SimpleDocTemplate(
            str(path), pagesize=landscape(A4),
            leftMargin=36, rightMargin=36, topMargin=72, bottomMargin=72,
            title=report_title
        )

        styles = getSampleStyleSheet()
        title_style = ParagraphStyle('ReportTitle', parent=styles['Title'], fontSize=20)
        subtitle_style = ParagraphStyle(
            'ReportSubtitle', parent=styles['Normal'], fontSize=10,
            textColor=colors.grey, alignment=TA_CENTER
        )
        info_style = ParagraphStyle('ReportInfo', parent=styles['Normal'], fontSize=10, textColor=colors.grey)

        table = Table(
            [list(headers)] + [["" if value is None else str(value) for value in row] for row in data],
            colWidths=[doc.width / len(headers)] * len(headers),
            repeatRows=1
        )
        table.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor(f"#{HEADER_COLOR}")),
            ('TEXTCOLOR', (0, 0), (-1, 0), colors.white),
            ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
            ('FONTSIZE', (0, 0), (-1, 0), 10),
            ('FONTSIZE', (0, 1), (-1, -1), 9),
            ('ALIGN', (0, 0), (-1, 0), 'CENTER'),
            ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
            ('ROWBACKGROUNDS', (0, 1), (-1, -1), [colors.white, colors.HexColor(f"#{ALTERNATE_ROW_COLOR}")]),
            ('GRID', (0, 0), (-1, -1), 0.5, colors.HexColor("#C8C8C8")),
            ('TOPPADDING', (0, 0), (-1, -1), 6),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 6),
        ]))

        story = [
            Paragraph(escape(report_title), title_style),
            Paragraph(escape(f"Generated on: {generated_on}"), subtitle_style),
            Spacer(1, 12),
            Paragraph(f"Total Records: {len(data)}", info_style),
            Spacer(1, 8),
            table,
            Spacer(1, 18),
            Paragraph(PDF_FOOTER_TEXT, subtitle_style),
        ]

        def draw_footer(canvas, doc):
            canvas.saveState()
            canvas.setFont('Helvetica', 8)
            canvas.setFillColor(colors.grey)
            canvas.drawCentredString(doc.pagesize[0] / 2, 30, f"Page {doc.page} | Generated on: {generated_on}")
            canvas.restoreState()

        try:
            doc.build(story, onFirstPage=draw_footer, onLaterPages=draw_footer)
        except OSError as e:
            logger.error(f"PDF export failed for {path}: {e}")
            raise ExportError(f"PDF export failed: {e}", user_message="PDF export failed") from e

        logger.info(f"PDF report exported: {path} ({len(data)} rows)")
        return path

    def export_to_csv(
        self,
        report_title: str,
        headers: Sequence[str],
        data: Rows,
        base_filename: str,
        now: Optional[datetime] = None
    ) -> Path:
        """
        Writes the report as CSV

        Layout: title row, "Generated on" row, empty row, header row, data rows.

        Returns:
            Path of the written file

        Raises:
            ExportError: If the file cannot be written
        """
        now = now or datetime.now()
        self._ensure_reports_directory()
        path = self._generate_path(base_filename, ".csv", now)

        try:
            with path.open('w', newline='', encoding='utf-8') as f:
                writer = csv.writer(f)
                writer.writerow([report_title])
                writer.writerow([f"Generated on: {now.strftime(self.date_format)}"])
                writer.writerow([])
                writer.writerow(list(headers))
                for row in data:
                    writer.writerow(["" if value is None else value for value in row])
        except OSError as e:
            logger.error(f"CSV export failed for {path}: {e}")
            raise ExportError(f"CSV export failed: {e}", user_message="CSV export failed") from e

        logger.info(f"CSV report exported: {path} ({len(data)} rows)")
        return path

    def export_to_json(
        self,
        report_title: str,
        headers: Sequence[str],
        data: Rows,
        base_filename: str,
        now: Optional[datetime] = None
    ) -> Path:
        """
        Writes the report as JSON

        Each row becomes an object keyed by the headers.

        Raises:
            ExportError: If the file cannot be written
        """
        now = now or datetime.now()
        self._ensure_reports_directory()
        path = self._generate_path(base_filename, ".json", now)

        document = {
            'title': report_title,
            'generated_on': now.strftime(self.date_format),
            'headers': list(headers),
            'rows': [dict(zip(headers, row)) for row in data],
        }

        try:
            with path.open('w', encoding='utf-8') as f:
                json.dump(document, f, ensure_ascii=False, indent=2)
        except OSError as e:
            logger.error(f"JSON export failed for {path}: {e}")
            raise ExportError(f"JSON export failed: {e}", user_message="JSON export failed") from e

        logger.info(f"JSON report exported: {path} ({len(data)} rows)")
        return path

    def prompt_for_export(
        self,
        input_helper: InputHelper,
        report_title: str,
        headers: Sequence[str],
        data: Rows,
        base_filename: str
    ) -> List[Path]:
        """
        Asks whether and how to export a report

        Returns:
            Paths of the files written, empty when the user declined
        """
        out = input_helper.output
        out.write("\n--- Export Report ---\n")

        response = input_helper.get_string("Do you want to export this report? (y/n): ").strip()
        if response.lower() != 'y':
            return []

        out.write("Export format selection:\n")
        out.write("1. Excel\n")
        out.write("2. PDF\n")
        out.write("3. Both\n")
        out.write("4. CSV\n")
        out.write("5. JSON\n")
        choice = input_helper.get_string("Please select: ").strip()

        exporters = {
            '1': [self.export_to_excel],
            '2': [self.export_to_pdf],
            '3': [self.export_to_excel, self.export_to_pdf],
            '4': [self.export_to_csv],
            '5': [self.export_to_json],
        }
        selected = exporters.get(choice)
        if selected is None:
            out.write("Invalid selection.\n")
            return []

        written: List[Path] = []
        for export in selected:
            try:
                path = export(report_title, headers, data, base_filename)
            except ExportError as e:
                out.write(f"❌ {e.user_message}\n")
                break
            written.append(path)
            out.write(f"✅ Report exported successfully: {path}\n")
        return written
