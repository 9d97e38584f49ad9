"""Export formatters for measured windows (PDF report, spreadsheet)."""

from .pdf_report import PdfExport, generate_pdf, report_file_name
from .sheet_export import build_sheet_rows, sheet_file_name, window_row, write_workbook

__all__ = [
    "PdfExport",
    "generate_pdf",
    "report_file_name",
    "build_sheet_rows",
    "sheet_file_name",
    "window_row",
    "write_workbook",
]
