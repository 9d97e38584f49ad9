"""Spreadsheet export of a job's windows.

Layout (one sheet):
- Row 1: company title (bold, white on brand color)
- Row 2: PO / client / date
- Row 3: site address
- Row 4: blank
- Row 5: column headers (bold, gray fill)
- One row per window, finals formatted as fractions with inch marks
- Blank row, then a "Total: N windows, M measured" summary
"""

import logging
from datetime import date
from pathlib import Path
from typing import Any, List, Optional, Sequence, Union

from openpyxl import Workbook
from openpyxl.styles import Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from ..config import Config, default_config
from ..measurements.fractions import format_fraction
from ..models.job import JobInfo, summarize_windows
from ..models.window import WindowRecord

logger = logging.getLogger(__name__)

HEADER_ROW_COUNT = 4  # Rows above the column headers


def _inches(value: Optional[float]) -> str:
    return f'{format_fraction(value)}"' if value is not None else ""


def window_row(window: WindowRecord) -> List[str]:
    """Cell values for one window, in sheet_columns order."""
    return [
        window.label or "",
        window.location or "",
        window.type or "",
        window.approx_width or "",
        window.approx_height or "",
        _inches(window.final_w),
        _inches(window.final_h),
        window.grid_style or "",
        window.temper or "",
        window.screen or "",
        window.outside_color or "",
        window.inside_color or "",
        window.notes or "",
        window.status or "",
    ]


def build_sheet_rows(
    windows: Sequence[WindowRecord],
    job: JobInfo,
    export_date: Optional[date] = None,
    config: Config = default_config,
) -> List[List[Any]]:
    """
    Build the full cell grid for a job export.

    Returns:
        List of rows; blank rows are empty lists
    """
    export_date = export_date or date.today()
    columns = list(config.sheet_columns)
    summary = summarize_windows(windows)

    rows: List[List[Any]] = [
        [f"{config.company_name} — Window Measurements"],
        [f"PO: {job.po_number}", "", f"Client: {job.client_name or ''}", "",
         f"Date: {export_date.strftime('%m/%d/%Y')}"],
        [f"Address: {job.address_line()}"],
        [],
        columns,
    ]
    rows.extend(window_row(w) for w in windows)
    rows.append([])

    summary_row = [""] * len(columns)
    summary_row[len(columns) - 2] = f"Total: {summary.total} windows, {summary.measured} measured"
    rows.append(summary_row)
    return rows


def sheet_file_name(po_number: str, config: Config = default_config) -> str:
    return f"{po_number}{config.sheet_file_suffix}"


def write_workbook(
    windows: Sequence[WindowRecord],
    job: JobInfo,
    output_path: Union[str, Path],
    export_date: Optional[date] = None,
    config: Config = default_config,
) -> Path:
    """
    Write the job export as an .xlsx workbook.

    Args:
        windows: Windows in display order
        job: Job header
        output_path: Target file, or a directory to place the default name in
        export_date: Date printed in the header (default: today)
        config: Branding and sheet settings

    Returns:
        Path of the written workbook
    """
    target = Path(output_path)
    if target.is_dir():
        target = target / sheet_file_name(job.po_number, config)

    rows = build_sheet_rows(windows, job, export_date, config)
    column_count = len(config.sheet_columns)

    workbook = Workbook()
    sheet = workbook.active
    sheet.title = config.sheet_title
    for row in rows:
        sheet.append(row)

    title_font = Font(bold=True, size=14, color="FFFFFF")
    title_fill = PatternFill(start_color=config.brand_fill_hex, end_color=config.brand_fill_hex, fill_type="solid")
    header_font = Font(bold=True, size=10)
    header_fill = PatternFill(start_color=config.header_fill_hex, end_color=config.header_fill_hex, fill_type="solid")
    header_border = Border(bottom=Side(style="thin"))

    for col in range(1, column_count + 1):
        title_cell = sheet.cell(row=1, column=col)
        title_cell.font = title_font
        title_cell.fill = title_fill

        header_cell = sheet.cell(row=HEADER_ROW_COUNT + 1, column=col)
        header_cell.font = header_font
        header_cell.fill = header_fill
        header_cell.border = header_border

    # Approximate auto-fit from the longest value in each column
    for col in range(1, column_count + 1):
        longest = max(
            (len(str(row[col - 1])) for row in rows[HEADER_ROW_COUNT:] if len(row) >= col),
            default=0,
        )
        sheet.column_dimensions[get_column_letter(col)].width = min(max(longest + 2, 8), 60)

    sheet.freeze_panes = sheet.cell(row=config.sheet_frozen_rows + 1, column=1)

    workbook.save(target)
    logger.info("Wrote %d window(s) to %s", len(windows), target)
    return target
