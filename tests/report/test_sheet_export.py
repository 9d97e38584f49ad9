"""Tests for the .xlsx export."""

from datetime import date

import pytest
from openpyxl import load_workbook

from window_measure.report.sheet_export import (
    build_sheet_rows,
    sheet_file_name,
    window_row,
    write_workbook,
)


@pytest.fixture
def windows(detailed_record, simple_record, pending_record):
    return [detailed_record, simple_record, pending_record]


class TestWindowRow:
    def test_measured_row(self, detailed_record):
        row = window_row(detailed_record)
        assert row[:3] == ["3", "Kitchen", "Picture"]
        assert row[5:7] == ['35 5/8"', '52"']
        assert row[7] == "Colonial"
        assert row[-1] == "measured"

    def test_pending_row_has_approximations_only(self, pending_record):
        row = window_row(pending_record)
        assert row[3:7] == ["30", "48", "", ""]
        assert row[-1] == "pending"


class TestBuildSheetRows:
    def test_layout(self, windows, job):
        rows = build_sheet_rows(windows, job, export_date=date(2026, 3, 5))
        assert rows[0] == ["H&F Exteriors — Window Measurements"]
        assert rows[1][0] == "PO: 4471"
        assert rows[1][2] == "Client: Smith Residence"
        assert rows[1][4] == "Date: 03/05/2026"
        assert rows[2] == ["Address: 12 Main St, Springfield, IL, 62701"]
        assert rows[3] == []
        assert rows[4][0] == "Label"
        assert len(rows) == 5 + len(windows) + 2
        assert rows[-2] == []

    def test_summary_row(self, windows, job):
        summary = build_sheet_rows(windows, job)[-1]
        assert summary[12] == "Total: 3 windows, 2 measured"
        assert [c for i, c in enumerate(summary) if i != 12] == [""] * 13


class TestWriteWorkbook:
    def test_writes_styled_workbook(self, tmp_path, windows, job):
        path = write_workbook(windows, job, tmp_path / "out.xlsx", export_date=date(2026, 3, 5))
        wb = load_workbook(path)
        ws = wb.active
        assert ws.title == "Measurements"
        assert ws["A1"].font.bold
        assert ws["A5"].value == "Label"
        assert ws["A5"].font.bold
        assert ws["F6"].value == '35 5/8"'
        assert ws["G7"].value == '24 1/2"'
        assert ws.freeze_panes == "A6"
        assert ws["M10"].value == "Total: 3 windows, 2 measured"

    def test_directory_target_uses_po_name(self, tmp_path, windows, job):
        path = write_workbook(windows, job, tmp_path)
        assert path == tmp_path / "4471_Window_Measurements.xlsx"
        assert path.exists()

    def test_file_name(self):
        assert sheet_file_name("88") == "88_Window_Measurements.xlsx"
