"""Importers that turn salesperson data into pending window records."""

from .spreadsheet import (
    HEADER_MAP,
    ParsedSpreadsheet,
    SpreadsheetFormatError,
    find_header,
    parse_rows,
    parse_workbook,
    read_rows,
)

__all__ = [
    "HEADER_MAP",
    "ParsedSpreadsheet",
    "SpreadsheetFormatError",
    "find_header",
    "parse_rows",
    "parse_workbook",
    "read_rows",
]
