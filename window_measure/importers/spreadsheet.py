"""Import salesperson window sheets into pending window records.

The sheets come from a shared template but are edited by hand, so the
parser is lenient:
1. Look for a header row (a label column and a width column) in the first rows
2. Map columns by header aliases; fall back to the template column order
3. Read PO / client / address from the label cells above the header
4. Every non-empty row after the header becomes a pending window

Approximate sizes are kept as typed text; field techs replace them with
real measurements later.
"""

import csv
import logging
import re
import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from ..config import default_config
from ..measurements.fractions import parse_fraction
from ..models.window import WindowRecord, WindowStatus

logger = logging.getLogger(__name__)


# Header aliases per field. Order matters: a column goes to the first
# field whose alias matches, and each field is mapped only once.
HEADER_MAP: Dict[str, List[str]] = {
    "label": ["label", "window", "win", "#", "no", "number"],
    "width": ["width", "width inches", "w", "width (inches)"],
    "height": ["height", "height inches", "h", "height (inches)"],
    "transom_height": ["transom height", "transom height inches", "transom h"],
    "transom_shape": ["transom shape", "transom"],
    "style": ["style"],
    "grid_style": ["grid style", "grid", "grids"],
    "temper": ["temper", "tempered", "glass"],
    "outside_color": ["outside color", "ext color", "exterior color", "outside", "ext"],
    "inside_color": ["inside color", "int color", "interior color", "inside", "int"],
    "screen": ["screen", "screens"],
    "notes": ["notes", "note", "comments", "comment"],
}

# Template column order, used when no header row is found
DEFAULT_COLUMNS: Dict[str, int] = {name: idx for idx, name in enumerate(HEADER_MAP)}

# Aliases this short only match a whole cell ("w" must not match "window")
MIN_SUBSTRING_ALIAS = 3

_PO_LABEL = re.compile(r'\bp\.?o\b', re.IGNORECASE)
_CLIENT_LABEL = re.compile(r'client|customer', re.IGNORECASE)
_ADDRESS_LABEL = re.compile(r'address', re.IGNORECASE)
_NOT_A_NAME = ("windows", "label", "width", "height")


class SpreadsheetFormatError(ValueError):
    """The file could not be read as a workbook."""


@dataclass
class ParsedSpreadsheet:
    """
    Result of importing a window sheet.

    Attributes:
        po_number: PO found above the header (falls back to client name)
        client_name: Customer name found above the header
        address: Site address found above the header
        windows: Pending WindowRecords, one per data row
        header_row: 0-based index of the header row (-1 if none)
        column_map: Field name -> 0-based column index used
    """
    po_number: Optional[str] = None
    client_name: Optional[str] = None
    address: Optional[str] = None
    windows: List[WindowRecord] = field(default_factory=list)
    header_row: int = -1
    column_map: Dict[str, int] = field(default_factory=dict)


def cell_text(value: Any) -> str:
    """Cell value as trimmed text; whole floats lose their ".0"."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def none_to_null(value: str) -> Optional[str]:
    if not value or value.lower() == "none":
        return None
    return value


def _alias_matches(cell: str, alias: str, exact_only: bool = False) -> bool:
    if cell == alias:
        return True
    return not exact_only and len(alias) >= MIN_SUBSTRING_ALIAS and alias in cell


def find_header(rows: Sequence[Sequence[Any]], scan_rows: Optional[int] = None):
    """
    Locate the header row and map its columns.

    Returns:
        (header_row_index, column_map), or (-1, {}) if no header was found
    """
    scan_rows = scan_rows or default_config.header_scan_rows

    for r, row in enumerate(rows[:scan_rows]):
        if not row:
            continue
        cells = [cell_text(c).lower() for c in row]

        has_label = any(c in HEADER_MAP["label"] for c in cells)
        has_width = any(c in HEADER_MAP["width"] or "width" in c for c in cells)
        if not (has_label and has_width):
            continue

        column_map: Dict[str, int] = {}
        claimed = set()
        # Whole-cell matches claim columns before any substring match
        for exact_only in (True, False):
            for c, text in enumerate(cells):
                if not text or c in claimed:
                    continue
                for field_name, aliases in HEADER_MAP.items():
                    if field_name in column_map:
                        continue
                    if any(_alias_matches(text, alias, exact_only) for alias in aliases):
                        column_map[field_name] = c
                        claimed.add(c)
                        break
        return r, column_map

    return -1, {}


def _fallback_header(rows: Sequence[Sequence[Any]]) -> int:
    """Assume the header sits right above the first row with a numeric label."""
    for r, row in enumerate(rows):
        if not row or row[0] is None:
            continue
        number = parse_fraction(cell_text(row[0]))
        if number is not None and number > 0:
            return r - 1
    return -1


def _scan_job_info(rows: Sequence[Sequence[Any]], header_row: int) -> Dict[str, Optional[str]]:
    """Pick PO / client / address out of label-value pairs above the header."""
    info: Dict[str, Optional[str]] = {"po_number": None, "client_name": None, "address": None}

    for row in rows[:max(header_row, 0)]:
        if not row:
            continue
        label_cells = set()
        for c, value in enumerate(row):
            text = cell_text(value)
            if not text:
                continue
            following = cell_text(row[c + 1]) if c + 1 < len(row) else ""
            if _PO_LABEL.search(text):
                label_cells.add(c)
                if following:
                    info["po_number"] = following
            if _CLIENT_LABEL.search(text):
                label_cells.add(c)
                if following:
                    info["client_name"] = following
            if _ADDRESS_LABEL.search(text):
                label_cells.add(c)
                if following:
                    info["address"] = following

        # A bare name in the first column is the client
        if info["client_name"] is None and 0 not in label_cells:
            first = cell_text(row[0])
            if (
                len(first) > 2
                and re.search(r'[a-zA-Z]', first)
                and not any(k in first.lower() for k in _NOT_A_NAME)
            ):
                info["client_name"] = first

    if not info["po_number"] and info["client_name"]:
        info["po_number"] = info["client_name"]
    return info


def _row_to_window(row: Sequence[Any], column_map: Dict[str, int]) -> Optional[WindowRecord]:
    def get(field_name: str) -> str:
        idx = column_map.get(field_name)
        if idx is None or idx >= len(row):
            return ""
        return cell_text(row[idx])

    label = get("label")
    width = get("width")
    height = get("height")
    if not label and not width and not height:
        return None

    transom_height = parse_fraction(get("transom_height"))
    if transom_height is not None and transom_height <= 0:
        transom_height = None

    style = get("style")
    window_type = "Half-Round" if style.lower() in ("half round", "half-round") else ""

    return WindowRecord(
        label=label or None,
        location=f"Window {label}" if label else "",
        type=window_type,
        approx_width=width or None,
        approx_height=height or None,
        transom_shape=none_to_null(get("transom_shape")),
        transom_height=transom_height,
        style=style or None,
        grid_style=none_to_null(get("grid_style")),
        temper=none_to_null(get("temper")),
        outside_color=get("outside_color") or None,
        inside_color=get("inside_color") or None,
        screen=none_to_null(get("screen")),
        notes=get("notes"),
        status=WindowStatus.PENDING.value,
    )


def parse_rows(
    rows: Sequence[Sequence[Any]],
    job_id: Optional[str] = None,
    po_number: Optional[str] = None,
) -> ParsedSpreadsheet:
    """
    Parse a grid of cell values into pending windows.

    Args:
        rows: Rows of cell values (first sheet, top to bottom)
        job_id: Job to attach the windows to
        po_number: PO to stamp on the windows (defaults to the one found)

    Returns:
        ParsedSpreadsheet
    """
    header_row, column_map = find_header(rows)
    if header_row == -1:
        header_row = _fallback_header(rows)
        column_map = dict(DEFAULT_COLUMNS)
        logger.info("No header row found, using template column order (data from row %d)", header_row + 2)
    else:
        logger.debug("Header row %d mapped columns: %s", header_row + 1, column_map)

    info = _scan_job_info(rows, header_row)
    po = po_number or info["po_number"] or ""

    windows = []
    for row in rows[header_row + 1:]:
        if not row:
            continue
        window = _row_to_window(row, column_map)
        if window is None:
            continue
        window.po_number = po
        window.job_id = job_id
        windows.append(window)

    logger.info("Imported %d window(s) for PO %r", len(windows), po)

    return ParsedSpreadsheet(
        po_number=info["po_number"],
        client_name=info["client_name"],
        address=info["address"],
        windows=windows,
        header_row=header_row,
        column_map=column_map,
    )


def read_rows(path: Union[str, Path]) -> List[List[Any]]:
    """
    Read the first sheet of an .xlsx workbook (or a .csv file) as rows.

    Raises:
        FileNotFoundError: If the file does not exist
        SpreadsheetFormatError: If the file is not a readable workbook
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    if path.suffix.lower() == ".csv":
        with open(path, "r", encoding="utf-8-sig", newline="") as f:
            return [list(row) for row in csv.reader(f)]

    try:
        workbook = load_workbook(path, read_only=True, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError) as e:
        raise SpreadsheetFormatError(f"Cannot read workbook {path.name}: {e}") from e

    try:
        sheet = workbook.worksheets[0]
        return [list(row) for row in sheet.iter_rows(values_only=True)]
    finally:
        workbook.close()


def parse_workbook(
    path: Union[str, Path],
    job_id: Optional[str] = None,
    po_number: Optional[str] = None,
) -> ParsedSpreadsheet:
    """Read a window sheet from disk and parse it (see parse_rows)."""
    rows = read_rows(path)
    logger.debug("Read %d row(s) from %s", len(rows), path)
    return parse_rows(rows, job_id=job_id, po_number=po_number)
