"""
PDF Measurement Report

Renders a job's windows into a printable letter-size report.
Uses PyMuPDF (fitz) for drawing; only persisted final sizes and reference
readings are printed, always through format_fraction.
"""

import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

import fitz  # PyMuPDF

from ..config import Config, default_config
from ..measurements.fractions import format_fraction, format_size
from ..models.job import JobInfo
from ..models.window import WindowRecord

logger = logging.getLogger(__name__)

BLOCK_HEADER_HEIGHT = 30
BLOCK_BASE_HEIGHT = 85
BLOCK_GAP = 15
NOTES_LINE_HEIGHT = 10


@dataclass
class PdfExport:
    """A generated report."""
    data: bytes
    file_name: str
    page_count: int


def report_file_name(po_number: str, config: Config = default_config) -> str:
    return f"{po_number}{config.pdf_file_suffix}"


def wrap_text(text: str, max_width: float, fontname: str, fontsize: float) -> List[str]:
    """Greedy word wrap using the font's real glyph widths."""
    lines: List[str] = []
    for paragraph in text.splitlines() or [""]:
        current = ""
        for word in paragraph.split():
            candidate = f"{current} {word}" if current else word
            if fitz.get_text_length(candidate, fontname=fontname, fontsize=fontsize) <= max_width:
                current = candidate
                continue
            if current:
                lines.append(current)
            current = word
        lines.append(current)
    return lines


class _ReportWriter:
    """Cursor-based drawing on top of a fitz.Document."""

    def __init__(self, config: Config):
        self.config = config
        self.doc = fitz.open()
        self.page = None
        self.y = 0.0
        self.new_page()

    @property
    def content_width(self) -> float:
        return self.config.pdf_page_width - self.config.pdf_margin * 2

    def new_page(self) -> None:
        self.page = self.doc.new_page(
            width=self.config.pdf_page_width,
            height=self.config.pdf_page_height,
        )
        self.y = self.config.pdf_margin

    def fits(self, height: float) -> bool:
        return self.y + height <= self.config.pdf_page_height - self.config.pdf_bottom_margin

    def text(
        self,
        x: float,
        y: float,
        text: str,
        size: float = 10,
        bold: bool = False,
        color: Tuple[float, float, float] = (0, 0, 0),
        align: str = "left",
    ) -> None:
        fontname = self.config.pdf_font_bold if bold else self.config.pdf_font
        if align != "left":
            width = fitz.get_text_length(text, fontname=fontname, fontsize=size)
            x = x - width if align == "right" else x - width / 2
        self.page.insert_text((x, y), text, fontsize=size, fontname=fontname, color=color)

    def fill_rect(self, x: float, y: float, width: float, height: float, color) -> None:
        self.page.draw_rect(fitz.Rect(x, y, x + width, y + height), color=None, fill=color)


def _block_height(window: WindowRecord, notes_lines: Sequence[str]) -> float:
    height = BLOCK_BASE_HEIGHT
    if window.has_transom:
        height += 30
    if window.notes:
        height += len(notes_lines) * NOTES_LINE_HEIGHT + 25
    if window.has_reference_readings:
        height += 40
    if window.spec_fields():
        height += 30
    return height


def _draw_header(w: _ReportWriter, job: JobInfo, report_date: date) -> None:
    cfg = w.config
    page_width = cfg.pdf_page_width
    margin = cfg.pdf_margin

    w.text(page_width / 2, w.y, f"{cfg.company_name} - {cfg.report_title}",
           size=20, color=cfg.brand_color, align="center")
    w.y += 20
    w.text(margin, w.y, f"PO Number: {job.po_number}", size=12, color=cfg.dark_gray)
    w.text(page_width - margin, w.y, f"Date: {report_date.strftime('%m/%d/%Y')}",
           size=12, color=cfg.dark_gray, align="right")
    w.y += 16

    if job.client_name:
        w.text(margin, w.y, job.client_name, size=10, color=cfg.mid_gray)
        w.y += 14
    address = job.address_line()
    if address:
        w.text(margin, w.y, address, size=10, color=cfg.mid_gray)
        w.y += 14
    w.y += 9


def _draw_window(w: _ReportWriter, window: WindowRecord) -> None:
    cfg = w.config
    margin = cfg.pdf_margin
    page_width = cfg.pdf_page_width
    half_width = page_width / 2

    notes_lines = wrap_text(window.notes, w.content_width - 20, cfg.pdf_font, 10) if window.notes else []
    block_height = _block_height(window, notes_lines)
    if not w.fits(block_height):
        w.new_page()
    block_start = w.y

    # Block header
    w.fill_rect(margin, w.y, w.content_width, BLOCK_HEADER_HEIGHT, cfg.brand_color)
    w.text(margin + 10, w.y + 20, window.header_text(), size=16, bold=True, color=(1, 1, 1))
    w.y += BLOCK_HEADER_HEIGHT

    w.fill_rect(margin, w.y, w.content_width, block_height - BLOCK_HEADER_HEIGHT, cfg.light_gray)
    w.y += 15

    # Type and final size
    type_x = half_width / 2 + margin / 2
    size_x = half_width + half_width / 2 - margin / 2
    w.text(type_x, w.y, "Type", size=11, color=cfg.mid_gray, align="center")
    w.text(size_x, w.y, "Final Size (Width × Height)", size=11, color=cfg.mid_gray, align="center")

    size_text = format_size(window.final_w, window.final_h) if window.has_final_size else "Not measured"
    w.text(type_x, w.y + 20, window.type or "-", size=18, bold=True, color=cfg.dark_gray, align="center")
    w.text(size_x, w.y + 20, size_text, size=18, bold=True, color=cfg.dark_gray, align="center")
    w.y += 40

    specs = window.spec_fields()
    if specs:
        line = "  |  ".join(f"{name}: {value}" for name, value in specs)
        w.text(margin + 10, w.y, line, size=9, color=cfg.mid_gray)
        w.y += 20

    if window.has_transom:
        w.text(margin + 10, w.y, "Transom", size=10, color=cfg.mid_gray)
        w.text(margin + 20, w.y + 14, f"Shape: {window.transom_shape or '-'}", size=12, color=cfg.dark_gray)
        w.text(half_width, w.y + 14, f'Height: {format_fraction(window.transom_height)}"',
               size=12, color=cfg.dark_gray)
        w.y += 30

    if notes_lines:
        w.text(margin + 10, w.y, "Notes", size=10, color=cfg.mid_gray)
        for idx, line in enumerate(notes_lines):
            w.text(margin + 20, w.y + 14 + idx * NOTES_LINE_HEIGHT, line, size=10, color=cfg.dark_gray)
        w.y += len(notes_lines) * NOTES_LINE_HEIGHT + 15

    if window.has_reference_readings:
        w.text(margin + 10, w.y, "Reference Measurements", size=10, color=cfg.mid_gray)
        w.text(margin + 20, w.y + 14, f'Width Top: {format_fraction(window.widths[0])}"',
               size=10, color=cfg.dark_gray)
        w.text(margin + 20, w.y + 26, f'Width Bottom: {format_fraction(window.widths[1])}"',
               size=10, color=cfg.dark_gray)
        w.text(half_width, w.y + 14, f'Height Left: {format_fraction(window.heights[0])}"',
               size=10, color=cfg.dark_gray)
        w.text(half_width, w.y + 26, f'Height Right: {format_fraction(window.heights[1])}"',
               size=10, color=cfg.dark_gray)
        w.y += 38

    w.y = block_start + block_height + BLOCK_GAP


def generate_pdf(
    windows: Sequence[WindowRecord],
    job: JobInfo,
    output_path: Optional[Union[str, Path]] = None,
    report_date: Optional[date] = None,
    config: Config = default_config,
) -> PdfExport:
    """
    Render the measurement report for a job.

    Args:
        windows: Windows in display order
        job: Job header (PO, client, address)
        output_path: File or directory to also write the PDF to
        report_date: Date printed in the header (default: today)
        config: Layout and branding settings

    Returns:
        PdfExport with the PDF bytes and suggested file name
    """
    writer = _ReportWriter(config)
    _draw_header(writer, job, report_date or date.today())
    for window in windows:
        _draw_window(writer, window)

    file_name = report_file_name(job.po_number, config)
    data = writer.doc.tobytes()
    page_count = len(writer.doc)
    writer.doc.close()

    if output_path is not None:
        target = Path(output_path)
        if target.is_dir():
            target = target / file_name
        target.write_bytes(data)
        logger.info("Wrote %d window(s) on %d page(s) to %s", len(windows), page_count, target)

    return PdfExport(data=data, file_name=file_name, page_count=page_count)
