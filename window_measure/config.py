"""
Configuration for the window measurement tracker.

All settings centralized here. Override by creating a Config instance
with custom values.

Usage:
    from window_measure.config import Config, default_config

    # Use defaults
    print(default_config.default_transom_shape)  # Rectangular

    # Override for a run
    my_config = Config(company_name="Acme Windows", output_dir="exports")
"""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass
class Config:
    """
    Central configuration for measurement, import and export.

    All settings have sensible defaults matching the field workflow.
    Create a new instance to override any setting.
    """

    # === Directories ===
    output_dir: str = "exports"

    # === Measurement entry ===
    default_transom_shape: str = "Rectangular"

    # === Report branding ===
    company_name: str = "H&F Exteriors"
    report_title: str = "Window Measurement Report"

    # === PDF layout (points, letter portrait) ===
    pdf_page_width: float = 612.0
    pdf_page_height: float = 792.0
    pdf_margin: float = 40.0
    pdf_bottom_margin: float = 40.0
    pdf_font: str = "helv"
    pdf_font_bold: str = "hebo"

    # RGB in 0..1, as PyMuPDF expects
    brand_color: Tuple[float, float, float] = (157 / 255, 34 / 255, 53 / 255)
    light_gray: Tuple[float, float, float] = (243 / 255, 244 / 255, 246 / 255)
    dark_gray: Tuple[float, float, float] = (55 / 255, 65 / 255, 81 / 255)
    mid_gray: Tuple[float, float, float] = (107 / 255, 114 / 255, 128 / 255)

    # === Spreadsheet ===
    header_scan_rows: int = 20       # Rows searched for the column header line
    sheet_title: str = "Measurements"
    sheet_frozen_rows: int = 5
    brand_fill_hex: str = "9D2235"
    header_fill_hex: str = "EDEDED"

    # === Photos ===
    photo_max_dimension: int = 1920  # Longest side after downscaling
    photo_jpeg_quality: int = 80
    photo_max_bytes: int = 1024 * 1024  # Compress anything larger

    # === Output Files ===
    pdf_file_suffix: str = "_Window_Measurements.pdf"
    sheet_file_suffix: str = "_Window_Measurements.xlsx"

    # Column headers for the spreadsheet export, in order
    sheet_columns: Tuple[str, ...] = field(
        default_factory=lambda: (
            "Label", "Location", "Type", "Approx W", "Approx H",
            "Final W", "Final H", "Grid", "Temper", "Screen",
            "Ext Color", "Int Color", "Notes", "Status",
        )
    )


# Default configuration instance
default_config = Config()
