"""
Window Measurement Tracker v1.0

Measurement core for a home-exteriors window workflow: salespeople import
approximate sizes, field techs record precise readings, and the results
are exported for ordering.

Modules:
- measurements: Eighth-inch fractions, final size and transom resolution, form state
- models: Window rows and job header info
- importers: Salesperson spreadsheet import
- report: PDF report and spreadsheet export
- utils: JSON row dumps, photo preparation
"""

__version__ = "1.0.0"


def __getattr__(name):
    """Lazy imports to avoid pulling in heavy dependencies (fitz, openpyxl, PIL)
    when only the measurement math is needed."""

    _measurement_names = {
        "split_value", "combine_value", "round_down_to_eighth", "format_fraction",
        "format_size", "parse_fraction", "resolve_final_size", "resolve_transom",
        "TransomValidationError", "MeasurementForm", "FormState",
    }
    _model_names = {"WindowRecord", "WindowStatus", "JobInfo", "JobStatus"}
    _contract_names = {"FracInput", "OpeningInputs", "FinalSize", "TransomState", "Transom"}
    _importer_names = {"parse_workbook", "parse_rows", "ParsedSpreadsheet"}
    _report_names = {"generate_pdf", "write_workbook", "build_sheet_rows"}

    if name in _measurement_names:
        from . import measurements
        return getattr(measurements, name)
    elif name in _model_names:
        from . import models
        return getattr(models, name)
    elif name in _contract_names:
        from . import contracts
        return getattr(contracts, name)
    elif name in _importer_names:
        from . import importers
        return getattr(importers, name)
    elif name in _report_names:
        from . import report
        return getattr(report, name)

    raise AttributeError(f"module 'window_measure' has no attribute {name!r}")
