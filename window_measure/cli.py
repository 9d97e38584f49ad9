"""Command line entry point.

Subcommands:
    import-sheet  Parse a salesperson sheet into a JSON row dump
    export-pdf    Render a JSON row dump as the PDF measurement report
    export-sheet  Render a JSON row dump as an .xlsx workbook
    format        Print decimal inches as fractions (floored to 1/8")
"""

import argparse
import logging
import sys
from pathlib import Path

from .config import default_config
from .importers.spreadsheet import SpreadsheetFormatError, parse_workbook
from .measurements.fractions import format_fraction, parse_fraction, round_down_to_eighth
from .models.job import JobInfo, summarize_windows
from .report.pdf_report import generate_pdf
from .report.sheet_export import write_workbook
from .utils.io import load_job_export, save_windows_json


def _cmd_import_sheet(args) -> int:
    try:
        parsed = parse_workbook(args.sheet, job_id=args.job_id, po_number=args.po)
    except (FileNotFoundError, SpreadsheetFormatError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    job = JobInfo(
        po_number=args.po or parsed.po_number or "",
        client_name=parsed.client_name,
        client_address=parsed.address,
    )
    out = save_windows_json(parsed.windows, args.out, job=job)

    print(f"Imported {len(parsed.windows)} window(s)")
    print(f"  PO: {job.po_number or 'N/A'}")
    print(f"  Client: {parsed.client_name or 'N/A'}")
    print(f"  Address: {parsed.address or 'N/A'}")
    print(f"\nRows saved to: {out}")
    return 0


def _load(args):
    job, windows, err = load_job_export(args.rows)
    if err:
        print(f"Error: {err}", file=sys.stderr)
        return None, None
    if args.po:
        job.po_number = args.po
    return job, windows


def _output_target(args) -> Path:
    out = Path(args.out or default_config.output_dir)
    if not out.suffix:
        out.mkdir(parents=True, exist_ok=True)
    return out


def _cmd_export_pdf(args) -> int:
    job, windows = _load(args)
    if job is None:
        return 1
    target = _output_target(args)
    export = generate_pdf(windows, job, output_path=target)

    summary = summarize_windows(windows)
    print(f"Report: {export.file_name} ({export.page_count} page(s))")
    print(f"  Windows: {summary.total} ({summary.measured} measured, {summary.pending} pending)")
    return 0


def _cmd_export_sheet(args) -> int:
    job, windows = _load(args)
    if job is None:
        return 1
    path = write_workbook(windows, job, _output_target(args))
    print(f"Workbook saved to: {path}")
    return 0


def _cmd_format(args) -> int:
    status = 0
    for raw in args.values:
        value = parse_fraction(raw)
        if value is None:
            print(f"{raw}: not a measurement", file=sys.stderr)
            status = 1
            continue
        print(f'{raw} -> {format_fraction(round_down_to_eighth(value))}"')
    return status


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Window measurement import, export and formatting"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_import = sub.add_parser("import-sheet", help="Parse a salesperson sheet (.xlsx/.csv)")
    p_import.add_argument("sheet", help="Path to the workbook")
    p_import.add_argument("--out", required=True, help="JSON file to write the window rows to")
    p_import.add_argument("--po", help="PO number (overrides the one in the sheet)")
    p_import.add_argument("--job-id", help="Job id to attach the windows to")
    p_import.set_defaults(func=_cmd_import_sheet)

    for name, func, help_text in (
        ("export-pdf", _cmd_export_pdf, "Render the PDF measurement report"),
        ("export-sheet", _cmd_export_sheet, "Render the .xlsx export"),
    ):
        p_export = sub.add_parser(name, help=help_text)
        p_export.add_argument("rows", help="JSON row dump ({job, windows})")
        p_export.add_argument("--out", help="Output file or directory")
        p_export.add_argument("--po", help="PO number (overrides the dump)")
        p_export.set_defaults(func=func)

    p_format = sub.add_parser("format", help="Format decimal inches as fractions")
    p_format.add_argument("values", nargs="+", help='Values such as 35.7 or "24 1/2"')
    p_format.set_defaults(func=_cmd_format)

    return parser


def main(argv=None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
