"""File I/O utilities."""

import json
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

from ..models.job import JobInfo
from ..models.window import WindowRecord


def load_json_robust(filepath: Union[str, Path]) -> Tuple[Optional[Any], Optional[str]]:
    """
    Load JSON with BOM (Byte Order Mark) handling.

    Row dumps exported from the store on Windows machines are sometimes
    saved with a BOM. This function tries multiple encodings.

    Encoding order:
    1. utf-8-sig: UTF-8 with BOM (handles Windows exports)
    2. utf-8: Standard UTF-8
    3. latin-1: Fallback for legacy files

    Args:
        filepath: Path to JSON file

    Returns:
        Tuple of (data, error):
        - On success: (data, None)
        - On failure: (None, error_message)
    """
    filepath = Path(filepath)

    if not filepath.exists():
        return None, f"File not found: {filepath}"

    for encoding in ["utf-8-sig", "utf-8", "latin-1"]:
        try:
            with open(filepath, "r", encoding=encoding) as f:
                return json.load(f), None
        except UnicodeDecodeError:
            continue
        except json.JSONDecodeError as e:
            return None, f"JSON error: {str(e)[:100]}"

    return None, f"Failed all encodings for: {filepath}"


def load_job_export(filepath: Union[str, Path]) -> Tuple[Optional[JobInfo], List[WindowRecord], Optional[str]]:
    """
    Load a job dump: {"job": {...}, "windows": [{...}, ...]}.

    A bare list is accepted as the windows with an empty job header.

    Returns:
        Tuple of (job, windows, error)
    """
    data, err = load_json_robust(filepath)
    if err:
        return None, [], err

    if isinstance(data, list):
        job_data, window_data = {}, data
    elif isinstance(data, dict):
        job_data = data.get("job") or {}
        window_data = data.get("windows") or []
    else:
        return None, [], f"Unexpected JSON structure in {filepath}"

    windows = [WindowRecord.from_dict(row) for row in window_data]
    job = JobInfo.from_dict(job_data)
    if not job.po_number and windows:
        job.po_number = windows[0].po_number
    return job, windows, None


def save_windows_json(windows: List[WindowRecord], filepath: Union[str, Path], job: Optional[JobInfo] = None) -> Path:
    """Write windows (and optional job header) in the load_job_export format."""
    filepath = Path(filepath)
    payload = {
        "job": vars(job) if job else {},
        "windows": [w.to_dict() for w in windows],
    }
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)
    return filepath
