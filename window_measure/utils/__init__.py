"""Utility modules (JSON row dumps, photo preparation)."""

from .io import load_json_robust, load_job_export, save_windows_json
from .photos import PhotoProcessingError, PreparedPhoto, prepare_photo, scaled_size

__all__ = [
    # JSON I/O
    "load_json_robust",
    "load_job_export",
    "save_windows_json",
    # Photos
    "PhotoProcessingError",
    "PreparedPhoto",
    "prepare_photo",
    "scaled_size",
]
