"""Data models for the window measurement tracker."""

from .window import WindowRecord, WindowStatus
from .job import JobInfo, JobStatus, JOB_STEPS, WindowSummary, job_is_complete, step_index, summarize_windows

__all__ = [
    "WindowRecord",
    "WindowStatus",
    "JobInfo",
    "JobStatus",
    "JOB_STEPS",
    "WindowSummary",
    "job_is_complete",
    "step_index",
    "summarize_windows",
]
