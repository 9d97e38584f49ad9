"""Job header info and workflow status."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .window import WindowRecord


class JobStatus(Enum):
    """Workflow stage of a job, in order."""
    DRAFT = "draft"
    WINDOWS_IMPORTED = "windows_imported"
    CONFIGURED = "configured"
    APPROVED = "approved"
    MEASURING = "measuring"
    COMPLETE = "complete"


# Progress bar steps, in workflow order
JOB_STEPS: List[Tuple[JobStatus, str]] = [
    (JobStatus.DRAFT, "Create"),
    (JobStatus.WINDOWS_IMPORTED, "Import"),
    (JobStatus.CONFIGURED, "Configure"),
    (JobStatus.APPROVED, "Approve"),
    (JobStatus.MEASURING, "Measure"),
    (JobStatus.COMPLETE, "Complete"),
]


def step_index(status: JobStatus) -> int:
    """Position of a status in JOB_STEPS."""
    for idx, (step_status, _) in enumerate(JOB_STEPS):
        if step_status is status:
            return idx
    raise ValueError(f"Unknown job status: {status!r}")


@dataclass
class JobInfo:
    """
    Job header printed on exports.

    Attributes:
        po_number: Purchase order number (export file names use it)
        client_name: Customer name
        client_address, client_city, client_state, client_zip: Site address
    """
    po_number: str
    client_name: Optional[str] = None
    client_address: Optional[str] = None
    client_city: Optional[str] = None
    client_state: Optional[str] = None
    client_zip: Optional[str] = None

    def address_line(self) -> str:
        """Non-empty address parts joined with commas."""
        parts = [self.client_address, self.client_city, self.client_state, self.client_zip]
        return ", ".join(p for p in parts if p)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "JobInfo":
        return cls(
            po_number=str(data.get("po_number") or ""),
            client_name=data.get("client_name"),
            client_address=data.get("client_address"),
            client_city=data.get("client_city"),
            client_state=data.get("client_state"),
            client_zip=data.get("client_zip"),
        )


@dataclass
class WindowSummary:
    """Window counts for a job."""
    total: int = 0
    measured: int = 0

    @property
    def pending(self) -> int:
        return self.total - self.measured

    @property
    def all_measured(self) -> bool:
        return self.total > 0 and self.measured == self.total


def summarize_windows(records: Iterable[WindowRecord]) -> WindowSummary:
    summary = WindowSummary()
    for record in records:
        summary.total += 1
        if record.is_measured:
            summary.measured += 1
    return summary


def job_is_complete(status: JobStatus, records: Iterable[WindowRecord]) -> bool:
    """A measuring job completes once every one of its windows is measured."""
    return status is JobStatus.MEASURING and summarize_windows(records).all_measured
