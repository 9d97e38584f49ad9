"""Window row model, matching the columns of the windows table."""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class WindowStatus(Enum):
    """Measurement status of a window row."""
    PENDING = "pending"    # Imported with approximate dimensions only
    MEASURED = "measured"  # Field tech saved a final size


@dataclass
class WindowRecord:
    """
    A single window as persisted by the data store.

    Created by the spreadsheet importer (pending, approximate sizes) or
    by MeasurementForm.build_save() (measured). Exporters read only the
    persisted finals and reference readings.

    Attributes:
        id: Row id (None until the store assigns one)
        po_number: Purchase order the window belongs to
        job_id: Owning job id
        label: Window number from the salesperson sheet ("3", "12A")
        location: Room / elevation text
        type: Window type, or free text entered through "Other"
        approx_width: Salesperson reference width, as typed
        approx_height: Salesperson reference height, as typed
        widths: Floored [top, bottom] readings (empty for simple types)
        heights: Floored [left, right] readings (empty for simple types)
        final_w: Order width in inches
        final_h: Order height in inches
        transom_shape: Transom shape, None when no transom
        transom_height: Transom height in inches, None when no transom
        style, grid_style, temper, outside_color, inside_color, screen:
            Optional spec fields
        notes: Free text
        status: "pending" or "measured"
    """

    id: Optional[str] = None
    po_number: str = ""
    job_id: Optional[str] = None
    label: Optional[str] = None
    location: str = ""
    type: str = ""
    approx_width: Optional[str] = None
    approx_height: Optional[str] = None
    widths: List[float] = field(default_factory=list)
    heights: List[float] = field(default_factory=list)
    final_w: Optional[float] = None
    final_h: Optional[float] = None
    transom_shape: Optional[str] = None
    transom_height: Optional[float] = None
    style: Optional[str] = None
    grid_style: Optional[str] = None
    temper: Optional[str] = None
    outside_color: Optional[str] = None
    inside_color: Optional[str] = None
    screen: Optional[str] = None
    notes: str = ""
    status: str = WindowStatus.PENDING.value
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def is_measured(self) -> bool:
        return self.status == WindowStatus.MEASURED.value

    @property
    def has_final_size(self) -> bool:
        return self.final_w is not None and self.final_h is not None

    @property
    def has_reference_readings(self) -> bool:
        """True when the four corner readings were stored with the finals."""
        return len(self.widths) >= 2 and len(self.heights) >= 2

    @property
    def has_transom(self) -> bool:
        return bool(self.transom_height)

    def header_text(self) -> str:
        """Block heading used by the exporters."""
        if self.label:
            return f"#{self.label} - {self.location}"
        return f"Window: {self.location}"

    def spec_fields(self) -> List[Tuple[str, str]]:
        """Non-empty spec fields as (short label, value) pairs."""
        pairs = [
            ("Style", self.style),
            ("Grid", self.grid_style),
            ("Temper", self.temper),
            ("Ext", self.outside_color),
            ("Int", self.inside_color),
            ("Screen", self.screen),
        ]
        return [(name, value) for name, value in pairs if value]

    def apply(self, changes: Dict[str, Any]) -> "WindowRecord":
        """Return a copy with the given column values replaced."""
        data = self.to_dict()
        data.update(changes)
        return WindowRecord.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a row dict keyed by column name."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["widths"] = list(self.widths)
        data["heights"] = list(self.heights)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WindowRecord":
        """Build from a row dict; unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}
        values["widths"] = [float(v) for v in (values.get("widths") or [])]
        values["heights"] = [float(v) for v in (values.get("heights") or [])]
        for key in ("final_w", "final_h", "transom_height"):
            if values.get(key) is not None:
                values[key] = float(values[key])
        if values.get("notes") is None:
            values["notes"] = ""
        return cls(**values)
