"""Measurement form state for a single opening.

The form owns the raw whole/fraction inputs while a field tech measures
one window. It recomputes the preview size on demand, builds the save
payload once, and tracks which persisted window (if any) is being edited:

    IDLE  --begin_edit(record)-->  EDITING(record.id)
    EDITING  --save() / cancel()-->  IDLE

Incomplete input never raises. build_save() returns None until every
required field is present; only an enabled-but-invalid transom raises.

Usage:
    form = MeasurementForm()
    form.location = "Kitchen"
    form.change_type("Picture")
    form.set_input("width_top", whole="35", frac=0.625)
    ...
    print(form.preview().format())   # 35 5/8" × 52"
    form.save(lambda window_id, payload: store.upsert(window_id, payload))
"""

from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any, Callable, Dict, Optional

from ..contracts import FinalSize, FracInput, OpeningInputs, TransomState
from ..models.window import WindowRecord, WindowStatus
from .resolver import floor_readings, resolve_final_size, resolve_simple
from .transom import resolve_transom, transom_state_from_record
from .window_types import (
    OTHER_TYPE,
    OpeningShape,
    classify_type,
    is_known_type,
    is_transom_eligible,
)

# Optional spec columns carried through unchanged
SPEC_FIELDS = ("style", "grid_style", "temper", "outside_color", "inside_color", "screen")

INPUT_FIELDS = tuple(f.name for f in fields(OpeningInputs))


class FormState(Enum):
    """Whether the form is adding a new window or editing a stored one."""
    IDLE = "idle"
    EDITING = "editing"


@dataclass
class ReferenceValues:
    """Salesperson approximations shown while measuring a pending window."""
    label: Optional[str] = None
    approx_width: Optional[str] = None
    approx_height: Optional[str] = None


@dataclass
class MeasurementForm:
    """
    Editable state of the window measurement form.

    Attributes:
        location: Room / elevation text (required to save)
        window_type: Selector value, one of WINDOW_TYPES or ""
        other_type: Free text used when window_type is "Other"
        notes: Free text
        inputs: Raw readings (six FracInput fields)
        transom: Transom sub-form
        specs: Optional spec fields keyed by column name
        state: IDLE or EDITING
        editing_id: Id of the window being edited (None when IDLE)
        reference: Salesperson values of the window being edited
    """

    location: str = ""
    window_type: str = ""
    other_type: str = ""
    notes: str = ""
    inputs: OpeningInputs = field(default_factory=OpeningInputs)
    transom: TransomState = field(default_factory=TransomState)
    specs: Dict[str, str] = field(default_factory=lambda: {name: "" for name in SPEC_FIELDS})
    state: FormState = FormState.IDLE
    editing_id: Optional[str] = None
    editing_status: Optional[str] = None
    reference: ReferenceValues = field(default_factory=ReferenceValues)

    # --- derived ---

    @property
    def is_editing(self) -> bool:
        return self.state is FormState.EDITING

    @property
    def is_pending_window(self) -> bool:
        return self.is_editing and self.editing_status == WindowStatus.PENDING.value

    @property
    def shape(self) -> Optional[OpeningShape]:
        return classify_type(self.window_type)

    @property
    def show_transom_option(self) -> bool:
        return self.shape is OpeningShape.DETAILED and is_transom_eligible(self.window_type)

    def resolved_type(self) -> str:
        """Type to persist: the Other free text, or the selected type."""
        if self.window_type == OTHER_TYPE:
            return self.other_type.strip()
        return self.window_type

    def preview(self) -> Optional[FinalSize]:
        """Live "Calculated Final Size", or None while input is incomplete."""
        return resolve_final_size(self.window_type, self.inputs)

    # --- input changes ---

    def set_input(self, name: str, whole: Optional[str] = None, frac: Optional[float] = None) -> None:
        """Update one reading; whole text is reduced to its digits."""
        if name not in INPUT_FIELDS:
            raise KeyError(f"Unknown measurement field: {name}")
        current: FracInput = getattr(self.inputs, name)
        if whole is not None:
            current = current.with_whole(whole)
        if frac is not None:
            current = current.with_frac(frac)
        self.inputs = replace(self.inputs, **{name: current})

    def set_spec(self, name: str, value: str) -> None:
        if name not in SPEC_FIELDS:
            raise KeyError(f"Unknown spec field: {name}")
        self.specs[name] = value

    def set_transom_enabled(self, enabled: bool) -> None:
        self.transom = self.transom.toggled(enabled)

    def set_transom_shape(self, shape: str, other_shape: Optional[str] = None) -> None:
        self.transom = self.transom.with_shape(shape)
        if other_shape is not None:
            self.transom = replace(self.transom, other_shape=other_shape)

    def set_transom_height(self, whole: Optional[str] = None, frac: Optional[float] = None) -> None:
        height = self.transom.height
        if whole is not None:
            height = height.with_whole(whole)
        if frac is not None:
            height = height.with_frac(frac)
        self.transom = replace(self.transom, height=height)

    def change_type(self, new_type: str) -> None:
        """
        Select a window type.

        A new window starts over with empty readings when the type
        changes; an edit keeps what was loaded.
        """
        self.window_type = new_type
        if not self.is_editing:
            self.inputs = OpeningInputs()
            self.transom = TransomState()
            self.notes = ""
            self.other_type = ""

    # --- lifecycle ---

    def clear(self) -> None:
        """Reset every field; editing state is left alone."""
        self.location = ""
        self.window_type = ""
        self.other_type = ""
        self.notes = ""
        self.inputs = OpeningInputs()
        self.transom = TransomState()
        self.specs = {name: "" for name in SPEC_FIELDS}

    def begin_edit(self, record: WindowRecord) -> None:
        """Load a stored window and switch to EDITING."""
        self.clear()
        self.populate(record)
        self.state = FormState.EDITING
        self.editing_id = record.id
        self.editing_status = record.status
        self.reference = ReferenceValues(
            label=record.label,
            approx_width=record.approx_width,
            approx_height=record.approx_height,
        )

    def cancel(self) -> None:
        self.clear()
        self._to_idle()

    def _to_idle(self) -> None:
        self.state = FormState.IDLE
        self.editing_id = None
        self.editing_status = None
        self.reference = ReferenceValues()

    def populate(self, record: WindowRecord) -> None:
        """
        Copy a stored window into the form fields.

        Readings are only pre-filled for measured windows; a pending
        window keeps empty inputs and shows its reference values instead.
        Detailed windows stored without corner readings fall back to
        re-splitting final_w / final_h into all four fields.
        """
        self.location = record.location or ""
        self.notes = record.notes or ""
        for name in SPEC_FIELDS:
            self.specs[name] = getattr(record, name) or ""

        if is_known_type(record.type):
            self.window_type = record.type
            self.other_type = ""
        elif record.type:
            self.window_type = OTHER_TYPE
            self.other_type = record.type

        if not record.is_measured:
            return

        shape = classify_type(record.type)
        if shape is OpeningShape.SIMPLE and record.has_final_size:
            self.inputs = OpeningInputs(
                width=FracInput.from_value(record.final_w),
                height=FracInput.from_value(record.final_h),
            )
        elif record.has_reference_readings:
            self.inputs = OpeningInputs(
                width_top=FracInput.from_value(record.widths[0]),
                width_bottom=FracInput.from_value(record.widths[1]),
                height_left=FracInput.from_value(record.heights[0]),
                height_right=FracInput.from_value(record.heights[1]),
            )
        elif record.has_final_size:
            width = FracInput.from_value(record.final_w)
            height = FracInput.from_value(record.final_h)
            self.inputs = OpeningInputs(
                width_top=width,
                width_bottom=width,
                height_left=height,
                height_right=height,
            )

        if record.transom_height is not None:
            self.transom = transom_state_from_record(record.transom_shape, record.transom_height)

    # --- save path ---

    def build_save(self) -> Optional[Dict[str, Any]]:
        """
        Build the column values to persist.

        Returns:
            Row dict with status "measured", or None while the location,
            type or any required reading is missing

        Raises:
            TransomValidationError: If a transom is enabled but incomplete
        """
        resolved_type = self.resolved_type()
        if not self.location.strip() or not resolved_type:
            return None

        shape = self.shape
        if shape is OpeningShape.SIMPLE:
            size = resolve_simple(self.inputs)
            if size is None:
                return None
            payload = {
                "widths": [],
                "heights": [],
                "final_w": size.width,
                "final_h": size.height,
                "transom_shape": None,
                "transom_height": None,
            }
        elif shape is OpeningShape.DETAILED:
            readings = floor_readings(self.inputs)
            if readings is None:
                return None
            transom = resolve_transom(self.transom) if self.show_transom_option else None
            payload = {
                "widths": readings.widths,
                "heights": readings.heights,
                "final_w": min(readings.widths),
                "final_h": min(readings.heights),
                "transom_shape": transom.shape if transom else None,
                "transom_height": transom.height if transom else None,
            }
        else:
            return None

        payload.update({
            "location": self.location.strip(),
            "type": resolved_type,
            "notes": self.notes.strip(),
            "status": WindowStatus.MEASURED.value,
        })
        for name in SPEC_FIELDS:
            payload[name] = self.specs.get(name) or None
        return payload

    def save(self, persist: Callable[[Optional[str], Dict[str, Any]], Any]) -> Any:
        """
        Build the payload and hand it to the store.

        Args:
            persist: Called as persist(editing_id, payload); editing_id is
                None for a new window

        Returns:
            Whatever persist returned, or None if the form is not ready
        """
        payload = self.build_save()
        if payload is None:
            return None
        result = persist(self.editing_id, payload)
        self.clear()
        self._to_idle()
        return result
