"""Tests for the measurement form: preview, save payload and edit lifecycle."""

import pytest

from window_measure.contracts import FinalSize, FracInput, TransomState
from window_measure.measurements.form import FormState, MeasurementForm
from window_measure.measurements.transom import TransomValidationError
from window_measure.models.window import WindowRecord


def fill_detailed(form, top=("35", 0.625), bottom=("35", 0.75), left=("52", 0.0), right=("52", 0.125)):
    form.set_input("width_top", whole=top[0], frac=top[1])
    form.set_input("width_bottom", whole=bottom[0], frac=bottom[1])
    form.set_input("height_left", whole=left[0], frac=left[1])
    form.set_input("height_right", whole=right[0], frac=right[1])


@pytest.fixture
def form():
    return MeasurementForm()


class TestNewWindow:
    def test_detailed_preview_and_payload(self, form):
        form.location = "Kitchen"
        form.change_type("Picture")
        fill_detailed(form)

        assert form.preview() == FinalSize(35.625, 52.0)

        payload = form.build_save()
        assert payload["widths"] == [35.625, 35.75]
        assert payload["heights"] == [52.0, 52.125]
        assert payload["final_w"] == 35.625
        assert payload["final_h"] == 52.0
        assert payload["transom_shape"] is None
        assert payload["transom_height"] is None
        assert payload["type"] == "Picture"
        assert payload["location"] == "Kitchen"
        assert payload["status"] == "measured"
        assert payload["grid_style"] is None

    def test_simple_payload_has_no_readings(self, form):
        form.location = "Stairwell"
        form.change_type("Half-Round")
        form.set_input("width", whole="36")
        form.set_input("height", whole="24", frac=0.5)

        payload = form.build_save()
        assert payload["widths"] == []
        assert payload["heights"] == []
        assert (payload["final_w"], payload["final_h"]) == (36.0, 24.5)
        assert payload["transom_height"] is None

    def test_not_ready_without_location(self, form):
        form.change_type("Picture")
        fill_detailed(form)
        assert form.preview() is not None
        assert form.build_save() is None

    def test_not_ready_without_type(self, form):
        form.location = "Kitchen"
        assert form.preview() is None
        assert form.build_save() is None

    def test_not_ready_with_missing_reading(self, form):
        form.location = "Kitchen"
        form.change_type("Slider")
        fill_detailed(form, right=("", 0.0))
        assert form.preview() is None
        assert form.build_save() is None

    def test_other_type_uses_free_text(self, form):
        form.location = "Den"
        form.change_type("Other")
        form.other_type = " Bay "
        fill_detailed(form)
        assert form.build_save()["type"] == "Bay"

    def test_other_without_text_is_not_ready(self, form):
        form.location = "Den"
        form.change_type("Other")
        fill_detailed(form)
        assert form.build_save() is None

    def test_spec_fields_saved(self, form):
        form.location = "Kitchen"
        form.change_type("Casement")
        fill_detailed(form)
        form.set_spec("grid_style", "Prairie")
        form.set_spec("screen", "Full")
        payload = form.build_save()
        assert payload["grid_style"] == "Prairie"
        assert payload["screen"] == "Full"
        assert payload["temper"] is None

    def test_unknown_spec_field(self, form):
        with pytest.raises(KeyError):
            form.set_spec("glass", "Low-E")


class TestTransomOnForm:
    def test_transom_saved_for_eligible_type(self, form):
        form.location = "Living Room"
        form.change_type("Picture")
        fill_detailed(form)
        form.set_transom_enabled(True)
        form.set_transom_shape("Half-Round")
        form.set_transom_height(whole="12", frac=0.5)

        payload = form.build_save()
        assert payload["transom_shape"] == "Half-Round"
        assert payload["transom_height"] == 12.5

    def test_enabled_transom_without_height_blocks_save(self, form):
        form.location = "Living Room"
        form.change_type("Double Hung")
        fill_detailed(form)
        form.set_transom_enabled(True)
        with pytest.raises(TransomValidationError):
            form.build_save()

    def test_transom_ignored_for_ineligible_type(self, form):
        form.location = "Den"
        form.change_type("Other")
        form.other_type = "Bay"
        fill_detailed(form)
        form.set_transom_enabled(True)
        assert not form.show_transom_option
        assert form.build_save()["transom_height"] is None

    def test_other_transom_shape_text(self, form):
        form.location = "Hall"
        form.change_type("Single Hung")
        fill_detailed(form)
        form.set_transom_enabled(True)
        form.set_transom_shape("Other", other_shape="Elliptical")
        form.set_transom_height(whole="10")
        assert form.build_save()["transom_shape"] == "Elliptical"

    def test_disabling_discards_transom(self, form):
        form.change_type("Picture")
        form.set_transom_enabled(True)
        form.set_transom_shape("Half-Round")
        form.set_transom_height(whole="12", frac=0.5)
        form.set_transom_enabled(False)
        form.set_transom_enabled(True)
        assert form.transom.shape == "Rectangular"
        assert form.transom.height == FracInput()


class TestInputHandling:
    def test_whole_keeps_digits_only(self, form):
        form.set_input("width", whole="3a6")
        assert form.inputs.width.whole == "36"

    def test_frac_update_keeps_whole(self, form):
        form.set_input("width", whole="36")
        form.set_input("width", frac=0.25)
        assert form.inputs.width == FracInput("36", 0.25)

    def test_unknown_field(self, form):
        with pytest.raises(KeyError):
            form.set_input("depth", whole="4")

    def test_type_change_resets_new_window(self, form):
        form.change_type("Picture")
        fill_detailed(form)
        form.notes = "check sill"
        form.set_transom_enabled(True)

        form.change_type("Slider")
        assert form.inputs.width_top == FracInput()
        assert form.transom == TransomState()
        assert form.notes == ""


class TestEditLifecycle:
    def test_begin_edit_loads_readings(self, form, detailed_record):
        form.begin_edit(detailed_record)

        assert form.state is FormState.EDITING
        assert form.editing_id == "w-1"
        assert form.window_type == "Picture"
        assert form.inputs.width_top == FracInput("35", 0.625)
        assert form.inputs.width_bottom == FracInput("35", 0.75)
        assert form.inputs.height_left == FracInput("52", 0.0)
        assert form.inputs.height_right == FracInput("52", 0.125)
        assert form.transom.enabled
        assert form.transom.shape == "Half-Round"
        assert form.transom.height == FracInput("12", 0.5)
        assert form.specs["grid_style"] == "Colonial"

    def test_resave_reproduces_record(self, form, detailed_record):
        form.begin_edit(detailed_record)
        payload = form.build_save()

        assert payload["widths"] == detailed_record.widths
        assert payload["heights"] == detailed_record.heights
        assert payload["final_w"] == detailed_record.final_w
        assert payload["final_h"] == detailed_record.final_h
        assert payload["transom_shape"] == "Half-Round"
        assert payload["transom_height"] == 12.5
        assert payload["outside_color"] == "White"

    def test_edit_simple_window(self, form, simple_record):
        form.begin_edit(simple_record)
        assert form.window_type == "Half-Round"
        assert form.inputs.width == FracInput("36", 0.0)
        assert form.inputs.height == FracInput("24", 0.5)
        assert not form.transom.enabled

    def test_edit_without_readings_falls_back_to_finals(self, form):
        """Older rows stored only the finals; all four fields get them."""
        record = WindowRecord(
            id="w-9", location="Bath", type="Slider",
            final_w=30.25, final_h=40.0, status="measured",
        )
        form.begin_edit(record)
        assert form.inputs.width_top == form.inputs.width_bottom == FracInput("30", 0.25)
        assert form.inputs.height_left == form.inputs.height_right == FracInput("40", 0.0)
        assert form.preview() == FinalSize(30.25, 40.0)

    def test_free_text_type_loads_as_other(self, form):
        record = WindowRecord(id="w-5", location="Den", type="Bay", status="pending")
        form.begin_edit(record)
        assert form.window_type == "Other"
        assert form.other_type == "Bay"

    def test_pending_window_shows_reference_only(self, form, pending_record):
        form.begin_edit(pending_record)
        assert form.is_pending_window
        assert form.reference.label == "7"
        assert form.reference.approx_width == "30"
        assert form.reference.approx_height == "48"
        assert form.inputs.width == FracInput()
        assert form.inputs.width_top == FracInput()
        assert form.build_save() is None

    def test_type_change_while_editing_keeps_readings(self, form, detailed_record):
        form.begin_edit(detailed_record)
        form.change_type("Casement")
        assert form.inputs.width_top == FracInput("35", 0.625)
        assert form.transom.enabled

    def test_cancel_returns_to_idle(self, form, detailed_record):
        form.begin_edit(detailed_record)
        form.cancel()
        assert form.state is FormState.IDLE
        assert form.editing_id is None
        assert form.location == ""
        assert form.inputs.width_top == FracInput()


class TestSave:
    def test_save_new_window(self, form):
        calls = []

        def persist(window_id, payload):
            calls.append((window_id, payload))
            return "new-id"

        form.location = "Kitchen"
        form.change_type("Picture")
        fill_detailed(form)

        assert form.save(persist) == "new-id"
        assert calls[0][0] is None
        assert calls[0][1]["final_w"] == 35.625
        assert form.location == ""
        assert form.state is FormState.IDLE

    def test_save_edit_passes_id(self, form, pending_record):
        calls = []
        form.begin_edit(pending_record)
        form.change_type("Double Hung")
        fill_detailed(form, top=("30", 0.0), bottom=("29", 0.875), left=("48", 0.0), right=("48", 0.0))

        form.save(lambda window_id, payload: calls.append((window_id, payload)))

        window_id, payload = calls[0]
        assert window_id == "w-3"
        assert payload["final_w"] == 29.875
        updated = pending_record.apply(payload)
        assert updated.is_measured
        assert updated.label == "7"
        assert form.editing_id is None

    def test_save_not_ready_skips_persist(self, form):
        calls = []
        form.location = "Kitchen"
        assert form.save(lambda window_id, payload: calls.append(payload)) is None
        assert calls == []
