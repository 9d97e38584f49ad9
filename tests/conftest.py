"""Shared fixtures: sample window rows and job header."""

import pytest

from window_measure.models.job import JobInfo
from window_measure.models.window import WindowRecord


@pytest.fixture
def job():
    return JobInfo(
        po_number="4471",
        client_name="Smith Residence",
        client_address="12 Main St",
        client_city="Springfield",
        client_state="IL",
        client_zip="62701",
    )


@pytest.fixture
def detailed_record():
    """Measured picture window with corner readings and a transom."""
    return WindowRecord(
        id="w-1",
        po_number="4471",
        label="3",
        location="Kitchen",
        type="Picture",
        widths=[35.625, 35.75],
        heights=[52.0, 52.125],
        final_w=35.625,
        final_h=52.0,
        transom_shape="Half-Round",
        transom_height=12.5,
        grid_style="Colonial",
        outside_color="White",
        notes="Tempered glass required near the door",
        status="measured",
    )


@pytest.fixture
def simple_record():
    """Measured half-round window."""
    return WindowRecord(
        id="w-2",
        po_number="4471",
        location="Stairwell",
        type="Half-Round",
        final_w=36.0,
        final_h=24.5,
        status="measured",
    )


@pytest.fixture
def pending_record():
    """Imported window with salesperson approximations only."""
    return WindowRecord(
        id="w-3",
        po_number="4471",
        label="7",
        location="Window 7",
        type="",
        approx_width="30",
        approx_height="48",
        status="pending",
    )
