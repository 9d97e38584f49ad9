"""Resolve the final order size of an opening from its raw readings.

Resolution rules:
1. Classify the type (Round / Half-Round are SIMPLE, everything else DETAILED)
2. SIMPLE: width and height must both be entered and > 0
3. DETAILED: all four corner readings must be entered and > 0
4. Floor every reading to the eighth grid FIRST, then take the smaller
   width and the smaller height (glass must fit the tightest clearance)

Missing input is not an error: the resolver returns None and the form
keeps waiting for the remaining fields.
"""

from typing import Optional

from ..contracts import DetailedReadings, FinalSize, OpeningInputs
from .fractions import round_down_to_eighth
from .window_types import OpeningShape, classify_type


def floor_readings(inputs: OpeningInputs) -> Optional[DetailedReadings]:
    """
    Floor the four corner readings of a detailed opening.

    Returns:
        DetailedReadings, or None if any reading is missing or <= 0
    """
    values = [
        inputs.width_top.positive_value(),
        inputs.width_bottom.positive_value(),
        inputs.height_left.positive_value(),
        inputs.height_right.positive_value(),
    ]
    if any(v is None for v in values):
        return None

    width_top, width_bottom, height_left, height_right = (
        round_down_to_eighth(v) for v in values
    )
    return DetailedReadings(
        width_top=width_top,
        width_bottom=width_bottom,
        height_left=height_left,
        height_right=height_right,
    )


def resolve_simple(inputs: OpeningInputs) -> Optional[FinalSize]:
    """Final size of a round / half-round opening."""
    width = inputs.width.positive_value()
    height = inputs.height.positive_value()
    if width is None or height is None:
        return None
    return FinalSize(
        width=round_down_to_eighth(width),
        height=round_down_to_eighth(height),
    )


def resolve_detailed(inputs: OpeningInputs) -> Optional[FinalSize]:
    """Final size of a rectangular opening: floor each reading, then min."""
    readings = floor_readings(inputs)
    if readings is None:
        return None
    return FinalSize(
        width=min(readings.width_top, readings.width_bottom),
        height=min(readings.height_left, readings.height_right),
    )


def resolve_final_size(window_type: Optional[str], inputs: OpeningInputs) -> Optional[FinalSize]:
    """
    Compute the final size for an opening, if enough input is present.

    Args:
        window_type: Selected type, or the free text typed for "Other"
        inputs: Current raw readings from the form

    Returns:
        FinalSize, or None while the type or any required reading is missing
    """
    shape = classify_type(window_type)
    if shape is OpeningShape.SIMPLE:
        return resolve_simple(inputs)
    if shape is OpeningShape.DETAILED:
        return resolve_detailed(inputs)
    return None
