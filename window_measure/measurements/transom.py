"""Transom validation.

A transom is the optional glazed unit above a rectangular opening. Unlike
the main readings, a half-filled transom blocks the save outright: it
cannot be stored partially.
"""

from typing import Optional

from ..config import default_config
from ..contracts import FracInput, Transom, TransomState
from .fractions import round_down_to_eighth


class TransomValidationError(ValueError):
    """Transom enabled but its shape or height is missing."""


def resolve_transom(state: TransomState) -> Optional[Transom]:
    """
    Validate the transom sub-form.

    Args:
        state: Current transom sub-form

    Returns:
        None when the transom is switched off, otherwise a Transom with
        the height floored to the eighth grid

    Raises:
        TransomValidationError: If enabled with a missing/non-positive
            height or an empty "Other" shape
    """
    if not state.enabled:
        return None

    height = state.height.positive_value()
    if height is None:
        raise TransomValidationError("transom height is required when a transom is added")

    shape = state.resolved_shape()
    if not shape:
        raise TransomValidationError("transom shape is required when 'Other' is selected")

    return Transom(shape=shape, height=round_down_to_eighth(height))


def transom_state_from_record(shape: Optional[str], height: Optional[float]) -> TransomState:
    """
    Rebuild the sub-form from a persisted transom.

    Shapes other than the two fixed ones were typed through "Other".
    """
    if height is None:
        return TransomState()

    height_input = FracInput.from_value(height)
    if shape and shape not in ("Rectangular", "Half-Round"):
        return TransomState(enabled=True, shape="Other", other_shape=shape, height=height_input)
    return TransomState(
        enabled=True,
        shape=shape or default_config.default_transom_shape,
        height=height_input,
    )
