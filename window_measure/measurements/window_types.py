"""Window type definitions and option lists for measurement entry."""

from enum import Enum
from typing import Optional

# Types offered in the type selector, in display order.
# This is the SINGLE SOURCE OF TRUTH for opening classification.
WINDOW_TYPES = [
    "Single Hung",
    "Double Hung",
    "Slider",
    "Picture",
    "Casement",
    "Round",
    "Half-Round",
    "Other",
]

OTHER_TYPE = "Other"

# Measured by one width and one height
SIMPLE_TYPES = {"Round", "Half-Round"}

# Measured by two widths (top, bottom) and two heights (left, right)
DETAILED_TYPES = {"Single Hung", "Double Hung", "Slider", "Picture", "Casement", "Other"}

# Rectangular types that may carry a transom above them
TRANSOM_ELIGIBLE_TYPES = {"Single Hung", "Double Hung", "Slider", "Picture", "Casement"}

TRANSOM_SHAPES = ["Rectangular", "Half-Round", "Other"]

# Eighth-inch grid offered next to the whole-inch field
FRACTION_VALUES = (0.0, 0.125, 0.25, 0.375, 0.5, 0.625, 0.75, 0.875)
FRACTION_OPTIONS = [
    (0.0, "0"),
    (0.125, "1/8"),
    (0.25, "1/4"),
    (0.375, "3/8"),
    (0.5, "1/2"),
    (0.625, "5/8"),
    (0.75, "3/4"),
    (0.875, "7/8"),
]

# Optional spec fields
GRID_STYLES = ["None", "Colonial", "Prairie", "Perimeter"]
TEMPER_OPTIONS = ["None", "Lower", "Full"]
SCREEN_OPTIONS = ["None", "Half", "Full"]


class OpeningShape(Enum):
    """How an opening is measured."""
    SIMPLE = "simple"      # Width + height
    DETAILED = "detailed"  # Four corner readings


def is_known_type(window_type: str) -> bool:
    """True for the fixed types other than the free-text Other."""
    return window_type in WINDOW_TYPES and window_type != OTHER_TYPE


def selector_type(window_type: Optional[str]) -> str:
    """
    Map a stored type to the value shown in the type selector.

    Free-text types that are not in WINDOW_TYPES were entered through
    the Other override, so they select "Other".
    """
    if not window_type:
        return ""
    if window_type in WINDOW_TYPES:
        return window_type
    return OTHER_TYPE


def classify_type(window_type: Optional[str]) -> Optional[OpeningShape]:
    """
    Classify a window type as SIMPLE or DETAILED.

    Returns None when no type has been selected yet.
    """
    selected = selector_type(window_type)
    if not selected:
        return None
    if selected in SIMPLE_TYPES:
        return OpeningShape.SIMPLE
    return OpeningShape.DETAILED


def is_transom_eligible(window_type: Optional[str]) -> bool:
    """Only the rectangular known types can carry a transom."""
    return selector_type(window_type) in TRANSOM_ELIGIBLE_TYPES
