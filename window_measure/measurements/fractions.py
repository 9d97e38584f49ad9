"""Eighth-inch fraction arithmetic for window measurements.

Field measurements are entered as a whole-inch string plus one of eight
fractional increments (0, 1/8, ... 7/8) and stored as decimal inches.
These helpers convert between the two forms:

1. split_value / combine_value: decimal <-> (whole, eighth) editing pair
2. round_down_to_eighth: floor a reading onto the eighth grid
3. format_fraction / parse_fraction: decimal <-> display text ("24 1/2")

All functions are pure. "Not entered" is represented as None, never as 0
or NaN.
"""

import math
import re
from typing import Optional, Tuple

from .window_types import FRACTION_VALUES

EIGHTHS = 8

_MIXED_FRACTION = re.compile(r'^(\d+)(?:\s+|-)(\d+)/(\d+)$')
_FRACTION = re.compile(r'^(\d+)/(\d+)$')
_DECIMAL = re.compile(r'^\d+(?:\.\d+)?$|^\.\d+$')


def split_value(value: float) -> Tuple[int, float]:
    """
    Split decimal inches into a whole number and the nearest eighth.

    The remainder snaps to the closest member of FRACTION_VALUES. On an
    exact midpoint (an odd sixteenth) the smaller fraction wins. A
    remainder above 15/16 still snaps to 7/8; the whole part is never
    carried.

    Args:
        value: Finite, non-negative decimal inches

    Returns:
        (whole, frac) tuple, e.g. 35.625 -> (35, 0.625)
    """
    whole = math.floor(value)
    remainder = value - whole

    closest = FRACTION_VALUES[0]
    for candidate in FRACTION_VALUES[1:]:
        # Strict comparison keeps the smaller candidate on ties
        if abs(candidate - remainder) < abs(closest - remainder):
            closest = candidate

    return int(whole), closest


def parse_whole(whole: Optional[str]) -> int:
    """Parse the whole-inch text. Empty, non-numeric or negative text is 0."""
    if whole is None:
        return 0
    text = str(whole).strip()
    if not text:
        return 0
    try:
        parsed = int(text)
    except ValueError:
        return 0
    return parsed if parsed > 0 else 0


def combine_value(whole: Optional[str], frac: float) -> Optional[float]:
    """
    Combine a whole-inch string and an eighth fraction into decimal inches.

    A whole of 0 (or blank) with a zero fraction means the field was never
    filled in, so None is returned instead of 0.0. A zero-size opening is
    never physically valid.

    Args:
        whole: Whole-inch text as typed (digits only in the UI)
        frac: One of FRACTION_VALUES

    Returns:
        Decimal inches, or None when nothing was entered
    """
    whole_int = parse_whole(whole)
    if whole_int == 0 and not frac:
        return None
    return whole_int + frac


def round_down_to_eighth(value: float) -> float:
    """Floor a reading onto the eighth-inch grid (never rounds up)."""
    return math.floor(value * EIGHTHS) / EIGHTHS


def format_fraction(value: Optional[float]) -> str:
    """
    Render decimal inches as a mixed fraction in lowest terms.

    Examples:
        format_fraction(24.5)   -> "24 1/2"
        format_fraction(0.75)   -> "3/4"
        format_fraction(36.0)   -> "36"
        format_fraction(35.97)  -> "36"   (carries into the whole)
        format_fraction(None)   -> ""
    """
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return ""

    whole = math.floor(value)
    # Half-up rounding on the eighth count
    eighths = math.floor((value - whole) * EIGHTHS + 0.5)

    if eighths == 0:
        return f"{whole}"
    if eighths == EIGHTHS:
        return f"{whole + 1}"

    divisor = math.gcd(eighths, EIGHTHS)
    numerator = eighths // divisor
    denominator = EIGHTHS // divisor

    if whole > 0:
        return f"{whole} {numerator}/{denominator}"
    return f"{numerator}/{denominator}"


def format_size(width: Optional[float], height: Optional[float]) -> str:
    """Render a width x height pair with inch marks, e.g. 36" × 24 1/2"."""
    return f'{format_fraction(width)}" × {format_fraction(height)}"'


def parse_fraction(text: Optional[str]) -> Optional[float]:
    """
    Parse display text back into decimal inches.

    Accepts "24 1/2", "24-1/2", "3/4", "36", "35.625" and any of those
    with a trailing inch mark. Returns None for anything else.
    """
    if text is None:
        return None

    value = str(text).strip().rstrip('"').strip()
    if not value:
        return None

    mixed_match = _MIXED_FRACTION.match(value)
    if mixed_match:
        whole = int(mixed_match.group(1))
        num = int(mixed_match.group(2))
        den = int(mixed_match.group(3))
        if den != 0:
            return whole + num / den
        return None

    frac_match = _FRACTION.match(value)
    if frac_match:
        num, den = int(frac_match.group(1)), int(frac_match.group(2))
        if den != 0:
            return num / den
        return None

    if _DECIMAL.match(value):
        return float(value)

    return None
