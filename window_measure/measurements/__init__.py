"""Measurement normalization: fractions, final size, transom and form state."""

# Lightweight imports (no dependency on contracts)
from .fractions import (
    combine_value,
    format_fraction,
    format_size,
    parse_fraction,
    round_down_to_eighth,
    split_value,
)
from .window_types import (
    FRACTION_OPTIONS,
    FRACTION_VALUES,
    OpeningShape,
    SIMPLE_TYPES,
    DETAILED_TYPES,
    TRANSOM_ELIGIBLE_TYPES,
    TRANSOM_SHAPES,
    WINDOW_TYPES,
    classify_type,
)


def __getattr__(name):
    """Lazy import for modules that depend on contracts (avoids an import cycle)."""
    _resolver_names = {"resolve_final_size", "resolve_simple", "resolve_detailed", "floor_readings"}
    _transom_names = {"resolve_transom", "TransomValidationError", "transom_state_from_record"}
    _form_names = {"MeasurementForm", "FormState", "ReferenceValues"}
    if name in _resolver_names:
        from . import resolver
        return getattr(resolver, name)
    if name in _transom_names:
        from . import transom
        return getattr(transom, name)
    if name in _form_names:
        from . import form
        return getattr(form, name)
    raise AttributeError(f"module 'window_measure.measurements' has no attribute {name!r}")


__all__ = [
    # fractions
    "split_value",
    "combine_value",
    "round_down_to_eighth",
    "format_fraction",
    "format_size",
    "parse_fraction",
    # types
    "WINDOW_TYPES",
    "SIMPLE_TYPES",
    "DETAILED_TYPES",
    "TRANSOM_ELIGIBLE_TYPES",
    "TRANSOM_SHAPES",
    "FRACTION_OPTIONS",
    "FRACTION_VALUES",
    "OpeningShape",
    "classify_type",
    # resolvers
    "resolve_final_size",
    "resolve_simple",
    "resolve_detailed",
    "floor_readings",
    "resolve_transom",
    "TransomValidationError",
    "transom_state_from_record",
    # form
    "MeasurementForm",
    "FormState",
    "ReferenceValues",
]
