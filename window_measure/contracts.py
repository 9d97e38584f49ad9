"""Value objects passed between the measurement form, resolvers and save path."""

from dataclasses import dataclass, field, replace
from typing import Optional

from .config import default_config
from .measurements.fractions import combine_value, format_size, split_value


@dataclass(frozen=True)
class FracInput:
    """One whole-inch + eighth-fraction entry field pair."""
    whole: str = ""
    frac: float = 0.0

    @classmethod
    def empty(cls) -> "FracInput":
        return cls()

    @classmethod
    def from_text(cls, whole: str, frac: float = 0.0) -> "FracInput":
        """Build from raw keystrokes, keeping only digit characters."""
        digits = "".join(ch for ch in (whole or "") if ch.isdigit())
        return cls(whole=digits, frac=frac)

    @classmethod
    def from_value(cls, value: Optional[float]) -> "FracInput":
        """Re-split a persisted decimal back into an editable pair."""
        if value is None:
            return cls()
        whole, frac = split_value(value)
        return cls(whole=str(whole), frac=frac)

    def with_whole(self, whole: str) -> "FracInput":
        return FracInput.from_text(whole, self.frac)

    def with_frac(self, frac: float) -> "FracInput":
        return replace(self, frac=frac)

    def value(self) -> Optional[float]:
        """Decimal inches, or None when the field is blank."""
        return combine_value(self.whole, self.frac)

    def positive_value(self) -> Optional[float]:
        """Decimal inches only when entered and strictly positive."""
        combined = self.value()
        if combined is None or combined <= 0:
            return None
        return combined


@dataclass(frozen=True)
class OpeningInputs:
    """
    Raw readings for one opening.

    Simple openings use width/height. Detailed openings use the four
    corner readings: width_top, width_bottom, height_left, height_right.
    """
    width: FracInput = field(default_factory=FracInput)
    height: FracInput = field(default_factory=FracInput)
    width_top: FracInput = field(default_factory=FracInput)
    width_bottom: FracInput = field(default_factory=FracInput)
    height_left: FracInput = field(default_factory=FracInput)
    height_right: FracInput = field(default_factory=FracInput)


@dataclass(frozen=True)
class FinalSize:
    """Order-ready width and height of an opening, in decimal inches."""
    width: float
    height: float

    def format(self) -> str:
        return format_size(self.width, self.height)

    def to_dict(self):
        return {"final_w": self.width, "final_h": self.height}


@dataclass(frozen=True)
class DetailedReadings:
    """The four corner readings after flooring to the eighth grid."""
    width_top: float
    width_bottom: float
    height_left: float
    height_right: float

    @property
    def widths(self):
        return [self.width_top, self.width_bottom]

    @property
    def heights(self):
        return [self.height_left, self.height_right]


@dataclass(frozen=True)
class TransomState:
    """
    Editable transom sub-form.

    Turning the toggle off discards everything typed into it, so a
    re-enabled transom always starts from the defaults.
    """
    enabled: bool = False
    shape: str = default_config.default_transom_shape
    other_shape: str = ""
    height: FracInput = field(default_factory=FracInput)

    def toggled(self, enabled: bool) -> "TransomState":
        if enabled:
            return replace(self, enabled=True)
        return TransomState()

    def with_shape(self, shape: str) -> "TransomState":
        # Leaving Other drops the free-text override
        other = self.other_shape if shape == "Other" else ""
        return replace(self, shape=shape, other_shape=other)

    def resolved_shape(self) -> str:
        if self.shape == "Other":
            return self.other_shape.strip()
        return self.shape


@dataclass(frozen=True)
class Transom:
    """Validated transom measurement."""
    shape: str
    height: float
