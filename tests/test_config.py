"""Tests for the configuration defaults."""

from dataclasses import fields

from window_measure.config import Config, default_config
from window_measure.measurements.fractions import EIGHTHS
from window_measure.measurements.window_types import FRACTION_VALUES


class TestConfig:
    def test_defaults(self):
        assert default_config.default_transom_shape == "Rectangular"
        assert default_config.photo_max_dimension == 1920
        assert len(default_config.sheet_columns) == 14

    def test_override(self):
        config = Config(company_name="Acme Windows")
        assert config.company_name == "Acme Windows"
        assert default_config.company_name == "H&F Exteriors"

    def test_fraction_grid_is_not_configurable(self):
        """The eighth-inch grid is fixed in the fraction helpers."""
        names = {f.name for f in fields(Config)}
        assert not any("fraction" in name or "denominator" in name for name in names)
        assert EIGHTHS == len(FRACTION_VALUES)
