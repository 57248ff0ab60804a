"""Tests for the unit table models."""

import math

import pytest
from pydantic import ValidationError

from distance.models.unit_table import FormatOptions, UnitDefinition, UnitTable
from distance.utils.units import DEFAULT_CONFIG, format_number, round_half_up


class TestUnitDefinition:
    def test_unit_alias(self):
        definition = UnitDefinition.model_validate({"unit": 1000, "decimals": 2, "suffix": "km"})
        assert definition.factor == 1000.0

    def test_defaults(self):
        definition = UnitDefinition(factor=1.0)
        assert definition.decimals == 2
        assert definition.suffix is None

    def test_negative_factor_rejected(self):
        with pytest.raises(ValidationError):
            UnitDefinition(factor=-1.0)

    def test_negative_decimals_rejected(self):
        with pytest.raises(ValidationError):
            UnitDefinition(factor=1.0, decimals=-1)


class TestUnitTable:
    def test_shipped_units_in_order(self, table):
        assert table.list_units() == ["meters", "kilometers", "miles", "footsteps"]
        assert table.definition("meters").factor == 1.0
        assert table.definition("parsecs") is None

    def test_format_defaults(self):
        table = UnitTable.from_config({"units": {"meters": {"unit": 1}}})
        assert table.format == FormatOptions(comma=True, suffix=False)

    def test_from_config_passes_tables_through(self, table):
        assert UnitTable.from_config(table) is table

    def test_is_frozen(self, table):
        with pytest.raises(ValidationError):
            table.format = FormatOptions(comma=False)

    def test_to_config_uses_unit_key(self, table):
        config = table.to_config()
        assert config["units"]["kilometers"]["unit"] == 1000.0
        assert config["format"] == DEFAULT_CONFIG["format"]

    def test_resolve(self, table):
        assert table.resolve("units.footsteps.suffix") == "steps"
        assert table.resolve("format.suffix") is False
        assert table.resolve("units.meters")["decimals"] == 2

    def test_resolve_missing_returns_fallback(self, table):
        assert table.resolve("units.parsecs.unit") is None
        assert table.resolve("units.parsecs.unit", 3.26) == 3.26
        assert table.resolve("format.comma.deeper", "x") == "x"

    def test_resolve_null_value_returns_fallback(self):
        table = UnitTable.from_config({"units": {"meters": {"unit": 1}}})
        assert table.resolve("units.meters.suffix", "m") == "m"

    def test_resolve_whole_table(self, table):
        assert set(table.resolve()) == {"units", "format"}


class TestNumberHelpers:
    @pytest.mark.parametrize("value, decimals, expected", [
        (2.675, 2, 2.68),
        (1.005, 2, 1.01),
        (0.5, 0, 1.0),
        (-0.5, 0, -1.0),
        (1458.15, 0, 1458.0),
    ])
    def test_round_half_up(self, value, decimals, expected):
        assert round_half_up(value, decimals) == expected

    def test_format_number(self):
        assert format_number(1234567.891, 2) == "1,234,567.89"
        assert format_number(1234567.891, 2, "") == "1234567.89"
        assert format_number(999.5, 0) == "1,000"

    def test_beyond_default_precision(self):
        assert round_half_up(1e26, 2) == 1e26
        assert round_half_up(123456789012345678901234567.5, 1) == 123456789012345678901234567.5
        assert math.isnan(round_half_up(float("nan"), 2))
        assert round_half_up(float("inf"), 2) == float("inf")
