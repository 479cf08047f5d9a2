#!/usr/bin/env python3
"""
Tests for voltage table derivation and lookup
"""

import numpy as np
import pytest

from composite_palette.exceptions import ConfigurationError
from composite_palette.voltage_tables import (
    APPROX_NES_PEAK_TO_PEAK,
    APPROX_NES_TABLE,
    NES_PEAK_TO_PEAK,
    NES_TABLE,
    VoltageTable,
    build_voltage_table,
    composite_table,
    get_voltage_table,
    table_step,
)

ALL_DERIVED_LENGTHS = [6, 8, 12, 16, 18, 24, 32, 36, 48]


@pytest.mark.unit
class TestTableStep:
    """Test the 1 / (n + 2) step rule"""

    def test_step_for_8_taps(self):
        assert table_step(8) == pytest.approx(0.1)

    def test_step_for_32_taps(self):
        assert table_step(32) == pytest.approx(0.0294117647)

    def test_step_is_single_precision(self):
        assert table_step(16).dtype == np.float32


@pytest.mark.unit
class TestBuildVoltageTable:
    """Test symmetric table construction"""

    @pytest.mark.parametrize("length", ALL_DERIVED_LENGTHS)
    def test_luma_symmetric_about_half(self, length):
        """luma[k] + luma[n-1-k] == 1 for every tap"""
        table = build_voltage_table(table_step(length), length)
        for k in range(length):
            assert table.luma[k] + table.luma[length - 1 - k] == pytest.approx(1.0, abs=1e-6)

    @pytest.mark.parametrize("length", ALL_DERIVED_LENGTHS)
    def test_saturation_mirrored(self, length):
        table = build_voltage_table(table_step(length), length)
        for k in range(length):
            assert table.saturation[k] == table.saturation[length - 1 - k]

    def test_lower_half_saturation_equals_luma(self):
        table = build_voltage_table(table_step(16), 16)
        np.testing.assert_array_equal(table.saturation[:8], table.luma[:8])

    def test_lower_half_steps_up_from_step(self):
        table = build_voltage_table(0.1, 8)
        np.testing.assert_allclose(table.luma[:4], [0.1, 0.2, 0.3, 0.4], rtol=1e-6)
        np.testing.assert_allclose(table.luma[4:], [0.6, 0.7, 0.8, 0.9], rtol=1e-6)

    def test_luma_strictly_increasing(self):
        table = build_voltage_table(table_step(32), 32)
        assert np.all(np.diff(table.luma) > 0)

    def test_default_name(self):
        assert build_voltage_table(0.1, 8).name == "composite_08"

    @pytest.mark.parametrize("length", [0, -2, 7])
    def test_invalid_length(self, length):
        with pytest.raises(ValueError):
            build_voltage_table(0.1, length)


@pytest.mark.unit
class TestFixedTables:
    """Test the literal NES tables"""

    def test_approx_nes_values(self):
        np.testing.assert_allclose(APPROX_NES_TABLE.luma, [0.2, 0.35, 0.65, 0.85], rtol=1e-6)
        np.testing.assert_allclose(APPROX_NES_TABLE.saturation, [0.2, 0.35, 0.35, 0.15], rtol=1e-6)

    def test_nes_values(self):
        np.testing.assert_allclose(NES_TABLE.luma, [0.1995, 0.342, 0.654, 0.8575], rtol=1e-6)
        np.testing.assert_allclose(NES_TABLE.saturation, [0.1995, 0.342, 0.346, 0.1425], rtol=1e-6)

    @pytest.mark.parametrize("table, peak_to_peak", [
        (NES_TABLE, NES_PEAK_TO_PEAK),
        (APPROX_NES_TABLE, APPROX_NES_PEAK_TO_PEAK),
    ])
    def test_saturation_is_half_peak_to_peak(self, table, peak_to_peak):
        np.testing.assert_allclose(table.saturation, np.array(peak_to_peak) / 2, rtol=1e-5)

    def test_fixed_tables_are_not_derived(self):
        """The 4-tap tables do not follow the 1/(n+2) rule"""
        derived = build_voltage_table(table_step(4), 4)
        assert not np.allclose(derived.luma, APPROX_NES_TABLE.luma)

    def test_tables_are_read_only(self):
        with pytest.raises(ValueError):
            APPROX_NES_TABLE.luma[0] = 0.5


@pytest.mark.unit
class TestVoltageTable:
    """Test the VoltageTable value object"""

    def test_length_mismatch_rejected(self):
        with pytest.raises(ValueError):
            VoltageTable("bad", [0.1, 0.2], [0.1])

    def test_tap_returns_floats(self):
        luma, saturation = APPROX_NES_TABLE.tap(1)
        assert luma == pytest.approx(0.35)
        assert saturation == pytest.approx(0.35)

    def test_equality(self):
        assert build_voltage_table(0.1, 8) == build_voltage_table(0.1, 8)
        assert build_voltage_table(0.1, 8) != build_voltage_table(0.1, 8, name="other")


@pytest.mark.unit
class TestGetVoltageTable:
    """Test table lookup by key"""

    def test_fixed_keys(self):
        assert get_voltage_table("approx_nes") is APPROX_NES_TABLE
        assert get_voltage_table("nes") is NES_TABLE

    @pytest.mark.parametrize("length", ALL_DERIVED_LENGTHS)
    def test_derived_keys(self, length):
        table = get_voltage_table(f"composite_{length:02d}")
        assert len(table) == length

    def test_derived_tables_cached(self):
        assert composite_table(16) is composite_table(16)
        assert get_voltage_table("composite_16") is composite_table(16)

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError, match="composite_10"):
            get_voltage_table("composite_10")
