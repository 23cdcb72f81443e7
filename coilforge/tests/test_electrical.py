"""Tests for current/power derivation and the safety limit check."""

import math

import pytest

from coilforge.electrical import RESISTANCE_EPSILON, derive, safety_message


class TestDerive:
    """Test Ohm's law derivation."""

    def test_reference_values(self):
        """0.25Ω at 7.4V → 29.6A, ~219W."""
        result = derive(0.25, 7.4, 30.0)
        assert result.current_amp == pytest.approx(29.6)
        assert result.power_watt == pytest.approx(29.6 ** 2 * 0.25)
        assert result.power_watt == pytest.approx(219.0, abs=0.1)

    def test_within_limit(self):
        assert derive(0.25, 7.4, 30.0).exceeds_safety_limit is False

    def test_exceeds_limit(self):
        assert derive(0.25, 7.4, 25.0).exceeds_safety_limit is True

    def test_limit_is_strict(self):
        """Current equal to the limit does not exceed it."""
        assert derive(0.5, 10.0, 20.0).exceeds_safety_limit is False

    def test_power_equals_v_squared_over_r(self):
        result = derive(1.2, 3.7, 30.0)
        assert result.power_watt == pytest.approx(3.7 ** 2 / 1.2)

    def test_zero_resistance_finite(self):
        """Zero resistance gives a huge but finite current."""
        result = derive(0.0, 7.4, 30.0)
        assert math.isfinite(result.current_amp)
        assert math.isfinite(result.power_watt)
        assert result.current_amp == pytest.approx(7.4 / RESISTANCE_EPSILON)
        assert result.exceeds_safety_limit


class TestSafetyMessage:

    def test_warning(self):
        msg = safety_message(29.6, 25.0)
        assert msg.startswith('Warning')
        assert '29.60 A' in msg
        assert '25 A' in msg

    def test_within_limit(self):
        msg = safety_message(23.9266, 30.0)
        assert 'within safety limit 30 A' in msg
        assert '23.93 A' in msg
