"""
Tests for Arctic Fox profile generation.

Validates:
1. Mode selection and temperature from the material
2. Power cap, preheat clamp and half-up rounding
3. Exact .cfg text and determinism
4. Export bundle
"""

import pytest

from coilforge.materials import Material
from coilforge.models import CalculationResult
from coilforge.profile import (
    Profile,
    ProfileMode,
    build_profile,
    export_profile,
    is_tc_material,
    serialize_profile,
)


def _calc(power_watt, resistance_ohm=0.3093):
    return CalculationResult(
        resistance_ohm=resistance_ohm,
        length_m=0.0531,
        current_amp=(power_watt / resistance_ohm) ** 0.5,
        power_watt=power_watt,
        exceeds_safety_limit=False,
    )


class TestBuildProfile:
    """Test profile derivation."""

    def test_ss316l_is_tc_with_temperature(self):
        profile = build_profile('SS316L', _calc(30.0))
        assert profile.mode == ProfileMode.TC_SS
        assert profile.temperature_c == 220

    @pytest.mark.parametrize('material', ['Ni200', 'Titanium'])
    def test_other_tc_materials_have_no_temperature(self, material):
        profile = build_profile(material, _calc(30.0))
        assert profile.mode == ProfileMode.TC_SS
        assert profile.temperature_c is None

    @pytest.mark.parametrize('material', ['Kanthal A1', 'Nichrome Ni80'])
    def test_wattage_materials(self, material):
        profile = build_profile(material, _calc(30.0))
        assert profile.mode == ProfileMode.POWER
        assert profile.temperature_c is None

    def test_titanium_variant_is_tc(self):
        """Any titanium grade runs TC-SS, even without the catalog flag."""
        grade2 = Material('Titanium Grade 2', 0.54, 'Ti grade 2')
        profile = build_profile(grade2, _calc(30.0))
        assert profile.mode == ProfileMode.TC_SS
        assert profile.temperature_c is None

    def test_redeclared_ss316l_keeps_temperature(self):
        """SS316L from a custom catalog still gets TC-SS and 220°C."""
        ss = Material('SS316L', 0.74, 'Stainless Steel 316L, custom batch')
        text = serialize_profile(build_profile(ss, _calc(30.0)))
        assert 'Mode=TC-SS\n' in text
        assert 'Temperature=220\n' in text

    def test_flag_adds_tc_material(self):
        ni = Material('NiFe30', 0.32, 'Resistherm', tc_capable=True)
        assert is_tc_material(ni)
        assert build_profile(ni, _calc(30.0)).mode == ProfileMode.TC_SS

    def test_flag_cannot_remove_tc_material(self):
        assert is_tc_material(Material('Ni200', 0.70, '', tc_capable=False))
        assert not is_tc_material('Kanthal A1')

    def test_power_capped_at_50(self):
        profile = build_profile('Kanthal A1', _calc(177.06))
        assert profile.power_watt == 50
        assert profile.preheat_power_watt == 80

    def test_power_rounding_half_up(self):
        """24.5W rounds up to 25, not to even."""
        assert build_profile('Kanthal A1', _calc(24.5)).power_watt == 25

    def test_preheat_scaled(self):
        """30.4W → preheat 42.56 → 43."""
        profile = build_profile('Kanthal A1', _calc(30.4))
        assert profile.power_watt == 30
        assert profile.preheat_power_watt == 43

    def test_preheat_floor(self):
        assert build_profile('Kanthal A1', _calc(10.0)).preheat_power_watt == 20

    def test_fixed_timings(self):
        profile = build_profile('SS316L', _calc(30.0))
        assert profile.preheat_time_sec == 1
        assert profile.cutoff_sec == 8

    def test_resistance_four_decimals(self):
        profile = build_profile('SS316L', _calc(30.0, resistance_ohm=0.309279))
        assert profile.estimated_resistance_ohm == '0.3093'

    def test_default_and_custom_name(self):
        assert build_profile('SS316L', _calc(30.0)).name == 'DAB-CUSTOM'
        assert build_profile('SS316L', _calc(30.0), name='MTL').name == 'MTL'


class TestSerializeProfile:
    """Test .cfg text output."""

    def test_tc_profile_text(self):
        profile = build_profile('SS316L', _calc(177.06, resistance_ohm=0.309279))
        assert serialize_profile(profile) == (
            "; Generated by CoilForge Coil Builder\n"
            "[ProfileCustom]\n"
            "Name=DAB-CUSTOM\n"
            "Mode=TC-SS\n"
            "Temperature=220\n"
            "Power=50\n"
            "PreheatPower=80\n"
            "PreheatTime=1\n"
            "Cutoff=8\n"
            "; EstimatedResistance=0.3093\n"
        )

    def test_power_profile_has_no_temperature_line(self):
        profile = build_profile('Kanthal A1', _calc(30.4, resistance_ohm=1.8))
        text = serialize_profile(profile, tool_name='Test Tool')
        assert 'Temperature=' not in text
        assert text.splitlines() == [
            '; Generated by Test Tool',
            '[ProfileCustom]',
            'Name=DAB-CUSTOM',
            'Mode=Power',
            'Power=30',
            'PreheatPower=43',
            'PreheatTime=1',
            'Cutoff=8',
            '; EstimatedResistance=1.8000',
        ]

    def test_deterministic(self):
        profile = Profile(
            name='X', mode=ProfileMode.POWER, temperature_c=None, power_watt=40,
            preheat_power_watt=56, preheat_time_sec=1, cutoff_sec=8,
            estimated_resistance_ohm='0.5000',
        )
        assert serialize_profile(profile) == serialize_profile(profile)

    def test_tool_name_from_settings(self, monkeypatch):
        from coilforge.config import get_settings
        monkeypatch.setenv('COILFORGE_TOOL_NAME', 'Lab Builder')
        get_settings.cache_clear()
        text = serialize_profile(build_profile('SS316L', _calc(30.0)))
        assert text.startswith('; Generated by Lab Builder\n')


class TestExportProfile:

    def test_bundle(self):
        profile = build_profile('SS316L', _calc(30.0))
        export = export_profile(profile)
        assert export.filename == 'arcticfox-profile-dab.cfg'
        assert export.media_type == 'text/plain'
        assert export.content == serialize_profile(profile)

    def test_custom_filename(self):
        export = export_profile(build_profile('Ni200', _calc(30.0)), filename='ni.cfg')
        assert export.filename == 'ni.cfg'
