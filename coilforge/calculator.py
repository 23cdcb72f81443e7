"""
One-shot recompute of every calculator output.

The presentation layer calls calculate() with the full input set whenever
any input changes and renders format_report(). Nothing is cached between
calls.
"""

import logging
from typing import Dict

from coilforge.config import get_settings
from coilforge.electrical import derive, safety_message
from coilforge.geometry import resistance, wire_length_m
from coilforge.materials import lookup
from coilforge.models import CalculationResult, CoilInputs, CoilReport
from coilforge.profile import ProfileExport, build_profile, export_profile
from coilforge.solver import solve_for_target
from coilforge.wire import resolve_wire_diameter

logger = logging.getLogger(__name__)

# Display precision (decimal places)
WIRE_DIAMETER_DECIMALS = 3
RESISTANCE_DECIMALS = 4
LENGTH_DECIMALS = 4
CURRENT_DECIMALS = 3
POWER_DECIMALS = 2


def calculate(inputs: CoilInputs) -> CoilReport:
    """
    Compute resistance, current, power and the target wrap count.

    Raises:
        UnknownMaterial: inputs.material not in the catalog.
        UnknownGauge: AWG mode with a gauge outside the table.
        InvalidDimension: non-positive wire diameter.
    """
    material = lookup(inputs.material)
    wire = resolve_wire_diameter(inputs.use_awg, inputs.awg, inputs.wire_diameter_mm)

    r = resistance(
        material, wire.diameter_mm, inputs.wraps, inputs.inner_diameter_mm, inputs.leg_length_mm
    )
    length = wire_length_m(inputs.wraps, inputs.inner_diameter_mm, inputs.leg_length_mm)
    elec = derive(r, inputs.supply_voltage, inputs.safety_limit_amp)
    solution = solve_for_target(
        material,
        wire.diameter_mm,
        inputs.inner_diameter_mm,
        inputs.leg_length_mm,
        inputs.target_ohm,
        max_wraps=get_settings().max_wraps,
    )
    logger.debug(
        "%s %.3fmm x%d: %.4fΩ, %.3fA, %.2fW",
        material.id, wire.diameter_mm, inputs.wraps, r, elec.current_amp, elec.power_watt,
    )

    return CoilReport(
        material=material.id,
        wire_diameter_mm=wire.diameter_mm,
        wraps=inputs.wraps,
        target_ohm=inputs.target_ohm,
        supply_voltage=inputs.supply_voltage,
        safety_limit_amp=inputs.safety_limit_amp,
        result=CalculationResult(
            resistance_ohm=r,
            length_m=length,
            current_amp=elec.current_amp,
            power_watt=elec.power_watt,
            exceeds_safety_limit=elec.exceeds_safety_limit,
        ),
        target_solution=solution,
        safety_message=safety_message(elec.current_amp, inputs.safety_limit_amp),
    )


def format_report(report: CoilReport) -> Dict[str, str]:
    """Display strings with the fixed decimal precision for each quantity."""
    res = report.result
    sol = report.target_solution
    return {
        'wire_diameter': f"{report.wire_diameter_mm:.{WIRE_DIAMETER_DECIMALS}f} mm",
        'resistance': f"{res.resistance_ohm:.{RESISTANCE_DECIMALS}f} Ω",
        'length': f"{res.length_m:.{LENGTH_DECIMALS}f} m",
        'current': f"{res.current_amp:.{CURRENT_DECIMALS}f} A",
        'power': f"{res.power_watt:.{POWER_DECIMALS}f} W",
        'target_wraps': str(sol.wraps),
        'target_resistance': f"{sol.resistance_ohm:.{RESISTANCE_DECIMALS}f} Ω",
        'safety': report.safety_message,
    }


def export_report_profile(report: CoilReport) -> ProfileExport:
    """Build and serialize the profile for a computed report."""
    profile = build_profile(report.material, report.result)
    return export_profile(profile)
