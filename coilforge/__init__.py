"""
CoilForge Compute Engine

Resistance, current and power estimates for heating-element coils, a wrap
count search for a target resistance, and Arctic Fox profile export.

All functions are pure and deterministic; nothing is cached or persisted.
"""

from coilforge.errors import CoilForgeError, UnknownMaterial, InvalidDimension, UnknownGauge, InvalidMaterial
from coilforge.materials import Material, MATERIALS, lookup, list_materials, build_catalog
from coilforge.wire import AWG_DIAMETERS_MM, WireSpec, awg_to_diameter, resolve_wire_diameter
from coilforge.geometry import wire_length_m, cross_section_area_mm2, resistance, resistance_curve
from coilforge.solver import WrapSolution, solve_for_target
from coilforge.electrical import ElectricalResult, derive, safety_message
from coilforge.models import CoilInputs, CalculationResult, CoilReport
from coilforge.profile import Profile, ProfileMode, ProfileExport, build_profile, serialize_profile, export_profile, is_tc_material
from coilforge.calculator import calculate, format_report, export_report_profile

__version__ = "0.1.0"
