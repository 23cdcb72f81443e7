"""
Coil geometry and DC resistance.

Geometry model:
    L = (π · D_inner · wraps + legs) / 1000        (m)
    A = π · (d_wire / 2)²                         (mm²)
    R = ρ · L / A                                 (Ω)

The coil is treated as `wraps` full circular turns of the stated inner
diameter plus straight lead wire. Pitch, turn spacing and the wire's own
thickness are not modelled; results are estimates to be checked with an
ohmmeter.
"""

import logging
import math
from typing import Tuple, Union

import numpy as np

from coilforge.errors import InvalidDimension
from coilforge.materials import Material, lookup

logger = logging.getLogger(__name__)

MaterialRef = Union[Material, str]


def as_material(material: MaterialRef) -> Material:
    """Resolve a catalog id to its Material; Material entries pass through."""
    if isinstance(material, Material):
        return material
    return lookup(material)


def wire_length_m(wraps: float, inner_diameter_mm: float, leg_length_mm: float) -> float:
    """Total wire length in meters: circumference × wraps plus both legs."""
    circumference_mm = math.pi * inner_diameter_mm
    return (circumference_mm * wraps + leg_length_mm) / 1000.0


def cross_section_area_mm2(diameter_mm: float) -> float:
    """Wire cross-section in mm². Raises InvalidDimension for d <= 0."""
    if diameter_mm <= 0:
        raise InvalidDimension("Wire diameter", diameter_mm)
    return math.pi * (diameter_mm / 2.0) ** 2


def resistance(
    material: MaterialRef,
    wire_diameter_mm: float,
    wraps: float,
    inner_diameter_mm: float,
    leg_length_mm: float,
) -> float:
    """
    DC resistance of a single coil.

    Args:
        material: Material entry or catalog id.
        wire_diameter_mm: Wire diameter (mm).
        wraps: Number of turns.
        inner_diameter_mm: Coil inner diameter (mm).
        leg_length_mm: Combined length of both legs (mm).

    Returns:
        Resistance in Ohms.

    Raises:
        UnknownMaterial: material id not in the catalog.
        InvalidDimension: wire diameter <= 0.
    """
    mat = as_material(material)
    area = cross_section_area_mm2(wire_diameter_mm)
    length = wire_length_m(wraps, inner_diameter_mm, leg_length_mm)
    return mat.resistivity_ohm_mm2_per_m * length / area


def resistance_curve(
    material: MaterialRef,
    wire_diameter_mm: float,
    inner_diameter_mm: float,
    leg_length_mm: float,
    max_wraps: int = 60,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Resistance for every wrap count from 1 to max_wraps.

    Returns:
        Tuple of (wraps, resistance_ohm) arrays. Resistance is strictly
        increasing in wraps for a fixed geometry.
    """
    mat = as_material(material)
    area = cross_section_area_mm2(wire_diameter_mm)
    wraps = np.arange(1, max_wraps + 1)
    length = (np.pi * inner_diameter_mm * wraps + leg_length_mm) / 1000.0
    logger.debug("Resistance curve for %s: %d points", mat.id, len(wraps))
    return wraps, mat.resistivity_ohm_mm2_per_m * length / area
