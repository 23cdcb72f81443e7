"""
Wrap count search for a target resistance.

Resistance grows linearly with wraps for fixed material and geometry, so
the first wrap count reaching the target is found with a bounded linear
scan. When the target is out of reach the scan saturates at max_wraps and
returns that coil instead of failing.
"""

import logging
from dataclasses import dataclass

from coilforge.errors import CoilForgeError
from coilforge.geometry import MaterialRef, as_material, resistance

logger = logging.getLogger(__name__)

DEFAULT_MAX_WRAPS = 60


@dataclass(frozen=True)
class WrapSolution:
    """Smallest wrap count meeting the target, or the saturated fallback."""
    wraps: int
    resistance_ohm: float
    saturated: bool = False


def solve_for_target(
    material: MaterialRef,
    wire_diameter_mm: float,
    inner_diameter_mm: float,
    leg_length_mm: float,
    target_ohm: float,
    max_wraps: int = DEFAULT_MAX_WRAPS,
) -> WrapSolution:
    """
    Find the minimal wrap count whose resistance is >= target_ohm.

    Args:
        material: Material entry or catalog id.
        wire_diameter_mm: Wire diameter (mm).
        inner_diameter_mm: Coil inner diameter (mm).
        leg_length_mm: Combined leg length (mm).
        target_ohm: Desired resistance (Ω).
        max_wraps: Search bound.

    Returns:
        WrapSolution. If no wrap count up to max_wraps reaches the target,
        wraps == max_wraps and saturated is True.

    Raises:
        CoilForgeError: max_wraps < 1.
    """
    if max_wraps < 1:
        raise CoilForgeError(f"max_wraps must be at least 1, got {max_wraps}")
    mat = as_material(material)

    for wraps in range(1, max_wraps + 1):
        r = resistance(mat, wire_diameter_mm, wraps, inner_diameter_mm, leg_length_mm)
        if r >= target_ohm:
            logger.debug("Target %.4fΩ reached at %d wraps (%.4fΩ)", target_ohm, wraps, r)
            return WrapSolution(wraps=wraps, resistance_ohm=r)

    r = resistance(mat, wire_diameter_mm, max_wraps, inner_diameter_mm, leg_length_mm)
    logger.warning(
        "Target %.4fΩ not reached within %d wraps of %s; best is %.4fΩ",
        target_ohm, max_wraps, mat.id, r,
    )
    return WrapSolution(wraps=max_wraps, resistance_ohm=r, saturated=True)
