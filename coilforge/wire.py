"""
Wire gauge reference data.

AWG diameters are the usual approximate values for resistance wire.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

from coilforge.errors import UnknownGauge


# AWG → diameter (mm)
AWG_DIAMETERS_MM = MappingProxyType({
    20: 0.8128,
    22: 0.6438,
    24: 0.511,
    26: 0.405,
    28: 0.321,
    30: 0.255,
    32: 0.202,
})


@dataclass(frozen=True)
class WireSpec:
    """Wire reconciled to a single diameter."""
    diameter_mm: float
    awg: Optional[int] = None  # set when the diameter came from the gauge table


def awg_to_diameter(awg: int) -> float:
    """Diameter in mm for a gauge from the AWG table."""
    if awg not in AWG_DIAMETERS_MM:
        raise UnknownGauge(awg, AWG_DIAMETERS_MM.keys())
    return AWG_DIAMETERS_MM[awg]


def resolve_wire_diameter(
    use_awg: bool,
    awg: Optional[int] = None,
    diameter_mm: Optional[float] = None,
) -> WireSpec:
    """
    Reconcile gauge selection and direct diameter entry into one WireSpec.

    Args:
        use_awg: True to take the diameter from the AWG table.
        awg: Gauge number (used only when use_awg is True).
        diameter_mm: Direct wire diameter (used only when use_awg is False).

    Returns:
        WireSpec. The diameter is not range-checked here; a non-positive
        direct diameter is rejected later by the area computation.
    """
    if use_awg:
        return WireSpec(diameter_mm=awg_to_diameter(awg), awg=awg)
    return WireSpec(diameter_mm=float(diameter_mm or 0.0))
