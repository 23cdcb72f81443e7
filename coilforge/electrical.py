"""
Current and power at a given supply voltage.

    I = V / R
    P = I² · R

R is floored at a small epsilon so a zero resistance gives a very large
but finite current instead of a division error.
"""

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

RESISTANCE_EPSILON = 1e-6


@dataclass(frozen=True)
class ElectricalResult:
    current_amp: float
    power_watt: float
    exceeds_safety_limit: bool


def derive(resistance_ohm: float, voltage: float, safety_limit_amp: float) -> ElectricalResult:
    """Ohm's law current, dissipated power, and the safety limit check."""
    r = max(resistance_ohm, RESISTANCE_EPSILON)
    current = voltage / r
    power = current ** 2 * r
    exceeds = current > safety_limit_amp

    if exceeds:
        logger.warning(
            "Estimated current %.2fA exceeds safety limit %gA", current, safety_limit_amp
        )
    return ElectricalResult(current_amp=current, power_watt=power, exceeds_safety_limit=exceeds)


def safety_message(current_amp: float, safety_limit_amp: float) -> str:
    """Human-readable safety line for the estimated current."""
    if current_amp > safety_limit_amp:
        return (
            f"Warning: estimated current {current_amp:.2f} A exceeds "
            f"safety limit {safety_limit_amp:g} A"
        )
    return f"Estimated current {current_amp:.2f} A, within safety limit {safety_limit_amp:g} A"
