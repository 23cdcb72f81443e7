"""Pydantic models for the calculator's input surface and report."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from coilforge.config import get_settings
from coilforge.solver import WrapSolution


def _default_voltage() -> float:
    return get_settings().supply_voltage


def _default_safety_limit() -> float:
    return get_settings().safety_limit_amp


class CoilInputs(BaseModel):
    """
    Everything the presentation layer collects from the user.

    Only numeric coercion happens here. Physical checks (positive wire
    diameter, known material) belong to the engine.
    """
    material: str = Field("SS316L", description="Material catalog id")
    use_awg: bool = Field(True, description="Take wire diameter from the AWG table")
    awg: int = Field(26, description="Wire gauge (AWG)")
    wire_diameter_mm: Optional[float] = Field(None, description="Direct wire diameter (mm)")
    wraps: int = Field(5, ge=1, description="Wrap count")
    inner_diameter_mm: float = Field(3.0, description="Coil inner diameter (mm)")
    leg_length_mm: float = Field(6.0, description="Combined leg length (mm)")
    target_ohm: float = Field(0.25, description="Target resistance (Ω)")
    supply_voltage: float = Field(default_factory=_default_voltage, description="Supply voltage (V)")
    safety_limit_amp: float = Field(default_factory=_default_safety_limit, description="Current ceiling (A)")


class CalculationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    resistance_ohm: float
    length_m: float
    current_amp: float
    power_watt: float
    exceeds_safety_limit: bool


class CoilReport(BaseModel):
    """One full recompute of the calculator outputs."""
    model_config = ConfigDict(frozen=True)

    material: str
    wire_diameter_mm: float
    wraps: int
    target_ohm: float
    supply_voltage: float
    safety_limit_amp: float
    result: CalculationResult
    target_solution: WrapSolution
    safety_message: str
