"""
Arctic Fox style profile generation.

A profile is derived from the chosen material and the computed coil, then
written as a small line-oriented .cfg document:

    ; Generated by <tool>
    [ProfileCustom]
    Name=...
    Mode=TC-SS | Power
    Temperature=...        (TC materials with a default temperature only)
    Power=...
    PreheatPower=...
    PreheatTime=...
    Cutoff=...
    ; EstimatedResistance=0.0000
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from coilforge.config import get_settings
from coilforge.geometry import MaterialRef, as_material
from coilforge.models import CalculationResult

MAX_POWER_WATT = 50
PREHEAT_FACTOR = 1.4
PREHEAT_MIN_WATT = 20
PREHEAT_MAX_WATT = 80
PREHEAT_TIME_SEC = 1
CUTOFF_SEC = 8

PROFILE_MEDIA_TYPE = "text/plain"

# TC-SS alloys: these ids plus any id containing TITANIUM_MARKER.
# Material.tc_capable adds to the set, it never removes from it.
TC_MATERIAL_IDS = frozenset({"SS316L", "Ni200"})
TITANIUM_MARKER = "Ti"
SS316L_TEMPERATURE_C = 220


class ProfileMode(str, Enum):
    TC_SS = "TC-SS"
    POWER = "Power"


@dataclass(frozen=True)
class Profile:
    name: str
    mode: ProfileMode
    temperature_c: Optional[int]
    power_watt: int
    preheat_power_watt: int
    preheat_time_sec: int
    cutoff_sec: int
    estimated_resistance_ohm: str


@dataclass(frozen=True)
class ProfileExport:
    """A serialized profile ready to be offered as a download."""
    filename: str
    media_type: str
    content: str


def is_tc_material(material: MaterialRef) -> bool:
    """True if profiles for this material should run in TC-SS mode."""
    mat = as_material(material)
    return mat.tc_capable or mat.id in TC_MATERIAL_IDS or TITANIUM_MARKER in mat.id


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def build_profile(
    material: MaterialRef,
    calc: CalculationResult,
    name: Optional[str] = None,
) -> Profile:
    """
    Map a computed coil onto profile settings.

    Mode is TC-SS for temperature-control capable materials, Power otherwise.
    Only SS316L gets a preset temperature.
    Power is capped at 50W; preheat power is 1.4× the coil power clamped to
    20–80W.
    """
    mat = as_material(material)
    power = calc.power_watt
    preheat = min(PREHEAT_MAX_WATT, max(PREHEAT_MIN_WATT, power * PREHEAT_FACTOR))

    return Profile(
        name=name or get_settings().profile_name,
        mode=ProfileMode.TC_SS if is_tc_material(mat) else ProfileMode.POWER,
        temperature_c=SS316L_TEMPERATURE_C if mat.id == "SS316L" else None,
        power_watt=min(MAX_POWER_WATT, _round_half_up(power)),
        preheat_power_watt=_round_half_up(preheat),
        preheat_time_sec=PREHEAT_TIME_SEC,
        cutoff_sec=CUTOFF_SEC,
        estimated_resistance_ohm=f"{calc.resistance_ohm:.4f}",
    )


def serialize_profile(profile: Profile, tool_name: Optional[str] = None) -> str:
    """Render a profile as .cfg text. Output depends only on the arguments."""
    lines: List[str] = [
        f"; Generated by {tool_name or get_settings().tool_name}",
        "[ProfileCustom]",
        f"Name={profile.name}",
        f"Mode={profile.mode.value}",
    ]
    if profile.temperature_c is not None:
        lines.append(f"Temperature={profile.temperature_c}")
    lines += [
        f"Power={profile.power_watt}",
        f"PreheatPower={profile.preheat_power_watt}",
        f"PreheatTime={profile.preheat_time_sec}",
        f"Cutoff={profile.cutoff_sec}",
        f"; EstimatedResistance={profile.estimated_resistance_ohm}",
    ]
    return "\n".join(lines) + "\n"


def export_profile(profile: Profile, filename: Optional[str] = None) -> ProfileExport:
    """Package a profile with its download filename and media type."""
    settings = get_settings()
    return ProfileExport(
        filename=filename or settings.profile_filename,
        media_type=PROFILE_MEDIA_TYPE,
        content=serialize_profile(profile, tool_name=settings.tool_name),
    )
