"""
Resistance wire material catalog.

Resistivity coefficients are given in Ω·mm²/m, so that
    R = ρ · L(m) / A(mm²)
yields Ohms directly without unit conversion.

TC (temperature control) capable materials have a usable temperature
coefficient of resistance; the rest are only suitable for wattage mode.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, List, Mapping

from coilforge.errors import InvalidMaterial, UnknownMaterial


@dataclass(frozen=True)
class Material:
    """A resistance wire alloy."""
    id: str
    resistivity_ohm_mm2_per_m: float
    note: str
    tc_capable: bool = False


REFERENCE_MATERIALS = (
    Material('Kanthal A1', 1.45, 'Kanthal A1 (good for wattage, not for TC)'),
    Material('Nichrome Ni80', 1.09, 'Nichrome, high resistivity, not for TC typically'),
    Material('SS316L', 0.75, 'Stainless Steel 316L, works with TC and VW', tc_capable=True),
    Material('Ni200', 0.70, 'Nickel 200, TC only, fragile', tc_capable=True),
    Material('Titanium', 0.42, 'Titanium, TC only, use with care', tc_capable=True),
)


def build_catalog(materials: Iterable[Material]) -> Mapping[str, Material]:
    """
    Build a read-only material catalog keyed by material id.

    Args:
        materials: Material entries, in display order.

    Returns:
        Immutable mapping of id → Material.

    Raises:
        InvalidMaterial: on duplicate ids or non-positive resistivity.
    """
    table = {}
    for mat in materials:
        if mat.id in table:
            raise InvalidMaterial(f"Duplicate material id '{mat.id}'")
        if mat.resistivity_ohm_mm2_per_m <= 0:
            raise InvalidMaterial(
                f"Resistivity of '{mat.id}' must be positive, "
                f"got {mat.resistivity_ohm_mm2_per_m}"
            )
        table[mat.id] = mat
    return MappingProxyType(table)


MATERIALS = build_catalog(REFERENCE_MATERIALS)


def lookup(material_id: str, catalog: Mapping[str, Material] = MATERIALS) -> Material:
    """Return the catalog entry for material_id, or raise UnknownMaterial."""
    try:
        return catalog[material_id]
    except KeyError:
        raise UnknownMaterial(material_id, catalog.keys()) from None


def list_materials(catalog: Mapping[str, Material] = MATERIALS) -> List[Material]:
    """All materials in catalog order."""
    return list(catalog.values())
