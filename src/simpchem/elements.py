"""Classification of chemical elements by their properties."""

from __future__ import annotations

from enum import Enum


class ElementCategory(str, Enum):
    METAL = "metal"
    METALLOID = "metalloid"
    NON_METAL = "non-metal"
    NOBLE_GAS = "noble-gas"
    UNKNOWN = "unknown"


ALKALI_METALS = frozenset({"Li", "Na", "K", "Rb", "Cs", "Fr"})
ALKALINE_EARTH_METALS = frozenset({"Be", "Mg", "Ca", "Sr", "Ba", "Ra"})

# Groups 1, 2 and the p-block metals
MAIN_GROUP_METALS = ALKALI_METALS | ALKALINE_EARTH_METALS | frozenset(
    {"Al", "Ga", "In", "Tl", "Sn", "Pb", "Bi"}
)

TRANSITION_METALS = frozenset(
    {
        "Sc", "Ti", "V", "Cr", "Mn", "Fe", "Co", "Ni", "Cu", "Zn",
        "Y", "Zr", "Nb", "Mo", "Tc", "Ru", "Rh", "Pd", "Ag", "Cd",
        "La", "Hf", "Ta", "W", "Re", "Os", "Ir", "Pt", "Au", "Hg",
    }
)

INNER_TRANSITION_METALS = frozenset(
    {
        "Ce", "Pr", "Nd", "Pm", "Sm", "Eu", "Gd", "Tb", "Dy", "Ho", "Er",
        "Tm", "Yb", "Lu",
        "Ac", "Th", "Pa", "U", "Np", "Pu", "Am", "Cm", "Bk", "Cf", "Es",
        "Fm", "Md", "No", "Lr",
    }
)

METALLOIDS = frozenset({"B", "Si", "Ge", "As", "Sb", "Te", "Po", "At"})

NON_METALS = frozenset({"H", "C", "N", "P", "O", "S", "Se", "F", "Cl", "Br", "I"})

NOBLE_GASES = frozenset({"He", "Ne", "Ar", "Kr", "Xe", "Rn"})

AMPHOTERIC_OXIDE_FORMERS = frozenset({"Al", "Zn", "Sn", "Pb", "Cr", "Be", "Ga"})

INDIFFERENT_OXIDE_FORMERS = frozenset({"C", "N"})

METALS = MAIN_GROUP_METALS | TRANSITION_METALS | INNER_TRANSITION_METALS


def categorize_element(symbol: str) -> ElementCategory:
    """Return the broad category of an element symbol.

    Symbols outside the static sets are reported as ``UNKNOWN``; no attempt is
    made to guess from the symbol's shape.
    """
    if symbol in METALS:
        return ElementCategory.METAL
    if symbol in METALLOIDS:
        return ElementCategory.METALLOID
    if symbol in NON_METALS:
        return ElementCategory.NON_METAL
    if symbol in NOBLE_GASES:
        return ElementCategory.NOBLE_GAS
    return ElementCategory.UNKNOWN


def is_metal(symbol: str) -> bool:
    return symbol in METALS


def is_non_metal(symbol: str) -> bool:
    """Non-metal check that also accepts the noble gases."""
    return symbol in NON_METALS or symbol in NOBLE_GASES


def is_metalloid(symbol: str) -> bool:
    return symbol in METALLOIDS


def is_noble_gas(symbol: str) -> bool:
    return symbol in NOBLE_GASES


def is_alkali_metal(symbol: str) -> bool:
    return symbol in ALKALI_METALS


def is_alkaline_earth_metal(symbol: str) -> bool:
    return symbol in ALKALINE_EARTH_METALS


def forms_amphoteric_oxide(symbol: str) -> bool:
    return symbol in AMPHOTERIC_OXIDE_FORMERS


def forms_indifferent_oxide(symbol: str) -> bool:
    return symbol in INDIFFERENT_OXIDE_FORMERS
