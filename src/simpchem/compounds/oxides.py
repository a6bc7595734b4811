"""Oxide recognition and classification."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from simpchem.elements import (
    forms_amphoteric_oxide,
    forms_indifferent_oxide,
    is_alkali_metal,
    is_metal,
    is_metalloid,
    is_non_metal,
)
from simpchem.ions import balance_salt_formula_with_oxidation_state, get_max_valence
from simpchem.models import Domain


class OxideCategory(str, Enum):
    BASIC = "basic"
    AMPHOTERIC = "amphoteric"
    ACIDIC = "acidic"
    INDIFFERENT = "indifferent"
    PEROXIDE = "peroxide"
    SUPEROXIDE = "superoxide"


_B, _AM, _AC = OxideCategory.BASIC, OxideCategory.AMPHOTERIC, OxideCategory.ACIDIC
_IN, _PER, _SUP = OxideCategory.INDIFFERENT, OxideCategory.PEROXIDE, OxideCategory.SUPEROXIDE

KNOWN_OXIDES: Mapping[str, OxideCategory] = MappingProxyType(
    {
        "Li2O": _B, "Na2O": _B, "K2O": _B, "Rb2O": _B, "Cs2O": _B,
        "MgO": _B, "CaO": _B, "SrO": _B, "BaO": _B,
        "FeO": _B, "Fe2O3": _B, "MnO": _B, "CuO": _B, "Cu2O": _B,
        "NiO": _B, "CoO": _B, "Ag2O": _B, "HgO": _B, "PbO": _B,
        "Al2O3": _AM, "ZnO": _AM, "SnO": _AM, "SnO2": _AM, "PbO2": _AM,
        "Cr2O3": _AM, "MnO2": _AM, "BeO": _AM, "Ga2O3": _AM, "In2O3": _AM,
        "TiO2": _AM, "V2O5": _AM,
        "CO2": _AC, "SiO2": _AC, "SO2": _AC, "SO3": _AC, "P2O3": _AC,
        "P2O5": _AC, "N2O3": _AC, "N2O5": _AC, "Cl2O": _AC, "Cl2O3": _AC,
        "Cl2O7": _AC, "B2O3": _AC, "As2O3": _AC, "As2O5": _AC, "Sb2O3": _AC,
        "Sb2O5": _AC, "CrO3": _AC, "Mn2O7": _AC,
        "N2O": _IN, "NO": _IN, "CO": _IN, "H2O": _IN,
        "H2O2": _PER, "Na2O2": _PER, "BaO2": _PER,
        "KO2": _SUP, "RbO2": _SUP, "CsO2": _SUP,
    }
)

CORRESPONDING_ACIDS: Mapping[str, str] = MappingProxyType(
    {
        "CO2": "H2CO3",
        "SO2": "H2SO3",
        "SO3": "H2SO4",
        "N2O3": "HNO2",
        "N2O5": "HNO3",
        "P2O5": "H3PO4",
        "P2O3": "H3PO3",
        "Cl2O": "HClO",
        "Cl2O7": "HClO4",
        "B2O3": "H3BO3",
        "SiO2": "H2SiO3",
        "CrO3": "H2CrO4",
        "Mn2O7": "HMnO4",
    }
)

# Fragments of oxy-anions and oxoacids; their presence rules out an oxide.
NON_OXIDE_FRAGMENTS: Tuple[str, ...] = ("CO3", "SO4", "NO3", "PO4", "ClO")
NON_OXIDES = frozenset({"H2SO4", "HNO3", "H3PO4", "HClO", "H2SO3", "H2CO3"})

_SIMPLE_OXIDE = re.compile(r"^([A-Z][a-z]?)(\d*)O(\d*)$")


@dataclass(frozen=True)
class OxideClassification:
    formula: str
    category: OxideCategory
    element: Optional[str]
    oxidation_state: Optional[Fraction]
    corresponding_acid: Optional[str]
    corresponding_hydroxide: Optional[str]

    domain = Domain.OXIDE

    def to_dict(self) -> Dict[str, Any]:
        state = self.oxidation_state
        return {
            "formula": self.formula,
            "domain": self.domain.value,
            "category": self.category.value,
            "element": self.element,
            "oxidation_state": (
                None if state is None else int(state) if state.denominator == 1 else str(state)
            ),
            "corresponding_acid": self.corresponding_acid,
            "corresponding_hydroxide": self.corresponding_hydroxide,
        }


def _split(formula: str) -> Optional[Tuple[str, int, int]]:
    match = _SIMPLE_OXIDE.match(formula)
    if match is None:
        return None
    element, count, oxygen = match.groups()
    return element, int(count or 1), int(oxygen or 1)


def is_oxide(formula: str) -> bool:
    if "O" not in formula or "OH" in formula:
        return False
    if formula in NON_OXIDES or any(part in formula for part in NON_OXIDE_FRAGMENTS):
        return formula in KNOWN_OXIDES
    if formula in KNOWN_OXIDES:
        return True
    parts = _split(formula)
    if parts is None:
        return False
    element = parts[0]
    return element != "O" and (
        is_metal(element) or is_non_metal(element) or is_metalloid(element)
    )


def extract_main_element(formula: str) -> Optional[str]:
    parts = _split(formula)
    return parts[0] if parts else None


def _oxygen_charge(category: Optional[OxideCategory]) -> Fraction:
    if category is OxideCategory.PEROXIDE:
        return Fraction(-1)
    if category is OxideCategory.SUPEROXIDE:
        return Fraction(-1, 2)
    return Fraction(-2)


def get_oxidation_state(formula: str, category: Optional[OxideCategory] = None) -> Optional[Fraction]:
    """Formal charge of the non-oxygen element.

    Oxygen counts as -2 unless ``category`` marks a peroxide (-1) or a
    superoxide (-1/2). The result may be fractional, e.g. ``Fe3O4``.
    """
    parts = _split(formula)
    if parts is None:
        return None
    _, count, oxygen = parts
    return -(oxygen * _oxygen_charge(category)) / count


def integral_oxidation_state(formula: str, category: Optional[OxideCategory] = None) -> Optional[int]:
    state = get_oxidation_state(formula, category)
    if state is None or state.denominator != 1 or state <= 0:
        return None
    return int(state)


def _structural_category(formula: str) -> Optional[OxideCategory]:
    parts = _split(formula)
    if parts is None:
        return None
    element, count, oxygen = parts

    if is_alkali_metal(element) and count == 1 and oxygen == 2:
        return OxideCategory.SUPEROXIDE
    if is_metal(element):
        max_valence = get_max_valence(element)
        if max_valence is not None and Fraction(2 * oxygen, count) > max_valence:
            return OxideCategory.PEROXIDE
    if forms_amphoteric_oxide(element):
        return OxideCategory.AMPHOTERIC
    if forms_indifferent_oxide(element) and Fraction(2 * oxygen, count) <= 2:
        return OxideCategory.INDIFFERENT
    if is_metal(element):
        return OxideCategory.BASIC
    if is_non_metal(element) or is_metalloid(element):
        return OxideCategory.ACIDIC
    return None


def classify_oxide_category(formula: str) -> Optional[OxideCategory]:
    """Known table first, then the structural rules; ``None`` for non-oxides."""
    if formula in KNOWN_OXIDES:
        return KNOWN_OXIDES[formula]
    if not is_oxide(formula):
        return None
    return _structural_category(formula)


def get_corresponding_acid(formula: str) -> Optional[str]:
    return CORRESPONDING_ACIDS.get(formula)


def get_corresponding_hydroxide(formula: str) -> Optional[str]:
    """Hydroxide of a basic or amphoteric oxide, e.g. ``CaO`` -> ``Ca(OH)2``."""
    category = classify_oxide_category(formula)
    if category not in (OxideCategory.BASIC, OxideCategory.AMPHOTERIC,
                        OxideCategory.PEROXIDE, OxideCategory.SUPEROXIDE):
        return None
    element = extract_main_element(formula)
    if element is None or not is_metal(element):
        return None
    state = integral_oxidation_state(formula, category)
    if state is None:
        return None
    return balance_salt_formula_with_oxidation_state(element, "OH", state)


def classify_oxide(formula: str) -> Optional[OxideClassification]:
    category = classify_oxide_category(formula)
    if category is None:
        return None
    return OxideClassification(
        formula=formula,
        category=category,
        element=extract_main_element(formula),
        oxidation_state=get_oxidation_state(formula, category),
        corresponding_acid=get_corresponding_acid(formula),
        corresponding_hydroxide=get_corresponding_hydroxide(formula),
    )


def describe_oxide(formula: str) -> str:
    category = classify_oxide_category(formula)
    if category is None:
        return "Not an oxide"
    return f"{category.value.capitalize()} Oxide"
