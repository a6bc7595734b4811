"""Base (hydroxide) recognition and classification."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from simpchem.elements import forms_amphoteric_oxide, is_metal
from simpchem.ions import get_most_common_valence
from simpchem.models import Domain


class BaseStrength(str, Enum):
    STRONG = "strong"
    WEAK = "weak"
    AMPHOTERIC = "amphoteric"


class Solubility(str, Enum):
    SOLUBLE = "soluble"
    INSOLUBLE = "insoluble"


_ST, _WK, _AM = BaseStrength.STRONG, BaseStrength.WEAK, BaseStrength.AMPHOTERIC
_SOL, _INS = Solubility.SOLUBLE, Solubility.INSOLUBLE

# Pb(OH)2 and Cr(OH)3 are amphoteric, not weak.
KNOWN_BASES: Mapping[str, Tuple[BaseStrength, Solubility]] = MappingProxyType(
    {
        "LiOH": (_ST, _SOL),
        "NaOH": (_ST, _SOL),
        "KOH": (_ST, _SOL),
        "RbOH": (_ST, _SOL),
        "CsOH": (_ST, _SOL),
        "Ba(OH)2": (_ST, _SOL),
        "Ca(OH)2": (_ST, _SOL),
        "Mg(OH)2": (_WK, _INS),
        "Fe(OH)2": (_WK, _INS),
        "Fe(OH)3": (_WK, _INS),
        "Cu(OH)2": (_WK, _INS),
        "Ni(OH)2": (_WK, _INS),
        "Co(OH)2": (_WK, _INS),
        "Mn(OH)2": (_WK, _INS),
        "NH4OH": (_WK, _SOL),
        "Al(OH)3": (_AM, _INS),
        "Zn(OH)2": (_AM, _INS),
        "Be(OH)2": (_AM, _INS),
        "Pb(OH)2": (_AM, _INS),
        "Sn(OH)2": (_AM, _INS),
        "Cr(OH)3": (_AM, _INS),
    }
)

STRONG_BASE_METALS = frozenset({"Li", "Na", "K", "Rb", "Cs", "Fr", "Ba", "Sr"})
SOLUBLE_BASE_METALS = frozenset({"Li", "Na", "K", "Rb", "Cs", "Fr", "Ba", "Sr", "Ca"})

_BASE_PATTERNS = (
    re.compile(r"^([A-Z][a-z]?)OH$"),
    re.compile(r"^([A-Z][a-z]?)\(OH\)(\d+)$"),
    re.compile(r"^([A-Z][a-z]?)(\d+)\(OH\)(\d+)$"),
)
_METAL_PREFIX = re.compile(r"^(NH4|[A-Z][a-z]?)")
_HYDROXIDE_COUNT = re.compile(r"\(OH\)(\d+)")


@dataclass(frozen=True)
class BaseClassification:
    formula: str
    metal: Optional[str]
    hydroxide_count: int
    strength: BaseStrength
    solubility: Solubility
    corresponding_oxide: Optional[str]

    domain = Domain.BASE

    @property
    def amphoteric(self) -> bool:
        return self.strength is BaseStrength.AMPHOTERIC

    def to_dict(self) -> Dict[str, Any]:
        return {
            "formula": self.formula,
            "domain": self.domain.value,
            "metal": self.metal,
            "hydroxide_count": self.hydroxide_count,
            "strength": self.strength.value,
            "solubility": self.solubility.value,
            "amphoteric": self.amphoteric,
            "corresponding_oxide": self.corresponding_oxide,
        }


def is_base(formula: str) -> bool:
    """Metal hydroxides (and ammonium hydroxide) are bases; oxoacids are not."""
    if "OH" not in formula:
        return False
    if formula.startswith("H") and not formula.startswith("H2O"):
        return False
    if formula in KNOWN_BASES:
        return True
    for pattern in _BASE_PATTERNS:
        match = pattern.match(formula)
        if match:
            return is_metal(match.group(1))
    return False


def extract_metal(formula: str) -> Optional[str]:
    match = _METAL_PREFIX.match(formula)
    return match.group(1) if match else None


def get_hydroxide_count(formula: str) -> int:
    match = _HYDROXIDE_COUNT.search(formula)
    if match:
        return int(match.group(1))
    return 1 if "OH" in formula else 0


def determine_strength(formula: str) -> BaseStrength:
    known = KNOWN_BASES.get(formula)
    if known is not None:
        return known[0]
    metal = extract_metal(formula)
    if metal in STRONG_BASE_METALS:
        return BaseStrength.STRONG
    if metal and forms_amphoteric_oxide(metal):
        return BaseStrength.AMPHOTERIC
    return BaseStrength.WEAK


def determine_solubility(formula: str) -> Solubility:
    known = KNOWN_BASES.get(formula)
    if known is not None:
        return known[1]
    if extract_metal(formula) in SOLUBLE_BASE_METALS:
        return Solubility.SOLUBLE
    return Solubility.INSOLUBLE


def get_corresponding_oxide(formula: str) -> Optional[str]:
    """Oxide with the same metal valence, e.g. ``Fe(OH)3`` -> ``Fe2O3``."""
    metal = extract_metal(formula)
    if metal is None or metal == "NH4":
        return None
    valence = get_hydroxide_count(formula) or get_most_common_valence(metal)
    if not valence:
        return None
    if valence == 1:
        return f"{metal}2O"
    if valence == 2:
        return f"{metal}O"
    if valence == 3:
        return f"{metal}2O3"
    if valence % 2 == 0:
        return f"{metal}O{valence // 2}"
    return f"{metal}2O{valence}"


def classify_base(formula: str) -> Optional[BaseClassification]:
    if not is_base(formula):
        return None
    return BaseClassification(
        formula=formula,
        metal=extract_metal(formula),
        hydroxide_count=get_hydroxide_count(formula),
        strength=determine_strength(formula),
        solubility=determine_solubility(formula),
        corresponding_oxide=get_corresponding_oxide(formula),
    )


def describe_base(formula: str) -> str:
    info = classify_base(formula)
    if info is None:
        return "Not a base"
    if info.amphoteric:
        name = "Amphoteric Hydroxide"
    elif info.strength is BaseStrength.STRONG:
        name = "Strong Base"
    else:
        name = "Weak Base"
    return f"{name} ({info.solubility.value.capitalize()})"
