"""Acid recognition and classification."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from simpchem.ions import contains_oxygen
from simpchem.models import Domain


class AcidStrength(str, Enum):
    STRONG = "strong"
    MODERATE = "moderate"
    WEAK = "weak"


class AcidType(str, Enum):
    OXYACID = "oxyacid"
    NONOXY = "nonoxy"


@dataclass(frozen=True)
class AcidTags:
    strength: AcidStrength
    basicity: int
    acid_type: AcidType


_S, _M, _W = AcidStrength.STRONG, AcidStrength.MODERATE, AcidStrength.WEAK
_OXY, _NON = AcidType.OXYACID, AcidType.NONOXY

KNOWN_ACIDS: Mapping[str, AcidTags] = MappingProxyType(
    {
        "HCl": AcidTags(_S, 1, _NON),
        "HBr": AcidTags(_S, 1, _NON),
        "HI": AcidTags(_S, 1, _NON),
        "HNO3": AcidTags(_S, 1, _OXY),
        "H2SO4": AcidTags(_S, 2, _OXY),
        "HClO4": AcidTags(_S, 1, _OXY),
        "HMnO4": AcidTags(_S, 1, _OXY),
        "H3PO4": AcidTags(_M, 3, _OXY),
        "H2SO3": AcidTags(_M, 2, _OXY),
        "HF": AcidTags(_M, 1, _NON),
        "HClO3": AcidTags(_M, 1, _OXY),
        "HPO3": AcidTags(_M, 1, _OXY),
        "H4P2O7": AcidTags(_M, 4, _OXY),
        "H2CrO4": AcidTags(_M, 2, _OXY),
        "H2Cr2O7": AcidTags(_M, 2, _OXY),
        "HCOOH": AcidTags(_W, 1, _OXY),
        "CH3COOH": AcidTags(_W, 1, _OXY),
        "H2CO3": AcidTags(_W, 2, _OXY),
        "H2S": AcidTags(_W, 2, _NON),
        "H2SiO3": AcidTags(_W, 2, _OXY),
        "HClO": AcidTags(_W, 1, _OXY),
        "HClO2": AcidTags(_W, 1, _OXY),
        "HNO2": AcidTags(_W, 1, _OXY),
        "H3BO3": AcidTags(_W, 3, _OXY),
    }
)

ACID_RADICALS: Mapping[str, str] = MappingProxyType(
    {
        "HF": "F",
        "HCl": "Cl",
        "HBr": "Br",
        "HI": "I",
        "H2S": "S",
        "HNO3": "NO3",
        "HNO2": "NO2",
        "H2SO4": "SO4",
        "H2SO3": "SO3",
        "H2CO3": "CO3",
        "H2SiO3": "SiO3",
        "H3PO4": "PO4",
        "HPO3": "PO3",
        "H4P2O7": "P2O7",
        "H2CrO4": "CrO4",
        "H2Cr2O7": "Cr2O7",
        "H3BO3": "BO3",
        "HClO": "ClO",
        "HClO2": "ClO2",
        "HClO3": "ClO3",
        "HClO4": "ClO4",
        "H2MnO4": "MnO4",
        "HMnO4": "MnO4",
        "HCOOH": "HCOO",
        "CH3COOH": "CH3COO",
    }
)

ANION_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "F": "fluoride",
        "Cl": "chloride",
        "Br": "bromide",
        "I": "iodide",
        "S": "sulfide",
        "NO3": "nitrate",
        "NO2": "nitrite",
        "SO4": "sulfate",
        "SO3": "sulfite",
        "HSO4": "hydrogen sulfate",
        "HSO3": "hydrogen sulfite",
        "CO3": "carbonate",
        "HCO3": "hydrogen carbonate",
        "SiO3": "silicate",
        "PO4": "phosphate",
        "HPO4": "hydrogen phosphate",
        "H2PO4": "dihydrogen phosphate",
        "PO3": "metaphosphate",
        "P2O7": "pyrophosphate",
        "CrO4": "chromate",
        "Cr2O7": "dichromate",
        "BO3": "borate",
        "ClO": "hypochlorite",
        "ClO2": "chlorite",
        "ClO3": "chlorate",
        "ClO4": "perchlorate",
        "MnO4": "permanganate",
        "HCOO": "formate",
        "CH3COO": "acetate",
        "OH": "hydroxide",
        "CN": "cyanide",
        "S2O3": "thiosulfate",
    }
)

ACID_OXIDES: Mapping[str, str] = MappingProxyType(
    {
        "HNO3": "N2O5",
        "HNO2": "N2O3",
        "H2SO4": "SO3",
        "H2SO3": "SO2",
        "H2CO3": "CO2",
        "H2SiO3": "SiO2",
        "H3PO4": "P2O5",
        "HPO3": "P2O5",
        "H2CrO4": "CrO3",
        "H2Cr2O7": "Cr2O7",
        "H3BO3": "B2O3",
        "HClO": "Cl2O",
        "HClO2": "ClO2",
        "HClO3": "Cl2O5",
        "HClO4": "Cl2O7",
    }
)

BASICITY_NAMES: Mapping[int, str] = MappingProxyType(
    {1: "monoprotic", 2: "diprotic", 3: "triprotic", 4: "tetraprotic"}
)

NON_ACIDS = frozenset({"H2O", "H2O2", "H2", "He", "Hg"})

_LEADING_HYDROGEN = re.compile(r"^H(\d?)(?![a-z])(.+)$")
_CAPITAL = re.compile(r"[A-Z]")


@dataclass(frozen=True)
class AcidClassification:
    formula: str
    strength: AcidStrength
    basicity: int
    acid_type: AcidType
    radical: Optional[str]
    anion_name: Optional[str]
    corresponding_oxide: Optional[str]

    domain = Domain.ACID

    @property
    def basicity_name(self) -> str:
        return BASICITY_NAMES.get(self.basicity, "unknown")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "formula": self.formula,
            "domain": self.domain.value,
            "strength": self.strength.value,
            "basicity": self.basicity,
            "basicity_name": self.basicity_name,
            "acid_type": self.acid_type.value,
            "radical": self.radical,
            "anion_name": self.anion_name,
            "corresponding_oxide": self.corresponding_oxide,
        }


def is_acid(formula: str) -> bool:
    """Return True for known acids, ``H``-led compounds and carboxylic acids."""
    if formula in KNOWN_ACIDS:
        return True
    if formula in NON_ACIDS:
        return False
    if _LEADING_HYDROGEN.match(formula) and len(_CAPITAL.findall(formula)) > 1:
        return True
    return "COOH" in formula


def extract_acid_radical(formula: str) -> Optional[str]:
    if formula in ACID_RADICALS:
        return ACID_RADICALS[formula]
    match = _LEADING_HYDROGEN.match(formula)
    if match:
        return match.group(2)
    if formula.endswith("COOH"):
        return formula[:-1]
    return None


def determine_basicity(formula: str) -> int:
    """Number of replaceable hydrogen atoms."""
    tags = KNOWN_ACIDS.get(formula)
    if tags is not None:
        return tags.basicity
    match = _LEADING_HYDROGEN.match(formula)
    if match:
        return int(match.group(1)) if match.group(1) else 1
    carboxyl = formula.count("COOH")
    return carboxyl if carboxyl else 1


def determine_acid_type(formula: str) -> AcidType:
    tags = KNOWN_ACIDS.get(formula)
    if tags is not None:
        return tags.acid_type
    return AcidType.OXYACID if contains_oxygen(formula) else AcidType.NONOXY


def classify_acid_by_strength(formula: str) -> AcidStrength:
    tags = KNOWN_ACIDS.get(formula)
    if tags is not None:
        return tags.strength
    return AcidStrength.WEAK


def get_corresponding_oxide(formula: str) -> Optional[str]:
    return ACID_OXIDES.get(formula)


def get_anion_name(formula: str) -> Optional[str]:
    radical = extract_acid_radical(formula)
    if radical is None:
        return None
    return ANION_NAMES.get(radical)


def acid_for_radical(radical: str) -> Optional[str]:
    """Reverse lookup of :data:`ACID_RADICALS`, first match wins."""
    for acid, acid_radical in ACID_RADICALS.items():
        if acid_radical == radical:
            return acid
    return None


def classify_acid(formula: str) -> Optional[AcidClassification]:
    if not is_acid(formula):
        return None
    acid_type = determine_acid_type(formula)
    return AcidClassification(
        formula=formula,
        strength=classify_acid_by_strength(formula),
        basicity=determine_basicity(formula),
        acid_type=acid_type,
        radical=extract_acid_radical(formula),
        anion_name=get_anion_name(formula),
        corresponding_oxide=(
            get_corresponding_oxide(formula) if acid_type is AcidType.OXYACID else None
        ),
    )


def describe_acid(formula: str) -> str:
    """Human-readable type name, e.g. ``Strong Oxyacid (diprotic)``."""
    info = classify_acid(formula)
    if info is None:
        return "Not an acid"
    kind = "Oxyacid" if info.acid_type is AcidType.OXYACID else "Non-oxygenated Acid"
    return f"{info.strength.value.capitalize()} {kind} ({info.basicity_name})"
