"""Salt recognition, solubility and classification."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from simpchem.compounds.acids import ACID_RADICALS, ANION_NAMES
from simpchem.compounds.bases import Solubility
from simpchem.compounds.oxides import is_oxide
from simpchem.elements import is_metal
from simpchem.ions import (
    CATION_SYMBOLS,
    IonComposition,
    extract_ions,
    extract_ions_with_oxidation_state,
    is_polyatomic,
)
from simpchem.models import Domain


class SaltType(str, Enum):
    NORMAL = "normal"
    ACIDIC = "acidic"
    BASIC = "basic"
    DOUBLE = "double"
    MIXED = "mixed"


class SaltPH(str, Enum):
    ACIDIC = "acidic"
    BASIC = "basic"
    NEUTRAL = "neutral"


_N, _AC, _BA = SaltType.NORMAL, SaltType.ACIDIC, SaltType.BASIC
_DO, _MI = SaltType.DOUBLE, SaltType.MIXED
_SOL, _INS = Solubility.SOLUBLE, Solubility.INSOLUBLE

KNOWN_SALTS: Mapping[str, Tuple[SaltType, Solubility]] = MappingProxyType(
    {
        "NaCl": (_N, _SOL),
        "KCl": (_N, _SOL),
        "CaSO4": (_N, _INS),
        "MgCl2": (_N, _SOL),
        "Na2SO4": (_N, _SOL),
        "CaCO3": (_N, _INS),
        "AgNO3": (_N, _SOL),
        "ZnCl2": (_N, _SOL),
        "FeCl3": (_N, _SOL),
        "Cu(NO3)2": (_N, _SOL),
        "Ca(NO3)2": (_N, _SOL),
        "K2SO4": (_N, _SOL),
        "KNO3": (_N, _SOL),
        "K2CO3": (_N, _SOL),
        "K3PO4": (_N, _SOL),
        "K2CrO4": (_N, _SOL),
        "K2Cr2O7": (_N, _SOL),
        "KMnO4": (_N, _SOL),
        "KClO": (_N, _SOL),
        "KClO3": (_N, _SOL),
        "CaCl2": (_N, _SOL),
        "Ca3(PO4)2": (_N, _INS),
        "CaCr2O7": (_N, _SOL),
        "Ca(ClO)2": (_N, _SOL),
        "Ca(ClO3)2": (_N, _SOL),
        "Ca(MnO4)2": (_N, _SOL),
        "CuSO4": (_N, _SOL),
        "ZnSO4": (_N, _SOL),
        "FeSO4": (_N, _SOL),
        "Fe2(SO4)3": (_N, _SOL),
        "NaHSO4": (_AC, _SOL),
        "KHCO3": (_AC, _SOL),
        "NaHCO3": (_AC, _SOL),
        "Ca(HCO3)2": (_AC, _SOL),
        "Ca(OH)Cl": (_BA, _SOL),
        "KAl(SO4)2": (_DO, _SOL),
        "CaOCl2": (_MI, _SOL),
    }
)

NON_SALTS = frozenset(
    {
        "H2O", "H2O2", "H2", "O2", "N2", "Cl2", "Br2", "I2",
        "H2SO4", "HCl", "HNO3", "H3PO4", "HBr", "HI", "H2CO3",
        "NaOH", "KOH", "Ca(OH)2", "Mg(OH)2", "Al(OH)3",
        "CO2", "SO2", "NO2", "P2O5", "SO3", "N2O5", "CaO", "MgO", "Al2O3",
    }
)

# Acid radicals plus the hydrogen and thio anions that only occur in salts.
SALT_ANIONS = frozenset(ACID_RADICALS.values()) | frozenset(
    {"HSO4", "HSO3", "HCO3", "H2PO4", "HPO4", "S2O3", "CN"}
)

STRONG_ACID_ANIONS = frozenset({"Cl", "Br", "I", "NO3", "ClO4", "ClO3"})
WEAK_ACID_ANIONS = frozenset({"CO3", "HCO3", "PO4", "SO3", "ClO", "ClO2", "F", "CH3COO"})
STRONG_BASE_CATIONS = frozenset({"Na", "K", "Li", "Rb", "Cs", "Ca", "Ba", "Sr"})
WEAK_BASE_CATIONS = frozenset({"NH4", "Fe", "Al", "Cu", "Zn", "Pb"})

# P = soluble, H = insoluble, M = slightly soluble, "-" = does not exist
SOLUBILITY_TABLE: Mapping[Tuple[str, str], str] = MappingProxyType(
    {
        ("OH", "H"): "P",
        ("OH", "Li"): "P",
        ("OH", "K"): "P",
        ("OH", "Na"): "P",
        ("OH", "NH4"): "P",
        ("OH", "Ba"): "P",
        ("OH", "Ca"): "M",
        ("OH", "Mg"): "H",
        ("OH", "Al"): "H",
        ("OH", "Cr"): "H",
        ("OH", "Fe2"): "H",
        ("OH", "Fe3"): "H",
        ("OH", "Ni"): "H",
        ("OH", "Co"): "H",
        ("OH", "Mn"): "H",
        ("OH", "Zn"): "H",
        ("OH", "Ag"): "-",
        ("OH", "Hg"): "-",
        ("OH", "Rb"): "H",
        ("OH", "Sn"): "H",
        ("OH", "Cu"): "H",
        ("F", "H"): "P",
        ("F", "Li"): "H",
        ("F", "K"): "P",
        ("F", "Na"): "P",
        ("F", "NH4"): "P",
        ("F", "Ba"): "M",
        ("F", "Ca"): "H",
        ("F", "Mg"): "H",
        ("F", "Al"): "P",
        ("F", "Cr"): "P",
        ("F", "Fe2"): "M",
        ("F", "Fe3"): "H",
        ("F", "Ni"): "H",
        ("F", "Co"): "M",
        ("F", "Mn"): "M",
        ("F", "Zn"): "M",
        ("F", "Ag"): "P",
        ("F", "Hg"): "H",
        ("F", "Rb"): "H",
        ("F", "Sn"): "P",
        ("F", "Cu"): "H",
        ("Cl", "H"): "P",
        ("Cl", "Li"): "P",
        ("Cl", "K"): "P",
        ("Cl", "Na"): "P",
        ("Cl", "NH4"): "P",
        ("Cl", "Ba"): "P",
        ("Cl", "Ca"): "P",
        ("Cl", "Mg"): "P",
        ("Cl", "Al"): "P",
        ("Cl", "Cr"): "P",
        ("Cl", "Fe2"): "P",
        ("Cl", "Fe3"): "P",
        ("Cl", "Ni"): "P",
        ("Cl", "Co"): "P",
        ("Cl", "Mn"): "P",
        ("Cl", "Zn"): "P",
        ("Cl", "Ag"): "H",
        ("Cl", "Hg"): "P",
        ("Cl", "Rb"): "M",
        ("Cl", "Sn"): "P",
        ("Cl", "Cu"): "P",
        ("Br", "H"): "P",
        ("Br", "Li"): "P",
        ("Br", "K"): "P",
        ("Br", "Na"): "P",
        ("Br", "NH4"): "P",
        ("Br", "Ba"): "P",
        ("Br", "Ca"): "P",
        ("Br", "Mg"): "P",
        ("Br", "Al"): "P",
        ("Br", "Cr"): "P",
        ("Br", "Fe2"): "P",
        ("Br", "Fe3"): "P",
        ("Br", "Ni"): "P",
        ("Br", "Co"): "P",
        ("Br", "Mn"): "P",
        ("Br", "Zn"): "P",
        ("Br", "Ag"): "H",
        ("Br", "Hg"): "M",
        ("Br", "Rb"): "M",
        ("Br", "Sn"): "P",
        ("Br", "Cu"): "P",
        ("I", "H"): "P",
        ("I", "Li"): "P",
        ("I", "K"): "P",
        ("I", "Na"): "P",
        ("I", "NH4"): "P",
        ("I", "Ba"): "P",
        ("I", "Ca"): "P",
        ("I", "Mg"): "P",
        ("I", "Al"): "P",
        ("I", "Cr"): "P",
        ("I", "Fe2"): "P",
        ("I", "Fe3"): "-",
        ("I", "Ni"): "P",
        ("I", "Co"): "P",
        ("I", "Mn"): "P",
        ("I", "Zn"): "P",
        ("I", "Ag"): "H",
        ("I", "Hg"): "H",
        ("I", "Rb"): "H",
        ("I", "Sn"): "M",
        ("I", "Cu"): "-",
        ("S", "H"): "P",
        ("S", "Li"): "P",
        ("S", "K"): "P",
        ("S", "Na"): "P",
        ("S", "NH4"): "P",
        ("S", "Ba"): "P",
        ("S", "Ca"): "P",
        ("S", "Mg"): "P",
        ("S", "Al"): "-",
        ("S", "Cr"): "-",
        ("S", "Fe2"): "H",
        ("S", "Fe3"): "-",
        ("S", "Ni"): "H",
        ("S", "Co"): "H",
        ("S", "Mn"): "H",
        ("S", "Zn"): "H",
        ("S", "Ag"): "H",
        ("S", "Hg"): "H",
        ("S", "Rb"): "H",
        ("S", "Sn"): "H",
        ("S", "Cu"): "H",
        ("SO4", "H"): "P",
        ("SO4", "Li"): "P",
        ("SO4", "K"): "P",
        ("SO4", "Na"): "P",
        ("SO4", "NH4"): "P",
        ("SO4", "Ba"): "H",
        ("SO4", "Ca"): "H",
        ("SO4", "Mg"): "H",
        ("SO4", "Al"): "-",
        ("SO4", "Cr"): "-",
        ("SO4", "Fe2"): "H",
        ("SO4", "Fe3"): "-",
        ("SO4", "Ni"): "H",
        ("SO4", "Co"): "H",
        ("SO4", "Mn"): "H",
        ("SO4", "Zn"): "H",
        ("SO4", "Ag"): "H",
        ("SO4", "Hg"): "-",
        ("SO4", "Rb"): "H",
        ("SO4", "Sn"): "-",
        ("SO4", "Cu"): "-",
        ("SO3", "H"): "P",
        ("SO3", "Li"): "P",
        ("SO3", "K"): "P",
        ("SO3", "Na"): "P",
        ("SO3", "NH4"): "P",
        ("SO3", "Ba"): "H",
        ("SO3", "Ca"): "M",
        ("SO3", "Mg"): "P",
        ("SO3", "Al"): "P",
        ("SO3", "Cr"): "P",
        ("SO3", "Fe2"): "P",
        ("SO3", "Fe3"): "P",
        ("SO3", "Ni"): "P",
        ("SO3", "Co"): "P",
        ("SO3", "Mn"): "P",
        ("SO3", "Zn"): "P",
        ("SO3", "Ag"): "M",
        ("SO3", "Hg"): "P",
        ("SO3", "Rb"): "H",
        ("SO3", "Sn"): "P",
        ("SO3", "Cu"): "P",
        ("PO4", "H"): "P",
        ("PO4", "Li"): "H",
        ("PO4", "K"): "P",
        ("PO4", "Na"): "P",
        ("PO4", "NH4"): "P",
        ("PO4", "Ba"): "H",
        ("PO4", "Ca"): "H",
        ("PO4", "Mg"): "H",
        ("PO4", "Al"): "H",
        ("PO4", "Cr"): "H",
        ("PO4", "Fe2"): "H",
        ("PO4", "Fe3"): "H",
        ("PO4", "Ni"): "H",
        ("PO4", "Co"): "H",
        ("PO4", "Mn"): "H",
        ("PO4", "Zn"): "H",
        ("PO4", "Ag"): "H",
        ("PO4", "Hg"): "H",
        ("PO4", "Rb"): "H",
        ("PO4", "Sn"): "H",
        ("PO4", "Cu"): "H",
        ("CO3", "H"): "P",
        ("CO3", "Li"): "P",
        ("CO3", "K"): "P",
        ("CO3", "Na"): "P",
        ("CO3", "NH4"): "P",
        ("CO3", "Ba"): "H",
        ("CO3", "Ca"): "H",
        ("CO3", "Mg"): "H",
        ("CO3", "Al"): "-",
        ("CO3", "Cr"): "-",
        ("CO3", "Fe2"): "H",
        ("CO3", "Fe3"): "-",
        ("CO3", "Ni"): "H",
        ("CO3", "Co"): "H",
        ("CO3", "Mn"): "H",
        ("CO3", "Zn"): "H",
        ("CO3", "Ag"): "H",
        ("CO3", "Hg"): "-",
        ("CO3", "Rb"): "H",
        ("CO3", "Sn"): "H",
        ("CO3", "Cu"): "H",
        ("SiO3", "H"): "H",
        ("SiO3", "Li"): "P",
        ("SiO3", "K"): "P",
        ("SiO3", "Na"): "P",
        ("SiO3", "NH4"): "-",
        ("SiO3", "Ba"): "H",
        ("SiO3", "Ca"): "H",
        ("SiO3", "Mg"): "H",
        ("SiO3", "Al"): "H",
        ("SiO3", "Cr"): "-",
        ("SiO3", "Fe2"): "H",
        ("SiO3", "Fe3"): "H",
        ("SiO3", "Ni"): "-",
        ("SiO3", "Co"): "-",
        ("SiO3", "Mn"): "H",
        ("SiO3", "Zn"): "H",
        ("SiO3", "Ag"): "-",
        ("SiO3", "Hg"): "-",
        ("SiO3", "Rb"): "H",
        ("SiO3", "Sn"): "-",
        ("SiO3", "Cu"): "H",
        ("NO3", "H"): "P",
        ("NO3", "Li"): "P",
        ("NO3", "K"): "P",
        ("NO3", "Na"): "P",
        ("NO3", "NH4"): "P",
        ("NO3", "Ba"): "P",
        ("NO3", "Ca"): "P",
        ("NO3", "Mg"): "P",
        ("NO3", "Al"): "P",
        ("NO3", "Cr"): "P",
        ("NO3", "Fe2"): "P",
        ("NO3", "Fe3"): "P",
        ("NO3", "Ni"): "P",
        ("NO3", "Co"): "P",
        ("NO3", "Mn"): "P",
        ("NO3", "Zn"): "P",
        ("NO3", "Ag"): "P",
        ("NO3", "Hg"): "P",
        ("NO3", "Rb"): "P",
        ("NO3", "Sn"): "-",
        ("NO3", "Cu"): "P",
        ("CH3COO", "H"): "P",
        ("CH3COO", "Li"): "P",
        ("CH3COO", "K"): "P",
        ("CH3COO", "Na"): "P",
        ("CH3COO", "NH4"): "P",
        ("CH3COO", "Ba"): "P",
        ("CH3COO", "Ca"): "P",
        ("CH3COO", "Mg"): "P",
        ("CH3COO", "Al"): "M",
        ("CH3COO", "Cr"): "P",
        ("CH3COO", "Fe2"): "P",
        ("CH3COO", "Fe3"): "P",
        ("CH3COO", "Ni"): "P",
        ("CH3COO", "Co"): "P",
        ("CH3COO", "Mn"): "P",
        ("CH3COO", "Zn"): "P",
        ("CH3COO", "Ag"): "P",
        ("CH3COO", "Hg"): "P",
        ("CH3COO", "Rb"): "P",
        ("CH3COO", "Sn"): "P",
        ("CH3COO", "Cu"): "P",
    }
)

_STRUCTURAL_SALT = re.compile(r"[A-Z][a-z]?[0-9]?[A-Z]")
_MIXED_SALT = re.compile(r"[A-Z][a-z]?[A-Z][a-z]?[A-Z]")
_LEADING_SYMBOL = re.compile(r"^(NH4|[A-Z][a-z]?)")
_HYDROGEN = re.compile(r"H(?![a-z])")
_CATIONS_BY_LENGTH = tuple(sorted(CATION_SYMBOLS, key=len, reverse=True))


@dataclass(frozen=True)
class SaltClassification:
    formula: str
    salt_type: SaltType
    cation: Optional[str]
    anion: Optional[str]
    anion_name: Optional[str]
    solubility: Solubility
    ph: SaltPH
    composition: IonComposition

    domain = Domain.SALT

    def to_dict(self) -> Dict[str, Any]:
        return {
            "formula": self.formula,
            "domain": self.domain.value,
            "type": self.salt_type.value,
            "cation": self.cation,
            "anion": self.anion,
            "anion_name": self.anion_name,
            "solubility": self.solubility.value,
            "ph": self.ph.value,
            "oxidation_state": self.composition.oxidation_state,
        }


def _has_replaceable_hydrogen(formula: str) -> bool:
    stripped = formula.replace("NH4", "").replace("CH3COO", "")
    return (
        not formula.startswith("H")
        and "OH" not in formula
        and _HYDROGEN.search(stripped) is not None
    )


def _has_hydroxide(formula: str) -> bool:
    leading = _LEADING_SYMBOL.match(formula)
    return "OH" in formula and leading is not None and is_metal(leading.group(1))


def is_salt(formula: str) -> bool:
    """Known salts, then metal/ammonium + radical, then the structural shape."""
    if formula in KNOWN_SALTS:
        return True
    if formula in NON_SALTS:
        return False

    ions = extract_ions(formula)
    if ions.cation and ions.anion in SALT_ANIONS:
        if is_metal(ions.cation) or ions.cation == "NH4":
            return True

    if formula.startswith("H") or "OH" in formula or is_oxide(formula):
        return False
    leading = _LEADING_SYMBOL.match(formula)
    if leading is None or not (is_metal(leading.group(1)) or leading.group(1) == "NH4"):
        return False
    return _STRUCTURAL_SALT.search(formula) is not None


def second_cation(formula: str) -> Optional[str]:
    """Another cation left after removing the first match, for double salts."""
    first = extract_ions(formula).cation
    if first is None:
        return None
    rest = formula.replace(first, "", 1)
    for symbol in _CATIONS_BY_LENGTH:
        if symbol != first and symbol in rest:
            return symbol
    return None


def lookup_solubility(anion: str, cation: str, oxidation_state: Optional[int] = None) -> Optional[str]:
    code = SOLUBILITY_TABLE.get((anion, cation))
    if code is None and oxidation_state:
        code = SOLUBILITY_TABLE.get((anion, f"{cation}{oxidation_state}"))
    return code


def pair_is_soluble(cation: str, anion: str, oxidation_state: Optional[int] = None) -> bool:
    """Solubility rules for an ion pair, falling back to the table."""
    if cation in ("Na", "K", "NH4"):
        return True
    if anion == "NO3":
        return True
    if anion == "Cl" and cation not in ("Ag", "Hg", "Pb"):
        return True
    if anion == "SO4" and cation not in ("Ca", "Ba", "Sr", "Pb"):
        return True
    if anion in ("CO3", "PO4", "S"):
        return False
    return lookup_solubility(anion, cation, oxidation_state) == "P"


def is_soluble(formula: str) -> Optional[bool]:
    known = KNOWN_SALTS.get(formula)
    if known is not None:
        return known[1] is Solubility.SOLUBLE
    composition = extract_ions_with_oxidation_state(formula)
    if composition.cation is None or composition.anion is None:
        return None
    return pair_is_soluble(composition.cation, composition.anion, composition.oxidation_state)


def classify_salt_by_type(formula: str) -> SaltType:
    known = KNOWN_SALTS.get(formula)
    if known is not None:
        return known[0]
    if _has_replaceable_hydrogen(formula):
        return SaltType.ACIDIC
    if _has_hydroxide(formula):
        return SaltType.BASIC
    if second_cation(formula) is not None:
        return SaltType.DOUBLE
    anion = extract_ions(formula).anion
    if (
        not any(group in formula for group in ("SO4", "NO3", "CO3", "PO4"))
        and "(" not in formula
        and _MIXED_SALT.search(formula)
        and not (anion and is_polyatomic(anion))
    ):
        return SaltType.MIXED
    return SaltType.NORMAL


def determine_salt_ph(formula: str) -> Optional[SaltPH]:
    """pH character of the salt's aqueous solution."""
    known = KNOWN_SALTS.get(formula)
    if known is not None:
        if known[0] is SaltType.ACIDIC:
            return SaltPH.ACIDIC
        if known[0] is SaltType.BASIC:
            return SaltPH.BASIC
        return SaltPH.NEUTRAL

    ions = extract_ions(formula)
    if ions.cation is None or ions.anion is None:
        return None
    if _has_replaceable_hydrogen(formula):
        return SaltPH.ACIDIC
    if _has_hydroxide(formula):
        return SaltPH.BASIC
    if ions.anion in STRONG_ACID_ANIONS and ions.cation in STRONG_BASE_CATIONS:
        return SaltPH.NEUTRAL
    if ions.anion in WEAK_ACID_ANIONS and ions.cation in STRONG_BASE_CATIONS:
        return SaltPH.BASIC
    if ions.anion in STRONG_ACID_ANIONS and ions.cation in WEAK_BASE_CATIONS:
        return SaltPH.ACIDIC
    return SaltPH.NEUTRAL


def classify_salt(formula: str) -> Optional[SaltClassification]:
    if not is_salt(formula):
        return None
    composition = extract_ions_with_oxidation_state(formula)
    soluble = is_soluble(formula)
    return SaltClassification(
        formula=formula,
        salt_type=classify_salt_by_type(formula),
        cation=composition.cation,
        anion=composition.anion,
        anion_name=ANION_NAMES.get(composition.anion) if composition.anion else None,
        solubility=Solubility.SOLUBLE if soluble else Solubility.INSOLUBLE,
        ph=determine_salt_ph(formula) or SaltPH.NEUTRAL,
        composition=composition,
    )


def describe_salt(formula: str) -> str:
    """Human-readable name, e.g. ``Normal Salt (Soluble) - Neutral in solution``."""
    info = classify_salt(formula)
    if info is None:
        return "Not a salt"
    name = f"{info.salt_type.value.capitalize()} Salt ({info.solubility.value.capitalize()})"
    return f"{name} - {info.ph.value.capitalize()} in solution"
