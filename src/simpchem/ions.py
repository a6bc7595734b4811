"""Ion extraction, valences and charge-balanced salt formulas.

All substring scanning for cations and anions lives here. Symbols are matched
longest first; symbols of equal length keep the order in which they are
listed, so the lists below are part of the behaviour and not just data.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from fractions import Fraction
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

# Most common valence first. Negative values are anionic states.
ELEMENT_VALENCES: Mapping[str, Tuple[int, ...]] = MappingProxyType(
    {
        "H": (1, -1),
        "Li": (1,), "Na": (1,), "K": (1,), "Rb": (1,), "Cs": (1,), "Fr": (1,),
        "Be": (2,), "Mg": (2,), "Ca": (2,), "Sr": (2,), "Ba": (2,), "Ra": (2,),
        "Sc": (3,),
        "Ti": (4, 3, 2),
        "V": (5, 4, 3, 2),
        "Cr": (6, 3, 2),
        "Mn": (7, 6, 4, 3, 2),
        "Fe": (3, 2),
        "Co": (3, 2),
        "Ni": (2, 3),
        "Cu": (2, 1),
        "Zn": (2,),
        "Y": (3,),
        "Zr": (4,),
        "Nb": (5, 3),
        "Mo": (6, 4, 3, 2),
        "Tc": (7, 4),
        "Ru": (3, 4, 6, 8),
        "Rh": (3,),
        "Pd": (2, 4),
        "Ag": (1,),
        "Cd": (2,),
        "Hf": (4,),
        "Ta": (5,),
        "W": (6, 4, 2),
        "Re": (7, 4),
        "Os": (4, 3, 8),
        "Ir": (3, 4, 6),
        "Pt": (2, 4),
        "Au": (3, 1),
        "Hg": (2, 1),
        "B": (3,),
        "Al": (3,),
        "Ga": (3, 1),
        "In": (3, 1),
        "Tl": (1, 3),
        "C": (4, 2, -4),
        "Si": (4, -4),
        "Ge": (4, 2),
        "Sn": (4, 2),
        "Pb": (4, 2),
        "N": (5, 4, 3, 2, -3),
        "P": (5, 3, -3),
        "As": (5, 3, -3),
        "Sb": (5, 3, -3),
        "Bi": (5, 3),
        "O": (-2,),
        "S": (6, 4, 2, -2),
        "Se": (6, 4, -2),
        "Te": (6, 4, -2),
        "Po": (4, 2),
        "F": (-1,),
        "Cl": (-1, 1, 3, 5, 7),
        "Br": (-1, 1, 3, 5),
        "I": (-1, 1, 3, 5, 7),
        "At": (-1, 1, 3, 5, 7),
        "He": (0,), "Ne": (0,), "Ar": (0,),
        "Kr": (0, 2),
        "Xe": (0, 2, 4, 6, 8),
        "Rn": (0, 2),
        "La": (3,),
        "Ce": (3, 4),
        "Pr": (3, 4),
        "Nd": (3,),
        "Pm": (3,),
        "Sm": (3, 2),
        "Eu": (3, 2),
        "Gd": (3,),
        "Tb": (3, 4),
        "Dy": (3,),
        "Ho": (3,),
        "Er": (3,),
        "Tm": (3, 2),
        "Yb": (3, 2),
        "Lu": (3,),
        "Ac": (3,),
        "Th": (4,),
        "Pa": (5, 4),
        "U": (6, 4, 3),
        "Np": (5, 4, 3),
        "Pu": (4, 3, 5, 6),
        "Am": (3, 4, 5, 6),
    }
)

POLYATOMIC_IONS: Mapping[str, int] = MappingProxyType(
    {
        "NH4": 1,
        "H3O": 1,
        "OH": -1,
        "CN": -1,
        "NO2": -1,
        "NO3": -1,
        "ClO": -1,
        "ClO2": -1,
        "ClO3": -1,
        "ClO4": -1,
        "CH3COO": -1,
        "HCO3": -1,
        "HSO4": -1,
        "HSO3": -1,
        "H2PO4": -1,
        "MnO4": -1,
        "CO3": -2,
        "SO4": -2,
        "SO3": -2,
        "S2O3": -2,
        "HPO4": -2,
        "CrO4": -2,
        "Cr2O7": -2,
        "SiO3": -2,
        "O2": -2,
        "PO4": -3,
        "AsO4": -3,
        "Fe(CN)6": -4,
    }
)

ANION_CHARGES: Mapping[str, int] = MappingProxyType(
    {
        **{ion: charge for ion, charge in POLYATOMIC_IONS.items() if charge < 0},
        "F": -1,
        "Cl": -1,
        "Br": -1,
        "I": -1,
        "O": -2,
        "S": -2,
        "PO3": -1,
        "AlO2": -1,
        "BrO": -1,
        "IO": -1,
        "ZnO2": -2,
        "BeO2": -2,
        "S2O7": -2,
        "P2O7": -4,
        "BO3": -3,
    }
)

CATION_SYMBOLS: Tuple[str, ...] = (
    "NH4",
    "Li", "Na", "K", "Rb", "Cs",
    "Be", "Mg", "Ca", "Sr", "Ba",
    "Al", "Fe", "Zn", "Cu", "Ag", "Pb", "Sn", "Hg",
    "Ni", "Co", "Cd",
)

ANION_SYMBOLS: Tuple[str, ...] = (
    "OH", "NO3", "NO2", "Cl", "Br", "I", "F",
    "SO4", "SO3", "HSO4", "HSO3", "S2O3", "S",
    "CO3", "HCO3",
    "PO4", "HPO4", "H2PO4", "PO3", "P2O7", "AsO4",
    "SiO3", "CH3COO", "CN",
    "ClO", "ClO2", "ClO3", "ClO4",
    "MnO4", "CrO4", "Cr2O7",
)

# sorted() is stable, so equal-length symbols keep their listed order
_CATIONS_BY_LENGTH = tuple(sorted(CATION_SYMBOLS, key=len, reverse=True))
_ANIONS_BY_LENGTH = tuple(sorted(ANION_SYMBOLS, key=len, reverse=True))

# Reactant formula -> element -> valence to use in products formed with it.
VALENCE_OVERRIDES: Mapping[str, Mapping[str, int]] = MappingProxyType(
    {
        "HCl": MappingProxyType({"Fe": 2, "Sn": 2, "Pb": 2, "Cr": 2}),
        "HBr": MappingProxyType({"Fe": 2, "Sn": 2, "Pb": 2}),
        "HI": MappingProxyType({"Fe": 2, "Sn": 2, "Pb": 2}),
        "H2SO4": MappingProxyType({"Cu": 2, "Hg": 2}),
        "HNO3": MappingProxyType({"Cu": 2, "Hg": 2}),
        "AgNO3": MappingProxyType({"Cu": 2}),
    }
)

_OXYGEN = re.compile(r"O(?![a-z])")
_CAPITAL = re.compile(r"[A-Z]")


@dataclass(frozen=True)
class Ions:
    cation: Optional[str]
    anion: Optional[str]


@dataclass(frozen=True)
class IonComposition:
    cation: Optional[str]
    anion: Optional[str]
    cation_count: Optional[int]
    anion_count: Optional[int]
    oxidation_state: Optional[int]


def contains_oxygen(formula: str | None) -> bool:
    return bool(formula) and _OXYGEN.search(formula) is not None


def get_valences(element: str) -> Tuple[int, ...]:
    return ELEMENT_VALENCES.get(element, ())


def get_most_common_valence(element: str) -> Optional[int]:
    valences = get_valences(element)
    return valences[0] if valences else None


def get_max_valence(element: str) -> Optional[int]:
    positive = [v for v in get_valences(element) if v > 0]
    return max(positive) if positive else None


def get_most_likely_valence(element: str, context: str | None = None) -> Optional[int]:
    """Pick the valence an element most plausibly shows next to ``context``.

    A reactant-specific override wins. Otherwise an oxygen-bearing context
    selects the lowest positive valence and anything else the first tabulated
    one.
    """
    override = VALENCE_OVERRIDES.get(context or "", {}).get(element)
    if override is not None:
        return override

    valences = get_valences(element)
    if not valences:
        return None
    if contains_oxygen(context):
        positive = [v for v in valences if v > 0]
        return min(positive) if positive else min(valences)
    return valences[0]


def cation_charge(cation: str, context: str | None = None) -> Optional[int]:
    if cation in POLYATOMIC_IONS:
        charge = POLYATOMIC_IONS[cation]
        return charge if charge > 0 else None
    valence = get_most_likely_valence(cation, context)
    if valence is None or valence <= 0:
        return None
    return valence


def anion_charge(anion: str) -> Optional[int]:
    """Signed charge of an anion, from the fixed table or the element's valences."""
    if anion in ANION_CHARGES:
        return ANION_CHARGES[anion]
    negative = [v for v in get_valences(anion) if v < 0]
    return negative[0] if negative else None


def salt_counts(cation_charge: int, anion_charge: int) -> Tuple[int, int]:
    """Smallest ion counts that make a neutral formula unit."""
    cat = abs(cation_charge)
    an = abs(anion_charge)
    if cat == 0 or an == 0:
        raise ValueError("Ion charges must be non-zero")
    lcm = math.lcm(cat, an)
    return lcm // cat, lcm // an


def is_polyatomic(ion: str) -> bool:
    return len(_CAPITAL.findall(ion)) > 1 or any(ch.isdigit() or ch == "(" for ch in ion)


def format_ion(ion: str, count: int) -> str:
    if count == 1:
        return ion
    if is_polyatomic(ion):
        return f"({ion}){count}"
    return f"{ion}{count}"


def compose_formula(cation: str, cat_charge: int, anion: str, an_charge: int) -> str:
    cat_count, an_count = salt_counts(cat_charge, an_charge)
    return format_ion(cation, cat_count) + format_ion(anion, an_count)


def balance_salt_formula(cation: str, anion: str, context: str | None = None) -> Optional[str]:
    """Build a neutral formula such as ``CaCl2`` or ``Fe2(SO4)3``.

    Args:
        cation: Element symbol or polyatomic cation (``NH4``).
        anion: Simple or polyatomic anion symbol.
        context: Formula of the co-reactant, used to pick among valences.

    Returns:
        The formula, or ``None`` when either charge cannot be resolved.
    """
    if not cation or not anion:
        return None
    cat = cation_charge(cation, context)
    an = anion_charge(anion)
    if not cat or not an:
        logger.debug("No charge data for %s/%s", cation, anion)
        return None
    return compose_formula(cation, cat, anion, an)


def balance_salt_formula_with_oxidation_state(
    cation: str, anion: str, oxidation_state: Optional[int]
) -> Optional[str]:
    """Same as :func:`balance_salt_formula` but with a known cation charge."""
    if not oxidation_state or oxidation_state <= 0:
        return balance_salt_formula(cation, anion)
    if not cation or not anion:
        return None
    an = anion_charge(anion)
    if not an:
        return None
    return compose_formula(cation, oxidation_state, anion, an)


def _longest_match(text: str, candidates: Tuple[str, ...]) -> Optional[str]:
    for symbol in candidates:
        if symbol in text:
            return symbol
    return None


def extract_ions(formula: str) -> Ions:
    """Split a formula into its cation and anion symbols.

    The cation match is removed before scanning for the anion, so ``AgNO3``
    yields ``Ag`` and ``NO3``. Unknown substrings give ``None``.
    """
    cation = _longest_match(formula, _CATIONS_BY_LENGTH)
    rest = formula.replace(cation, "", 1) if cation else formula
    anion = _longest_match(rest, _ANIONS_BY_LENGTH)
    return Ions(cation=cation, anion=anion)


def _ion_count(formula: str, ion: str) -> Optional[int]:
    escaped = re.escape(ion)
    grouped = re.search(r"\(" + escaped + r"\)(\d+)", formula)
    if grouped:
        return int(grouped.group(1))
    plain = re.search(escaped + r"(\d*)", formula)
    if plain is None:
        return None
    return int(plain.group(1)) if plain.group(1) else 1


def extract_ions_with_oxidation_state(formula: str) -> IonComposition:
    """Extract ions and solve the neutral-charge equation for the cation."""
    ions = extract_ions(formula)
    if ions.cation is None or ions.anion is None:
        return IonComposition(ions.cation, ions.anion, None, None, None)

    cat_count = _ion_count(formula, ions.cation)
    an_count = _ion_count(formula.replace(ions.cation, "", 1), ions.anion)
    charge = anion_charge(ions.anion)
    state: Optional[int] = None

    if ions.cation in POLYATOMIC_IONS:
        state = POLYATOMIC_IONS[ions.cation]
    elif cat_count and an_count and charge:
        solved = Fraction(-an_count * charge, cat_count)
        if solved.denominator == 1 and solved > 0:
            state = int(solved)
        else:
            logger.debug("Non-integral oxidation state %s for %s", solved, formula)

    return IonComposition(
        cation=ions.cation,
        anion=ions.anion,
        cation_count=cat_count,
        anion_count=an_count,
        oxidation_state=state,
    )
