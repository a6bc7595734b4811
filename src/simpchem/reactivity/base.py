"""Shared machinery for the reactivity rule tables.

Each domain module defines an enum of subject categories and a table
``Mapping[category, Mapping[Counterpart, ReactionRule]]``. This module detects
what kind of counterpart a formula is, walks the table and builds the common
product formulas (salts, oxides, hydroxides, complex salts).
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple

from simpchem.compounds.acids import ACID_RADICALS, describe_acid, extract_acid_radical, is_acid
from simpchem.compounds.bases import (
    BaseStrength,
    describe_base,
    determine_strength,
    extract_metal,
    get_hydroxide_count,
    is_base,
)
from simpchem.compounds.oxides import (
    OxideCategory,
    classify_oxide_category,
    describe_oxide,
    extract_main_element,
    get_corresponding_acid,
    integral_oxidation_state,
    is_oxide,
)
from simpchem.compounds.salts import describe_salt, is_salt
from simpchem.elements import is_metal, is_non_metal
from simpchem.ions import (
    balance_salt_formula,
    balance_salt_formula_with_oxidation_state,
    compose_formula,
    extract_ions,
    extract_ions_with_oxidation_state,
)
from simpchem.models import (
    Counterpart,
    ProductBuilder,
    ReactionInfo,
    ReactionRule,
    RuleTable,
    evaluate_possibility,
)

logger = logging.getLogger(__name__)

HEAT = "heat"
WATER = "H2O"

ROOM_TEMPERATURE = ("room temperature", "aqueous")
HEATING = ("heating",)

ACTIVITY_SERIES: Tuple[str, ...] = (
    "K", "Na", "Ca", "Mg", "Al", "Zn", "Fe", "Pb", "H", "Cu", "Ag", "Au",
)

DIATOMIC_NON_METALS = frozenset({"H2", "N2", "O2", "F2", "Cl2", "Br2", "I2"})

_OXIDE_KINDS = {
    OxideCategory.BASIC: Counterpart.BASIC_OXIDE,
    OxideCategory.ACIDIC: Counterpart.ACIDIC_OXIDE,
    OxideCategory.AMPHOTERIC: Counterpart.AMPHOTERIC_OXIDE,
    OxideCategory.INDIFFERENT: Counterpart.INDIFFERENT_OXIDE,
    OxideCategory.PEROXIDE: Counterpart.PEROXIDE,
    OxideCategory.SUPEROXIDE: Counterpart.SUPEROXIDE,
}

_BASE_KINDS = {
    BaseStrength.STRONG: Counterpart.STRONG_BASE,
    BaseStrength.AMPHOTERIC: Counterpart.AMPHOTERIC_HYDROXIDE,
    BaseStrength.WEAK: Counterpart.BASE,
}

# Products released when an acid attacks a salt of a weaker or volatile acid.
RELEASED_BY_ACID = {
    "CO3": ("H2O", "CO2"),
    "HCO3": ("H2O", "CO2"),
    "SO3": ("H2O", "SO2"),
    "HSO3": ("H2O", "SO2"),
    "S": ("H2S",),
    "NO2": ("HNO2",),
}

# Amphoteric metal -> complex anion formed with excess alkali.
COMPLEX_ANIONS = {"Al": "AlO2", "Zn": "ZnO2", "Be": "BeO2"}


def detect_counterpart(formula: str) -> Counterpart:
    """Decide which column of a rule table ``formula`` falls into."""
    if formula == HEAT:
        return Counterpart.HEAT
    if formula == WATER:
        return Counterpart.WATER
    if is_metal(formula):
        return Counterpart.METAL
    if formula in DIATOMIC_NON_METALS or is_non_metal(formula):
        return Counterpart.NON_METAL
    if is_acid(formula):
        return Counterpart.ACID
    if is_oxide(formula):
        category = classify_oxide_category(formula)
        if category is not None:
            return _OXIDE_KINDS[category]
    if is_base(formula):
        return _BASE_KINDS[determine_strength(formula)]
    if is_salt(formula):
        return Counterpart.SALT
    return Counterpart.UNKNOWN


def describe_reactant(formula: str) -> str:
    """Human-readable type of any reactant, including heat and water."""
    kind = detect_counterpart(formula)
    if kind is Counterpart.HEAT:
        return "Heat (Thermal Decomposition)"
    if kind is Counterpart.WATER:
        return "Water"
    if kind is Counterpart.METAL:
        return "Metal"
    if kind is Counterpart.NON_METAL:
        return "Non-metal"
    if kind is Counterpart.ACID:
        return describe_acid(formula)
    if kind is Counterpart.SALT:
        return describe_salt(formula)
    if kind is Counterpart.UNKNOWN:
        return "Unknown"
    if kind in (Counterpart.BASE, Counterpart.STRONG_BASE, Counterpart.AMPHOTERIC_HYDROXIDE):
        return describe_base(formula)
    return describe_oxide(formula)


def lookup_rule(table: RuleTable, category: Enum, kind: Counterpart) -> Optional[ReactionRule]:
    row = table.get(category, {})
    for candidate in kind.lineage:
        rule = row.get(candidate)
        if rule is not None:
            return rule
    return None


def resolve(
    table: RuleTable, categories: Iterable[Enum], subject: str, other: str
) -> Optional[ReactionInfo]:
    """First possible rule over ``categories`` for the ordered pair.

    A missing rule, a failed possibility check and a product builder that
    returns nothing all mean "no reaction".
    """
    kind = detect_counterpart(other)
    for category in categories:
        rule = lookup_rule(table, category, kind)
        if rule is None:
            logger.debug("No rule for %s/%s (%s + %s)", category.value, kind.value, subject, other)
            continue
        if not evaluate_possibility(rule.possible, subject, other):
            logger.debug("Rule %s/%s rejects %s + %s", category.value, kind.value, subject, other)
            continue
        products = rule.products(subject, other)
        if not products or any(p is None for p in products):
            logger.debug("No products for %s + %s", subject, other)
            continue
        return ReactionInfo(
            subject=subject,
            other=other,
            category=category.value,
            counterpart=kind,
            reaction_type=rule.reaction_type,
            products=tuple(products),
            conditions=rule.conditions,
        )
    return None


def activity_index(metal: str) -> Optional[int]:
    try:
        return ACTIVITY_SERIES.index(metal)
    except ValueError:
        return None


def displaces_hydrogen(metal: str) -> bool:
    index = activity_index(metal)
    return index is not None and index < ACTIVITY_SERIES.index("H")


def is_more_active(metal: str, other: str) -> bool:
    first, second = activity_index(metal), activity_index(other)
    return first is not None and second is not None and first < second


def salt_from(cation: Optional[str], anion: Optional[str], state: Optional[int] = None,
              context: Optional[str] = None) -> Optional[str]:
    if not cation or not anion:
        return None
    if state:
        return balance_salt_formula_with_oxidation_state(cation, anion, state)
    return balance_salt_formula(cation, anion, context)


def oxide_of(metal: Optional[str], state: Optional[int] = None) -> Optional[str]:
    return salt_from(metal, "O", state)


def hydroxide_of(metal: Optional[str], state: Optional[int] = None) -> Optional[str]:
    return salt_from(metal, "OH", state)


def acid_anion(acid: str) -> Optional[str]:
    return extract_acid_radical(acid) or extract_ions(acid).anion


def base_parts(base: str) -> Tuple[Optional[str], Optional[int]]:
    """Metal and oxidation state (hydroxide count) of a base."""
    metal = extract_metal(base)
    if metal == "NH4":
        return metal, 1
    return metal, get_hydroxide_count(base) or None


def oxide_parts(oxide: str) -> Tuple[Optional[str], Optional[int]]:
    category = classify_oxide_category(oxide)
    return extract_main_element(oxide), integral_oxidation_state(oxide, category)


def salt_parts(salt: str) -> Tuple[Optional[str], Optional[str], Optional[int]]:
    composition = extract_ions_with_oxidation_state(salt)
    return composition.cation, composition.anion, composition.oxidation_state


def oxide_radical(oxide: str) -> Optional[str]:
    """Acid radical of an acidic oxide, via its corresponding acid."""
    acid = get_corresponding_acid(oxide)
    if acid is None:
        return None
    return ACID_RADICALS.get(acid)


def complex_salt(cation: str, cation_state: Optional[int], metal: str,
                 valence: Optional[int]) -> Optional[str]:
    """Aluminate/zincate-style salt of an amphoteric metal.

    Al forms ``MAlO2`` and Zn forms ``M2ZnO2`` with monovalent cations; other
    metals use the ``M{v}XO{v}`` pattern.
    """
    anion = COMPLEX_ANIONS.get(metal)
    if anion is not None:
        return salt_from(cation, anion, cation_state)
    if not valence:
        return None
    return compose_formula(cation, cation_state or 1, f"{metal}O{valence}", -valence)


def heuristic_oxysalt(metal: str, metal_valence: int, non_metal: str,
                      non_metal_valence: int) -> str:
    """Approximate salt of two oxides built from their valences alone."""
    mv, nv = metal_valence, non_metal_valence
    if mv == 1 and nv == 1:
        return f"{metal}{non_metal}O2"
    if mv == 2 and nv == 1:
        return f"{metal}({non_metal}O2)2"
    if mv == 1 and nv == 2:
        return f"{metal}2{non_metal}O3"
    if mv == 2 and nv == 2:
        return f"{metal}{non_metal}O3"
    if mv == 3 and nv == 2:
        return f"{metal}2({non_metal}O4)3"
    if mv == 2 and nv == 3:
        return f"{metal}3({non_metal}O4)2"
    lcm = math.lcm(mv, nv)
    mc, nc = lcm // mv, lcm // nv
    return f"{metal}{mc if mc > 1 else ''}{non_metal}{nc if nc > 1 else ''}O{mc + nc}"


def oxysalt(metal_oxide: str, acidic_oxide: str) -> Optional[str]:
    """Salt from a metal oxide and an acidic oxide.

    Uses the acidic oxide's acid radical when one is known, else the
    valence heuristic.
    """
    metal, state = oxide_parts(metal_oxide)
    radical = oxide_radical(acidic_oxide)
    if radical is not None:
        return salt_from(metal, radical, state)
    non_metal, nm_state = oxide_parts(acidic_oxide)
    if not metal or not state or not non_metal or not nm_state:
        return None
    return heuristic_oxysalt(metal, state, non_metal, nm_state)


def swap(builder: ProductBuilder) -> ProductBuilder:
    """Adapt a ``(a, b)`` product builder to be called as ``(b, a)``."""
    def swapped(subject: str, other: str) -> Optional[Sequence[str]]:
        return builder(other, subject)
    return swapped


def hydroxide_oxysalt(base: str, acidic_oxide: str) -> Optional[str]:
    """Salt from a hydroxide and an acidic oxide, e.g. ``NaOH`` + ``CO2``."""
    metal, state = base_parts(base)
    radical = oxide_radical(acidic_oxide)
    if radical is not None:
        return salt_from(metal, radical, state)
    element, element_state = oxide_parts(acidic_oxide)
    if not metal or not state or not element or not element_state:
        return None
    return heuristic_oxysalt(metal, state, element, element_state)


def displace_with_acid(acid: str, salt: str) -> Optional[Sequence[str]]:
    """New salt plus the gas or weak acid driven out of ``salt``."""
    cation, anion, state = salt_parts(salt)
    released = RELEASED_BY_ACID.get(anion or "")
    if released is None:
        return None
    return [salt_from(cation, acid_anion(acid), state), *released]
