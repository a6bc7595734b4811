"""Reaction rules for salts, keyed by :class:`SaltType`."""

from __future__ import annotations

from types import MappingProxyType
from typing import Optional, Sequence, Tuple

from simpchem.compounds.acids import AcidStrength, classify_acid_by_strength
from simpchem.compounds.salts import SaltType, classify_salt_by_type, pair_is_soluble, second_cation
from simpchem.ions import extract_ions
from simpchem.models import Counterpart, Fixed, Predicate, ReactionInfo, ReactionRule, ReactionType
from simpchem.reactivity.base import (
    HEATING,
    ROOM_TEMPERATURE,
    acid_anion,
    base_parts,
    displace_with_acid,
    hydroxide_of,
    is_more_active,
    oxide_of,
    resolve,
    salt_from,
    salt_parts,
    swap,
)

# Volatile anions that a strong acid drives out of a normal salt.
VOLATILE_ANIONS = frozenset({"CO3", "HCO3", "SO3", "S", "NO2"})
# Cations whose hydroxide precipitates when a salt meets a base.
INSOLUBLE_HYDROXIDE_CATIONS = frozenset({"Fe", "Cu", "Zn", "Pb", "Mg", "Ca", "Al", "Ni", "Co"})
# Precipitates recognised before the general solubility rules are consulted.
INSOLUBLE_PAIRS = frozenset(
    {(cation, anion) for cation in ("Ag", "Pb", "Hg") for anion in ("Cl", "Br", "I")}
    | {(cation, "SO4") for cation in ("Ba", "Sr", "Pb")}
)
# Nitrates that stop at the nitrite when heated.
NITRITE_FORMERS = frozenset({"Na", "K", "Rb", "Cs"})

# Hydrogen-bearing anion -> anion left once the hydrogen is neutralized.
NORMAL_ANIONS = MappingProxyType(
    {"HSO4": "SO4", "HSO3": "SO3", "HCO3": "CO3", "H2PO4": "HPO4", "HPO4": "PO4"}
)


def categories_of(salt: str) -> Tuple[SaltType, ...]:
    salt_type = classify_salt_by_type(salt)
    if salt_type is SaltType.DOUBLE:
        return (SaltType.DOUBLE, SaltType.NORMAL)
    return (salt_type,)


def _precipitates(cation: str, anion: str, state: Optional[int]) -> bool:
    if (cation, anion) in INSOLUBLE_PAIRS:
        return True
    return not pair_is_soluble(cation, anion, state)


def _exchange_forms_precipitate(salt: str, other: str) -> bool:
    cation1, anion1, state1 = salt_parts(salt)
    cation2, anion2, state2 = salt_parts(other)
    if not (cation1 and anion1 and cation2 and anion2):
        return False
    return _precipitates(cation1, anion2, state1) or _precipitates(cation2, anion1, state2)


def _exchange(salt: str, other: str) -> Optional[Sequence[str]]:
    cation1, anion1, state1 = salt_parts(salt)
    cation2, anion2, state2 = salt_parts(other)
    return [salt_from(cation1, anion2, state1), salt_from(cation2, anion1, state2)]


def _displace_metal(salt: str, metal: str) -> Optional[Sequence[str]]:
    cation, anion, _ = salt_parts(salt)
    return [salt_from(metal, anion, context=salt), cation]


def _with_base(salt: str, base: str) -> Optional[Sequence[str]]:
    cation, anion, state = salt_parts(salt)
    metal, base_state = base_parts(base)
    return [salt_from(metal, anion, base_state), hydroxide_of(cation, state)]


def _decompose_normal(salt: str, heat: str) -> Optional[Sequence[str]]:
    cation, anion, state = salt_parts(salt)
    if anion == "CO3":
        return [oxide_of(cation, state), "CO2"]
    if anion == "HCO3":
        return [salt_from(cation, "CO3", state), "H2O", "CO2"]
    if anion == "NO3":
        if cation in NITRITE_FORMERS:
            return [salt_from(cation, "NO2", state), "O2"]
        return [oxide_of(cation, state), "NO2", "O2"]
    if anion == "OH":
        return [oxide_of(cation, state), "H2O"]
    if anion == "SO4":
        return [oxide_of(cation, state), "SO3"]
    if anion in ("ClO3", "ClO4"):
        return [salt_from(cation, "Cl", state), "O2"]
    return None


def _neutralize_acidic(salt: str, base: str) -> Optional[Sequence[str]]:
    cation, anion, state = salt_parts(salt)
    normal = NORMAL_ANIONS.get(anion or "")
    if normal is None:
        return None
    metal, base_state = base_parts(base)
    products = [salt_from(cation, normal, state)]
    if metal != cation:
        products.append(salt_from(metal, normal, base_state))
    return products + ["H2O"]


def _decompose_acidic(salt: str, heat: str) -> Optional[Sequence[str]]:
    cation, anion, state = salt_parts(salt)
    if anion == "HCO3":
        return [salt_from(cation, "CO3", state), "H2O", "CO2"]
    if anion == "HSO4":
        return [salt_from(cation, "S2O7", state), "H2O"]
    if anion == "H2PO4":
        return [salt_from(cation, "PO3", state), "H2O"]
    return None


def _neutralize_basic(salt: str, acid: str) -> Optional[Sequence[str]]:
    cation = extract_ions(salt).cation
    return [salt_from(cation, acid_anion(acid)), "H2O"]


def _decompose_basic(salt: str, heat: str) -> Optional[Sequence[str]]:
    return [oxide_of(extract_ions(salt).cation), "H2O"]


def _split_double(salt: str, heat: str) -> Optional[Sequence[str]]:
    cation, anion, _ = salt_parts(salt)
    return [salt_from(cation, anion), salt_from(second_cation(salt), anion)]


def _anion_in(*anions: str) -> Predicate:
    return Predicate(lambda salt, other: extract_ions(salt).anion in anions)


NORMAL_SALT_REACTIONS = MappingProxyType(
    {
        Counterpart.METAL: ReactionRule(
            possible=Predicate(
                lambda salt, metal: is_more_active(metal, extract_ions(salt).cation or "")
            ),
            products=_displace_metal,
            reaction_type=ReactionType.SINGLE_REPLACEMENT,
            conditions=ROOM_TEMPERATURE,
        ),
        Counterpart.ACID: ReactionRule(
            possible=Predicate(
                lambda salt, acid: classify_acid_by_strength(acid) is AcidStrength.STRONG
                and extract_ions(salt).anion in VOLATILE_ANIONS
            ),
            products=swap(displace_with_acid),
            reaction_type=ReactionType.DOUBLE_REPLACEMENT,
            conditions=ROOM_TEMPERATURE,
        ),
        Counterpart.BASE: ReactionRule(
            possible=Predicate(
                lambda salt, base: extract_ions(salt).cation in INSOLUBLE_HYDROXIDE_CATIONS
            ),
            products=_with_base,
            reaction_type=ReactionType.DOUBLE_REPLACEMENT,
            conditions=ROOM_TEMPERATURE,
        ),
        Counterpart.SALT: ReactionRule(
            possible=Predicate(_exchange_forms_precipitate),
            products=_exchange,
            reaction_type=ReactionType.DOUBLE_REPLACEMENT,
            conditions=ROOM_TEMPERATURE,
        ),
        Counterpart.HEAT: ReactionRule(
            possible=_anion_in("CO3", "HCO3", "NO3", "OH", "SO4", "ClO3", "ClO4"),
            products=_decompose_normal,
            reaction_type=ReactionType.DECOMPOSITION,
            conditions=HEATING,
        ),
    }
)

SALT_REACTIONS = MappingProxyType(
    {
        SaltType.NORMAL: NORMAL_SALT_REACTIONS,
        SaltType.ACIDIC: MappingProxyType(
            {
                Counterpart.BASE: ReactionRule(
                    possible=Fixed(True),
                    products=_neutralize_acidic,
                    reaction_type=ReactionType.NEUTRALIZATION,
                    conditions=ROOM_TEMPERATURE,
                ),
                Counterpart.HEAT: ReactionRule(
                    possible=_anion_in("HCO3", "HSO4", "H2PO4"),
                    products=_decompose_acidic,
                    reaction_type=ReactionType.DECOMPOSITION,
                    conditions=HEATING,
                ),
            }
        ),
        SaltType.BASIC: MappingProxyType(
            {
                Counterpart.ACID: ReactionRule(
                    possible=Fixed(True),
                    products=_neutralize_basic,
                    reaction_type=ReactionType.NEUTRALIZATION,
                    conditions=ROOM_TEMPERATURE,
                ),
                Counterpart.HEAT: ReactionRule(
                    possible=Fixed(True),
                    products=_decompose_basic,
                    reaction_type=ReactionType.DECOMPOSITION,
                    conditions=HEATING,
                ),
            }
        ),
        # Everything except heating falls through to the normal-salt row.
        SaltType.DOUBLE: MappingProxyType(
            {
                Counterpart.HEAT: ReactionRule(
                    possible=Fixed(True),
                    products=_split_double,
                    reaction_type=ReactionType.DECOMPOSITION,
                    conditions=HEATING,
                ),
            }
        ),
        SaltType.MIXED: MappingProxyType({}),
    }
)


def get_reaction_info(salt: str, other: str) -> Optional[ReactionInfo]:
    return resolve(SALT_REACTIONS, categories_of(salt), salt, other)


def can_react(salt: str, other: str) -> bool:
    return get_reaction_info(salt, other) is not None


def predict_products(salt: str, other: str) -> Optional[Tuple[str, ...]]:
    info = get_reaction_info(salt, other)
    return info.products if info else None
