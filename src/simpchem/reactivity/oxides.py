"""Reaction rules for oxides, keyed by :class:`OxideCategory`."""

from __future__ import annotations

from types import MappingProxyType
from typing import Optional, Sequence, Tuple

from simpchem.compounds.oxides import (
    OxideCategory,
    classify_oxide_category,
    get_corresponding_acid,
    get_corresponding_hydroxide,
)
from simpchem.elements import is_metal
from simpchem.models import Counterpart, Fixed, Predicate, ReactionInfo, ReactionRule, ReactionType
from simpchem.reactivity.base import (
    HEATING,
    ROOM_TEMPERATURE,
    acid_anion,
    base_parts,
    complex_salt,
    hydroxide_of,
    hydroxide_oxysalt,
    oxide_parts,
    oxysalt,
    resolve,
    salt_from,
    swap,
)

# Silica does not dissolve in water.
INSOLUBLE_ACIDIC_OXIDES = frozenset({"SiO2"})

EXCESS_BASE = ROOM_TEMPERATURE + ("excess base",)


def categories_of(oxide: str) -> Tuple[OxideCategory, ...]:
    category = classify_oxide_category(oxide)
    return (category,) if category is not None else ()


def _hydrate_basic(oxide: str, water: str) -> Optional[Sequence[str]]:
    return [get_corresponding_hydroxide(oxide)]


def _hydrate_acidic(oxide: str, water: str) -> Optional[Sequence[str]]:
    return [get_corresponding_acid(oxide)]


def _with_acid(oxide: str, acid: str) -> Optional[Sequence[str]]:
    metal, state = oxide_parts(oxide)
    return [salt_from(metal, acid_anion(acid), state), "H2O"]


def _with_acidic_oxide(oxide: str, acidic_oxide: str) -> Optional[Sequence[str]]:
    return [oxysalt(oxide, acidic_oxide)]


def _complex_with_oxide(amphoteric: str, basic: str) -> Optional[Sequence[str]]:
    metal, state = oxide_parts(basic)
    element, valence = oxide_parts(amphoteric)
    if not metal or not element:
        return None
    return [complex_salt(metal, state, element, valence)]


def _complex_with_base(amphoteric: str, base: str) -> Optional[Sequence[str]]:
    metal, state = base_parts(base)
    element, valence = oxide_parts(amphoteric)
    if not metal or not element:
        return None
    return [complex_salt(metal, state, element, valence), "H2O"]


def _acidic_with_base(oxide: str, base: str) -> Optional[Sequence[str]]:
    return [hydroxide_oxysalt(base, oxide), "H2O"]


def _peroxide_with_acid(peroxide: str, acid: str) -> Optional[Sequence[str]]:
    metal, state = oxide_parts(peroxide)
    return ["H2O2", salt_from(metal, acid_anion(acid), state)]


def _peroxide_with_water(peroxide: str, water: str) -> Optional[Sequence[str]]:
    metal, state = oxide_parts(peroxide)
    return [hydroxide_of(metal, state), "H2O2"]


def _superoxide_with_water(superoxide: str, water: str) -> Optional[Sequence[str]]:
    metal, state = oxide_parts(superoxide)
    return [hydroxide_of(metal, state), "H2O2", "O2"]


def _metal_oxide(oxide: str, other: str) -> bool:
    element = oxide_parts(oxide)[0]
    return element is not None and is_metal(element)


_NEUTRALIZATION = ReactionRule(
    possible=Fixed(True),
    products=_with_acid,
    reaction_type=ReactionType.NEUTRALIZATION,
    conditions=ROOM_TEMPERATURE,
)

OXIDE_REACTIONS = MappingProxyType(
    {
        OxideCategory.BASIC: MappingProxyType(
            {
                Counterpart.WATER: ReactionRule(
                    possible=Fixed(True),
                    products=_hydrate_basic,
                    reaction_type=ReactionType.HYDRATION,
                    conditions=ROOM_TEMPERATURE,
                ),
                Counterpart.ACID: _NEUTRALIZATION,
                Counterpart.ACIDIC_OXIDE: ReactionRule(
                    possible=Fixed(True),
                    products=_with_acidic_oxide,
                    reaction_type=ReactionType.OXIDE_COMBINATION,
                    conditions=HEATING,
                ),
                Counterpart.AMPHOTERIC_OXIDE: ReactionRule(
                    possible=Fixed(True),
                    products=swap(_complex_with_oxide),
                    reaction_type=ReactionType.OXIDE_COMBINATION,
                    conditions=HEATING,
                ),
            }
        ),
        OxideCategory.AMPHOTERIC: MappingProxyType(
            {
                Counterpart.ACID: _NEUTRALIZATION,
                Counterpart.STRONG_BASE: ReactionRule(
                    possible=Fixed(True),
                    products=_complex_with_base,
                    reaction_type=ReactionType.COMPLEX_FORMATION,
                    conditions=EXCESS_BASE,
                ),
                Counterpart.BASIC_OXIDE: ReactionRule(
                    possible=Fixed(True),
                    products=_complex_with_oxide,
                    reaction_type=ReactionType.OXIDE_COMBINATION,
                    conditions=HEATING,
                ),
                Counterpart.ACIDIC_OXIDE: ReactionRule(
                    possible=Fixed(True),
                    products=_with_acidic_oxide,
                    reaction_type=ReactionType.SALT_FORMATION,
                    conditions=HEATING,
                ),
            }
        ),
        OxideCategory.ACIDIC: MappingProxyType(
            {
                Counterpart.WATER: ReactionRule(
                    possible=Predicate(
                        lambda oxide, water: oxide not in INSOLUBLE_ACIDIC_OXIDES
                        and get_corresponding_acid(oxide) is not None
                    ),
                    products=_hydrate_acidic,
                    reaction_type=ReactionType.HYDRATION,
                    conditions=ROOM_TEMPERATURE,
                ),
                Counterpart.BASE: ReactionRule(
                    possible=Fixed(True),
                    products=_acidic_with_base,
                    reaction_type=ReactionType.NEUTRALIZATION,
                    conditions=ROOM_TEMPERATURE,
                ),
                Counterpart.BASIC_OXIDE: ReactionRule(
                    possible=Fixed(True),
                    products=swap(_with_acidic_oxide),
                    reaction_type=ReactionType.OXIDE_COMBINATION,
                    conditions=HEATING,
                ),
                Counterpart.AMPHOTERIC_OXIDE: ReactionRule(
                    possible=Fixed(True),
                    products=swap(_with_acidic_oxide),
                    reaction_type=ReactionType.SALT_FORMATION,
                    conditions=HEATING,
                ),
                Counterpart.ACIDIC_OXIDE: ReactionRule.never(),
                Counterpart.INDIFFERENT_OXIDE: ReactionRule.never(),
            }
        ),
        # Indifferent oxides form neither salts nor hydrates.
        OxideCategory.INDIFFERENT: MappingProxyType({}),
        OxideCategory.PEROXIDE: MappingProxyType(
            {
                Counterpart.ACID: ReactionRule(
                    possible=Predicate(_metal_oxide),
                    products=_peroxide_with_acid,
                    reaction_type=ReactionType.DOUBLE_REPLACEMENT,
                    conditions=ROOM_TEMPERATURE,
                ),
                Counterpart.WATER: ReactionRule(
                    possible=Predicate(_metal_oxide),
                    products=_peroxide_with_water,
                    reaction_type=ReactionType.HYDRATION,
                    conditions=ROOM_TEMPERATURE,
                ),
            }
        ),
        OxideCategory.SUPEROXIDE: MappingProxyType(
            {
                Counterpart.WATER: ReactionRule(
                    possible=Fixed(True),
                    products=_superoxide_with_water,
                    reaction_type=ReactionType.DECOMPOSITION,
                    conditions=ROOM_TEMPERATURE,
                ),
            }
        ),
    }
)


def get_reaction_info(oxide: str, other: str) -> Optional[ReactionInfo]:
    return resolve(OXIDE_REACTIONS, categories_of(oxide), oxide, other)


def can_react(oxide: str, other: str) -> bool:
    return get_reaction_info(oxide, other) is not None


def predict_products(oxide: str, other: str) -> Optional[Tuple[str, ...]]:
    info = get_reaction_info(oxide, other)
    return info.products if info else None
