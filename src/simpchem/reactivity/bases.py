"""Reaction rules for bases (hydroxides)."""

from __future__ import annotations

from types import MappingProxyType
from typing import Optional, Sequence, Tuple

from simpchem.compounds.bases import BaseStrength, determine_strength
from simpchem.ions import extract_ions
from simpchem.models import Counterpart, Fixed, Predicate, ReactionInfo, ReactionRule, ReactionType
from simpchem.reactivity.base import (
    HEATING,
    ROOM_TEMPERATURE,
    acid_anion,
    base_parts,
    complex_salt,
    hydroxide_oxysalt,
    hydroxide_of,
    oxide_parts,
    oxide_of,
    resolve,
    salt_from,
    salt_parts,
)

# Cations whose hydroxides precipitate from a strong base.
PRECIPITATING_CATIONS = frozenset({"Fe", "Cu", "Zn", "Ni", "Co", "Mn", "Cr", "Cd", "Hg", "Pb"})
# Halogens that disproportionate into halide and hypohalite.
DISPROPORTIONATING_HALOGENS = frozenset({"Cl2", "Br2", "I2"})

EXCESS_BASE = ROOM_TEMPERATURE + ("excess base",)


def categories_of(base: str) -> Tuple[BaseStrength, ...]:
    return (determine_strength(base),)


def _with_acid(base: str, acid: str) -> Optional[Sequence[str]]:
    metal, state = base_parts(base)
    return [salt_from(metal, acid_anion(acid), state), "H2O"]


def _with_acidic_oxide(base: str, oxide: str) -> Optional[Sequence[str]]:
    return [hydroxide_oxysalt(base, oxide), "H2O"]


def _with_amphoteric_oxide(base: str, oxide: str) -> Optional[Sequence[str]]:
    metal, state = base_parts(base)
    element, valence = oxide_parts(oxide)
    if not metal or not element:
        return None
    return [complex_salt(metal, state, element, valence), "H2O"]


def _with_amphoteric_hydroxide(base: str, hydroxide: str) -> Optional[Sequence[str]]:
    metal, state = base_parts(base)
    element, valence = base_parts(hydroxide)
    if not metal or not element:
        return None
    return [complex_salt(metal, state, element, valence), "H2O"]


def _dissolve_in_strong_base(hydroxide: str, base: str) -> Optional[Sequence[str]]:
    return _with_amphoteric_hydroxide(base, hydroxide)


def _precipitate(base: str, salt: str) -> Optional[Sequence[str]]:
    cation, anion, cation_state = salt_parts(salt)
    metal, state = base_parts(base)
    return [hydroxide_of(cation, cation_state), salt_from(metal, anion, state)]


def _with_halogen(base: str, halogen: str) -> Optional[Sequence[str]]:
    metal, state = base_parts(base)
    element = halogen[:-1]
    return [salt_from(metal, element, state), salt_from(metal, f"{element}O", state), "H2O"]


def _decompose(base: str, heat: str) -> Optional[Sequence[str]]:
    if base == "NH4OH":
        return ["NH3", "H2O"]
    metal, state = base_parts(base)
    return [oxide_of(metal, state), "H2O"]


_NEUTRALIZATION = ReactionRule(
    possible=Fixed(True),
    products=_with_acid,
    reaction_type=ReactionType.NEUTRALIZATION,
    conditions=ROOM_TEMPERATURE,
)
_ACIDIC_OXIDE = ReactionRule(
    possible=Fixed(True),
    products=_with_acidic_oxide,
    reaction_type=ReactionType.NEUTRALIZATION,
    conditions=ROOM_TEMPERATURE,
)
_DECOMPOSITION = ReactionRule(
    possible=Fixed(True),
    products=_decompose,
    reaction_type=ReactionType.DECOMPOSITION,
    conditions=HEATING,
)

BASE_REACTIONS = MappingProxyType(
    {
        BaseStrength.STRONG: MappingProxyType(
            {
                Counterpart.ACID: _NEUTRALIZATION,
                Counterpart.ACIDIC_OXIDE: _ACIDIC_OXIDE,
                Counterpart.AMPHOTERIC_OXIDE: ReactionRule(
                    possible=Fixed(True),
                    products=_with_amphoteric_oxide,
                    reaction_type=ReactionType.COMPLEX_FORMATION,
                    conditions=EXCESS_BASE,
                ),
                Counterpart.AMPHOTERIC_HYDROXIDE: ReactionRule(
                    possible=Fixed(True),
                    products=_with_amphoteric_hydroxide,
                    reaction_type=ReactionType.COMPLEX_FORMATION,
                    conditions=EXCESS_BASE,
                ),
                Counterpart.SALT: ReactionRule(
                    possible=Predicate(
                        lambda base, salt: extract_ions(salt).cation in PRECIPITATING_CATIONS
                    ),
                    products=_precipitate,
                    reaction_type=ReactionType.DOUBLE_REPLACEMENT,
                    conditions=ROOM_TEMPERATURE,
                ),
                Counterpart.NON_METAL: ReactionRule(
                    possible=Predicate(
                        lambda base, other: other in DISPROPORTIONATING_HALOGENS
                    ),
                    products=_with_halogen,
                    reaction_type=ReactionType.REDOX,
                    conditions=ROOM_TEMPERATURE,
                ),
            }
        ),
        BaseStrength.WEAK: MappingProxyType(
            {
                Counterpart.ACID: _NEUTRALIZATION,
                Counterpart.ACIDIC_OXIDE: _ACIDIC_OXIDE,
                Counterpart.HEAT: _DECOMPOSITION,
            }
        ),
        BaseStrength.AMPHOTERIC: MappingProxyType(
            {
                Counterpart.ACID: _NEUTRALIZATION,
                Counterpart.STRONG_BASE: ReactionRule(
                    possible=Fixed(True),
                    products=_dissolve_in_strong_base,
                    reaction_type=ReactionType.COMPLEX_FORMATION,
                    conditions=EXCESS_BASE,
                ),
                Counterpart.HEAT: _DECOMPOSITION,
            }
        ),
    }
)


def get_reaction_info(base: str, other: str) -> Optional[ReactionInfo]:
    return resolve(BASE_REACTIONS, categories_of(base), base, other)


def can_react(base: str, other: str) -> bool:
    return get_reaction_info(base, other) is not None


def predict_products(base: str, other: str) -> Optional[Tuple[str, ...]]:
    info = get_reaction_info(base, other)
    return info.products if info else None
