"""Reaction rules for acids."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Tuple

from simpchem.compounds.acids import AcidStrength, classify_acid_by_strength
from simpchem.ions import extract_ions
from simpchem.models import Counterpart, Fixed, Predicate, ReactionInfo, ReactionRule, ReactionType
from simpchem.reactivity.base import (
    HEATING,
    ROOM_TEMPERATURE,
    acid_anion,
    base_parts,
    displace_with_acid,
    displaces_hydrogen,
    oxide_parts,
    resolve,
    salt_from,
)


class AcidBucket(str, Enum):
    STRONG = "strong"
    MODERATE = "moderate"
    WEAK = "weak"
    CONCENTRATED = "concentrated"


OXIDIZING_ACIDS = frozenset({"H2SO4", "HNO3"})
# Metals below hydrogen that still dissolve in hot concentrated oxidizing acids.
CONCENTRATED_ACID_METALS = frozenset({"Cu", "Ag", "Hg", "Pb"})
# Weak acids are only attacked by these.
REACTIVE_METALS = frozenset({"Na", "K", "Li", "Ca", "Mg", "Al", "Zn", "Fe"})

VOLATILE_ANIONS: Mapping[AcidBucket, frozenset] = MappingProxyType(
    {
        AcidBucket.STRONG: frozenset({"CO3", "HCO3", "SO3", "HSO3", "S", "NO2"}),
        AcidBucket.MODERATE: frozenset({"CO3", "HCO3", "S"}),
        AcidBucket.WEAK: frozenset({"CO3", "HCO3"}),
    }
)

THERMAL_DECOMPOSITION: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "H2SiO3": ("H2O", "SiO2"),
        "HNO3": ("NO2", "H2O", "O2"),
        "H2S": ("H2", "S"),
        "H2CO3": ("H2O", "CO2"),
        "H2SO3": ("H2O", "SO2"),
    }
)

_STRENGTH_BUCKETS = {
    AcidStrength.STRONG: AcidBucket.STRONG,
    AcidStrength.MODERATE: AcidBucket.MODERATE,
    AcidStrength.WEAK: AcidBucket.WEAK,
}


def categories_of(acid: str, is_concentrated: bool = False) -> Tuple[AcidBucket, ...]:
    """Rule rows to try for ``acid``, most specific first."""
    strength = _STRENGTH_BUCKETS[classify_acid_by_strength(acid)]
    if is_concentrated and acid in OXIDIZING_ACIDS:
        return (AcidBucket.CONCENTRATED, strength)
    return (strength,)


def _metal_salt(acid: str, metal: str) -> Optional[Sequence[str]]:
    return [salt_from(metal, acid_anion(acid), context=acid), "H2"]


def _concentrated_metal(acid: str, metal: str) -> Optional[Sequence[str]]:
    if acid == "H2SO4":
        return [salt_from(metal, "SO4", context=acid), "SO2", "H2O"]
    return [salt_from(metal, "NO3", context=acid), "NO2", "H2O"]


def _with_base(acid: str, base: str) -> Optional[Sequence[str]]:
    metal, state = base_parts(base)
    return [salt_from(metal, acid_anion(acid), state), "H2O"]


def _with_oxide(acid: str, oxide: str) -> Optional[Sequence[str]]:
    metal, state = oxide_parts(oxide)
    return [salt_from(metal, acid_anion(acid), state), "H2O"]


def _decompose(acid: str, heat: str) -> Optional[Sequence[str]]:
    return THERMAL_DECOMPOSITION.get(acid)


def _releases_volatile(bucket: AcidBucket):
    volatile = VOLATILE_ANIONS[bucket]
    return Predicate(lambda acid, salt: extract_ions(salt).anion in volatile)


def _row(bucket: AcidBucket, metal_check) -> Mapping[Counterpart, ReactionRule]:
    neutralization = dict(reaction_type=ReactionType.NEUTRALIZATION, conditions=ROOM_TEMPERATURE)
    return MappingProxyType(
        {
            Counterpart.METAL: ReactionRule(
                possible=Predicate(metal_check),
                products=_metal_salt,
                reaction_type=ReactionType.SINGLE_REPLACEMENT,
                conditions=ROOM_TEMPERATURE,
            ),
            Counterpart.BASE: ReactionRule(Fixed(True), _with_base, **neutralization),
            Counterpart.BASIC_OXIDE: ReactionRule(Fixed(True), _with_oxide, **neutralization),
            Counterpart.AMPHOTERIC_OXIDE: ReactionRule(Fixed(True), _with_oxide, **neutralization),
            Counterpart.SALT: ReactionRule(
                possible=_releases_volatile(bucket),
                products=displace_with_acid,
                reaction_type=ReactionType.DOUBLE_REPLACEMENT,
                conditions=ROOM_TEMPERATURE,
            ),
            Counterpart.HEAT: ReactionRule(
                possible=Predicate(lambda acid, heat: acid in THERMAL_DECOMPOSITION),
                products=_decompose,
                reaction_type=ReactionType.DECOMPOSITION,
                conditions=HEATING,
            ),
        }
    )


ACID_REACTIONS = MappingProxyType(
    {
        AcidBucket.STRONG: _row(AcidBucket.STRONG, lambda acid, metal: displaces_hydrogen(metal)),
        AcidBucket.MODERATE: _row(AcidBucket.MODERATE, lambda acid, metal: displaces_hydrogen(metal)),
        AcidBucket.WEAK: _row(
            AcidBucket.WEAK,
            lambda acid, metal: displaces_hydrogen(metal) and metal in REACTIVE_METALS,
        ),
        AcidBucket.CONCENTRATED: MappingProxyType(
            {
                Counterpart.METAL: ReactionRule(
                    possible=Predicate(lambda acid, metal: metal in CONCENTRATED_ACID_METALS),
                    products=_concentrated_metal,
                    reaction_type=ReactionType.REDOX,
                    conditions=("concentrated acid", "heating"),
                ),
            }
        ),
    }
)


def get_reaction_info(acid: str, other: str, is_concentrated: bool = False) -> Optional[ReactionInfo]:
    return resolve(ACID_REACTIONS, categories_of(acid, is_concentrated), acid, other)


def can_react(acid: str, other: str, is_concentrated: bool = False) -> bool:
    return get_reaction_info(acid, other, is_concentrated) is not None


def predict_products(acid: str, other: str, is_concentrated: bool = False) -> Optional[Tuple[str, ...]]:
    info = get_reaction_info(acid, other, is_concentrated)
    return info.products if info else None

