"""Data structures shared by classifiers, rule tables and handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Sequence, Tuple, Union


class Domain(str, Enum):
    ACID = "acid"
    BASE = "base"
    OXIDE = "oxide"
    SALT = "salt"


class ReactionType(str, Enum):
    NEUTRALIZATION = "neutralization"
    DECOMPOSITION = "decomposition"
    SINGLE_REPLACEMENT = "single_replacement"
    DOUBLE_REPLACEMENT = "double_replacement"
    REDOX = "redox"
    COMPLEX_FORMATION = "complex_formation"
    HYDRATION = "hydration"
    OXIDE_COMBINATION = "oxide_combination"
    SALT_FORMATION = "salt_formation"
    NO_REACTION = "no_reaction"


class Counterpart(str, Enum):
    """What the second reactant is, as seen from the subject compound."""

    METAL = "metal"
    NON_METAL = "non_metal"
    WATER = "water"
    HEAT = "heat"
    ACID = "acid"
    BASE = "base"
    STRONG_BASE = "strong_base"
    AMPHOTERIC_HYDROXIDE = "amphoteric_hydroxide"
    BASIC_OXIDE = "basic_oxide"
    ACIDIC_OXIDE = "acidic_oxide"
    AMPHOTERIC_OXIDE = "amphoteric_oxide"
    INDIFFERENT_OXIDE = "indifferent_oxide"
    PEROXIDE = "peroxide"
    SUPEROXIDE = "superoxide"
    SALT = "salt"
    UNKNOWN = "unknown"

    @property
    def lineage(self) -> Tuple["Counterpart", ...]:
        """Kinds to try in a rule table, most specific first."""
        parent = _PARENT_KIND.get(self)
        if parent is None:
            return (self,)
        return (self, parent)


_PARENT_KIND = {
    Counterpart.STRONG_BASE: Counterpart.BASE,
    Counterpart.AMPHOTERIC_HYDROXIDE: Counterpart.BASE,
}


@dataclass(frozen=True)
class Fixed:
    value: bool


@dataclass(frozen=True)
class Predicate:
    check: Callable[[str, str], bool]


PossibilityRule = Union[Fixed, Predicate]

ProductBuilder = Callable[[str, str], Union[Sequence[str], None]]


def evaluate_possibility(rule: PossibilityRule, subject: str, other: str) -> bool:
    """Resolve a possibility rule for a concrete pair of reactants."""
    if isinstance(rule, Fixed):
        return rule.value
    return bool(rule.check(subject, other))


def _no_products(subject: str, other: str) -> None:
    return None


@dataclass(frozen=True)
class ReactionRule:
    possible: PossibilityRule
    products: ProductBuilder = _no_products
    reaction_type: ReactionType = ReactionType.NO_REACTION
    conditions: Tuple[str, ...] = ()

    @classmethod
    def never(cls) -> "ReactionRule":
        return cls(possible=Fixed(False))


RuleTable = Mapping[Enum, Mapping[Counterpart, ReactionRule]]


@dataclass(frozen=True)
class ReactionInfo:
    """Outcome of a successful rule lookup for an ordered pair of reactants."""

    subject: str
    other: str
    category: str
    counterpart: Counterpart
    reaction_type: ReactionType
    products: Tuple[str, ...]
    conditions: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "subject": self.subject,
            "other": self.other,
            "category": self.category,
            "counterpart": self.counterpart.value,
            "reaction_type": self.reaction_type.value,
            "products": list(self.products),
            "conditions": list(self.conditions),
        }


@dataclass(frozen=True)
class ReactionResult:
    """Structured answer for a full reaction string.

    Every field is populated even when the reaction is rejected, so callers
    never have to handle exceptions from the analyzer.
    """

    valid: bool
    possible: bool = False
    reactants: Tuple[str, ...] = ()
    given_products: Tuple[str, ...] = ()
    predicted_products: Tuple[str, ...] = ()
    reaction_type: ReactionType = ReactionType.NO_REACTION
    conditions: Tuple[str, ...] = ()
    reactant_types: Mapping[str, str] = field(default_factory=dict)
    products_match: bool = False
    error: str | None = None
    domain: Domain | None = None
    detected_domains: Mapping[str, bool] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": self.valid,
            "possible": self.possible,
            "domain": self.domain.value if self.domain else None,
            "reactants": list(self.reactants),
            "given_products": list(self.given_products),
            "predicted_products": list(self.predicted_products),
            "reaction_type": self.reaction_type.value,
            "conditions": list(self.conditions),
            "reactant_types": dict(self.reactant_types),
            "products_match": self.products_match,
            "error": self.error,
            "detected_domains": dict(self.detected_domains),
        }
