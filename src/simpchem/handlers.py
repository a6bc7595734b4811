"""One generic handler per compound family.

A :class:`DomainHandler` binds a membership test, a classifier, a category
extractor and a rule table. Every public method returns a value; errors raised
inside a rule are logged and reported in the result.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Sequence, Tuple

from simpchem.compounds.acids import classify_acid, describe_acid, is_acid
from simpchem.compounds.bases import classify_base, describe_base, is_base
from simpchem.compounds.oxides import classify_oxide, describe_oxide, is_oxide
from simpchem.compounds.salts import classify_salt, describe_salt, is_salt
from simpchem.equations import parse_reaction
from simpchem.errors import ReactionFormatError
from simpchem.models import Domain, ReactionInfo, ReactionResult, RuleTable
from simpchem.reactivity import acids as acid_rules
from simpchem.reactivity import bases as base_rules
from simpchem.reactivity import oxides as oxide_rules
from simpchem.reactivity import salts as salt_rules
from simpchem.reactivity.base import HEAT, WATER, describe_reactant, resolve

logger = logging.getLogger(__name__)

CategoryExtractor = Callable[[str, bool], Tuple[Enum, ...]]

NO_REACTION = "No reaction occurs between these compounds"
TOO_MANY_REACTANTS = "Complex reactions with more than 2 reactants not yet supported"


def products_match(predicted: Sequence[str], given: Sequence[str]) -> bool:
    """Compare product lists as multisets."""
    if not predicted or not given:
        return False
    return Counter(predicted) == Counter(given)


@dataclass(frozen=True)
class DomainHandler:
    domain: Domain
    membership: Callable[[str], bool]
    classifier: Callable[[str], Any]
    categories: CategoryExtractor
    table: RuleTable
    describe: Callable[[str], str]

    def is_member(self, formula: str) -> bool:
        return self.membership(formula)

    def classify(self, formula: str) -> Any:
        return self.classifier(formula)

    def type_name(self, formula: str) -> str:
        if formula != WATER and self.is_member(formula):
            return self.describe(formula)
        return describe_reactant(formula)

    def _lookup(self, first: str, second: str, is_concentrated: bool) -> Optional[ReactionInfo]:
        for subject, other in ((first, second), (second, first)):
            if not self.is_member(subject):
                continue
            info = resolve(self.table, self.categories(subject, is_concentrated), subject, other)
            if info is not None:
                return info
        return None

    def get_reaction_info(
        self, first: str, second: str, is_concentrated: bool = False
    ) -> Optional[ReactionInfo]:
        """First possible rule with either reactant as the subject."""
        try:
            return self._lookup(first, second, is_concentrated)
        except Exception:
            logger.exception("%s rules failed for %s + %s", self.domain.value, first, second)
            return None

    def can_react(self, first: str, second: str, is_concentrated: bool = False) -> bool:
        return self.get_reaction_info(first, second, is_concentrated) is not None

    def predict_products(
        self, first: str, second: str, is_concentrated: bool = False
    ) -> Optional[Tuple[str, ...]]:
        info = self.get_reaction_info(first, second, is_concentrated)
        return info.products if info else None

    def analyze_reaction(self, reaction: str, is_concentrated: bool = False) -> ReactionResult:
        try:
            parsed = parse_reaction(reaction)
        except ReactionFormatError as exc:
            return ReactionResult(valid=False, error=str(exc), domain=self.domain)

        reactants, given = parsed.reactants, parsed.products
        common = dict(reactants=reactants, given_products=given, domain=self.domain)

        if not any(self.is_member(r) for r in reactants):
            return ReactionResult(
                valid=False, error=f"No {self.domain.value} found in reactants", **common
            )
        reactant_types = {formula: self.type_name(formula) for formula in reactants}
        if len(reactants) > 2:
            return ReactionResult(
                valid=False, error=TOO_MANY_REACTANTS, reactant_types=reactant_types, **common
            )

        pair = (reactants[0], HEAT) if len(reactants) == 1 else reactants
        try:
            info = self._lookup(pair[0], pair[1], is_concentrated)
        except Exception:
            logger.exception("%s rules failed for %r", self.domain.value, reaction)
            return ReactionResult(
                valid=False,
                error=f"Internal error while applying {self.domain.value} rules",
                reactant_types=reactant_types,
                **common,
            )

        if info is None:
            return ReactionResult(
                valid=False, error=NO_REACTION, reactant_types=reactant_types, **common
            )
        return ReactionResult(
            valid=True,
            possible=True,
            predicted_products=info.products,
            reaction_type=info.reaction_type,
            conditions=info.conditions,
            reactant_types=reactant_types,
            products_match=products_match(info.products, given),
            **common,
        )


def _ignoring_concentration(categories_of: Callable[[str], Tuple[Enum, ...]]) -> CategoryExtractor:
    def categories(formula: str, is_concentrated: bool = False) -> Tuple[Enum, ...]:
        return categories_of(formula)
    return categories


ACID_HANDLER = DomainHandler(
    domain=Domain.ACID,
    membership=is_acid,
    classifier=classify_acid,
    categories=acid_rules.categories_of,
    table=acid_rules.ACID_REACTIONS,
    describe=describe_acid,
)

BASE_HANDLER = DomainHandler(
    domain=Domain.BASE,
    membership=is_base,
    classifier=classify_base,
    categories=_ignoring_concentration(base_rules.categories_of),
    table=base_rules.BASE_REACTIONS,
    describe=describe_base,
)

OXIDE_HANDLER = DomainHandler(
    domain=Domain.OXIDE,
    membership=is_oxide,
    classifier=classify_oxide,
    categories=_ignoring_concentration(oxide_rules.categories_of),
    table=oxide_rules.OXIDE_REACTIONS,
    describe=describe_oxide,
)

SALT_HANDLER = DomainHandler(
    domain=Domain.SALT,
    membership=is_salt,
    classifier=classify_salt,
    categories=_ignoring_concentration(salt_rules.categories_of),
    table=salt_rules.SALT_REACTIONS,
    describe=describe_salt,
)

HANDLERS = {
    Domain.ACID: ACID_HANDLER,
    Domain.BASE: BASE_HANDLER,
    Domain.OXIDE: OXIDE_HANDLER,
    Domain.SALT: SALT_HANDLER,
}
