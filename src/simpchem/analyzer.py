"""Reaction analysis across the four compound families."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from simpchem.balancer import balance_equation
from simpchem.equations import ARROW, UNKNOWN_PRODUCTS, has_arrow, parse_reaction
from simpchem.errors import ReactionFormatError
from simpchem.handlers import HANDLERS, DomainHandler
from simpchem.models import Domain, ReactionInfo, ReactionResult
from simpchem.reactivity.base import describe_reactant

logger = logging.getLogger(__name__)

DEFAULT_HANDLER_ORDER: Tuple[Domain, ...] = (Domain.ACID, Domain.BASE, Domain.OXIDE, Domain.SALT)
# Order used when naming a single compound.
CLASSIFICATION_ORDER: Tuple[Domain, ...] = (Domain.ACID, Domain.OXIDE, Domain.BASE, Domain.SALT)

UNDETERMINED = "Unable to determine reaction type"


def _parse_domain(value: Any) -> Domain:
    if isinstance(value, Domain):
        return value
    try:
        return Domain(str(value).lower())
    except ValueError:
        raise ValueError(f"Unknown domain: {value}") from None


@dataclass(frozen=True)
class AnalyzerOptions:
    """Settings shared by every analysis run.

    Attributes:
        is_concentrated: Treat oxidizing acids (H2SO4, HNO3) as concentrated.
        handler_order: Domains to try, first possible result wins.
    """

    is_concentrated: bool = False
    handler_order: Tuple[Domain, ...] = DEFAULT_HANDLER_ORDER

    def __post_init__(self) -> None:
        order = tuple(_parse_domain(value) for value in self.handler_order)
        if not order:
            raise ValueError("handler_order must name at least one domain")
        object.__setattr__(self, "handler_order", order)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "AnalyzerOptions":
        return cls(
            is_concentrated=bool(data.get("is_concentrated", False)),
            handler_order=tuple(data.get("handler_order", DEFAULT_HANDLER_ORDER)),
        )


@dataclass(frozen=True)
class CompoundInfo:
    formula: str
    domain: Optional[Domain]
    name: str
    classification: Any = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "formula": self.formula,
            "type": self.domain.value if self.domain else "unknown",
            "name": self.name,
            "info": self.classification.to_dict() if self.classification else None,
        }


class ReactionAnalyzer:
    """Delegates a reaction string to the domain handlers in priority order."""

    def __init__(
        self,
        options: AnalyzerOptions | None = None,
        handlers: Mapping[Domain, DomainHandler] = HANDLERS,
    ):
        self.options = options or AnalyzerOptions()
        self.handlers = handlers

    def _is_member(self, domain: Domain, handler: DomainHandler, formula: str) -> bool:
        try:
            return handler.is_member(formula)
        except Exception:
            logger.exception("%s membership check failed on %r", domain.value, formula)
            return False

    def identify_domains(self, compounds: Iterable[str]) -> Dict[str, bool]:
        compounds = list(compounds)
        return {
            domain.value: any(self._is_member(domain, handler, c) for c in compounds)
            for domain, handler in self.handlers.items()
        }

    def analyze_reaction(
        self, reaction: str, options: AnalyzerOptions | None = None
    ) -> ReactionResult:
        options = options or self.options
        try:
            parsed = parse_reaction(reaction)
        except ReactionFormatError as exc:
            return ReactionResult(valid=False, error=str(exc))

        first_rejection: ReactionResult | None = None
        for domain in options.handler_order:
            handler = self.handlers[domain]
            try:
                result = handler.analyze_reaction(reaction, options.is_concentrated)
            except Exception:
                logger.exception("%s handler failed on %r", domain.value, reaction)
                continue
            if result.possible:
                return result
            logger.debug("%s handler: %s", domain.value, result.error)
            if first_rejection is None and result.reactant_types:
                first_rejection = result

        detected = self.identify_domains(parsed.reactants)
        if first_rejection is not None:
            return dataclasses.replace(first_rejection, domain=None, detected_domains=detected)
        return ReactionResult(
            valid=False,
            error=UNDETERMINED,
            reactants=parsed.reactants,
            given_products=parsed.products,
            reactant_types={f: describe_reactant(f) for f in parsed.reactants},
            detected_domains=detected,
        )

    def is_possible(self, reaction: str, options: AnalyzerOptions | None = None) -> bool:
        return self.analyze_reaction(reaction, options).possible

    def predict_products(
        self, reaction: str, options: AnalyzerOptions | None = None
    ) -> Optional[List[str]]:
        """Products for a reaction string; the arrow and products are optional."""
        if not has_arrow(reaction):
            reaction = f"{reaction} {ARROW} {UNKNOWN_PRODUCTS}"
        result = self.analyze_reaction(reaction, options)
        return list(result.predicted_products) if result.possible else None

    def get_compound_info(self, formula: str) -> CompoundInfo:
        for domain in CLASSIFICATION_ORDER:
            handler = self.handlers[domain]
            if handler.is_member(formula):
                return CompoundInfo(
                    formula=formula,
                    domain=domain,
                    name=handler.describe(formula),
                    classification=handler.classify(formula),
                )
        return CompoundInfo(formula=formula, domain=None, name="Unknown")

    def balance(self, reaction: str) -> Optional[str]:
        return balance_equation(reaction)


_DEFAULT = ReactionAnalyzer()


def classify(formula: str) -> Any:
    """Classification dataclass for ``formula``, or ``None`` if unrecognized."""
    return _DEFAULT.get_compound_info(formula).classification


def get_reaction_info(first: str, second: str, is_concentrated: bool = False) -> Optional[ReactionInfo]:
    for domain in DEFAULT_HANDLER_ORDER:
        info = HANDLERS[domain].get_reaction_info(first, second, is_concentrated)
        if info is not None:
            return info
    return None


def can_react(first: str, second: str, is_concentrated: bool = False) -> bool:
    return get_reaction_info(first, second, is_concentrated) is not None


def predict_products(first: str, second: str, is_concentrated: bool = False) -> Optional[List[str]]:
    info = get_reaction_info(first, second, is_concentrated)
    return list(info.products) if info else None


def analyze_reaction(reaction: str, is_concentrated: bool = False) -> ReactionResult:
    return _DEFAULT.analyze_reaction(reaction, AnalyzerOptions(is_concentrated=is_concentrated))


def analyze_many(
    reactions: Sequence[str], options: AnalyzerOptions | None = None
) -> List[ReactionResult]:
    analyzer = ReactionAnalyzer(options)
    return [analyzer.analyze_reaction(reaction) for reaction in reactions]
