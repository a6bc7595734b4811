"""Parsing of reaction strings such as ``"2 H2 + O2 -> 2 H2O"``."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Tuple

from simpchem.errors import ReactionFormatError

ARROW = "->"
DISPLAY_ARROW = "→"
UNKNOWN_PRODUCTS = "?"

_ARROWS = re.compile(r"->|→")
_COEFFICIENT = re.compile(r"^(\d+)\s*(?=[A-Z(\[])")


@dataclass(frozen=True)
class ParsedReaction:
    reactants: Tuple[str, ...]
    products: Tuple[str, ...]

    @property
    def species(self) -> Tuple[str, ...]:
        return self.reactants + self.products


def strip_coefficient(term: str) -> str:
    """Drop a leading stoichiometric coefficient: ``"2 H2O"`` -> ``"H2O"``."""
    return _COEFFICIENT.sub("", term.strip(), count=1)


def _split_side(side: str) -> List[str]:
    terms = [strip_coefficient(term) for term in side.split("+")]
    if any(not term for term in terms):
        raise ReactionFormatError("Missing reactants or products")
    return terms


def parse_reaction(reaction: str, allow_unknown_products: bool = True) -> ParsedReaction:
    """Split a reaction string into reactant and product formulas.

    Both ``->`` and ``→`` are accepted as the arrow. A right-hand side of
    ``?`` means the products are unknown and yields an empty tuple.

    Raises:
        ReactionFormatError: if there is not exactly one arrow or a side is
            empty.
    """
    sides = _ARROWS.split(reaction)
    if len(sides) != 2:
        raise ReactionFormatError("Invalid reaction format")
    left, right = sides
    reactants = _split_side(left)
    if right.strip() == UNKNOWN_PRODUCTS and allow_unknown_products:
        return ParsedReaction(tuple(reactants), ())
    return ParsedReaction(tuple(reactants), tuple(_split_side(right)))


def has_arrow(reaction: str) -> bool:
    return _ARROWS.search(reaction) is not None


def format_reaction(reactants, products, arrow: str = DISPLAY_ARROW) -> str:
    return f"{' + '.join(reactants)} {arrow} {' + '.join(products)}"
