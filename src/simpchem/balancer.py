"""Exact balancing of chemical equations.

Each distinct element gives one row of an integer stoichiometric matrix, with
reactant columns negated. The null space of that matrix is computed exactly
with :mod:`sympy`, and the single solution vector is scaled to the smallest
positive integers.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
import sympy as sp

from simpchem.equations import DISPLAY_ARROW, format_reaction, parse_reaction
from simpchem.errors import BalancingError, ReactionFormatError, SimpChemError

logger = logging.getLogger(__name__)

_ELEMENT_COUNT = re.compile(r"([A-Z][a-z]*)(\d*)")
_TOKEN = re.compile(r"[A-Z][a-z]*|\d+|[()\[\]]|\S")
_OPEN = {"(": ")", "[": "]"}


def parse_formula(formula: str) -> List[Tuple[str, int]]:
    """Greedy ``(element, count)`` pairs in order of appearance.

    Parentheses and their multipliers are ignored and repeated elements are
    not merged, so ``Ca(OH)2`` gives ``[("Ca", 1), ("O", 1), ("H", 1)]``. Use
    :func:`element_counts` for real atom counts.
    """
    return [(element, int(count) if count else 1) for element, count in _ELEMENT_COUNT.findall(formula)]


def element_counts(formula: str) -> Dict[str, int]:
    """Atom count per element, expanding parenthesised groups.

    >>> element_counts("Fe2(SO4)3")
    {'Fe': 2, 'S': 3, 'O': 12}
    """
    tokens = _TOKEN.findall(formula)
    stack: List[Tuple[Dict[str, int], Optional[str]]] = [({}, None)]
    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1
        multiplier = 1
        if index < len(tokens) and tokens[index].isdigit():
            multiplier = int(tokens[index])
            index += 1

        if token in _OPEN:
            if multiplier != 1:
                raise ReactionFormatError(f"Cannot parse formula {formula!r}")
            stack.append(({}, _OPEN[token]))
        elif token in (")", "]"):
            group, closer = stack.pop() if len(stack) > 1 else ({}, None)
            if closer != token:
                raise ReactionFormatError(f"Unbalanced brackets in formula {formula!r}")
            target = stack[-1][0]
            for element, count in group.items():
                target[element] = target.get(element, 0) + count * multiplier
        elif token[0].isupper():
            target = stack[-1][0]
            target[token] = target.get(token, 0) + multiplier
        else:
            raise ReactionFormatError(f"Cannot parse formula {formula!r}")

    if len(stack) != 1 or not stack[0][0]:
        raise ReactionFormatError(f"Cannot parse formula {formula!r}")
    return stack[0][0]


@dataclass(frozen=True)
class StoichiometricSystem:
    reactants: Tuple[str, ...]
    products: Tuple[str, ...]
    elements: Tuple[str, ...]
    matrix: np.ndarray

    @property
    def compounds(self) -> Tuple[str, ...]:
        return self.reactants + self.products

    def rows(self) -> List[Tuple[str, List[int]]]:
        return [(element, row.tolist()) for element, row in zip(self.elements, self.matrix)]


@dataclass(frozen=True)
class BalancedEquation:
    reactants: Tuple[str, ...]
    products: Tuple[str, ...]
    coefficients: Tuple[int, ...]

    @property
    def reactant_coefficients(self) -> Tuple[int, ...]:
        return self.coefficients[: len(self.reactants)]

    @property
    def product_coefficients(self) -> Tuple[int, ...]:
        return self.coefficients[len(self.reactants):]

    def __str__(self) -> str:
        left = [f"{c} {r}" for c, r in zip(self.reactant_coefficients, self.reactants)]
        right = [f"{c} {p}" for c, p in zip(self.product_coefficients, self.products)]
        return format_reaction(left, right, DISPLAY_ARROW)


def build_system(reaction: str) -> StoichiometricSystem:
    """Stoichiometric matrix for ``reaction``, elements in first-seen order."""
    parsed = parse_reaction(reaction, allow_unknown_products=False)
    counts = [element_counts(compound) for compound in parsed.species]

    elements: List[str] = []
    for compound_counts in counts:
        for element in compound_counts:
            if element not in elements:
                elements.append(element)

    n_reactants = len(parsed.reactants)
    matrix = np.zeros((len(elements), len(counts)), dtype=np.int64)
    for column, compound_counts in enumerate(counts):
        sign = -1 if column < n_reactants else 1
        for element, count in compound_counts.items():
            matrix[elements.index(element), column] = sign * count

    return StoichiometricSystem(
        reactants=parsed.reactants,
        products=parsed.products,
        elements=tuple(elements),
        matrix=matrix,
    )


def _reduce(matrix: np.ndarray) -> Tuple[sp.Matrix, Tuple[int, ...]]:
    """Reduced row-echelon form of ``matrix`` and its pivot columns."""
    if matrix.ndim != 2 or 0 in matrix.shape:
        raise BalancingError("Stoichiometric matrix is empty")
    return sp.Matrix(matrix.tolist()).rref()


def solve_coefficients(matrix: np.ndarray) -> Tuple[int, ...]:
    """Minimal positive integer null-space vector of ``matrix``.

    Raises:
        BalancingError: unless the last column is the only free column and the
            resulting vector is strictly positive.
    """
    _, pivots = _reduce(matrix)
    n_cols = matrix.shape[1]
    free = [col for col in range(n_cols) if col not in pivots]
    if not free:
        raise BalancingError("No free variables: the only solution is the zero vector")
    if free != [n_cols - 1]:
        raise BalancingError(f"Degenerate system with free columns {free}")

    null_space = sp.Matrix(matrix.tolist()).nullspace()
    if len(null_space) != 1:
        raise BalancingError(f"Expected one solution vector, got {len(null_space)}")
    vector = null_space[0]

    scale = sp.lcm([value.q for value in vector])
    integers = [int(value * scale) for value in vector]
    divisor = int(sp.gcd(integers))
    integers = [value // divisor for value in integers]
    if all(value < 0 for value in integers):
        integers = [-value for value in integers]
    if any(value <= 0 for value in integers):
        raise BalancingError(f"No positive solution: {integers}")
    return tuple(integers)


def _conserves(matrix: np.ndarray, coefficients: Sequence[int]) -> bool:
    return bool(np.all(matrix @ np.asarray(coefficients, dtype=np.int64) == 0))


def balance(reaction: str) -> Optional[BalancedEquation]:
    """Balance ``reaction``; ``None`` when it cannot be balanced."""
    try:
        system = build_system(reaction)
        coefficients = solve_coefficients(system.matrix)
    except SimpChemError as exc:
        logger.info("Balancing failed for %r: %s", reaction, exc)
        return None
    if not _conserves(system.matrix, coefficients):
        logger.info("Balancing failed for %r: atoms not conserved", reaction)
        return None
    return BalancedEquation(system.reactants, system.products, coefficients)


def balance_equation(reaction: str) -> Optional[str]:
    """Balanced reaction as ``"1 CH4 + 2 O2 → 1 CO2 + 2 H2O"``."""
    result = balance(reaction)
    return str(result) if result is not None else None


def explain_balancing_steps(reaction: str) -> List[str]:
    """Human-readable walk through :func:`balance`."""
    try:
        system = build_system(reaction)
    except SimpChemError as exc:
        return [f"Balancing failed: {exc}"]

    steps = [
        f"Reactants: {', '.join(system.reactants)}",
        f"Products: {', '.join(system.products)}",
        f"Unique elements involved: {', '.join(system.elements)}",
        "Constructed balance matrix:",
    ]
    steps.extend(f"{element}: {row}" for element, row in system.rows())

    try:
        reduced, pivots = _reduce(system.matrix)
        steps.append("Reduced row-echelon form:")
        steps.extend(str(reduced.row(i).tolist()[0]) for i in range(len(pivots)))
        coefficients = solve_coefficients(system.matrix)
    except BalancingError as exc:
        steps.append(f"Balancing failed: {exc}")
        return steps
    steps.append("Final balanced equation:")
    steps.append(str(BalancedEquation(system.reactants, system.products, coefficients)))
    return steps
