"""Molecular weight and simple volume calculations."""

from __future__ import annotations

from typing import Mapping, Optional

from simpchem.balancer import element_counts
from simpchem.constants import (
    ATOMIC_WEIGHTS,
    HYDROCARBON_NAMES,
    HYDROCARBON_WEIGHTS,
    R_GAS,
    STANDARD_PRESSURE,
    STANDARD_TEMPERATURE,
)
from simpchem.errors import UnknownElementError


def get_molecular_weight(formula: str) -> float:
    """Molar mass in g/mol.

    Tabulated hydrocarbons are looked up directly; anything else is the sum of
    atomic weights over the expanded formula.

    Raises:
        UnknownElementError: if a symbol is not in the periodic table.
    """
    formula = formula.strip()
    if formula in HYDROCARBON_WEIGHTS:
        return HYDROCARBON_WEIGHTS[formula]

    total = 0.0
    for symbol, count in element_counts(formula).items():
        weight = ATOMIC_WEIGHTS.get(symbol)
        if weight is None:
            raise UnknownElementError(symbol, formula)
        total += weight * count
    return total


def get_hydrocarbon_name(formula: str) -> Optional[str]:
    return HYDROCARBON_NAMES.get(formula.strip())


def mixture_molecular_weight(composition: Mapping[str, float]) -> float:
    """Mole-fraction weighted molar mass of a mixture (g/mol)."""
    total_fraction = sum(composition.values())
    if total_fraction <= 0:
        raise ValueError("Composition must contain a positive amount")
    return sum(
        fraction * get_molecular_weight(formula) for formula, fraction in composition.items()
    ) / total_fraction


def get_moles(mass: float, formula: str) -> float:
    return mass / get_molecular_weight(formula)


def get_volume(mass: float, density: float) -> float:
    """Volume from mass and density, in the units they imply."""
    if density <= 0:
        raise ValueError("Density must be positive")
    return mass / density


def get_gas_volume(
    moles: float,
    temperature: float = STANDARD_TEMPERATURE,
    pressure: float = STANDARD_PRESSURE,
) -> float:
    """Ideal gas volume in litres, V = nRT / P.

    Args:
        moles: Amount of gas (mol).
        temperature: Absolute temperature (K).
        pressure: Pressure (atm).
    """
    if temperature <= 0:
        raise ValueError("Temperature must be positive (K)")
    if pressure <= 0:
        raise ValueError("Pressure must be positive (atm)")
    return moles * R_GAS * temperature / pressure
