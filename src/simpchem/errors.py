"""Exception types raised by SimpChem."""

from __future__ import annotations


class SimpChemError(Exception):
    """Base class for all SimpChem errors."""


class ReactionFormatError(SimpChemError, ValueError):
    """A reaction string does not follow ``A + B -> C + D``."""


class BalancingError(SimpChemError, ValueError):
    """The stoichiometric system has no unique positive solution."""


class UnknownElementError(SimpChemError, ValueError):
    """A formula references an element missing from the periodic table."""

    def __init__(self, symbol: str, formula: str):
        super().__init__(f"Unknown element {symbol!r} in formula {formula!r}")
        self.symbol = symbol
        self.formula = formula
