"""Known oxidizing and reducing agents and combustion detection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from simpchem.equations import DISPLAY_ARROW, format_reaction, parse_reaction

OXIDIZING_AGENTS = frozenset(
    {
        "O2",
        "O3",
        "H2O2",
        "KMnO4",
        "HNO3",
        "K2Cr2O7",
        "CrO3",
        "H2SO4",  # concentrated
        "Cl2",
        "Br2",
        "I2",
        "FeCl3",
        "CuSO4",
        "MnO2",
        "AgNO3",
        "NaOCl",
        "PbO2",
        "N2O",
        "NO2",
        "HClO",
        "ClO2",
        "HBrO",
        "HIO3",
        "XeF4",
    }
)

REDUCING_AGENTS = frozenset(
    {
        "H2",
        "C",
        "CO",
        "CH4",
        "C2H6",
        "C6H6",
        "Fe",
        "Zn",
        "Al",
        "Mg",
        "Na",
        "K",
        "Li",
        "Ca",
        "Ba",
        "Sn",
        "Pb",
        "Cu",
        "NH3",
        "H2S",
        "NaBH4",
        "LiAlH4",
        "SO2",
        "FeSO4",
        "TiCl3",
        "Cr2O3",
        "AsH3",
        "SbH3",
        "PH3",
    }
)

COMBUSTION_FUELS = frozenset({"CH4", "C2H6", "C6H6"})
COMBUSTION_PRODUCTS = frozenset({"CO2", "H2O"})


@dataclass(frozen=True)
class RedoxAgents:
    oxidizing: Tuple[str, ...]
    reducing: Tuple[str, ...]

    @property
    def is_redox_pair(self) -> bool:
        return bool(self.oxidizing) and bool(self.reducing)


def get_oxidizing_agents(compounds: Iterable[str]) -> List[str]:
    return [c for c in compounds if c in OXIDIZING_AGENTS]


def get_reducing_agents(compounds: Iterable[str]) -> List[str]:
    return [c for c in compounds if c in REDUCING_AGENTS]


def find_redox_agents(compounds: Iterable[str]) -> RedoxAgents:
    """Split ``compounds`` into known oxidizers and reducers, keeping order."""
    compounds = [c.strip() for c in compounds]
    return RedoxAgents(
        oxidizing=tuple(get_oxidizing_agents(compounds)),
        reducing=tuple(get_reducing_agents(compounds)),
    )


def is_combustion_reaction(reaction: str) -> bool:
    """A known fuel burning in O2 to CO2 and H2O."""
    parsed = parse_reaction(reaction, allow_unknown_products=False)
    reactants = set(parsed.reactants)
    return (
        "O2" in reactants
        and bool(reactants & COMBUSTION_FUELS)
        and COMBUSTION_PRODUCTS <= set(parsed.products)
    )


def resolve_reaction(reaction: str) -> str:
    """Normalize spacing and arrow: ``"A+B->C"`` becomes ``"A + B → C"``."""
    parsed = parse_reaction(reaction, allow_unknown_products=False)
    return format_reaction(parsed.reactants, parsed.products, DISPLAY_ARROW)
