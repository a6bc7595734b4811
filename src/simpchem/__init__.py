"""SimpChem core package."""

from simpchem.analyzer import (
    AnalyzerOptions,
    ReactionAnalyzer,
    analyze_reaction,
    can_react,
    classify,
    get_reaction_info,
    predict_products,
)
from simpchem.balancer import balance_equation
from simpchem.compounds import is_acid, is_base, is_oxide, is_salt
from simpchem.models import ReactionResult, ReactionType
from simpchem.properties import get_molecular_weight

__all__ = [
    "AnalyzerOptions",
    "ReactionAnalyzer",
    "ReactionResult",
    "ReactionType",
    "analyze_reaction",
    "balance_equation",
    "can_react",
    "classify",
    "get_molecular_weight",
    "get_reaction_info",
    "is_acid",
    "is_base",
    "is_oxide",
    "is_salt",
    "predict_products",
]
