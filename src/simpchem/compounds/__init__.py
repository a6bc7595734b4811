"""Classifiers for the four compound families."""

from .acids import AcidClassification, classify_acid, describe_acid, is_acid
from .bases import BaseClassification, classify_base, describe_base, is_base
from .oxides import OxideClassification, classify_oxide, describe_oxide, is_oxide
from .salts import SaltClassification, classify_salt, describe_salt, is_salt

__all__ = [
    "AcidClassification",
    "BaseClassification",
    "OxideClassification",
    "SaltClassification",
    "classify_acid",
    "classify_base",
    "classify_oxide",
    "classify_salt",
    "describe_acid",
    "describe_base",
    "describe_oxide",
    "describe_salt",
    "is_acid",
    "is_base",
    "is_oxide",
    "is_salt",
]
