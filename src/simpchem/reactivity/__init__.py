"""Enum-keyed reaction rule tables for each compound family."""

from .acids import ACID_REACTIONS, AcidBucket
from .base import ACTIVITY_SERIES, describe_reactant, detect_counterpart, resolve
from .bases import BASE_REACTIONS
from .oxides import OXIDE_REACTIONS
from .salts import SALT_REACTIONS

__all__ = [
    "ACID_REACTIONS",
    "ACTIVITY_SERIES",
    "AcidBucket",
    "BASE_REACTIONS",
    "OXIDE_REACTIONS",
    "SALT_REACTIONS",
    "describe_reactant",
    "detect_counterpart",
    "resolve",
]
