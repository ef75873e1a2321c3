"""paxcalc data models."""

from paxcalc.models.pax_class import ClassGroup, PaxClass
from paxcalc.models.pax_index import IndexType, PaxIndex
from paxcalc.models.preferences import UserPreferences, ViewMode
from paxcalc.models.results import CalculationResult, ValidationResult

__all__ = [
    "CalculationResult",
    "ClassGroup",
    "IndexType",
    "PaxClass",
    "PaxIndex",
    "UserPreferences",
    "ValidationResult",
    "ViewMode",
]
