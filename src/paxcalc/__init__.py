"""paxcalc: PAX time conversion and handicap dataset validation."""

from paxcalc.calculator import convert
from paxcalc.data import (
    ALL_INDICES,
    PROSOLO_2024,
    SOLO_2024,
    get_available_years,
    get_index,
    get_latest_index,
    load_index,
)
from paxcalc.exceptions import (
    DomainErrorReason,
    NegativeTimeError,
    NonFiniteTimeError,
    PaxCalcError,
    PaxDataError,
    PaxDomainError,
    TimeFormatError,
)
from paxcalc.lookup import active_classes, find_class, sorted_active_classes
from paxcalc.models import (
    CalculationResult,
    ClassGroup,
    IndexType,
    PaxClass,
    PaxIndex,
    UserPreferences,
    ValidationResult,
    ViewMode,
)
from paxcalc.timing import check_easter_egg, format_difference, format_time, parse_time
from paxcalc.validation import validate

__all__ = [
    "ALL_INDICES",
    "CalculationResult",
    "ClassGroup",
    "DomainErrorReason",
    "IndexType",
    "NegativeTimeError",
    "NonFiniteTimeError",
    "PROSOLO_2024",
    "PaxCalcError",
    "PaxClass",
    "PaxDataError",
    "PaxDomainError",
    "PaxIndex",
    "SOLO_2024",
    "TimeFormatError",
    "UserPreferences",
    "ValidationResult",
    "ViewMode",
    "active_classes",
    "check_easter_egg",
    "convert",
    "find_class",
    "format_difference",
    "format_time",
    "get_available_years",
    "get_index",
    "get_latest_index",
    "load_index",
    "parse_time",
    "sorted_active_classes",
    "validate",
]

__version__ = "0.1.0"
