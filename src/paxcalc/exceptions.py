"""Custom exceptions for the PAX calculator core."""

from __future__ import annotations

from enum import Enum


class PaxCalcError(Exception):
    """Base exception for all paxcalc errors."""


class TimeFormatError(PaxCalcError, ValueError):
    """Raised when a time string matches none of the accepted formats."""


class NegativeTimeError(PaxCalcError, ValueError):
    """Raised when a negative value is passed to the time formatter."""


class NonFiniteTimeError(PaxCalcError, ValueError):
    """Raised when an infinite or NaN time reaches rounding or formatting."""


class DomainErrorReason(str, Enum):
    """Why a conversion was refused."""

    NON_POSITIVE_TIME = "non_positive_time"
    NON_POSITIVE_PAX = "non_positive_pax"
    NON_FINITE_RESULT = "non_finite_result"


class PaxDomainError(PaxCalcError, ValueError):
    """Raised when a conversion is asked for with out-of-domain inputs."""

    def __init__(self, reason: DomainErrorReason, message: str) -> None:
        self.reason = reason
        self.message = message
        super().__init__(message)


class PaxDataError(PaxCalcError):
    """Raised when a dataset payload fails model validation."""
