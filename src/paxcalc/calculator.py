"""PAX time conversion between classes."""

from __future__ import annotations

import math
from datetime import datetime, timezone

from paxcalc._logging import log_core_call
from paxcalc.exceptions import DomainErrorReason, PaxDomainError
from paxcalc.models.pax_class import PaxClass
from paxcalc.models.results import CalculationResult
from paxcalc.timing import round_half_up


@log_core_call
def convert(
    input_time: float,
    input_class: PaxClass,
    output_class: PaxClass,
) -> CalculationResult:
    """Convert a time run in one class to the equivalent time in another.

    ``output_time = input_time * (input_pax / output_pax)``. Converting into a
    class with a higher index gives a lower time. Output time and difference
    are rounded to milliseconds, and the difference is taken from the rounded
    output time.

    Raises:
        PaxDomainError: If the time or either PAX index is not positive, or
            the converted time is not a finite number.
    """
    if input_time <= 0:
        raise PaxDomainError(
            DomainErrorReason.NON_POSITIVE_TIME, "input time must be positive",
        )
    if input_class.pax_index <= 0 or output_class.pax_index <= 0:
        raise PaxDomainError(
            DomainErrorReason.NON_POSITIVE_PAX, "pax indices must be positive",
        )

    raw = input_time * (input_class.pax_index / output_class.pax_index)
    if not (math.isfinite(input_time) and math.isfinite(raw)):
        raise PaxDomainError(
            DomainErrorReason.NON_FINITE_RESULT, "output time must be finite",
        )

    if input_class.pax_index == output_class.pax_index:
        output_time = input_time
        time_difference = 0.0
    else:
        output_time = float(round_half_up(raw))
        time_difference = float(round_half_up(output_time - input_time))

    return CalculationResult(
        input_time=input_time,
        input_class=input_class,
        output_time=output_time,
        output_class=output_class,
        time_difference=time_difference,
        is_faster=time_difference < 0,
        calculated_at=datetime.now(timezone.utc),
    )
