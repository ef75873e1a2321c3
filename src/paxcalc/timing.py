"""Parsing and formatting of run times.

Times travel through the calculator as plain seconds (``float``). Input is
accepted in the forms timing systems and drivers actually type::

    65.123       seconds.milliseconds
    65           whole seconds
    1:05.123     minutes:seconds.milliseconds
    1:05:12.123  hours:minutes:seconds.milliseconds

Components are not range-checked, so ``1:99.000`` is 159 seconds. A short
fractional part is a truncated millisecond field: ``.1`` means 100 ms.
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal

from paxcalc.constants import DECIMAL_PLACES, EASTER_EGG_TIME
from paxcalc.exceptions import NegativeTimeError, NonFiniteTimeError, TimeFormatError

# Tried in order; re.ASCII keeps \d to 0-9
_MINUTES_RE = re.compile(r"(\d+):(\d{1,2})\.(\d{1,3})", re.ASCII)
_HOURS_RE = re.compile(r"(\d+):(\d{1,2}):(\d{1,2})\.(\d{1,3})", re.ASCII)
_DECIMAL_RE = re.compile(r"(\d+)\.(\d{1,3})", re.ASCII)
_WHOLE_RE = re.compile(r"(\d+)", re.ASCII)

_QUANTUM = Decimal(1).scaleb(-DECIMAL_PLACES)


def _millis(digits: str) -> float:
    return int(digits.ljust(3, "0")) / 1000


def _seconds(hours: str, minutes: str, seconds: str, millis: str) -> float:
    # float() turns an oversized digit run into inf rather than OverflowError
    total = float(hours) * 3600 + float(minutes) * 60 + float(seconds) + _millis(millis)
    if not math.isfinite(total):
        raise TimeFormatError("time value out of range")
    return total


def parse_time(time_string: str) -> float:
    """Parse a time string into seconds.

    Raises:
        TimeFormatError: If the string is empty, matches no accepted format,
            or names a time too large to represent.
    """
    if not time_string or not time_string.strip():
        raise TimeFormatError("time string cannot be empty")

    cleaned = time_string.strip()

    match = _MINUTES_RE.fullmatch(cleaned)
    if match:
        minutes, seconds, millis = match.groups()
        return _seconds("0", minutes, seconds, millis)

    match = _HOURS_RE.fullmatch(cleaned)
    if match:
        hours, minutes, seconds, millis = match.groups()
        return _seconds(hours, minutes, seconds, millis)

    match = _DECIMAL_RE.fullmatch(cleaned)
    if match:
        seconds, millis = match.groups()
        return _seconds("0", "0", seconds, millis)

    match = _WHOLE_RE.fullmatch(cleaned)
    if match:
        return _seconds("0", "0", match.group(1), "0")

    raise TimeFormatError(f"invalid time format: {time_string}")


def round_half_up(value: float) -> Decimal:
    """Round to the display precision using decimal half-up rounding.

    The float goes through its shortest repr, so 0.9995 rounds as the
    decimal 0.9995 rather than as its binary approximation.

    Raises:
        NonFiniteTimeError: If the value is infinite or NaN.
    """
    if not math.isfinite(value):
        raise NonFiniteTimeError(f"time must be finite: {value}")
    return Decimal(repr(value)).quantize(_QUANTUM, rounding=ROUND_HALF_UP)


def _to_fixed(value: float) -> str:
    rounded = round_half_up(value)
    if value == 0:
        rounded = abs(rounded)
    return f"{rounded:.{DECIMAL_PLACES}f}"


def format_time(seconds: float) -> str:
    """Format seconds as a fixed three-decimal string, e.g. '65.123'."""
    if seconds < 0:
        raise NegativeTimeError("time cannot be negative")
    return _to_fixed(seconds)


def format_difference(difference: float) -> str:
    """Format a signed time difference as '+1.012', '-0.995' or '0.000'."""
    text = _to_fixed(difference)
    return f"+{text}" if difference > 0 else text


def check_easter_egg(time_string: str) -> str | None:
    """Return 'NICE' for the one time that deserves it."""
    if time_string.strip() == EASTER_EGG_TIME:
        return "NICE"
    return None
